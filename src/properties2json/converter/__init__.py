"""Conversion subsystem: classifies .properties files and renders JSON."""

from properties2json.converter.classifier import (
    OUTPUT_PREFIX,
    OUTPUT_SUFFIX,
    PROPERTIES_SUFFIX,
    FileClassifierConverter,
)
from properties2json.converter.errors import ConversionError
from properties2json.converter.models import ConversionResult

__all__ = [
    "ConversionError",
    "ConversionResult",
    "FileClassifierConverter",
    "OUTPUT_PREFIX",
    "OUTPUT_SUFFIX",
    "PROPERTIES_SUFFIX",
]
