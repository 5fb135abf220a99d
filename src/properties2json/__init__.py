"""properties2json - convert Java .properties files in a directory tree to JSON."""

from properties2json.config import Properties2JsonConfig, load_config
from properties2json.converter import ConversionError, ConversionResult, FileClassifierConverter
from properties2json.output import JsonWriter
from properties2json.walker import TreeConverter, TreeReport

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "ConversionResult",
    "FileClassifierConverter",
    "JsonWriter",
    "Properties2JsonConfig",
    "TreeConverter",
    "TreeReport",
    "load_config",
]
