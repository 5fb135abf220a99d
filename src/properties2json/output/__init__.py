"""Output subsystem: writes generated JSON files."""

from properties2json.output.writer import JsonWriter

__all__ = [
    "JsonWriter",
]
