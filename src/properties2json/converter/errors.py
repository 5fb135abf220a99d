"""Errors raised while converting a single file."""

from __future__ import annotations


class ConversionError(Exception):
    """Wraps a per-file failure with the path and the step that failed."""

    def __init__(self, path: str, operation: str, cause: Exception) -> None:
        self.path = path
        self.operation = operation
        super().__init__(f"{operation} failed for {path}: {cause}")
        self.__cause__ = cause
