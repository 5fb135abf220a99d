"""Pydantic models for the conversion subsystem."""

from __future__ import annotations

from pydantic import BaseModel


class ConversionResult(BaseModel):
    """One converted .properties file, ready to be written."""

    source_path: str
    dest_path: str
    json_text: str
    property_count: int = 0
