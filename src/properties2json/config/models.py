import re
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class OutputConfig(BaseModel):
    encoding: str = "utf-8"
    overwrite: bool = True
    trailing_newline: bool = False


class Properties2JsonConfig(BaseModel):
    source_dir: str = "."
    dest_dir: str | None = None
    exclude: str = ""
    ignore_dirs: list[str] = Field(default_factory=lambda: [".git", ".svn", ".hg"])
    output: OutputConfig = Field(default_factory=OutputConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"

    @field_validator("exclude")
    @classmethod
    def _exclude_must_compile(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid exclude pattern {value!r}: {e}") from e
        return value
