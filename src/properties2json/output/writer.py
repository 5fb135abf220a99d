"""JsonWriter: writes ConversionResult JSON text to disk."""

from __future__ import annotations

import logging
from pathlib import Path

from properties2json.config.models import OutputConfig
from properties2json.converter.models import ConversionResult

logger = logging.getLogger(__name__)


class JsonWriter:
    """Writes converted JSON next to its source or under a mirrored tree.

    Handles directory creation, overwrite protection, and dry-run mode.
    """

    def __init__(self, config: OutputConfig | None = None) -> None:
        self.config = config or OutputConfig()

    def write(self, result: ConversionResult, *, dry_run: bool = False) -> Path | None:
        """Write a single result to ``result.dest_path``.

        Returns the Path of the written (or would-be) file, or None when an
        existing file was kept because overwriting is disabled.
        """
        dest = Path(result.dest_path)
        content = result.json_text
        if self.config.trailing_newline:
            content += "\n"

        if dest.exists() and not self.config.overwrite:
            logger.info("exists, not overwriting: %s", dest)
            return None

        if dry_run:
            logger.debug("dry-run: would write %s", dest)
            return dest

        dest.parent.mkdir(parents=True, exist_ok=True)
        data = content.encode(self.config.encoding)
        dest.write_bytes(data)
        logger.info("wrote %s (%d bytes)", dest, len(data))
        return dest
