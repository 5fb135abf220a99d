"""Decides which files are .properties files and renders them as JSON."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from pathlib import Path, PurePath

import javaproperties

from properties2json.converter.models import ConversionResult

logger = logging.getLogger(__name__)

PROPERTIES_SUFFIX = ".properties"
OUTPUT_PREFIX = "__"
OUTPUT_SUFFIX = ".json"

# First non-whitespace bytes that mean "already JSON or quoted, leave it alone"
_JSON_LIKE_STARTS = (b"{", b"[", b'"')

_PEEK_CHUNK = 4096


class FileClassifierConverter:
    """Classifies candidate files and converts property sets to JSON text.

    ``source_root`` anchors relative output locations, ``dest_root`` is where
    mirrored output goes (``None`` writes next to the source), and ``exclude``
    is a regular expression that must match a whole file name to disqualify it.
    """

    def __init__(
        self,
        source_root: str | Path | None = None,
        dest_root: str | Path | None = None,
        exclude: str = "",
    ) -> None:
        self.source_root = Path(source_root) if source_root is not None else None
        self.dest_root = Path(dest_root) if dest_root is not None else None
        self.exclude = exclude
        self._exclude_re = re.compile(exclude)

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def is_property_file(self, path: str | Path) -> bool:
        """Return True if *path* should be converted.

        Suffix and exclusion checks run first and never touch the disk.
        Reading the content may raise ``OSError``.
        """
        name = PurePath(path).name
        if not name.endswith(PROPERTIES_SUFFIX):
            return False
        if self._exclude_re.fullmatch(name):
            logger.debug("excluded by pattern %r: %s", self.exclude, path)
            return False
        if _looks_like_json(Path(path)):
            logger.debug("content looks like JSON, skipping: %s", path)
            return False
        return True

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    @staticmethod
    def load_properties(path: str | Path) -> dict[str, str]:
        """Parse a .properties file (bytes decoded as Latin-1)."""
        with open(path, "rb") as fp:
            return javaproperties.load(fp)

    @staticmethod
    def convert_to_json(props: Mapping[str, str]) -> str:
        """Render a flat property mapping as an indented JSON object.

        Keys keep whatever order the mapping yields. Text that cannot be
        encoded as UTF-8 (lone surrogates from ``\\uD800``-style escapes) is
        rendered with every non-ASCII character as a ``\\uXXXX`` escape.
        """
        text = json.dumps(dict(props), indent=2, ensure_ascii=False)
        try:
            text.encode("utf-8")
        except UnicodeEncodeError:
            return json.dumps(dict(props), indent=2, ensure_ascii=True)
        return text

    # ------------------------------------------------------------------
    # Output location
    # ------------------------------------------------------------------

    @staticmethod
    def compute_new_file_name(path: str | Path) -> str:
        return f"{OUTPUT_PREFIX}{PurePath(path).name}{OUTPUT_SUFFIX}"

    def compute_relative_source_parent(self, path: str | Path) -> Path:
        """Parent of *path* relative to the source root, computed lexically.

        Returns ``Path("")`` when the file sits directly in the source root.
        Raises ValueError if *path* is not under the source root.
        """
        if self.source_root is None:
            raise ValueError("no source root configured")
        return Path(PurePath(path).parent.relative_to(self.source_root))

    def compute_destination(self, path: str | Path) -> Path:
        new_name = self.compute_new_file_name(path)
        if self.dest_root is None:
            return Path(path).parent / new_name
        return self.dest_root / self.compute_relative_source_parent(path) / new_name

    def convert(self, path: str | Path) -> ConversionResult | None:
        """Classify, parse and render one file. Returns None when skipped."""
        if not self.is_property_file(path):
            return None

        props = self.load_properties(path)
        dest = self.compute_destination(path)
        return ConversionResult(
            source_path=str(path),
            dest_path=str(dest),
            json_text=self.convert_to_json(props),
            property_count=len(props),
        )


def _looks_like_json(path: Path) -> bool:
    """Peek at the first non-whitespace byte of *path*."""
    with path.open("rb") as fp:
        while chunk := fp.read(_PEEK_CHUNK):
            stripped = chunk.lstrip()
            if stripped:
                return stripped.startswith(_JSON_LIKE_STARTS)
    return False
