"""Walks a source tree and converts every .properties file found."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from properties2json.converter import (
    ConversionError,
    ConversionResult,
    FileClassifierConverter,
)
from properties2json.output import JsonWriter

logger = logging.getLogger(__name__)


@dataclass
class TreeReport:
    """Outcome of converting one source tree."""

    converted: list[ConversionResult] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[ConversionError] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return bool(self.failed)


def iter_candidate_files(root: Path, ignore_dirs: Iterable[str] = ()) -> Iterator[Path]:
    """Yield regular files under *root*, top-down, names sorted per directory.

    Ignored directories are pruned and never descended into.
    """
    ignore = set(ignore_dirs)
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in ignore)
        base = Path(dirpath)
        for name in sorted(filenames):
            p = base / name
            if p.is_file():
                yield p


class TreeConverter:
    """Runs the classifier over a tree and hands results to the writer.

    One bad file never stops the walk; its error is recorded in the report.
    """

    def __init__(
        self,
        classifier: FileClassifierConverter,
        writer: JsonWriter,
        ignore_dirs: Iterable[str] = (".git", ".svn", ".hg"),
    ) -> None:
        self.classifier = classifier
        self.writer = writer
        self.ignore_dirs = list(ignore_dirs)

    def run(self, root: str | Path, *, dry_run: bool = False) -> TreeReport:
        root = Path(root)
        if not root.is_dir():
            raise FileNotFoundError(f"source directory not found: {root}")

        report = TreeReport()
        for path in iter_candidate_files(root, self.ignore_dirs):
            self._convert_one(path, report, dry_run=dry_run)

        logger.info(
            "converted %d, skipped %d, failed %d under %s",
            len(report.converted),
            len(report.skipped),
            len(report.failed),
            root,
        )
        return report

    def _convert_one(self, path: Path, report: TreeReport, *, dry_run: bool) -> None:
        try:
            result = self.classifier.convert(path)
        except (OSError, ValueError) as e:
            logger.warning("Conversion failed for %s: %s", path, e)
            report.failed.append(ConversionError(str(path), "convert", e))
            return

        if result is None:
            report.skipped.append(str(path))
            return

        try:
            written = self.writer.write(result, dry_run=dry_run)
        except (OSError, UnicodeError) as e:
            logger.warning("Write failed for %s: %s", result.dest_path, e)
            report.failed.append(ConversionError(str(path), "write", e))
            return

        if written is None:
            report.skipped.append(str(path))
            return

        report.converted.append(result)
