"""Shared test fixtures for properties2json."""

from pathlib import Path

import pytest

from properties2json.config.models import OutputConfig, Properties2JsonConfig
from properties2json.converter import FileClassifierConverter


@pytest.fixture
def sample_config():
    return Properties2JsonConfig()


@pytest.fixture
def output_config():
    return OutputConfig()


@pytest.fixture
def classifier():
    """Classifier with no roots that excludes exactly ``a.properties``."""
    return FileClassifierConverter(None, None, "^(a.properties)$")


@pytest.fixture
def write_file(tmp_path):
    """Write *content* to ``tmp_path / name`` and return the path."""

    def _write(name: str, content: str | bytes = "") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def source_tree(tmp_path):
    """A small project tree with a mix of convertible and skipped files."""
    src = tmp_path / "src"
    (src / "conf" / "nested").mkdir(parents=True)
    (src / ".git").mkdir()

    (src / "app.properties").write_text("name=demo\nport=8080\n")
    (src / "conf" / "db.properties").write_text("# database\ndb.url=jdbc:h2:mem\n")
    (src / "conf" / "nested" / "messages.properties").write_text("greeting=hello\n")
    (src / "conf" / "already.properties").write_text('  {"a": "1"}')
    (src / "conf" / "readme.txt").write_text("not properties")
    (src / "skip.properties").write_text("secret=1\n")
    (src / ".git" / "hooks.properties").write_text("x=1\n")
    return src
