"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import Properties2JsonConfig


def load_config(cli_path: str | None = None) -> Properties2JsonConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults.

    An explicit CLI path must exist and must not be empty.
    """
    if cli_path:
        path = Path(cli_path)
        if not path.exists():
            raise ValueError(f"Config file not found: {cli_path}")
        raw = _read_yaml(path)
        if raw is None:
            raise ValueError(f"Config file is empty: {cli_path}")
        return _build_config(path, raw)

    for path in (
        Path("./properties2json.yaml"),
        Path.home() / ".properties2json" / "config.yaml",
    ):
        if path.exists():
            raw = _read_yaml(path)
            if raw is None:
                continue
            return _build_config(path, raw)

    return Properties2JsonConfig()


def _read_yaml(path: Path) -> object:
    try:
        with open(path) as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e


def _build_config(path: Path, raw: object) -> Properties2JsonConfig:
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config in {path}: expected a mapping")
    try:
        return Properties2JsonConfig(**_expand_env_vars(raw))
    except ValidationError as e:
        raise ValueError(f"Invalid config in {path}: {e}") from e


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `properties2json config init`
DEFAULT_CONFIG_TEMPLATE = """\
# properties2json.yaml

# Where to look for .properties files
source_dir: "."

# Mirror output under this directory (omit to write next to each source file)
# dest_dir: "build/json"

# Regular expression matched against the whole file name; matches are skipped
exclude: ""

# Directory names never descended into
ignore_dirs: [".git", ".svn", ".hg"]

# Output
output:
  encoding: "utf-8"
  overwrite: true
  trailing_newline: false

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
