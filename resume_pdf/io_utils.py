"""File helpers for the CLI: YAML/JSON input and binary output."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError, NotFoundError


def load_yaml(path: str | os.PathLike[str]) -> Any:
    """Load a YAML file; returns {} if empty."""
    text = Path(path).read_text(encoding="utf-8")
    if not text.strip():
        return {}
    data = yaml.safe_load(text)
    return {} if data is None else data


def read_yaml_or_json(path: str | os.PathLike[str]) -> Any:
    p = Path(path)
    if not p.exists():
        raise NotFoundError(f"File not found: {p}", hint="check the --input or --theme path")
    is_yaml = p.suffix.lower() in {".yaml", ".yml"}
    try:
        if is_yaml:
            return load_yaml(p)
        return json.loads(p.read_text(encoding="utf-8"))
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        kind = "YAML" if is_yaml else "JSON"
        raise ConfigError(
            f"Could not parse {p.name} as {kind}",
            hint=f"{type(exc).__name__}; files ending in .yaml/.yml are read as YAML, anything else as JSON",
        ) from exc


def write_bytes(data: bytes, path: str | os.PathLike[str]) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(data)
    return p
