"""Build `MapParams` from JSON or YAML documents.

Decoding errors from `json` / `yaml` propagate unchanged; a document whose top
level is not a mapping, or has non-string keys, raises ValueError.
"""
from pathlib import Path
import json
import logging
import yaml
from .params import MapParams

LOG = logging.getLogger(__name__)


def _wrap(raw, source: str, label: str | None) -> MapParams:
    if not isinstance(raw, dict):
        raise ValueError(f"{source}: expected a mapping at top level, got {type(raw).__name__}")
    bad_keys = [k for k in raw if not isinstance(k, str)]
    if bad_keys:
        raise ValueError(f"{source}: argument keys must be strings, got {bad_keys!r}")
    return MapParams(raw, label=label)


def from_json(text: str, label: str | None = None) -> MapParams:
    return _wrap(json.loads(text), "json", label)


def from_yaml(text: str, label: str | None = None) -> MapParams:
    # An empty document loads as None
    raw = yaml.safe_load(text)
    return _wrap({} if raw is None else raw, "yaml", label)


def load_file(path: str | Path, label: str | None = None) -> MapParams:
    """Load job arguments from a `.json`, `.yaml` or `.yml` file."""
    p = Path(path)
    suffix = p.suffix.lower()
    if suffix == ".json":
        params = from_json(p.read_text(encoding="utf-8"), label)
    elif suffix in (".yaml", ".yml"):
        params = from_yaml(p.read_text(encoding="utf-8"), label)
    else:
        raise ValueError(f"unsupported argument file type: {p}")
    LOG.info("Loaded %d args from %s", len(params), p)
    return params
