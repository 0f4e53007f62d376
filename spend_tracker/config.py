# spend_tracker/config.py
from __future__ import annotations

from pathlib import Path
from typing import Dict

import yaml

from spend_tracker.pagination import DEFAULT_PAGE_SIZE, PAGE_SIZE_OPTIONS

DEFAULT_CONFIG: Dict[str, object] = {
    "loaders": {
        "yaml": "spend_tracker.loaders.yaml_loader.YAMLLoader",
        "csv": "spend_tracker.loaders.csv_loader.CSVLoader",
    },
    "output_modules": {
        "csv": "spend_tracker.outputs.csv_output.CSVOutput",
    },
    "page_size": DEFAULT_PAGE_SIZE,
    "page_size_options": list(PAGE_SIZE_OPTIONS),
    "default_sort": [{"field": "date", "direction": "desc"}],
    "output_dir": "data",
}


def _merge_defaults(current: Dict[str, object], defaults: Dict[str, object]) -> Dict[str, object]:
    """Merge missing default keys into the current config recursively."""
    merged = dict(current)
    for key, value in defaults.items():
        if key not in merged:
            merged[key] = value
        elif isinstance(value, dict) and isinstance(merged[key], dict):
            merged[key] = _merge_defaults(merged[key], value)
    return merged


def load_config(path: str | Path | None = None) -> Dict[str, object]:
    if path is None:
        return _merge_defaults({}, DEFAULT_CONFIG)
    target = Path(path)
    if not target.exists():
        return _merge_defaults({}, DEFAULT_CONFIG)
    with target.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {target} must contain a mapping")
    config = _merge_defaults(data, DEFAULT_CONFIG)
    page_size = config["page_size"]
    if not isinstance(page_size, int) or page_size <= 0:
        raise ValueError(f"page_size must be a positive integer, got {page_size!r}")
    return config
