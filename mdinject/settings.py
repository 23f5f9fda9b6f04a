"""YAML defaults file loader (``--config``)."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from mdinject.errors import ConfigError

_KEY_TYPES: dict[str, type] = {
    "id": str,
    "template": str,
    "template_file": str,
    "fail_on_diff": bool,
    "print_only": bool,
}


def load_settings(path: str | Path) -> dict[str, Any]:
    """Load run defaults from a YAML file.

    Unknown keys or values of the wrong type cause a ``ConfigError`` so
    typos are caught early. A relative ``template_file`` is resolved
    against the directory holding the YAML file.
    """
    path = Path(path)
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"cannot read config {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"config {path} is not valid YAML: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"config {path} must be a mapping, got {type(raw).__name__}")

    unknown = set(raw) - set(_KEY_TYPES)
    if unknown:
        raise ConfigError(
            f"Unknown keys in config {path}: {sorted(unknown)}. "
            f"Allowed: {sorted(_KEY_TYPES)}"
        )

    for key, value in raw.items():
        expected = _KEY_TYPES[key]
        if not isinstance(value, expected):
            raise ConfigError(
                f"'{key}' in config {path} must be {expected.__name__}, "
                f"got {type(value).__name__}"
            )

    if "template" in raw and "template_file" in raw:
        raise ConfigError(f"config {path} sets both 'template' and 'template_file'")

    settings = dict(raw)
    if "template_file" in settings:
        template_file = Path(settings["template_file"])
        if not template_file.is_absolute():
            template_file = path.parent / template_file
        settings["template_file"] = str(template_file)
    return settings
