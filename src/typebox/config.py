from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

DEFAULT_TEXT = (
    "the morning sun shines bright and warms the earth as people start their day "
    "with simple tasks some walk their dogs while others enjoy a cup of coffee and "
    "read the news the city wakes up slowly with the sound of cars and people "
    "talking the streets fill with life and energy as everyone goes about their "
    "routines meeting friends and working hard each day brings new chances to "
    "learn and enjoy the little things that make life special"
)

DEFAULT_CONFIG: Dict[str, Any] = {
    "data_root": "~/.local/share/typebox",
    "log_level": "INFO",
    "textbox": {
        "columns": 50,
        "rows": 5,
        "show_typed": False,
    },
}


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class TextboxSettings:
    columns: int = 50
    rows: int = 5
    show_typed: bool = False
    text: str = DEFAULT_TEXT

    def __post_init__(self) -> None:
        for name in ("columns", "rows"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"textbox {name} must be an integer, got {value!r}")
            if value <= 0:
                raise ConfigError(f"textbox {name} must be positive, got {value}")

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "TextboxSettings":
        textbox = config.get("textbox", {})
        if not isinstance(textbox, dict):
            raise ConfigError("textbox section must be a mapping")
        return cls(
            columns=textbox.get("columns", 50),
            rows=textbox.get("rows", 5),
            show_typed=bool(textbox.get("show_typed", False)),
            text=_normalize_text(DEFAULT_TEXT),
        )


def _normalize_text(text: str) -> str:
    return " ".join(text.split())


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if (
            key in merged
            and isinstance(merged[key], dict)
            and isinstance(value, dict)
        ):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _candidate_config_paths(explicit: Optional[Path] = None) -> List[Path]:
    paths = []
    if explicit is not None:
        paths.append(explicit)
    env_path = os.environ.get("TYPEBOX_CONFIG")
    if env_path:
        paths.append(Path(env_path))
    paths.extend([
        Path("config.yaml"),
        Path("~/.config/typebox/config.yaml").expanduser(),
    ])
    return paths


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    if path is not None and not path.exists():
        raise ConfigError(f"config file not found: {path}")
    config = dict(DEFAULT_CONFIG)
    for candidate in _candidate_config_paths(path):
        if candidate.exists():
            with candidate.open("r", encoding="utf-8") as handle:
                try:
                    data = yaml.safe_load(handle) or {}
                except yaml.YAMLError as exc:
                    raise ConfigError(f"invalid YAML in {candidate}: {exc}") from exc
            if isinstance(data, dict):
                config = _deep_merge(config, data)
            break
    return config
