from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


def _default_config_path() -> Path:
    return Path(__file__).resolve().parent.parent / "config.yaml"


def _default_seed_path() -> Path:
    return Path(__file__).resolve().parent / "data" / "rooms.json"


def _require_str(value: Any, default: str, name: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string")
    return value


def _require_prefix(value: Any, default: str) -> str:
    prefix = _require_str(value, default, "admin_prefix")
    if not prefix.startswith("/") or (len(prefix) > 1 and prefix.endswith("/")):
        raise ValueError("admin_prefix must start with '/' and not end with '/'")
    if prefix == "/":
        raise ValueError("admin_prefix must not be the site root")
    return prefix


def _require_log_level(value: Any, default: str) -> str:
    level = _require_str(value, default, "log_level").upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"log_level {level!r} is not a logging level")
    return level


@dataclass(frozen=True)
class Config:
    site_title: str = "Chat Rooms"
    admin_prefix: str = "/admin"
    seed_path: Path = field(default_factory=_default_seed_path)
    log_level: str = "INFO"

    @classmethod
    def load(cls, path: Path | str | None = None) -> "Config":
        config_path = Path(path) if path else _default_config_path()
        if not config_path.exists():
            return cls()
        raw = yaml.safe_load(config_path.read_text()) or {}
        if not isinstance(raw, dict):
            raise ValueError("config.yaml must contain a mapping")
        return cls.from_dict(raw, base_dir=config_path.resolve().parent)

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], base_dir: Path | None = None
    ) -> "Config":
        defaults = cls()
        seed_value = data.get("seed_path")
        if seed_value is None:
            seed_path = defaults.seed_path
        else:
            seed_path = Path(_require_str(seed_value, "", "seed_path"))
            if not seed_path.is_absolute() and base_dir is not None:
                seed_path = base_dir / seed_path
        return cls(
            site_title=_require_str(
                data.get("site_title"), defaults.site_title, "site_title"
            ),
            admin_prefix=_require_prefix(data.get("admin_prefix"), defaults.admin_prefix),
            seed_path=seed_path,
            log_level=_require_log_level(data.get("log_level"), defaults.log_level),
        )
