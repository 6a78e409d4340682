"""Load panel settings from ``spira.yaml`` (with fallbacks)."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .config import KIND_ORDER, AppSettings

logger = logging.getLogger(__name__)

_CACHE: AppSettings | None = None


def load_settings(base_path: str | Path | None = None, *, reload: bool = False) -> AppSettings:
    global _CACHE
    if _CACHE is not None and not reload:
        return _CACHE
    base = Path(base_path or Path(__file__).resolve().parent.parent)
    yaml_path = base / "spira.yaml"
    settings = AppSettings()
    if not yaml_path.exists():
        _CACHE = settings
        return _CACHE
    try:
        data = yaml.safe_load(yaml_path.read_text()) or {}
        section = data.get("spira") or {}
        if section.get("api_path"):
            settings.api_path = "/" + str(section["api_path"]).strip("/")
        if section.get("timeout") is not None:
            settings.timeout = float(section["timeout"])
        titles = section.get("section_titles") or {}
        for kind in KIND_ORDER:
            if titles.get(kind):
                settings.section_titles[kind] = str(titles[kind])
    except (yaml.YAMLError, AttributeError, TypeError, ValueError) as exc:
        logger.warning("Ignoring invalid settings file %s: %s", yaml_path, exc)
        settings = AppSettings()
    _CACHE = settings
    return _CACHE
