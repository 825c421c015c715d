"""
Configuration management for the Digraph Editor.

Settings are resolved in this order (first wins):
1. Environment variables DIGRAPH_EDITOR_* (a .env file is loaded by app.py)
2. config.json next to the executable/project root
3. Built-in defaults
"""

import json
import logging
import os
import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

ENV_PREFIX = "DIGRAPH_EDITOR_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_config_path() -> Path:
    """config.json next to the executable when frozen, else in the project root."""
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).parent / "config.json"
    return Path(__file__).parent.parent / "config.json"


@dataclass
class EditorSettings:
    title: str = "Digraph Editor"
    port: int = 8080
    canvas_width: int = 600
    canvas_height: int = 400
    vertex_margin: int = 30
    dark_mode: bool = True
    log_level: str = "INFO"


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration from config.json. Missing or unreadable files give {}."""
    config_path = config_path or get_config_path()
    if config_path.exists():
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if isinstance(data, dict):
                return data
            logger.warning(f"Ignoring {config_path}: top level is not an object")
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"Ignoring unreadable config {config_path}: {e}")
    return {}


def _coerce(name: str, raw: Any, default: Any) -> Any:
    """Convert raw (str from env, or JSON value) to the type of default."""
    if isinstance(default, bool):
        if isinstance(raw, bool):
            return raw
        text = str(raw).strip().lower()
        if text in ("1", "true", "yes", "on"):
            return True
        if text in ("0", "false", "no", "off"):
            return False
        raise ValueError(f"{name} must be a boolean, got {raw!r}")

    if isinstance(default, int):
        value = int(raw)
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")
        return value

    text = str(raw).strip()
    if name == "log_level":
        text = text.upper()
        if text not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {raw!r}")
    return text


def load_settings(config_path: Optional[Path] = None, environ: Optional[Dict[str, str]] = None) -> EditorSettings:
    """
    Resolve EditorSettings from the environment, config.json and defaults.

    Invalid values are logged and the next source (or default) is used.
    """
    environ = os.environ if environ is None else environ
    file_config = load_config(config_path)
    defaults = EditorSettings()
    values = {}

    for f in fields(EditorSettings):
        default = getattr(defaults, f.name)
        candidates = [
            (f"environment variable {ENV_PREFIX}{f.name.upper()}", environ.get(ENV_PREFIX + f.name.upper())),
            (f"config.json key '{f.name}'", file_config.get(f.name)),
        ]
        values[f.name] = default
        for source, raw in candidates:
            if raw is None or raw == "":
                continue
            try:
                values[f.name] = _coerce(f.name, raw, default)
                break
            except (TypeError, ValueError) as e:
                logger.warning(f"Ignoring {source}: {e}")

    settings = EditorSettings(**values)
    if settings.canvas_width < 2 * settings.vertex_margin or settings.canvas_height < 2 * settings.vertex_margin:
        logger.warning(
            f"Canvas {settings.canvas_width}x{settings.canvas_height} too small for margin "
            f"{settings.vertex_margin}; using default canvas"
        )
        settings.canvas_width = defaults.canvas_width
        settings.canvas_height = defaults.canvas_height
        settings.vertex_margin = defaults.vertex_margin
    return settings
