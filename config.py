from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

USER_CONFIG_PATH = Path.home() / ".gt_config.yaml"
DEFAULT_THEME = "classic"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_TTIMEOUTLEN = 0.05

logger = logging.getLogger("gt.config")


def _config_path() -> Path:
    override = os.environ.get("GT_CONFIG")
    if override:
        return Path(override).expanduser()
    return USER_CONFIG_PATH


def _load_config() -> Dict[str, Any]:
    path = _config_path()
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        logger.warning("ignoring unreadable config %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: top level is not a mapping", path)
        return {}
    return data


def _setting(key: str, env: str, default: Optional[str] = None) -> Optional[str]:
    value = os.environ.get(env, "").strip()
    if value:
        return value
    raw = _load_config().get(key)
    if raw is None:
        return default
    value = str(raw).strip()
    return value or default


def get_theme() -> str:
    return _setting("theme", "GT_THEME", DEFAULT_THEME) or DEFAULT_THEME


def get_task_bin() -> Optional[str]:
    return _setting("task_bin", "GT_TASK_BIN")


def get_log_level() -> str:
    return (_setting("log_level", "GT_LOG_LEVEL", DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()


def get_log_file() -> Optional[str]:
    return _setting("log_file", "GT_LOG_FILE")


def get_ttimeoutlen() -> float:
    """Escape-key disambiguation timeout; slow terminals/SSH may need more."""
    try:
        return max(0.0, float(os.getenv("GT_TUI_TTIMEOUTLEN", str(DEFAULT_TTIMEOUTLEN))))
    except ValueError:
        return DEFAULT_TTIMEOUTLEN
