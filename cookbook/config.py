"""Configuration utilities.

Settings come from environment variables; a ``.env`` file in the working
directory is loaded first when present.

Example .env:
    COOKBOOK_LOG_LEVEL=DEBUG
    COOKBOOK_LOG_JSON=true
    COOKBOOK_DISPLAY_STYLE=descriptive
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

import structlog
from dotenv import load_dotenv

from cookbook.domain.units.kinds import DisplayStyle

logger = structlog.get_logger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    """Runtime settings.

    Attributes:
        log_level: Standard logging level name
        log_json: Render logs as JSON instead of console text
        display_style: Default style for human-facing unit rendering
    """

    log_level: str = "INFO"
    log_json: bool = False
    display_style: DisplayStyle = DisplayStyle.ABBREVIATED


def get_log_level() -> str:
    """
    Get logging level name.

    Returns:
        Level from COOKBOOK_LOG_LEVEL, defaults to "INFO"
    """
    level = os.getenv("COOKBOOK_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Unknown log level, using INFO", value=level)
        return "INFO"
    return level


def get_log_json() -> bool:
    """
    Get whether logs are rendered as JSON.

    Returns:
        Flag from COOKBOOK_LOG_JSON, defaults to False
    """
    raw = os.getenv("COOKBOOK_LOG_JSON", "false").strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw not in _FALSE_VALUES:
        logger.warning("Unknown boolean for COOKBOOK_LOG_JSON, using false", value=raw)
    return False


def get_display_style() -> DisplayStyle:
    """
    Get default display style for units.

    Returns:
        Style from COOKBOOK_DISPLAY_STYLE, defaults to abbreviated
    """
    raw = os.getenv("COOKBOOK_DISPLAY_STYLE", DisplayStyle.ABBREVIATED.value).strip().lower()
    try:
        return DisplayStyle(raw)
    except ValueError:
        logger.warning("Unknown display style, using abbreviated", value=raw)
        return DisplayStyle.ABBREVIATED


def get_settings(env_file: Optional[str] = None) -> Settings:
    """
    Load settings from the environment.

    Args:
        env_file: Optional path to a .env file (default: search from cwd).
            Variables already set in the environment win over the file.

    Returns:
        Settings snapshot
    """
    load_dotenv(env_file)
    return Settings(
        log_level=get_log_level(),
        log_json=get_log_json(),
        display_style=get_display_style(),
    )
