# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_LOGS_DIR = os.getenv("LOGS_DIR", None)
_LOG_TO_FILE = _env_flag("LOG_TO_FILE", "true")
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Navigation button labels
_WIZARD_BACK_TEXT = os.getenv("WIZARD_BACK_TEXT", "< Back")
_WIZARD_NEXT_TEXT = os.getenv("WIZARD_NEXT_TEXT", "Next >")
_WIZARD_FINISH_TEXT = os.getenv("WIZARD_FINISH_TEXT", "Finish")
_WIZARD_CANCEL_TEXT = os.getenv("WIZARD_CANCEL_TEXT", "Cancel")

_ENFORCE_THREAD_AFFINITY = _env_flag("ENFORCE_THREAD_AFFINITY", "true")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "License Wizard"
    APP_TITLE: str = "License Installation Wizard"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "License Wizard"

    # Paths
    DATA_DIR: Path = Path.home() / ".licensewizard"
    LOGS_DIR: Path = Path(_LOGS_DIR) if _LOGS_DIR else DATA_DIR / "logs"

    # Logging
    LOG_TO_FILE: bool = _LOG_TO_FILE
    LOG_LEVEL: str = _LOG_LEVEL  # console handler level
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # Wizard navigation buttons
    WIZARD_BACK_TEXT: str = _WIZARD_BACK_TEXT
    WIZARD_NEXT_TEXT: str = _WIZARD_NEXT_TEXT
    WIZARD_FINISH_TEXT: str = _WIZARD_FINISH_TEXT
    WIZARD_CANCEL_TEXT: str = _WIZARD_CANCEL_TEXT

    # Wizard dialog
    WIZARD_MIN_WIDTH: int = 520
    WIZARD_MIN_HEIGHT: int = 360
    WIZARD_BORDER: int = 10

    # Public wizard entry points must run on the thread that created the wizard
    ENFORCE_THREAD_AFFINITY: bool = _ENFORCE_THREAD_AFFINITY
