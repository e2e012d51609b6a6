# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3000/api")
_API_TOKEN = os.getenv("API_TOKEN", "mock-admin-token-123")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
_SUBMIT_TIMEOUT = int(os.getenv("SUBMIT_TIMEOUT", "60"))
_UPLOAD_TIMEOUT = int(os.getenv("UPLOAD_TIMEOUT", "300"))

# Upload limits
_MAX_UPLOAD_SIZE = int(os.getenv("MAX_UPLOAD_SIZE", str(50 * 1024 * 1024)))

# UI
_LANGUAGE = os.getenv("LANGUAGE_CODE", "en")

# Drafts (wizard state survives an application restart)
_DRAFTS_ENABLED = os.getenv("DRAFTS_ENABLED", "true").lower() in ("true", "1", "yes")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Template Studio"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "Template Studio"

    # HTTP API Backend Settings
    # Reads from .env file (API_BASE_URL, API_TOKEN, API_TIMEOUT, SUBMIT_TIMEOUT)
    API_BASE_URL: str = _API_BASE_URL
    API_TOKEN: str = _API_TOKEN
    API_TIMEOUT: int = _API_TIMEOUT
    SUBMIT_TIMEOUT: int = _SUBMIT_TIMEOUT  # final template submission
    UPLOAD_TIMEOUT: int = _UPLOAD_TIMEOUT  # raw file PUT to storage

    # Template upload
    MAX_UPLOAD_SIZE: int = _MAX_UPLOAD_SIZE  # 50MB
    ALLOWED_EXTENSIONS: tuple = (".png", ".fig")
    ALLOWED_MIME_TYPES: tuple = ("image/png", "application/figma")
    MAX_TEMPLATE_NAME_LENGTH: int = 100
    MAX_TEMPLATE_DESCRIPTION_LENGTH: int = 500
    MAX_TEMPLATE_TAGS: int = 10

    # Language
    LANGUAGE: str = _LANGUAGE

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    DATA_DIR: Path = PROJECT_ROOT / "data"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    DRAFTS_DIR: Path = DATA_DIR / "drafts"

    # Drafts
    DRAFTS_ENABLED: bool = _DRAFTS_ENABLED
    DRAFT_FILE: str = "template_wizard_state.json"

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # UI Settings
    WINDOW_MIN_WIDTH: int = 960
    WINDOW_MIN_HEIGHT: int = 720
