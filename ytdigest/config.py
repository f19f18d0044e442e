"""
Configuration settings for the YouTube transcript digest application.
"""

import os
from typing import Dict, List
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


def _split_env(name: str, default: str) -> List[str]:
    """Read a comma-separated environment variable as a list of stripped values."""
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube Transcript Digest"
    APP_VERSION = "0.1.0"
    DEBUG = False

    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()

    # Chat-completion endpoint (OpenAI compatible)
    OPENROUTER_API_KEY = os.getenv("OPENROUTER_API_KEY")
    OPENROUTER_BASE_URL = os.getenv("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1")
    MODEL_PROVIDER = os.getenv("MODEL_PROVIDER", "openai")

    # Default models
    DEFAULT_SUMMARY_MODEL = os.getenv("DEFAULT_SUMMARY_MODEL", "amazon/nova-2-lite-v1:free")
    DEFAULT_QA_MODEL = os.getenv("DEFAULT_QA_MODEL", "mistralai/devstral-2512:free")
    AVAILABLE_MODELS: Dict[str, str] = {
        "amazon/nova-2-lite-v1:free": "Amazon Nova Lite",
        "arcee-ai/trinity-mini:free": "Arcee Trinity Mini",
        "kwaipilot/kat-coder-pro:free": "Kat Coder Pro",
    }
    MAX_OUTPUT_TOKENS = 900

    # YouTube Data API
    YOUTUBE_API_KEY = os.getenv("YOUTUBE_API_KEY")
    YOUTUBE_API_URL = os.getenv("YOUTUBE_API_URL", "https://www.googleapis.com/youtube/v3")
    SEARCH_CANDIDATE_LIMIT = 10
    SEARCH_RESULT_LIMIT = 5

    # Transcript sources, tried in this order
    TRANSCRIPT_SOURCES = _split_env("TRANSCRIPT_SOURCES", "youtube_loader,transcript_api")
    TRANSCRIPT_LANGUAGES = _split_env("TRANSCRIPT_LANGUAGES", "en,en-US,en-GB")
    HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "30"))

    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        from ytdigest.utils.logger import logging

        # Credentials are checked again at call time; this is only a heads-up
        if not cls.OPENROUTER_API_KEY:
            logging.warning("OPENROUTER_API_KEY environment variable not set. "
                            "Summaries and answers will be unavailable.")
        if not cls.YOUTUBE_API_KEY:
            logging.warning("YOUTUBE_API_KEY environment variable not set. "
                            "Video search will be unavailable.")

    @classmethod
    def model_choices(cls) -> List[Dict[str, str]]:
        """Get the selectable models as id/name pairs."""
        return [{"id": model_id, "name": name} for model_id, name in cls.AVAILABLE_MODELS.items()]


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
