"""
Configuration loader.
Reads settings from the .env file and the environment.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

# JSON file backing the settings store (keys -> base64 blobs)
SETTINGS_FILE = os.getenv("SETTINGS_FILE", "settings.json")

# Slot the favorites collection is stored under
FAVORITES_KEY = os.getenv("FAVORITES_KEY", "Favorites")

# Prefix for poster/backdrop image URLs
IMAGE_BASE_URL = os.getenv("IMAGE_BASE_URL", "https://image.tmdb.org/t/p/")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def configure_logging(level: str | None = None) -> None:
    """Set up root logging for scripts and the API process."""
    level_name = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
