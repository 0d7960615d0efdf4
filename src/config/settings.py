# src/config/settings.py

"""Central configuration for the storefront demo."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _delay_multiplier() -> float:
    """Read the simulated-latency multiplier from the environment."""
    raw = os.getenv("STOREFRONT_SIMULATED_DELAY", "1.0")
    try:
        return max(float(raw), 0.0)
    except ValueError:
        return 1.0


class Settings:
    """Central configuration for the storefront demo."""

    # --- Simulated latency (catalog service only) ---
    DELAY_MULTIPLIER: float = _delay_multiplier()
    LIST_DELAY: float = 0.1 * DELAY_MULTIPLIER      # get_all_products
    SEARCH_DELAY: float = 0.15 * DELAY_MULTIPLIER   # search_products
    LOOKUP_DELAY: float = 0.05 * DELAY_MULTIPLIER   # by-id / categories

    # --- Search ---
    SEARCH_DEBOUNCE: float = 0.3        # Seconds of idle typing before search
    DEFAULT_PAGE: int = 1
    DEFAULT_LIMIT: int = 50
    ALL_CATEGORIES: str = "All"         # Sentinel meaning "no category filter"

    # --- Presentation ---
    CURRENCY_SYMBOL: str = "$"
    DESCRIPTION_MAX_LENGTH: int = 120
    RATING_CHOICES: list[float] = [4.5, 4.0, 3.5, 3.0]

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    CATALOG_PATH: Path = BASE_DIR / "src" / "config" / "catalog.json"
    LOGS_DIR: Path = BASE_DIR / "logs"

    # --- Logging ---
    CONSOLE_LOG_LEVEL: str = os.getenv("STOREFRONT_LOG_LEVEL", "WARNING").upper()
