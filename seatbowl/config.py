"""Application configuration."""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def get_setting(key: str, default: str = None) -> str:
    """Get a setting from the environment (or .env file)."""
    return os.getenv(f"SEATBOWL_{key}", default)


def get_float(key: str, default: float) -> float:
    """Get a numeric setting, falling back to the default."""
    value = get_setting(key)
    if value is None or value == "":
        return default
    return float(value)


# Base paths
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = Path(get_setting("DATA_DIR", str(BASE_DIR / "data")))
SECTIONS_DIR = DATA_DIR / "sections"

# Logging
LOG_LEVEL = get_setting("LOG_LEVEL", "INFO")
LOG_FILE = get_setting("LOG_FILE")

# Tier defaults, in metres (scaled by the tier unit)
DEFAULT_ROW_COUNT = 20
DEFAULT_ROW_WIDTH = get_float("DEFAULT_ROW_WIDTH", 0.8)
DEFAULT_START_H = 5.0
DEFAULT_START_V = 1.0
DEFAULT_C_VALUE = get_float("DEFAULT_C_VALUE", 0.10)
DEFAULT_EYE_H = 0.8
DEFAULT_EYE_V = 1.2
DEFAULT_STANDING_EYE_H = 0.8
DEFAULT_STANDING_EYE_V = 2.5

# Riser solve: denominators smaller than this are treated as zero
GEOMETRY_TOLERANCE = get_float("GEOMETRY_TOLERANCE", 1e-9)

# Slack allowed when checking a measured C-value against the target
C_VALUE_TOLERANCE = 1e-6

# Profile rendering
DEFAULT_RENDER_WIDTH = 1200
DEFAULT_RENDER_HEIGHT = 700
RENDER_MARGIN = 40
