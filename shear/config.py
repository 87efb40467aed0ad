"""Configuration settings for shear

This module centralizes the settings used across the tool:
- Log file location and default level
- Default maximum scene length in seconds and in frames
- Scene detector parameters

User-configurable values are read from SHEAR_* environment variables;
the rest are internal constants.
"""

import os
from pathlib import Path

from .exceptions import ConfigurationError


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}", module="config") from e


# LOG_DIR: user definable with default of "$HOME/shear_logs"
LOG_DIR = Path(os.environ.get("SHEAR_LOG_DIR", str(Path.home() / "shear_logs")))

# Logging configuration
LOG_LEVEL = os.environ.get("SHEAR_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR, CRITICAL

# Maximum scene length; the smaller of the two bounds every chunk
MAX_SCENE_SECS = _env_int("SHEAR_MAX_SCENE_SECS", 10)
MAX_SCENE_FRAMES = _env_int("SHEAR_MAX_SCENE_FRAMES", 300)

# Scene detection settings
SCENE_THRESHOLD = 27.0  # ContentDetector threshold
ADAPTIVE_THRESHOLD = 3.0  # AdaptiveDetector threshold
MIN_SCENE_LEN = 5  # Minimum scene length (frames)
