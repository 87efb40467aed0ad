"""FFprobe helpers for media file analysis

Responsibilities:
- Query the first video stream of a file through ffmpeg-python
- Cache probe results per file
- Extract the frame rate the seconds-based scene limit is based on
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Tuple

import ffmpeg

from .exceptions import ShearError

logger = logging.getLogger(__name__)


class MetadataError(ShearError):
    """Raised when metadata cannot be retrieved or parsed"""
    def __init__(self, message: str, property_name: str = None):
        self.property_name = property_name
        super().__init__(f"Metadata error: {message}", module="ffprobe")


@lru_cache(maxsize=100)
def probe_video_stream(path: Path) -> Dict[str, Any]:
    """
    Run ffprobe on the first video stream of a file.

    Args:
        path: Path to media file.

    Returns:
        The ffprobe stream dictionary.

    Raises:
        MetadataError: If ffprobe fails or the file has no video stream.
    """
    try:
        data = ffmpeg.probe(str(path), select_streams="v:0")
    except ffmpeg.Error as e:
        stderr = e.stderr.decode(errors="replace").strip() if e.stderr else ""
        raise MetadataError(f"ffprobe failed for {path}: {stderr or e}") from e
    except OSError as e:
        raise MetadataError(f"Could not run ffprobe: {e}") from e

    streams = data.get("streams", [])
    if not streams:
        raise MetadataError(f"No video stream found in {path}")
    return streams[0]


def parse_rational(value: str) -> Tuple[int, int]:
    """Parse an ffprobe rational such as "24000/1001" into (num, den)."""
    num, sep, den = str(value).partition("/")
    try:
        num_i = int(num)
        den_i = int(den) if sep else 1
    except ValueError as e:
        raise MetadataError(f"Could not parse rational {value!r}") from e
    if num_i <= 0 or den_i <= 0:
        raise MetadataError(f"Rational {value!r} is not positive")
    return num_i, den_i


def get_frame_rate(path: Path) -> Tuple[int, int]:
    """Get the video frame rate as a (numerator, denominator) pair"""
    stream = probe_video_stream(path)
    for prop in ("avg_frame_rate", "r_frame_rate"):
        value = stream.get(prop)
        if not value or value in ("0/0", "N/A"):
            continue
        try:
            return parse_rational(value)
        except MetadataError:
            logger.debug("Ignoring unusable %s=%r", prop, value)
    raise MetadataError(f"No usable frame rate for {path}", "r_frame_rate")

