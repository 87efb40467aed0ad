"""Maximum scene length resolution

The encoder is configured with a limit in seconds, a limit in frames, or
both. They are collapsed here into the single frame count the boundary
normalizer works with, so the normalizer never sees frame rates.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..exceptions import InvalidInputError

logger = logging.getLogger(__name__)


def _require_positive_int(value, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{name} must be an integer, got {value!r}", module="limits")
    if value <= 0:
        raise InvalidInputError(f"{name} must be positive, got {value}", module="limits")


def seconds_to_frames(seconds: int, fps_num: int, fps_den: int) -> int:
    """
    Convert a duration in seconds to frames, rounding up.

    Uses exact integer arithmetic, so 10 seconds at 24000/1001 fps is
    ceil(240000 / 1001) = 240 frames.
    """
    _require_positive_int(seconds, "seconds")
    _require_positive_int(fps_num, "fps_num")
    _require_positive_int(fps_den, "fps_den")
    return -(-seconds * fps_num // fps_den)


def resolve_max_scene_length(
    fps_num: int,
    fps_den: int,
    max_scene_secs: Optional[int] = None,
    max_scene_frames: Optional[int] = None
) -> int:
    """
    Resolve the effective maximum scene length in frames.

    Args:
        fps_num: Frame rate numerator.
        fps_den: Frame rate denominator.
        max_scene_secs: Optional limit in seconds.
        max_scene_frames: Optional limit in frames.

    Returns:
        The smaller of the supplied limits, in frames.

    Raises:
        InvalidInputError: If no limit is supplied, a limit is not a
            positive integer, or the frame rate is not positive.
    """
    candidates = []
    if max_scene_secs is not None:
        _require_positive_int(max_scene_secs, "max_scene_secs")
        candidates.append(seconds_to_frames(max_scene_secs, fps_num, fps_den))
    if max_scene_frames is not None:
        _require_positive_int(max_scene_frames, "max_scene_frames")
        candidates.append(max_scene_frames)
    if not candidates:
        raise InvalidInputError(
            "at least one of max_scene_secs or max_scene_frames is required",
            module="limits"
        )
    return min(candidates)


@dataclass
class SceneLimits:
    """Frame rate and scene length limits for one input."""
    fps_num: int
    fps_den: int = 1
    max_scene_secs: Optional[int] = None
    max_scene_frames: Optional[int] = None

    def validate(self) -> None:
        """Raise InvalidInputError if the limits cannot be resolved."""
        _require_positive_int(self.fps_num, "fps_num")
        _require_positive_int(self.fps_den, "fps_den")
        resolve_max_scene_length(
            self.fps_num, self.fps_den, self.max_scene_secs, self.max_scene_frames
        )

    @property
    def fps(self) -> float:
        """Frame rate as a float, for display only."""
        return self.fps_num / self.fps_den

    @property
    def max_scene_length(self) -> int:
        """Effective maximum scene length in frames."""
        max_len = resolve_max_scene_length(
            self.fps_num, self.fps_den, self.max_scene_secs, self.max_scene_frames
        )
        logger.debug(
            "Resolved max scene length %d frames (secs=%s, frames=%s, fps=%d/%d)",
            max_len, self.max_scene_secs, self.max_scene_frames, self.fps_num, self.fps_den
        )
        return max_len
