"""Scene boundary normalization

Responsibilities:
- Validate detected scene starts against the frame count and scene limit
- Split scenes longer than the limit into evenly sized sub-chunks
- Preserve every detected scene start in the result

Sub-chunk offsets are computed with integer arithmetic only, so the
length bound holds exactly for any frame count.
"""

import logging
from typing import List, Sequence

from ..exceptions import InvalidInputError

logger = logging.getLogger(__name__)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_boundaries(raw: Sequence[int], total_frames: int, max_len: int) -> None:
    """
    Check the preconditions of normalize().

    Args:
        raw: Detected scene start frames.
        total_frames: Number of frames in the video.
        max_len: Maximum scene length in frames.

    Raises:
        InvalidInputError: If raw is empty, does not start at 0, is not
            strictly increasing, holds a value outside [0, total_frames),
            or if total_frames or max_len is not a positive integer.
    """
    if not _is_int(total_frames) or total_frames < 1:
        raise InvalidInputError(f"total_frames must be a positive integer, got {total_frames!r}",
                                module="normalize")
    if not _is_int(max_len) or max_len < 1:
        raise InvalidInputError(f"max_len must be a positive integer, got {max_len!r}",
                                module="normalize")
    if len(raw) == 0:
        raise InvalidInputError("scene list is empty", module="normalize")

    prev = None
    for index, frame in enumerate(raw):
        if not _is_int(frame):
            raise InvalidInputError(f"scene {index} is not an integer frame: {frame!r}",
                                    module="normalize")
        if frame < 0 or frame >= total_frames:
            raise InvalidInputError(
                f"scene {index} starts at frame {frame}, outside [0, {total_frames})",
                module="normalize"
            )
        if prev is not None and frame <= prev:
            raise InvalidInputError(
                f"scene starts not strictly increasing at index {index}: {prev} -> {frame}",
                module="normalize"
            )
        prev = frame

    if raw[0] != 0:
        raise InvalidInputError(f"first scene must start at frame 0, got {raw[0]}",
                                module="normalize")


def split_interval(start: int, end: int, max_len: int) -> List[int]:
    """
    Split the frame range [start, end) into chunks of at most max_len frames.

    A range that already fits is returned as [start]. Longer ranges are cut
    into n = ceil(length / max_len) pieces whose lengths differ by at most
    one frame, so no short remainder chunk is left at the end.

    Returns:
        The start frame of every chunk, beginning with start.
    """
    length = end - start
    if length <= max_len:
        return [start]
    num_chunks = -(-length // max_len)
    return [start + (i * length) // num_chunks for i in range(num_chunks)]


def normalize(raw: Sequence[int], total_frames: int, max_len: int) -> List[int]:
    """
    Turn detected scene starts into chunk boundaries no more than max_len apart.

    Args:
        raw: Detected scene start frames, strictly increasing from 0.
        total_frames: Number of frames in the video.
        max_len: Maximum chunk length in frames.

    Returns:
        Strictly increasing chunk start frames. Every value of raw is kept,
        and consecutive boundaries (including the end of the video) are at
        most max_len frames apart.

    Raises:
        InvalidInputError: If the arguments violate the preconditions
            checked by validate_boundaries().
    """
    validate_boundaries(raw, total_frames, max_len)

    ends = list(raw[1:]) + [total_frames]
    result: List[int] = []
    split_count = 0
    for start, end in zip(raw, ends):
        chunk_starts = split_interval(start, end, max_len)
        if len(chunk_starts) > 1:
            split_count += 1
            logger.debug("Split scene %d-%d (%d frames) into %d chunks",
                         start, end, end - start, len(chunk_starts))
        result.extend(chunk_starts)

    logger.debug("Normalized %d scenes into %d chunks (%d scenes split, max %d frames)",
                 len(raw), len(result), split_count, max_len)
    return result
