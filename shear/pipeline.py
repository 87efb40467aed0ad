"""High-level pipeline orchestration for scene file generation

Responsibilities:
  - Resolve the maximum scene length for the input.
  - Run scene detection and settle the total frame count.
  - Normalize scene starts into bounded chunk boundaries.
  - Write the scene file consumed by the chunked encoder.
"""

import logging
from pathlib import Path
from typing import List

from .formatting import print_chunk_summary, print_detection_summary, print_step
from .scenes.detection import clip_scene_starts, detect_scene_changes
from .scenes.limits import SceneLimits
from .scenes.normalize import normalize
from .scenes.output import read_boundaries, write_boundaries

logger = logging.getLogger(__name__)


def process_file(
    input_file: Path,
    output_file: Path,
    limits: SceneLimits,
    total_frames: int = 0,
    show_progress: bool = False
) -> List[int]:
    """
    Detect scenes in a video and write its chunk boundaries.

    Args:
        input_file: Path to input video file.
        output_file: Path of the scene file to write.
        limits: Frame rate and scene length limits.
        total_frames: Frame count of the input; 0 uses the number of
            frames decoded during detection.
        show_progress: Show progress and status lines on the console.

    Returns:
        The boundaries written to output_file.

    Raises:
        InvalidInputError: If the limits or the detected scenes are invalid.
        DetectionError: If scene detection fails.
        WriteError: If the scene file cannot be written.
    """
    max_len = limits.max_scene_length
    logger.info("Detecting scene changes in %s (max %d frames/scene)", input_file, max_len)
    if show_progress:
        print_step(f"Detecting scene changes in {input_file} (max {max_len} frames/scene)")

    detection = detect_scene_changes(input_file, show_progress=show_progress)
    if show_progress:
        print_detection_summary(len(detection.scene_starts), detection.frame_count)

    if total_frames > 0:
        if detection.frame_count and detection.frame_count != total_frames:
            logger.warning("Decoder produced %d frames but total frame count is %d",
                           detection.frame_count, total_frames)
    else:
        total_frames = detection.frame_count

    scene_starts = clip_scene_starts(detection.scene_starts, total_frames)
    boundaries = normalize(scene_starts, total_frames, max_len)

    write_boundaries(boundaries, output_file)
    logger.info("Wrote %d scene boundaries to %s", len(boundaries), output_file)
    if show_progress:
        print_chunk_summary(len(scene_starts), boundaries, total_frames, max_len, output_file)
    return boundaries


def renormalize_file(scene_file: Path, output_file: Path, total_frames: int, max_len: int) -> List[int]:
    """
    Re-apply a scene length limit to an existing scene file.

    Boundaries already within the limit are left untouched, so running this
    on a file produced with the same limit rewrites it unchanged.
    """
    boundaries = normalize(read_boundaries(scene_file), total_frames, max_len)
    write_boundaries(boundaries, output_file)
    logger.info("Renormalized %s into %d boundaries at %s", scene_file, len(boundaries), output_file)
    return boundaries
