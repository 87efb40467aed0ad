"""Scene detection utilities for video processing

Runs PySceneDetect over the whole input and reports the frame number at
which each scene starts, together with the number of frames decoded.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from scenedetect import SceneManager, open_video
from scenedetect.detectors import AdaptiveDetector, ContentDetector

from ..config import ADAPTIVE_THRESHOLD, MIN_SCENE_LEN, SCENE_THRESHOLD
from ..exceptions import DetectionError

logger = logging.getLogger(__name__)


@dataclass
class DetectionResult:
    """Scene starts found in one video."""
    scene_starts: List[int] = field(default_factory=lambda: [0])
    frame_count: int = 0


def _build_detector(adaptive: bool, threshold: Optional[float], min_scene_len: int):
    if adaptive:
        if threshold is None:
            threshold = ADAPTIVE_THRESHOLD
        return AdaptiveDetector(adaptive_threshold=threshold, min_scene_len=min_scene_len)
    if threshold is None:
        threshold = SCENE_THRESHOLD
    return ContentDetector(threshold=threshold, min_scene_len=min_scene_len)


def _frame_of(timecode) -> int:
    # scenedetect 0.7 deprecates get_frames() in favour of frame_num
    frame_num = getattr(timecode, "frame_num", None)
    if isinstance(frame_num, int):
        return frame_num
    return timecode.get_frames()


def detect_scene_changes(
    input_file: Path,
    show_progress: bool = False,
    threshold: Optional[float] = None,
    min_scene_len: int = MIN_SCENE_LEN,
    adaptive: bool = True
) -> DetectionResult:
    """
    Detect scene changes in a video.

    Args:
        input_file: Path to input video file.
        show_progress: Display a progress bar while decoding.
        threshold: Threshold of the active detector; defaults to
            ADAPTIVE_THRESHOLD or SCENE_THRESHOLD depending on adaptive.
        min_scene_len: Minimum scene length in frames.
        adaptive: Use AdaptiveDetector, which is less sensitive to fast
            camera motion than ContentDetector.

    Returns:
        DetectionResult whose scene starts are sorted, unique, and begin at 0.

    Raises:
        DetectionError: If the video cannot be opened or decoded.
    """
    try:
        video = open_video(str(input_file))
    except Exception as e:
        raise DetectionError(f"Failed to open {input_file}: {e}", module="detection") from e

    manager = SceneManager()
    manager.add_detector(_build_detector(adaptive, threshold, min_scene_len))
    try:
        manager.detect_scenes(video=video, show_progress=show_progress)
    except Exception as e:
        raise DetectionError(f"Scene detection failed for {input_file}: {e}", module="detection") from e

    scene_list = manager.get_scene_list(start_in_scene=True)
    scene_starts = sorted({_frame_of(scene[0]) for scene in scene_list})

    # The first frame always starts a scene
    if not scene_starts or scene_starts[0] != 0:
        scene_starts.insert(0, 0)

    frame_count = video.frame_number
    logger.info("Detected %d scenes in %s (%d frames decoded)",
                len(scene_starts), input_file.name, frame_count)
    return DetectionResult(scene_starts=scene_starts, frame_count=frame_count)


def clip_scene_starts(scene_starts: Sequence[int], total_frames: int) -> List[int]:
    """
    Drop scene starts at or beyond total_frames.

    Container frame counts do not always match what the decoder produced;
    scenes the detector placed past the known end are discarded.
    """
    clipped = [frame for frame in scene_starts if frame < total_frames]
    dropped = len(scene_starts) - len(clipped)
    if dropped:
        logger.warning("Dropped %d scene starts beyond frame %d", dropped, total_frames)
    return clipped
