"""Scene boundary processing

This package provides:
- Scene detection through PySceneDetect
- Resolution of the maximum scene length from seconds and frame limits
- Normalization of scene starts into bounded chunk boundaries
- Reading and writing of scene files
"""

from .limits import SceneLimits, resolve_max_scene_length, seconds_to_frames
from .normalize import normalize, split_interval, validate_boundaries
from .output import format_boundaries, read_boundaries, write_boundaries

__all__ = [
    'SceneLimits',
    'resolve_max_scene_length',
    'seconds_to_frames',
    'normalize',
    'split_interval',
    'validate_boundaries',
    'format_boundaries',
    'read_boundaries',
    'write_boundaries'
]
