"""
Command-line interface for shear scene detection
"""
import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .config import MAX_SCENE_FRAMES, MAX_SCENE_SECS
from .exceptions import InvalidInputError, ShearError
from .ffprobe import get_frame_rate
from .formatting import print_header
from .logging import configure_logging
from .pipeline import process_file, renormalize_file
from .scenes.limits import SceneLimits

def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="shear",
        description="Scene change detection for chunked video encoding"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "-i", "--input",
        type=Path,
        help="Input video file"
    )
    source.add_argument(
        "--scenes",
        type=Path,
        help="Existing scene file to re-split instead of running detection"
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        required=True,
        help="Output scene file (one frame number per line)"
    )
    parser.add_argument(
        "--fps-num",
        type=int,
        default=None,
        help="FPS numerator (probed from the input when omitted)"
    )
    parser.add_argument(
        "--fps-den",
        type=int,
        default=None,
        help="FPS denominator (probed from the input when omitted)"
    )
    parser.add_argument(
        "--total-frames",
        type=int,
        default=0,
        help="Total number of frames in the video (default: frames decoded during detection)"
    )
    parser.add_argument(
        "--max-scene-secs",
        type=int,
        default=MAX_SCENE_SECS,
        help="Maximum scene length in seconds; 0 disables this limit (default: %(default)s). "
             "When both limits are set the stricter one applies"
    )
    parser.add_argument(
        "--max-scene-frames",
        type=int,
        default=MAX_SCENE_FRAMES,
        help="Maximum scene length in frames; 0 disables this limit (default: %(default)s). "
             "When both limits are set the stricter one applies"
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show progress output"
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Set logging level (default from SHEAR_LOG_LEVEL or INFO)"
    )
    parser.add_argument(
        "--no-log-file",
        dest="file_logging",
        action="store_false",
        help="Do not write a log file"
    )
    return parser.parse_args(argv)

def _resolve_frame_rate(args) -> tuple:
    """Use the frame rate given on the command line, probing the input otherwise."""
    if args.fps_num is not None:
        return args.fps_num, args.fps_den if args.fps_den is not None else 1
    if args.fps_den is not None:
        raise InvalidInputError("--fps-den given without --fps-num", module="cli")
    if args.input is None:
        raise InvalidInputError("--fps-num is required with --scenes", module="cli")
    return get_frame_rate(args.input)

def _optional_limit(value: int):
    """Map a limit of 0 on the command line to "not supplied"."""
    return None if value == 0 else value

def run(args) -> int:
    """Run shear for parsed arguments, raising on failure"""
    log = logging.getLogger("shear")
    if args.input is not None and not args.input.is_file():
        raise InvalidInputError(f"Input {args.input} does not exist", module="cli")
    if args.total_frames < 0:
        raise InvalidInputError("--total-frames must not be negative", module="cli")

    fps_num, fps_den = _resolve_frame_rate(args)
    limits = SceneLimits(
        fps_num=fps_num,
        fps_den=fps_den,
        max_scene_secs=_optional_limit(args.max_scene_secs),
        max_scene_frames=_optional_limit(args.max_scene_frames)
    )
    limits.validate()
    log.debug("Using frame rate %d/%d (%.3f fps)", fps_num, fps_den, limits.fps)

    if args.scenes is not None:
        if args.total_frames <= 0:
            raise InvalidInputError("--total-frames is required with --scenes", module="cli")
        renormalize_file(args.scenes, args.output, args.total_frames, limits.max_scene_length)
        return 0

    if args.progress:
        print_header(f"shear v{__version__}")
    process_file(
        args.input,
        args.output,
        limits,
        total_frames=args.total_frames,
        show_progress=args.progress
    )
    return 0

def main(argv=None):
    """Main entry point"""
    args = parse_args(argv)
    configure_logging(args.log_level, file_logging=args.file_logging)
    log = logging.getLogger("shear")

    try:
        return run(args)
    except KeyboardInterrupt:
        log.warning("Scene detection interrupted by user")
        return 130
    except ShearError as e:
        log.error("%s", e)
        return 1
    except Exception as e:
        log.exception("Scene detection failed: %s", e)
        return 1

if __name__ == "__main__":
    sys.exit(main())
