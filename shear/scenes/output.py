"""Scene file reading and writing

The scene file holds one chunk start frame per line, in ascending order,
as plain ASCII with "\n" line endings and no header.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from ..exceptions import InvalidInputError, ShearError, WriteError

logger = logging.getLogger(__name__)


def format_boundaries(boundaries: Iterable[int]) -> str:
    """Render boundaries as newline-terminated decimal lines."""
    return "".join(f"{frame}\n" for frame in boundaries)


def write_boundaries(boundaries: Iterable[int], path: Union[str, Path]) -> Path:
    """
    Write boundaries to a scene file.

    Args:
        boundaries: Final chunk boundaries.
        path: Destination file.

    Returns:
        The destination path.

    Raises:
        WriteError: If the destination cannot be written.
    """
    path = Path(path)
    text = format_boundaries(boundaries)
    try:
        with open(path, "w", encoding="ascii", newline="\n") as f:
            f.write(text)
    except OSError as e:
        raise WriteError(f"Failed to write scene file {path}: {e}", path=path, module="output") from e
    logger.debug("Wrote %d boundaries to %s", text.count("\n"), path)
    return path


def read_boundaries(path: Union[str, Path]) -> List[int]:
    """
    Read a scene file written by write_boundaries().

    Raises:
        ShearError: If the file cannot be read.
        InvalidInputError: If a line is not a non-negative integer.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="ascii")
    except (OSError, UnicodeDecodeError) as e:
        raise ShearError(f"Failed to read scene file {path}: {e}", module="output") from e

    boundaries = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line.isdigit():
            raise InvalidInputError(f"{path}:{lineno}: expected a frame number, got {line!r}",
                                    module="output")
        boundaries.append(int(line))
    return boundaries
