"""Rich-based console output for scene detection runs

Everything is printed to stderr, next to the log output.
"""

from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

console = Console(stderr=True)

def longest_chunk(boundaries: Sequence[int], total_frames: int) -> int:
    """Length in frames of the longest chunk, counting the one ending at total_frames."""
    edges = list(boundaries) + [total_frames]
    return max((b - a for a, b in zip(edges, edges[1:])), default=0)

def print_header(title: str) -> None:
    """Print the run banner."""
    console.print(Panel.fit(Text(title, style="bold"), border_style="blue"))

def print_step(message: str) -> None:
    """Print the stage that is about to run."""
    console.print(Text("» ", style="bold cyan") + Text(message, style="cyan"))

def print_detection_summary(scene_count: int, frame_count: int) -> None:
    """Report what the detector found."""
    text = Text("✓ ", style="bold green") + Text(
        f"Scene detection complete, found {scene_count} scenes in {frame_count} frames",
        style="bold"
    )
    console.print(text)

def print_chunk_summary(scene_count: int, boundaries: Sequence[int], total_frames: int,
                        max_len: int, output_file: Path) -> None:
    """Tabulate how the scenes were cut into chunks and where they were written."""
    longest = longest_chunk(boundaries, total_frames)
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold blue")
    table.add_column()
    table.add_row("Scenes", str(scene_count))
    table.add_row("Chunks", f"{len(boundaries)} ({len(boundaries) - scene_count} added by splitting)")
    table.add_row("Longest chunk", f"{longest} frames (limit {max_len})")
    table.add_row("Scene file", str(output_file))
    console.print(table)
