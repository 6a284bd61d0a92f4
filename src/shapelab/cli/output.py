"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from shapelab.domain import Point, Scene

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Shapelab[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_scene_info(scene_path: str, scene: Scene) -> None:
    """Print scene file information.

    Args:
        scene_path: Path to the scene file
        scene: The loaded scene
    """
    counts: dict[str, int] = {}
    for record in scene.shapes:
        kind = record.shape.kind.value
        counts[kind] = counts.get(kind, 0) + 1

    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(scene_path)
    console.print(line)
    summary = f" {SYM_DOT} ".join(f"{n} {kind}s" for kind, n in sorted(counts.items()))
    console.print(f"  {len(scene)} shapes" + (f" {SYM_DOT} {summary}" if summary else ""))


def _format_point(point: Point) -> str:
    return f"({point.x:.1f}, {point.y:.1f})"


def print_shapes(scene: Scene) -> None:
    """Print a table of shapes with their anchors and current color.

    Args:
        scene: The scene to list
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Shape")
    table.add_column("Type")
    table.add_column("Anchors")
    table.add_column("Color")

    for record in scene.shapes:
        anchors = " ".join(_format_point(p) for p in record.shape.anchors)
        style = "red" if record.color == scene.highlight_color else None
        table.add_row(
            record.name,
            record.shape.kind.value,
            anchors,
            Text(record.color, style=style or ""),
        )
    console.print(table)


def print_intersections(pairs: list[tuple[str, str]]) -> None:
    """Print intersecting shape pairs.

    Args:
        pairs: Names of intersecting shapes
    """
    if not pairs:
        console.print("  [green]No intersections[/green]")
        return

    console.print(f"  [red]{len(pairs)}[/red] intersecting pairs")
    for first, second in pairs:
        console.print(f"  {first} {SYM_DOT} {second}")


def print_outlines(outlines: dict[str, list[Point]]) -> None:
    """Print the vertices of each shape outline.

    Args:
        outlines: Outline vertices keyed by shape name
    """
    for name, vertices in outlines.items():
        console.print(f"  [bold]{name}[/bold] ({len(vertices)} vertices)")
        console.print("    " + " ".join(_format_point(p) for p in vertices))


def print_drag_result(
    shape_name: str,
    anchor_index: int,
    start: Point,
    end: Point,
    steps: int,
) -> None:
    """Print a summary of a replayed drag gesture.

    Args:
        shape_name: Name of the dragged shape
        anchor_index: Index of the dragged anchor
        start: Pointer start position
        end: Pointer end position
        steps: Number of pointer moves replayed
    """
    console.print(
        f"  {shape_name} anchor {anchor_index} {SYM_DOT} "
        f"{_format_point(start)} → {_format_point(end)} {SYM_DOT} {steps} moves"
    )


def print_success(message: str, output_path: str | None = None) -> None:
    """Print success message.

    Args:
        message: Summary message
        output_path: Path of a written file, if any
    """
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]")
    if output_path:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
