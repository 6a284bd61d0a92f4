"""CLI application entry point for shapelab.

This module provides the main CLI interface using Typer.
"""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from shapelab import __version__
from shapelab.cli.output import (
    console,
    print_drag_result,
    print_error,
    print_header,
    print_intersections,
    print_outlines,
    print_scene_info,
    print_shapes,
    print_step,
    print_success,
)
from shapelab.config import (
    InteractionConfig,
    IntersectionConfig,
    IntersectionMethod,
    LoggingConfig,
    SceneStyleConfig,
    ShapelabSettings,
)
from shapelab.core import SceneController
from shapelab.domain import Point, Scene, default_scene
from shapelab.exceptions import SceneLoadError, SceneSaveError, ShapelabError
from shapelab.io import SceneReader, SceneWriter
from shapelab.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="shapelab",
    help="Interactive 2D shape intersection: drag anchors, highlight overlaps.",
    add_completion=False,
    no_args_is_help=True,
)


@dataclass
class CliState:
    """Options shared by all commands."""

    log_file: Path | None = None
    log_level: str = "WARNING"
    quiet: bool = False


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Shapelab[/bold blue] v{__version__}")
        raise typer.Exit()


def parse_point(value: str) -> Point:
    """Parse an "X,Y" command-line value into a Point.

    Raises:
        typer.BadParameter: If the value is not two comma-separated numbers
    """
    parts = value.split(",")
    if len(parts) != 2:
        raise typer.BadParameter(f"Expected X,Y but got '{value}'")
    try:
        return Point(float(parts[0]), float(parts[1]))
    except ValueError:
        raise typer.BadParameter(f"Expected numeric X,Y but got '{value}'") from None


def _parse_method(method: str) -> IntersectionMethod:
    try:
        return IntersectionMethod(method.lower())
    except ValueError:
        raise typer.BadParameter(
            f"Invalid method: {method} (valid values: sat, edges)"
        ) from None


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Work with scenes of anchored triangles, rectangles and circles."""
    if log_level.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        print_error(f"Invalid log level: {log_level}")
        raise typer.Exit(code=1)
    ctx.obj = CliState(log_file=log_file, log_level=log_level, quiet=quiet)


def _build_settings(
    state: CliState,
    method: str = "sat",
    pick_radius: float = 5.0,
) -> ShapelabSettings:
    """Create settings from shared and per-command options."""
    return ShapelabSettings(
        interaction=InteractionConfig(anchor_pick_radius=pick_radius),
        intersection=IntersectionConfig(method=_parse_method(method)),
        logging=LoggingConfig(
            log_file=state.log_file,
            log_level=state.log_level if not state.quiet else "WARNING",
        ),
    )


def _make_controller(scene: Scene, settings: ShapelabSettings, quiet: bool) -> SceneController:
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    return SceneController(scene, settings, logger=logger)


def _load_scene(scene_path: Path, quiet: bool) -> Scene:
    if not quiet:
        print_step("Loading scene")
    scene = SceneReader(scene_path).load()
    if not quiet:
        print_scene_info(str(scene_path), scene)
    return scene


def _run(state: CliState, action: Callable[[], None]) -> None:
    """Run a command body, mapping errors to messages and exit codes."""
    try:
        action()
    except SceneLoadError as e:
        print_error(f"Could not load scene: {e.reason}")
        raise typer.Exit(code=1)
    except SceneSaveError as e:
        print_error(f"Could not save scene: {e.reason}")
        raise typer.Exit(code=1)
    except ShapelabError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except typer.BadParameter:
        raise
    except Exception as e:
        if not state.quiet:
            print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


@app.command()
def demo(
    ctx: typer.Context,
    output: Annotated[
        Path,
        typer.Argument(
            help="Where to write the demo scene",
            show_default=False,
        ),
    ],
    default_color: Annotated[
        str,
        typer.Option("--default-color", help="Color of shapes that intersect nothing"),
    ] = "black",
    highlight_color: Annotated[
        str,
        typer.Option("--highlight-color", help="Color of intersecting shapes"),
    ] = "red",
) -> None:
    """Write the three-by-three demo scene (triangles, rectangles, circles).

    Example:
        shapelab demo scene.json
    """
    state: CliState = ctx.obj

    def action() -> None:
        settings = ShapelabSettings(
            style=SceneStyleConfig(default_color=default_color, highlight_color=highlight_color)
        )
        style = settings.style
        scene = default_scene()
        scene.default_color = style.default_color
        scene.highlight_color = style.highlight_color
        for record in scene.shapes:
            record.color = style.default_color

        path = SceneWriter(output).save(scene)
        if not state.quiet:
            print_header(__version__)
            print_success(f"Wrote {len(scene)} shapes", str(path))

    _run(state, action)


@app.command()
def check(
    ctx: typer.Context,
    scene_path: Annotated[
        Path,
        typer.Argument(help="Path to a JSON scene file", show_default=False),
    ],
    method: Annotated[
        str,
        typer.Option("--method", "-m", help="Polygon intersection method (sat|edges)"),
    ] = "sat",
    vertices: Annotated[
        bool,
        typer.Option("--vertices", help="Also print outline vertices of every shape"),
    ] = False,
) -> None:
    """Report which shapes of a scene intersect."""
    state: CliState = ctx.obj
    settings = _build_settings(state, method=method)

    def action() -> None:
        if not state.quiet:
            print_header(__version__)
        scene = _load_scene(scene_path, state.quiet)
        controller = _make_controller(scene, settings, state.quiet)
        controller.evaluate()

        if not state.quiet:
            print_step(f"Intersections ({settings.intersection.method.value})")
            print_intersections(controller.intersecting_names())
            print_step("Shapes")
            print_shapes(scene)
            if vertices:
                print_step("Outlines")
                print_outlines(controller.outlines())

    _run(state, action)


@app.command()
def drag(
    ctx: typer.Context,
    scene_path: Annotated[
        Path,
        typer.Argument(help="Path to a JSON scene file", show_default=False),
    ],
    start: Annotated[
        str,
        typer.Option("--from", help="Pointer press position as X,Y", show_default=False),
    ],
    end: Annotated[
        str,
        typer.Option("--to", help="Pointer release position as X,Y", show_default=False),
    ],
    steps: Annotated[
        int,
        typer.Option("--steps", "-s", help="Number of pointer moves to replay", min=1),
    ] = 1,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output path (default: {name}-dragged.json)"),
    ] = None,
    method: Annotated[
        str,
        typer.Option("--method", "-m", help="Polygon intersection method (sat|edges)"),
    ] = "sat",
    pick_radius: Annotated[
        float,
        typer.Option("--pick-radius", help="Anchor grab distance", min=0.1, max=100.0),
    ] = 5.0,
) -> None:
    """Replay a pointer drag on a scene and save the result.

    The anchor under --from is grabbed and moved to --to in equal steps;
    intersections are re-evaluated after each move.

    Example:
        shapelab drag scene.json --from 100,50 --to 240,60
    """
    state: CliState = ctx.obj
    press = parse_point(start)
    release = parse_point(end)
    settings = _build_settings(state, method=method, pick_radius=pick_radius)

    def action() -> None:
        if not state.quiet:
            print_header(__version__)
        scene = _load_scene(scene_path, state.quiet)
        controller = _make_controller(scene, settings, state.quiet)
        controller.evaluate()

        if not controller.begin_drag(press):
            print_error(
                f"No anchor within {pick_radius} of ({press.x}, {press.y})",
                details="Use 'shapelab check --vertices' to list anchor positions.",
            )
            raise typer.Exit(code=1)

        anchor = controller.drag.anchor  # type: ignore[union-attr]
        for i in range(1, steps + 1):
            t = i / steps
            controller.drag_to(press + (release - press).scale(t))
        controller.end_drag()

        destination = output if output is not None else SceneWriter.get_output_path(scene_path)
        SceneWriter(destination).save(scene)

        if not state.quiet:
            print_step("Drag")
            print_drag_result(
                scene.shapes[anchor.shape_index].name,
                anchor.anchor_index,
                press,
                release,
                steps,
            )
            print_step("Intersections")
            print_intersections(controller.intersecting_names())
            print_success("Scene updated", str(destination))

    _run(state, action)


@app.command()
def probe(
    ctx: typer.Context,
    scene_path: Annotated[
        Path,
        typer.Argument(help="Path to a JSON scene file", show_default=False),
    ],
    at: Annotated[
        str,
        typer.Option("--at", help="Point to probe as X,Y", show_default=False),
    ],
) -> None:
    """List the shapes whose interior contains a point."""
    state: CliState = ctx.obj
    position = parse_point(at)
    settings = _build_settings(state)

    def action() -> None:
        scene = SceneReader(scene_path).load()
        controller = _make_controller(scene, settings, state.quiet)
        names = controller.shapes_at(position)
        if names:
            for name in names:
                console.print(name)
        elif not state.quiet:
            console.print(f"No shape contains ({position.x}, {position.y})")

    _run(state, action)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
