"""CLI entrypoint for jeopardy-tool — typer app with show, create, convert and validate."""

import logging
import random
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

import structlog
import typer
from rich.console import Console

from jeopardy_tool.authoring.application.builder import GameBuilder
from jeopardy_tool.authoring.infrastructure.observer import StructlogAuthoringObserver
from jeopardy_tool.cli.output.board import render_board, render_library, render_report
from jeopardy_tool.config.domain.config import ToolConfig
from jeopardy_tool.config.infrastructure.observer import StructlogConfigObserver
from jeopardy_tool.config.infrastructure.yaml_loader import YamlConfigLoader
from jeopardy_tool.core.errors import JeopardyToolError
from jeopardy_tool.game.domain.validation import ValidationReport
from jeopardy_tool.game.infrastructure.errors import GameValidationError
from jeopardy_tool.game.infrastructure.observer import StructlogGameObserver
from jeopardy_tool.game.infrastructure.yaml_store import YamlGameStore
from jeopardy_tool.legacy.infrastructure.json_converter import LegacyJsonConverter
from jeopardy_tool.legacy.infrastructure.observer import StructlogLegacyObserver
from jeopardy_tool.library.infrastructure.directory_library import (
    DirectoryCategoryLibrary,
)
from jeopardy_tool.library.infrastructure.observer import StructlogLibraryObserver

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Author and validate Jeopardy-style question sets.",
)


@dataclass(frozen=True)
class CliState:
    """Settings resolved by the app callback and shared with every command."""

    config: ToolConfig


def _configure_structlog(log_format: str, verbose: bool) -> None:
    """Configure structlog based on the requested format. Logs go to stderr."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(
            f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.", err=True
        )
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.INFO
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


@contextmanager
def _reported_errors() -> Iterator[None]:
    """Turn tool errors into a message on stderr and exit status 1."""
    try:
        yield
    except (typer.Exit, typer.Abort):
        raise
    except KeyboardInterrupt:
        typer.echo("Interrupted.", err=True)
        raise typer.Exit(code=1)
    except JeopardyToolError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.", err=True)
        raise typer.Exit(code=1) from exc


def _state(ctx: typer.Context) -> CliState:
    state = ctx.obj
    if not isinstance(state, CliState):
        raise RuntimeError("CLI state not initialised")
    return state


def _store() -> YamlGameStore:
    return YamlGameStore(observer=StructlogGameObserver())


def _library(config: ToolConfig, store: YamlGameStore) -> DirectoryCategoryLibrary:
    return DirectoryCategoryLibrary(
        root=config.library_dir,
        store=store,
        observer=StructlogLibraryObserver(),
    )


def _check_report(subject: str, report: ValidationReport, strict: bool) -> None:
    if not report.is_valid:
        raise GameValidationError(subject=subject, report=report)
    if strict and report.warnings:
        raise GameValidationError(subject=subject, report=report, strict=True)


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Path | None = typer.Option(
        None,
        "--config",
        help="Path to a jeopardy-tool YAML config file",
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Author and validate Jeopardy-style question sets."""
    _configure_structlog(log_format=log_format, verbose=verbose)
    with _reported_errors():
        if config_path is None:
            config = ToolConfig()
        else:
            loader = YamlConfigLoader(observer=StructlogConfigObserver())
            config = loader.load(path=config_path)
    ctx.obj = CliState(config=config)


@app.command()
def show(
    ctx: typer.Context,
    prefix: str | None = typer.Option(
        None,
        "--prefix",
        "-p",
        help="Only list categories whose name starts with this text",
    ),
    game_path: Path | None = typer.Option(
        None,
        "--game",
        "-g",
        help="Show the board of this game file instead of the category library",
    ),
) -> None:
    """Show the available categories, or the board of one game."""
    state = _state(ctx)
    console = Console(highlight=False)
    with _reported_errors():
        store = _store()
        if game_path is not None:
            game = store.load_game(path=game_path)
            render_board(console=console, game=game)
            render_report(
                console=console,
                report=game.validate_game(asset_root=state.config.asset_root),
            )
            return

        entries = _library(config=state.config, store=store).entries(prefix=prefix)
        if not entries:
            suffix = f" matching prefix '{prefix}'" if prefix else ""
            typer.echo(f"No categories found in {state.config.library_dir}{suffix}.")
            return
        render_library(console=console, entries=entries)


@app.command()
def create(
    ctx: typer.Context,
    output: Path = typer.Argument(
        ...,
        help="Game file to write; relative paths are placed in the games directory",
    ),
    categories: list[str] | None = typer.Option(
        None,
        "--category",
        "-c",
        help="Category to include by name; repeat for more. Free slots are filled at random",
    ),
    seed: int | None = typer.Option(
        None,
        "--seed",
        help="Seed for category and Double Jeopardy selection (overrides config)",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail when the game has content warnings",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        help="Overwrite an existing game file",
    ),
) -> None:
    """Create a new game from the category library."""
    state = _state(ctx)
    config = state.config
    with _reported_errors():
        store = _store()
        rng = random.Random(seed if seed is not None else config.seed)
        builder = GameBuilder(
            library=_library(config=config, store=store),
            observer=StructlogAuthoringObserver(),
            rng=rng,
        )
        game = builder.build(category_names=categories)
        _check_report(
            subject="game",
            report=game.validate_game(asset_root=config.asset_root),
            strict=strict,
        )

        target = _game_path(output=output, games_dir=config.games_dir)
        store.save_game(game=game, path=target, overwrite=force)

        render_board(console=Console(highlight=False), game=game)
        typer.echo(f"Created game {target}")


@app.command()
def convert(
    source: Path = typer.Argument(..., help="Category file in the old JSON format"),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Where to write the converted category (default: SOURCE with .yaml suffix)",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        help="Overwrite an existing output file",
    ),
) -> None:
    """Convert an old category to the new format."""
    with _reported_errors():
        converter = LegacyJsonConverter(observer=StructlogLegacyObserver())
        category = converter.convert(path=source)

        target = output if output is not None else source.with_suffix(".yaml")
        _store().save_category(category=category, path=target, overwrite=force)

        if not category.is_valid():
            typer.echo(
                f"Warning: category '{category.name}' has {len(category.answers)}"
                " answers; a game needs exactly 5.",
                err=True,
            )
        typer.echo(f"Converted {source} -> {target}")


@app.command()
def validate(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Game file to validate"),
    is_category: bool = typer.Option(
        False,
        "--category",
        help="Treat PATH as a single category file",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Treat content warnings as failures",
    ),
) -> None:
    """Validate a game (or category) file and print every issue found."""
    state = _state(ctx)
    asset_root = state.config.asset_root
    console = Console(highlight=False)
    with _reported_errors():
        store = _store()
        if is_category:
            subject = "category"
            report = store.load_category(path=path).validate_category(
                asset_root=asset_root
            )
        else:
            subject = "game"
            report = store.load_game(path=path).validate_game(asset_root=asset_root)

        render_report(console=console, report=report)
        _check_report(subject=subject, report=report, strict=strict)


def _game_path(output: Path, games_dir: Path) -> Path:
    target = output if output.is_absolute() else games_dir / output
    if not target.suffix:
        target = target.with_suffix(".yaml")
    return target


if __name__ == "__main__":
    app()
