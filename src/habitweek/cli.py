"""Command line interface for HabitWeek."""

from __future__ import annotations

from pathlib import Path

import click

from .config import BaseConfig
from .domain.dates import parse_date_key, today_key
from .domain.view_model import CellState, HabitGrid
from .infra.database import bootstrap_database
from .infra.persistence import SQLModelStateGateway
from .logging_config import setup_logging
from .services.tracker import HabitTracker, Outcome

CELL_WIDTH = 9
_CELL_TEXT = {
    CellState.COMPLETED: "[x]",
    CellState.EMPTY: "[ ]",
    CellState.FUTURE_DISABLED: " - ",
}


def render_text(grid: HabitGrid) -> str:
    """Paint the grid as fixed-width text."""

    name_width = max([len(row.name) for row in grid.rows] + [len(grid.empty_title), 5])
    header = ["Habit".ljust(name_width)] + [h.center(CELL_WIDTH) for h in grid.headers]
    header.append("Streak")
    lines = [grid.range_label, " ".join(header)]
    if grid.is_empty:
        blank = [" " * CELL_WIDTH] * len(grid.headers)
        lines.append(" ".join([grid.empty_title.ljust(name_width)] + blank + ["0"]))
        lines.append(grid.empty_hint)
        return "\n".join(lines)
    for row in grid.rows:
        cells = [_CELL_TEXT[cell.state].center(CELL_WIDTH) for cell in row.cells]
        lines.append(" ".join([row.name.ljust(name_width)] + cells + [str(row.streak)]))
    lines.append("")
    for row in grid.rows:
        lines.append(f"{row.habit_id}  {row.name}")
    return "\n".join(lines)


def _finish(outcome: Outcome, fallback: str = "Nothing changed.") -> None:
    if not outcome.ok:
        raise click.ClickException(outcome.message or fallback)
    if outcome.message:
        click.echo(outcome.message)


def _tracker(ctx: click.Context) -> HabitTracker:
    return ctx.obj["tracker"]


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="HABITWEEK_DATA_DIR",
    help="Directory holding the database and logs.",
)
@click.option("--verbose", is_flag=True, default=False, help="Log to the console.")
@click.pass_context
def main(ctx: click.Context, data_dir: Path | None, verbose: bool) -> None:
    """Track seven days of habits from the terminal."""

    config = BaseConfig(data_dir=data_dir)
    if verbose:
        setup_logging(config)
    _engine, session_factory = bootstrap_database(config)
    gateway = SQLModelStateGateway(session_factory, key=config.STORAGE_KEY)
    ctx.obj = {"config": config, "tracker": HabitTracker.load(gateway)}


@main.command()
@click.pass_context
def show(ctx: click.Context) -> None:
    """Print the weekly grid."""
    click.echo(render_text(_tracker(ctx).build()))


@main.command()
@click.argument("name")
@click.pass_context
def add(ctx: click.Context, name: str) -> None:
    """Add a habit called NAME."""
    tracker = _tracker(ctx)
    _finish(tracker.add_habit(name))
    click.echo(render_text(tracker.build()))


@main.command()
@click.argument("habit_id")
@click.option("--date", "date_key", default=None, help="Day to toggle (YYYY-MM-DD, default today).")
@click.pass_context
def toggle(ctx: click.Context, habit_id: str, date_key: str | None) -> None:
    """Mark or un-mark a day for HABIT_ID."""
    tracker = _tracker(ctx)
    key = date_key or today_key(tracker.clock)
    try:
        parse_date_key(key)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--date") from exc
    _finish(tracker.toggle(habit_id, key), "Nothing changed (unknown habit or future day).")
    click.echo(render_text(tracker.build()))


@main.command()
@click.argument("habit_id")
@click.pass_context
def tick(ctx: click.Context, habit_id: str) -> None:
    """Toggle today for HABIT_ID."""
    tracker = _tracker(ctx)
    _finish(tracker.tick_today(habit_id), "No habit with that id.")
    click.echo(render_text(tracker.build()))


@main.command()
@click.argument("habit_id")
@click.option("--yes", is_flag=True, default=False, help="Skip the confirmation prompt.")
@click.pass_context
def delete(ctx: click.Context, habit_id: str, yes: bool) -> None:
    """Delete HABIT_ID after confirmation."""
    tracker = _tracker(ctx)
    if tracker.store.get(habit_id) is None:
        raise click.ClickException("No habit with that id.")
    confirm = None if yes else (lambda message: click.confirm(message, default=False))
    _finish(tracker.delete_habit(habit_id, confirm=confirm), "Aborted.")
    click.echo(render_text(tracker.build()))


@main.command("export")
@click.option(
    "--out",
    "out_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for habits-export.json (default: configured export dir).",
)
@click.pass_context
def export_cmd(ctx: click.Context, out_dir: Path | None) -> None:
    """Write the whole dataset to habits-export.json."""
    tracker = _tracker(ctx)
    _finish(tracker.export_to(out_dir or ctx.obj["config"].EXPORT_DIR))


@main.command("import")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def import_cmd(ctx: click.Context, file: Path) -> None:
    """Replace all data with the contents of FILE."""
    _finish(_tracker(ctx).import_file(file))


@main.command()
@click.option("--yes", is_flag=True, default=False, help="Skip the confirmation prompt.")
@click.pass_context
def reset(ctx: click.Context, yes: bool) -> None:
    """Remove every habit and log entry."""
    confirm = None if yes else (lambda message: click.confirm(message, default=False))
    _finish(_tracker(ctx).reset_all(confirm=confirm), "Aborted.")


@main.command()
def desktop() -> None:
    """Open the desktop window."""
    import flet as ft

    from .desktop.app import main as desktop_main

    ft.app(target=desktop_main)


if __name__ == "__main__":  # pragma: no cover
    main()
