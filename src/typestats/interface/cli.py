"""typestats CLI: per-period statistics for a keybr.com typing history export."""

import logging
import sys
from datetime import date, datetime
from pathlib import Path
from typing import Annotated, Literal, NoReturn

import typer

from typestats.application.config import resolve_config
from typestats.application.factory import (
    get_csv_exporter,
    get_session_source,
    get_width_provider,
)
from typestats.application.stats.service import PeriodReportService
from typestats.consts import VERSION
from typestats.domain.constants import DATE_AFTER_FORMAT
from typestats.domain.errors import (
    InputFileNotFoundError,
    InvalidJsonInputError,
    MissingInputFileError,
    TypestatsError,
)
from typestats.interface.presenters import render_graph, render_list

app = typer.Typer(
    help="typestats: Typing speed statistics per day, week, month or year.",
    rich_markup_mode="rich",
)

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

_LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def _configure_logging(verbose: int) -> None:
    level = _LOG_LEVELS[min(max(verbose, 0), len(_LOG_LEVELS) - 1)]
    logging.getLogger("typestats").setLevel(level)


# ---------------------------------------------------------------------------
# Option callbacks
# ---------------------------------------------------------------------------


def _help_callback(ctx: typer.Context, value: str | None) -> None:
    # Any value shows help, so both `--help` and `--help=1` work
    if value is not None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _truthy(value: str | None) -> bool:
    """`--list=1`, `--list=yes` enable; `--list=0` and `--list=` do not."""
    return value not in (None, "", "0")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"typestats {VERSION}")
        raise typer.Exit()


def _parse_date_after(value: str | None) -> date | None:
    if value is None:
        return None
    try:
        return datetime.strptime(value, DATE_AFTER_FORMAT).date()
    except ValueError:
        raise typer.BadParameter(f"Expected Y/m/d (e.g. 2021/03/15), got {value!r}.") from None


def _fail(ctx: typer.Context, error: TypestatsError, show_help: bool = False) -> NoReturn:
    typer.secho(f"ERROR: {error}", fg="red")
    if show_help:
        typer.echo(ctx.get_help())
    raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------


@app.command(add_help_option=False)
def main(
    ctx: typer.Context,
    file: Annotated[
        Path | None,
        typer.Option("--file", help="JSON file downloaded from keybr.com/profile."),
    ] = None,
    colors: Annotated[
        str | None, typer.Option("--colors", help="1 = show colored graph.")
    ] = None,
    show_graph: Annotated[str | None, typer.Option("--graph", help="1 = show graph.")] = None,
    show_list: Annotated[
        str | None, typer.Option("--list", help="1 = show list with results.")
    ] = None,
    lesson_type: Annotated[
        str | None,
        typer.Option("--lessontype", help="Count only the selected lesson type. [default: auto]"),
    ] = None,
    period: Annotated[
        Literal["day", "week", "month", "year"] | None,
        typer.Option("--period", help="Group by period. [default: month]"),
    ] = None,
    date_after: Annotated[
        str | None,
        typer.Option(
            "--date-after",
            help="Only count sessions on or after this date (Y/m/d).",
            callback=_parse_date_after,
        ),
    ] = None,
    min_wpm: Annotated[
        int | None, typer.Option("--minwpm", help="Graph only periods with at least this WPM.")
    ] = None,
    create_csv: Annotated[
        str | None, typer.Option("--csv", help="1 = write results to the CSV file.")
    ] = None,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Increase verbosity. Repeat for more detail."
        ),
    ] = 0,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version."),
    ] = False,
    show_help: Annotated[
        str | None,
        typer.Option(
            "--help",
            is_flag=False,
            flag_value="1",
            callback=_help_callback,
            is_eager=True,
            help="Show this message and exit.",
        ),
    ] = None,
):
    """Show [bold green]typing statistics[/bold green] grouped by period."""
    config = resolve_config(
        {
            "lesson_type": lesson_type,
            "period": period,
            "colors": _truthy(colors) if colors is not None else None,
            "verbose": verbose or None,
        }
    )
    _configure_logging(config.verbose)
    logger.debug("Resolved config: %s", config.model_dump())

    if file is None:
        _fail(
            ctx,
            MissingInputFileError("Provide valid json file downloaded from keybr.com/profile !"),
            show_help=True,
        )

    service = PeriodReportService()
    try:
        report = service.build_from_source(
            get_session_source(file),
            granularity=config.period,
            lesson_type=config.lesson_type,
            date_after=date_after,
        )
    except (InputFileNotFoundError, InvalidJsonInputError) as e:
        _fail(ctx, e, show_help=True)
    except TypestatsError as e:
        _fail(ctx, e)

    if _truthy(show_list):
        typer.echo(render_list(report.periods), nl=False)

    if _truthy(create_csv):
        try:
            path = get_csv_exporter(config).export(report.periods)
        except TypestatsError as e:
            _fail(ctx, e)
        logger.info("CSV written to %s", path)

    if _truthy(show_graph):
        try:
            width = get_width_provider(config).get_width()
        except TypestatsError as e:
            _fail(ctx, e)
        typer.echo(
            render_graph(
                report,
                width=width,
                max_width=config.graph_max_width,
                min_wpm=min_wpm,
                colors=config.colors,
            ),
            nl=False,
        )


if __name__ == "__main__":
    app()
