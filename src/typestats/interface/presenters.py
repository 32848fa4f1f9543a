"""Text renderers for a PeriodReport: the per-period list and the ASCII graph.

Both return strings; writing them out is the CLI's job.
"""

from collections.abc import Sequence

import typer

from typestats.application.utils.rounding import round_to_int
from typestats.domain.constants import CONSOLE_PADDING, GRAPH_MAX_WIDTH
from typestats.domain.stats.models import PeriodReport, PeriodStatistics

SEPARATOR = "-" * 32


def _paint(text: str, fg: str, colors: bool) -> str:
    return typer.style(text, fg=fg) if colors else text


# ---------- List ----------


def render_period(stats: PeriodStatistics) -> str:
    lines = [
        SEPARATOR,
        f"Date            :  {stats.date}",
        f"Samples         :  {stats.sample_count}",
        f"Average (cpm)   :  {stats.average_cpm:.2f}",
        f"Average (wpm)   :  {stats.average_wpm:.2f}",
        f"Median  (wpm)   :  {stats.median_wpm:.2f}",
        f"Mode    (wpm)   :  {stats.mode_wpm:.2f}",
        f"Average Errors  :  {stats.average_errors:.2f}",
    ]
    return "\n".join(lines) + "\n\n"


def render_list(periods: Sequence[PeriodStatistics]) -> str:
    return "".join(render_period(p) for p in periods)


# ---------- Graph ----------


def min_console_width(max_width: int = GRAPH_MAX_WIDTH) -> int:
    return max_width + CONSOLE_PADDING


def render_bar(stats: PeriodStatistics, max_width: int, colors: bool = False) -> str:
    """
    One graph row: label, bar of round(wpm) filled cells, wpm and average errors.
    """
    blocks = round_to_int(stats.average_wpm)
    filled = max(0, min(blocks, max_width))

    label = _paint(f"{stats.date} ", typer.colors.WHITE, colors)
    sep = _paint(":", typer.colors.BRIGHT_BLACK, colors)
    bar = _paint("#" * filled, typer.colors.BRIGHT_GREEN, colors)
    rest = _paint("-" * (max_width - filled), typer.colors.BRIGHT_BLACK, colors)
    errors = _paint(f"{stats.average_errors:.2f}", typer.colors.BRIGHT_RED, colors)

    return f"{label}{sep} {bar}{rest} {blocks:>3}  {errors}"


def render_graph(
    report: PeriodReport,
    width: int,
    max_width: int = GRAPH_MAX_WIDTH,
    min_wpm: int | None = None,
    colors: bool = False,
) -> str:
    """
    Render the bar graph of average WPM per period, followed by the grand totals.

    Args:
        report: Assembled report.
        width: Terminal width in columns.
        max_width: Number of cells in a full bar.
        min_wpm: Rows below this average WPM are left out. None or 0 keeps all.
        colors: Wrap parts of each row in ANSI colors.

    Returns:
        The graph text, or a one-line notice when the terminal is too narrow.
    """
    required = min_console_width(max_width)
    if width < required:
        return (
            f"Console width ({width}) is too small. "
            f"Should be at least ({required}). Graph is not displayed.\n"
        )

    lines = [f"Console Width: {width} (Displaying 'Average WPM'), Max Value: {max_width}", ""]
    for stats in report.periods:
        if min_wpm and stats.average_wpm < min_wpm:
            continue
        lines.append(render_bar(stats, max_width, colors))

    totals = report.totals
    errors = _paint(f"{totals.overall_average_errors:.2f}", typer.colors.BRIGHT_RED, colors)
    lines += [
        "",
        f"     Speed : {totals.overall_average_wpm:.2f} WPM (Average)",
        f"    Errors : {errors}",
    ]
    return "\n".join(lines) + "\n"
