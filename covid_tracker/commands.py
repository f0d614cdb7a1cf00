"""
The four report commands: summary, list, live and timeline.

Each fetches everything it needs before printing the header, so a failure
never leaves a partial table. summary/list/timeline print one line on
failure and return exit status 1; live retries forever.
"""

import logging
import sys

from . import api, formatting
from .config import Settings
from .errors import CovidTrackerError
from .live import LIVE_COLUMNS, run_live
from .models import Subject
from .reconstruct import subjects_present
from .sorting import SortKey, sort_entries
from .table import Color, Column, Table

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = [
    Column("CASES", 14, Color.YELLOW),
    Column("DEATHS", 14, Color.RED),
    Column("RECOVERED", 14, Color.GREEN),
    Column("ACTIVE", 14, Color.BLUE),
    Column("TERRITORIES", 12),
]

LIST_COLUMNS = [
    Column("TERRITORY", 24),
    Column("CASE ALL", 12, Color.YELLOW),
    Column("CASE DAY", 12, Color.YELLOW),
    Column("DTH ALL", 12, Color.RED),
    Column("DTH DAY", 12, Color.RED),
    Column("REC ALL", 12, Color.GREEN),
    Column("REC DAY", 12, Color.GREEN),
    Column("ACTIVE", 12, Color.BLUE),
]

SUBJECT_COLORS = {
    Subject.CASES: Color.YELLOW,
    Subject.DEATHS: Color.RED,
    Subject.RECOVERED: Color.GREEN,
    Subject.ACTIVE: Color.BLUE,
}

SUBJECT_LABELS = {
    Subject.CASES: ("CASES", "CASE INC"),
    Subject.DEATHS: ("DEATHS", "DTH INC"),
    Subject.RECOVERED: ("RECOVERED", "REC INC"),
    Subject.ACTIVE: ("ACTIVE", "ACT INC"),
}

DATE_COLUMN = Column("DATE", 10)
GRAPH_WIDTH = 40


def _fail(error):
    logger.debug("Command failed", exc_info=error)
    print("Failed to fetch data.", file=sys.stderr)
    return 1


def list_row(entry):
    return [
        entry.territory,
        formatting.metric(entry.cases),
        formatting.metric(entry.cases_today),
        formatting.metric(entry.deaths),
        formatting.metric(entry.deaths_today),
        formatting.metric(entry.recovered),
        formatting.metric(entry.recovered_today),
        formatting.metric(entry.active),
    ]


def summary(territory=None, settings=Settings(), writer=None):
    """Global totals, or one territory's row when `territory` is given."""
    try:
        if territory:
            entry = api.fetch_country(territory, settings)
        else:
            data = api.fetch_summary(settings)
    except CovidTrackerError as e:
        return _fail(e)

    if territory:
        table = Table(LIST_COLUMNS, writer)
        table.print_headers()
        table.print_row(list_row(entry))
        return 0

    table = Table(SUMMARY_COLUMNS, writer)
    table.print_headers()
    table.print_row([
        formatting.metric(data.cases),
        formatting.metric(data.deaths),
        formatting.metric(data.recovered),
        formatting.metric(data.active),
        formatting.metric(data.affected_territories),
    ])
    return 0


def list_countries(sort_key=SortKey.CASES, limit=None, settings=Settings(), writer=None):
    """Every territory, largest `sort_key` first."""
    try:
        entries = api.fetch_countries(settings)
    except CovidTrackerError as e:
        return _fail(e)

    entries = sort_entries(entries, sort_key)
    if limit is not None and limit > 0:
        entries = entries[:limit]

    table = Table(LIST_COLUMNS, writer)
    table.print_headers()
    for entry in entries:
        table.print_row(list_row(entry))
    return 0


def live(settings=Settings(), writer=None, **loop_options):
    """Stream changed territories until interrupted. Extra options go to run_live."""
    table = Table(LIVE_COLUMNS, writer)
    run_live(lambda: api.fetch_countries(settings), table, settings=settings, **loop_options)
    return 0


def _timeline_columns(subjects):
    columns = [DATE_COLUMN]
    for subject in subjects:
        value_label, increase_label = SUBJECT_LABELS[subject]
        columns.append(Column(value_label, 12, SUBJECT_COLORS[subject]))
        columns.append(Column(increase_label, 10, SUBJECT_COLORS[subject]))
    return columns


def _print_full_timeline(data, writer):
    subjects = list(Subject)
    table = Table(_timeline_columns(subjects), writer)
    table.print_headers()
    for entry in data:
        row = [entry.date]
        for subject in subjects:
            row.append(formatting.metric(entry.value(subject)))
            row.append(formatting.increase(entry.increase(subject)))
        table.print_row(row)


def _print_subject_timeline(data, subject, writer):
    color = SUBJECT_COLORS[subject]
    table = Table(
        [DATE_COLUMN, Column(SUBJECT_LABELS[subject][0], 12, color),
         Column("INC", 10, color), Column("", GRAPH_WIDTH + 2, color)],
        writer,
    )
    maximum = data.max_value(subject)
    table.print_headers()
    for entry in data:
        value = entry.value(subject)
        table.print_row([
            entry.date,
            formatting.metric(value),
            formatting.increase(entry.increase(subject)),
            formatting.bar(value, maximum, GRAPH_WIDTH),
        ])


def timeline(territory="all", days=30, subject=None, chronological=False,
             savepath=None, settings=Settings(), writer=None):
    """Historical totals per date for a territory ("all" for the world)."""
    try:
        data = api.fetch_historical(territory or "all", days, settings, sort_dates=chronological)
    except CovidTrackerError as e:
        return _fail(e)

    if subject is None:
        _print_full_timeline(data, writer)
    else:
        _print_subject_timeline(data, subject, writer)

    if savepath:
        from .plot import plot_timeline
        try:
            plot_timeline(data, [subject] if subject else subjects_present(data), savepath)
        except (OSError, ValueError) as e:
            print(f"Could not save plot: {e}", file=sys.stderr)
            return 1
    return 0
