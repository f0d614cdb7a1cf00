"""
Live mode: poll /countries forever and print what changed.

SnapshotCache keeps the last entry seen per territory. Each poll is diffed
against it; territories seen for the first time and territories with no
change produce no row. The cache is overwritten after every successful poll,
so each delta covers the time since the previous poll only.
"""

import logging
import random
import sys
import time
from dataclasses import dataclass
from datetime import datetime

from . import formatting
from .config import Settings
from .errors import CovidTrackerError
from .models import ListEntry, ListEntryDifference
from .table import Color, Column

logger = logging.getLogger(__name__)

LIVE_COLUMNS = [
    Column("TIME", 8),
    Column("TERRITORY", 24),
    Column("CASE NEW", 12, Color.YELLOW),
    Column("CASE ALL", 12, Color.YELLOW),
    Column("CASE DAY", 12, Color.YELLOW),
    Column("DTH NEW", 12, Color.RED),
    Column("DTH ALL", 12, Color.RED),
    Column("DTH DAY", 12, Color.RED),
    Column("REC NEW", 12, Color.GREEN),
    Column("REC ALL", 12, Color.GREEN),
    Column("REC DAY", 12, Color.GREEN),
    Column("ACTIVE", 12, Color.BLUE),
]


@dataclass(frozen=True)
class LiveChange:
    entry: ListEntry
    difference: ListEntryDifference


class SnapshotCache:
    """Last seen ListEntry per territory name (case-sensitive, verbatim)."""

    def __init__(self):
        self.entries = {}

    def __len__(self):
        return len(self.entries)

    def __contains__(self, territory):
        return territory in self.entries

    def get(self, territory):
        return self.entries.get(territory)

    def update(self, snapshot):
        """Store a full poll and return the non-empty changes, in poll order."""
        changes = []
        for entry in snapshot:
            previous = self.entries.get(entry.territory)
            if previous is not None:
                difference = ListEntryDifference.between(previous, entry)
                if not difference.is_empty:
                    changes.append(LiveChange(entry, difference))
            self.entries[entry.territory] = entry
        return changes


def live_row(change, time_label):
    entry, diff = change.entry, change.difference
    return [
        time_label,
        entry.territory,
        formatting.delta(diff.cases),
        formatting.metric(entry.cases),
        formatting.metric(entry.cases_today),
        formatting.delta(diff.deaths),
        formatting.metric(entry.deaths),
        formatting.metric(entry.deaths_today),
        formatting.delta(diff.recovered),
        formatting.metric(entry.recovered),
        formatting.metric(entry.recovered_today),
        formatting.metric(entry.active),
    ]


def wall_clock():
    return datetime.now().strftime("%H:%M")


def describe_delay(seconds):
    """Human wording for a delay: 60 -> "1 minute", 90 -> "90 seconds"."""
    if seconds >= 60 and seconds % 60 == 0:
        minutes = int(seconds // 60)
        return f"{minutes} minute" if minutes == 1 else f"{minutes} minutes"
    return f"{seconds:g} second" if seconds == 1 else f"{seconds:g} seconds"


def next_delay(settings, rng=random):
    return settings.live_min_delay + rng.uniform(0, settings.live_jitter)


def run_live(fetch, table, settings=Settings(), cache=None, clock=wall_clock,
             sleep=time.sleep, rng=random, cycles=None):
    """Poll `fetch` and print changed territories to `table`.

    Runs forever unless `cycles` is given. A failed poll prints a notice,
    waits settings.live_retry_delay and leaves the cache as it was.
    Returns the cache.
    """
    cache = SnapshotCache() if cache is None else cache
    table.print_headers()
    done = 0
    while cycles is None or done < cycles:
        done += 1
        try:
            snapshot = fetch()
        except CovidTrackerError as e:
            logger.debug("Live poll failed: %s", e)
            print(f"Failed to fetch data. Retrying in {describe_delay(settings.live_retry_delay)}.", file=sys.stderr)
            sleep(settings.live_retry_delay)
            continue

        changes = cache.update(snapshot)
        logger.info("Polled %d territories, %d changed", len(snapshot), len(changes))
        for change in changes:
            table.print_row(live_row(change, clock()))
        sleep(next_delay(settings, rng))
    return cache
