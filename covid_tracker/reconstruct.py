"""
Time-series reconstruction.

The historical endpoint returns three separate date -> value mappings
(cases, deaths, recovered) that need not share the same dates. They are
merged into one Timeline with one entry per date, in the order dates are
first seen scanning cases, then deaths, then recovered. `active` and the
period-over-period increases are derived along the way.

Historical payload sample:
{
  "country": "India",
  "timeline": {
     "cases": {"1/22/20": n, "1/23/20": n2, ...},
     "deaths": {...},
     "recovered": {...}
  }
}
The global endpoint (/historical/all) returns the inner "timeline" object
directly.
"""

import logging
import math

import pandas as pd

from .decoding import number_mapping, optional_string
from .errors import DecodingError
from .models import Subject, Timeline, TimelineEntry

logger = logging.getLogger(__name__)

SERIES = ("cases", "deaths", "recovered")
DATE_FORMAT = "%m/%d/%y"


def parse_historical(payload, territory="all"):
    """Decode a historical payload into its three raw series."""
    if not isinstance(payload, dict):
        raise DecodingError(f"expected an object, got {type(payload).__name__}")
    timeline = payload.get("timeline") or payload  # /historical/all is not nested
    label = optional_string(payload, "country") or territory
    return label, {name: number_mapping(timeline, name) for name in SERIES}


def merged_dates(cases, deaths, recovered):
    """Union of the date keys, in first-seen order across the three series."""
    return list(dict.fromkeys([*cases, *deaths, *recovered]))


def chronological(dates):
    """Sort date keys by calendar date, or return them unchanged if any fails to parse."""
    parsed = pd.to_datetime(pd.Series(dates, dtype="object"), format=DATE_FORMAT, errors="coerce")
    if parsed.isna().any():
        logger.warning("Timeline dates are not all %s; keeping source order", DATE_FORMAT)
        return list(dates)
    return [dates[i] for i in parsed.sort_values(kind="stable").index]


def _increase(frame):
    # null unless both sides exist, previous is nonzero and the value changed
    previous = frame.shift(1)
    ratio = (frame - previous) / previous
    return ratio.where((previous != 0) & (frame != previous))


def _cell(name, value):
    if value is None or math.isnan(value):
        return None
    value = float(value)
    if name.endswith("_increase") or not value.is_integer():
        return value
    return int(value)


def reconstruct(cases, deaths, recovered, territory="all", sort_dates=False):
    """Merge three sparse series into one Timeline.

    `sort_dates` orders the entries by calendar date instead of first-seen
    order; growth rates always follow the final order.
    """
    dates = merged_dates(cases, deaths, recovered)
    if sort_dates:
        dates = chronological(dates)

    frame = pd.DataFrame(
        {
            "cases": pd.Series(cases, dtype="float64").reindex(dates),
            "deaths": pd.Series(deaths, dtype="float64").reindex(dates),
            "recovered": pd.Series(recovered, dtype="float64").reindex(dates),
        },
        index=pd.Index(dates, dtype="object"),
    )
    # NaN in any input gives NaN, so active is null unless all three exist
    frame["active"] = frame["cases"] - frame["deaths"] - frame["recovered"]
    increases = _increase(frame).add_suffix("_increase")

    entries = []
    for date, row in pd.concat([frame, increases], axis=1).iterrows():
        entries.append(TimelineEntry(date=date, **{name: _cell(name, value) for name, value in row.items()}))
    logger.debug("Reconstructed %d timeline entries for %s", len(entries), territory)
    return Timeline(territory=territory, entries=entries)


def timeline_from_payload(payload, territory="all", sort_dates=False):
    label, series = parse_historical(payload, territory)
    return reconstruct(
        series["cases"], series["deaths"], series["recovered"],
        territory=label, sort_dates=sort_dates,
    )


def subjects_present(timeline):
    """Subjects with at least one non-null value, in display order."""
    return [s for s in Subject if timeline.max_value(s) is not None]
