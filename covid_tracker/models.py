"""
Data model
==========

Records built from the API payloads. They are immutable (`frozen=True`) and
created fresh on every fetch; the live mode keeps the latest ListEntry per
territory in its own cache (see live.py).

Numeric fields are either a finite number or None. None means the API
omitted the field or sent something that was not a number.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .decoding import optional_number, required_count, required_string
from .errors import DecodingError

Number = float  # ints are accepted wherever a Number is expected


class Subject(Enum):
    """Metric a single-column timeline view renders."""
    CASES = "cases"
    DEATHS = "deaths"
    RECOVERED = "recovered"
    ACTIVE = "active"


def active_count(cases, deaths, recovered):
    """cases - deaths - recovered, or None if any input is missing. Not clamped."""
    if cases is None or deaths is None or recovered is None:
        return None
    return cases - deaths - recovered


@dataclass(frozen=True)
class Summary:
    """Global snapshot from /all."""
    cases: Number
    deaths: Number
    recovered: Number
    affected_territories: Number

    @property
    def active(self) -> Number:
        return self.cases - self.deaths - self.recovered

    @classmethod
    def from_json(cls, record) -> "Summary":
        return cls(
            cases=required_count(record, "cases"),
            deaths=required_count(record, "deaths"),
            recovered=required_count(record, "recovered"),
            affected_territories=required_count(record, "affectedCountries"),
        )


@dataclass(frozen=True)
class ListEntry:
    """One territory's row from /countries."""
    territory: str
    cases: Optional[Number] = None
    cases_today: Optional[Number] = None
    deaths: Optional[Number] = None
    deaths_today: Optional[Number] = None
    recovered: Optional[Number] = None
    recovered_today: Optional[Number] = None
    sourced_active: Optional[Number] = None

    @property
    def active(self) -> Optional[Number]:
        """The API's own active count, else derived from the totals."""
        if self.sourced_active is not None:
            return self.sourced_active
        return active_count(self.cases, self.deaths, self.recovered)

    @classmethod
    def from_json(cls, record) -> "ListEntry":
        territory = required_string(record, "country")
        if not territory:
            raise DecodingError("field 'country' must not be empty")
        return cls(
            territory=territory,
            cases=optional_number(record, "cases"),
            cases_today=optional_number(record, "todayCases"),
            deaths=optional_number(record, "deaths"),
            deaths_today=optional_number(record, "todayDeaths"),
            recovered=optional_number(record, "recovered"),
            recovered_today=optional_number(record, "todayRecovered"),
            sourced_active=optional_number(record, "active"),
        )


def _delta(old, new):
    if old is None or new is None:
        return 0
    return new - old


@dataclass(frozen=True)
class ListEntryDifference:
    """Signed change of one territory between two consecutive polls."""
    cases: Number
    deaths: Number
    recovered: Number

    @classmethod
    def between(cls, old: ListEntry, new: ListEntry) -> "ListEntryDifference":
        return cls(
            cases=_delta(old.cases, new.cases),
            deaths=_delta(old.deaths, new.deaths),
            recovered=_delta(old.recovered, new.recovered),
        )

    @property
    def is_empty(self) -> bool:
        return self.cases == 0 and self.deaths == 0 and self.recovered == 0


@dataclass(frozen=True)
class TimelineEntry:
    """Aggregate state on one date, plus growth against the previous entry.

    Increases are fractions (0.05 means +5%).
    """
    date: str
    cases: Optional[Number] = None
    deaths: Optional[Number] = None
    recovered: Optional[Number] = None
    active: Optional[Number] = None
    cases_increase: Optional[float] = None
    deaths_increase: Optional[float] = None
    recovered_increase: Optional[float] = None
    active_increase: Optional[float] = None

    def value(self, subject: Subject) -> Optional[Number]:
        return getattr(self, subject.value)

    def increase(self, subject: Subject) -> Optional[float]:
        return getattr(self, f"{subject.value}_increase")


@dataclass(frozen=True)
class Timeline:
    territory: str
    entries: List[TimelineEntry] = field(default_factory=list)

    def __iter__(self):
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)

    def max_value(self, subject: Subject) -> Optional[Number]:
        values = [e.value(subject) for e in self.entries if e.value(subject) is not None]
        return max(values) if values else None
