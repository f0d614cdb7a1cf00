"""Tests for merging the three historical series into a Timeline."""

import pytest

from covid_tracker.errors import DecodingError
from covid_tracker.models import Subject
from covid_tracker.reconstruct import (
    chronological,
    merged_dates,
    reconstruct,
    subjects_present,
    timeline_from_payload,
)


def test_sparse_series_give_null_fields() -> None:
    t = reconstruct({"1/1": 10, "1/2": 12}, {"1/1": 1}, {})
    assert [e.date for e in t] == ["1/1", "1/2"]
    second = t.entries[1]
    assert second.cases == 12
    assert second.deaths is None
    assert second.recovered is None
    assert second.active is None


def test_active_needs_all_three_series() -> None:
    t = reconstruct({"1/1": 10}, {"1/1": 1}, {"1/1": 4})
    assert t.entries[0].active == 5
    assert isinstance(t.entries[0].cases, int)


def test_dates_in_first_seen_order_across_series() -> None:
    cases = {"1/2": 5, "1/1": 4}
    deaths = {"1/3": 1, "1/2": 0}
    recovered = {"1/0": 2}
    assert merged_dates(cases, deaths, recovered) == ["1/2", "1/1", "1/3", "1/0"]
    t = reconstruct(cases, deaths, recovered)
    assert [e.date for e in t] == ["1/2", "1/1", "1/3", "1/0"]
    assert t.entries[2].cases is None
    assert t.entries[2].deaths == 1


def test_growth_rate() -> None:
    t = reconstruct({"a": 100, "b": 150}, {}, {})
    assert t.entries[0].cases_increase is None
    assert t.entries[1].cases_increase == 0.5


def test_growth_rate_from_zero_is_null() -> None:
    t = reconstruct({"a": 0, "b": 25}, {}, {})
    assert t.entries[1].cases_increase is None


def test_unchanged_value_has_null_growth_not_zero() -> None:
    t = reconstruct({"a": 100, "b": 100}, {}, {})
    assert t.entries[1].cases_increase is None


def test_growth_rate_needs_previous_value() -> None:
    t = reconstruct({"a": 100, "c": 120}, {"b": 3}, {})
    # order a, c, b: c follows a, b has no cases
    assert t.entries[1].cases_increase == pytest.approx(0.2)
    assert t.entries[2].cases_increase is None
    assert t.entries[2].deaths_increase is None


def test_negative_growth_and_active_growth() -> None:
    t = reconstruct({"a": 200, "b": 150}, {"a": 0, "b": 0}, {"a": 100, "b": 100})
    assert t.entries[1].cases_increase == -0.25
    assert t.entries[0].active == 100
    assert t.entries[1].active == 50
    assert t.entries[1].active_increase == -0.5


def test_empty_series() -> None:
    t = reconstruct({}, {}, {}, territory="Nowhere")
    assert len(t) == 0
    assert t.territory == "Nowhere"


def test_chronological_sort() -> None:
    assert chronological(["1/3/20", "12/31/19", "1/1/20"]) == ["12/31/19", "1/1/20", "1/3/20"]
    # unparseable dates leave the order alone
    assert chronological(["b", "a"]) == ["b", "a"]


def test_chronological_growth_follows_sorted_order() -> None:
    t = reconstruct({"1/2/20": 150, "1/1/20": 100}, {}, {}, sort_dates=True)
    assert [e.date for e in t] == ["1/1/20", "1/2/20"]
    assert t.entries[1].cases_increase == 0.5


def test_timeline_from_nested_payload() -> None:
    payload = {
        "country": "Italy",
        "timeline": {"cases": {"1/1/20": 1}, "deaths": {}, "recovered": {"1/1/20": 0}},
    }
    t = timeline_from_payload(payload, territory="italy")
    assert t.territory == "Italy"
    assert t.entries[0].recovered == 0
    assert subjects_present(t) == [Subject.CASES, Subject.RECOVERED]


def test_timeline_from_global_payload() -> None:
    payload = {"cases": {"1/1/20": 1}, "deaths": {"1/1/20": 0}, "recovered": {"1/1/20": 0}}
    t = timeline_from_payload(payload)
    assert t.territory == "all"
    assert t.entries[0].active == 1


def test_timeline_payload_missing_series() -> None:
    with pytest.raises(DecodingError):
        timeline_from_payload({"timeline": {"cases": {}}})
