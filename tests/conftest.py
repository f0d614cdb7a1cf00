import matplotlib

matplotlib.use("Agg")

import pytest

from covid_tracker.models import ListEntry
from covid_tracker.table import PlainWriter


@pytest.fixture
def writer():
    return PlainWriter()


def entry(territory, cases=None, deaths=None, recovered=None, **extra):
    return ListEntry(territory=territory, cases=cases, deaths=deaths, recovered=recovered, **extra)
