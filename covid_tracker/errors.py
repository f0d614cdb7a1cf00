"""Exceptions raised while fetching or decoding API data."""


class CovidTrackerError(Exception):
    """Base class for faults the commands report and recover from."""


class DecodingError(CovidTrackerError):
    """A required field was missing or had an unexpected type."""


class TransportError(CovidTrackerError):
    """The HTTP request failed or returned an unusable response."""
