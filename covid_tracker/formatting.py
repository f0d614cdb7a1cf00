"""Number and cell formatting shared by every table."""

from decimal import ROUND_HALF_UP, Decimal

PLACEHOLDER = "-"
BAR_CHAR = "█"


class NumberFormatter:
    """Formats a number with an optional leading '+' and optional rounding.

    Rounding is half away from zero (2.5 -> 3, -2.5 -> -3). Negative values
    always carry '-', zero never carries a sign.
    """

    def __init__(self, includes_plus_sign=False, rounds_floats=False):
        self.includes_plus_sign = includes_plus_sign
        self.rounds_floats = rounds_floats

    def format(self, value):
        if self.rounds_floats:
            value = int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))
        magnitude = _plain(abs(value))
        if value > 0 and self.includes_plus_sign:
            return f"+{magnitude}"
        if value < 0:
            return f"-{magnitude}"
        return magnitude


def _plain(value):
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


_totals = NumberFormatter()
_deltas = NumberFormatter(includes_plus_sign=True)
_percentages = NumberFormatter(includes_plus_sign=True, rounds_floats=True)


def metric(value):
    """Absolute total, or the placeholder for a missing value."""
    return PLACEHOLDER if value is None else _totals.format(value)


def delta(value):
    """Signed change; zero renders as an empty cell."""
    return "" if not value else _deltas.format(value)


def increase(fraction):
    """Growth fraction as a signed, rounded percentage (0.054 -> '+5%')."""
    return PLACEHOLDER if fraction is None else f"{_percentages.format(fraction * 100)}%"


def bar(value, maximum, width):
    """Horizontal bar, `width` characters long at `maximum`."""
    if value is None or not maximum or maximum <= 0 or value <= 0:
        return ""
    length = int(Decimal(value / maximum * width).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    return BAR_CHAR * min(length, width)
