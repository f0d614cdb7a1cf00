"""
HTTP access to the disease.sh COVID-19 API.

Every failure (connection, timeout, non-2xx status, body that is not JSON)
surfaces as TransportError. Decoding the JSON into records happens in the
callers.
"""

import logging
import urllib.parse

import requests

from .config import Settings
from .errors import DecodingError, TransportError
from .models import ListEntry, Summary
from .reconstruct import timeline_from_payload

logger = logging.getLogger(__name__)


def _get_json(settings, path, params=None):
    url = f"{settings.api_base.rstrip('/')}/{path}"
    logger.debug("GET %s params=%s", url, params)
    try:
        r = requests.get(url, timeout=settings.timeout, params=params)
        r.raise_for_status()
        return r.json()
    except requests.RequestException as e:
        raise TransportError(f"request to {url} failed: {e}") from e
    except ValueError as e:
        raise TransportError(f"response from {url} is not JSON: {e}") from e


def _quote(territory):
    return urllib.parse.quote(territory, safe="")


def fetch_summary(settings=Settings()):
    return Summary.from_json(_get_json(settings, "all"))


def fetch_country(territory, settings=Settings()):
    payload = _get_json(settings, f"countries/{_quote(territory)}", params={"strict": "true"})
    return ListEntry.from_json(payload)


def fetch_countries(settings=Settings()):
    payload = _get_json(settings, "countries")
    if not isinstance(payload, list):
        raise DecodingError(f"expected a list of countries, got {type(payload).__name__}")
    return [ListEntry.from_json(record) for record in payload]


def fetch_historical(territory="all", days=30, settings=Settings(), sort_dates=False):
    """Timeline for a territory ("all" for the world); days <= 0 asks for everything."""
    days_param = "all" if days <= 0 else str(days)
    payload = _get_json(settings, f"historical/{_quote(territory)}", params={"lastdays": days_param})
    return timeline_from_payload(payload, territory=territory, sort_dates=sort_dates)
