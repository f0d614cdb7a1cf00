"""Runtime settings: API location, HTTP timeout and live polling delays."""

import os
from dataclasses import dataclass, replace

API_BASE = "https://disease.sh/v3/covid-19"


@dataclass(frozen=True)
class Settings:
    api_base: str = API_BASE
    timeout: float = 10
    # live mode waits live_min_delay + uniform(0, live_jitter) seconds between polls
    live_min_delay: float = 60
    live_jitter: float = 9 * 60
    live_retry_delay: float = 60

    @classmethod
    def from_env(cls, environ=None, **overrides):
        """Defaults, then COVID_API_BASE / COVID_API_TIMEOUT, then non-None overrides."""
        environ = os.environ if environ is None else environ
        settings = cls()
        if environ.get("COVID_API_BASE"):
            settings = replace(settings, api_base=environ["COVID_API_BASE"])
        if environ.get("COVID_API_TIMEOUT"):
            settings = replace(settings, timeout=float(environ["COVID_API_TIMEOUT"]))
        return replace(settings, **{k: v for k, v in overrides.items() if v is not None})
