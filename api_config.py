# Endpoint and display settings, overridable through environment variables.

import math
import os
from dataclasses import dataclass
from datetime import tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

DEFAULT_IP_URL = "https://api.ipify.org"
DEFAULT_GEO_URL = "http://ipwho.is/{ip}"
DEFAULT_FLYOVER_URL = "https://iss-flyover.herokuapp.com/json/"
DEFAULT_HTTP_TIMEOUT = 10.0


@dataclass(frozen=True)
class Settings:
    ip_url: str = DEFAULT_IP_URL
    geo_url: str = DEFAULT_GEO_URL
    flyover_url: str = DEFAULT_FLYOVER_URL
    timeout: float = DEFAULT_HTTP_TIMEOUT
    tz: tzinfo | None = None


def load_settings() -> Settings:
    """
    Reads the optional ISS_* variables (a .env file is honoured too).
    Anything unset falls back to the public endpoints and the system timezone.
    """
    load_dotenv()

    timeout_str = os.getenv("ISS_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT))
    try:
        timeout = float(timeout_str)
    except ValueError:
        timeout = None
    if timeout is None or not math.isfinite(timeout) or timeout <= 0:
        raise ValueError(
            f"FATAL ERROR: ISS_HTTP_TIMEOUT must be a positive number of seconds, got '{timeout_str}'.")

    tz = None
    tz_name = os.getenv("ISS_TZ")
    if tz_name:
        try:
            tz = ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            raise ValueError(
                f"FATAL ERROR: The timezone '{tz_name}' set in the ISS_TZ environment variable is invalid.")

    return Settings(
        ip_url=os.getenv("ISS_IP_URL", DEFAULT_IP_URL),
        geo_url=os.getenv("ISS_GEO_URL", DEFAULT_GEO_URL),
        flyover_url=os.getenv("ISS_FLYOVER_URL", DEFAULT_FLYOVER_URL),
        timeout=timeout,
        tz=tz,
    )
