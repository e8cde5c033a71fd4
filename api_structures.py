# Defines the standardized, internal data structures for the application.

from dataclasses import dataclass
from datetime import datetime, tzinfo


@dataclass(frozen=True)
class Coordinates:
    """A location as reported by the geolocation service, values kept verbatim."""
    latitude: str
    longitude: str


@dataclass(frozen=True)
class PassPrediction:
    """A single predicted ISS fly-over."""
    risetime: int
    duration: int

    def rise_datetime(self, tz: tzinfo | None = None) -> datetime:
        """Converts the epoch-seconds rise time into an aware local datetime."""
        if tz is None:
            return datetime.fromtimestamp(self.risetime).astimezone()
        return datetime.fromtimestamp(self.risetime, tz=tz)
