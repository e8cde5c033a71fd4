# Contains the adapter classes for communicating with the IP, geolocation and fly-over APIs.

import requests
from abc import ABC, abstractmethod
from typing import Any

from api_config import (
    DEFAULT_FLYOVER_URL,
    DEFAULT_GEO_URL,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_IP_URL,
)
from api_errors import (
    MalformedResponseError,
    RemoteStatusError,
    TransportError,
    UpstreamRejectedError,
)
from api_structures import Coordinates, PassPrediction

FLYOVER_SUCCESS = "success"


def _get_json(url: str, what: str, timeout: float, params: dict | None = None) -> Any:
    """Performs a single GET and returns the decoded JSON body of a 200 response."""
    try:
        response = requests.get(url, params=params, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise TransportError(f"Network error when fetching {what}: {e}") from e

    if response.status_code != 200:
        raise RemoteStatusError(response.status_code, response.text, what)

    try:
        return response.json()
    except ValueError as e:
        raise MalformedResponseError(
            f"Invalid JSON in response when fetching {what}") from e


class IpAdapter(ABC):
    """Blueprint for services that report the caller's public IP address."""
    @abstractmethod
    def fetch_my_ip(self) -> str:
        """Returns the caller's public IPv4 address as a string."""
        pass


class GeoAdapter(ABC):
    """Blueprint for services that resolve an IP address to coordinates."""
    @abstractmethod
    def fetch_coords_by_ip(self, ip: str) -> Coordinates:
        """Looks up the coordinates of an IP address."""
        pass


class FlyoverAdapter(ABC):
    """Blueprint for services that predict ISS passes over a location."""
    @abstractmethod
    def fetch_flyover_times(self, coords: Coordinates) -> list[PassPrediction]:
        """Returns the predicted passes over a location, in upstream order."""
        pass


class IpifyAdapter(IpAdapter):
    """The adapter for the ipify IP echo API."""

    def __init__(self, url: str = DEFAULT_IP_URL, timeout: float = DEFAULT_HTTP_TIMEOUT, verbose: bool = False):
        self.url = url
        self.timeout = timeout
        self.verbose = verbose

    def fetch_my_ip(self) -> str:
        if self.verbose:
            print(f"   > [ipify] GET {self.url}?format=json")
        data = _get_json(self.url, "IP", self.timeout, params={'format': 'json'})
        try:
            return data['ip']
        except (KeyError, TypeError) as e:
            raise MalformedResponseError(
                "Unable to fetch your IP address: 'ip' missing from response") from e


class IpWhoIsAdapter(GeoAdapter):
    """The adapter for the ipwho.is geolocation API."""

    def __init__(self, url: str = DEFAULT_GEO_URL, timeout: float = DEFAULT_HTTP_TIMEOUT, verbose: bool = False):
        self.url = url
        self.timeout = timeout
        self.verbose = verbose

    def fetch_coords_by_ip(self, ip: str) -> Coordinates:
        url = self.url.format(ip=ip)
        if self.verbose:
            print(f"   > [ipwho.is] GET {url}")
        data = _get_json(url, "coordinates", self.timeout)
        try:
            if not data['success']:
                upstream_message = data.get('message')
                raise UpstreamRejectedError(
                    f"Error: {upstream_message or 'geolocation rejected'}", upstream_message)
            return Coordinates(latitude=data['latitude'], longitude=data['longitude'])
        except KeyError as e:
            raise MalformedResponseError(
                f"Unable to read coordinates from response: missing field {e}") from e
        except (TypeError, AttributeError) as e:
            raise MalformedResponseError(
                "Unable to read coordinates from response: unexpected layout") from e


class IssFlyoverAdapter(FlyoverAdapter):
    """The adapter for the ISS fly-over prediction API."""

    def __init__(self, url: str = DEFAULT_FLYOVER_URL, timeout: float = DEFAULT_HTTP_TIMEOUT, verbose: bool = False):
        self.url = url
        self.timeout = timeout
        self.verbose = verbose

    def fetch_flyover_times(self, coords: Coordinates) -> list[PassPrediction]:
        params = {'lat': coords.latitude, 'lon': coords.longitude}
        if self.verbose:
            print(
                f"   > [iss-flyover] GET {self.url}?lat={coords.latitude}&lon={coords.longitude}")
        data = _get_json(self.url, "fly over times", self.timeout, params=params)
        try:
            if data.get('message') != FLYOVER_SUCCESS:
                raise UpstreamRejectedError("Error: failed to fetch flyover times")
            # Upstream decides how many passes and in which order.
            return [PassPrediction(risetime=p['risetime'], duration=p['duration'])
                    for p in data['response']]
        except KeyError as e:
            raise MalformedResponseError(
                f"Unable to read fly over times from response: missing field {e}") from e
        except (TypeError, AttributeError) as e:
            raise MalformedResponseError(
                "Unable to read fly over times from response: unexpected layout") from e
