# Main script to find the next ISS fly-overs for your current location.

import argparse
import asyncio
from datetime import tzinfo
from typing import Callable

from api_adapters import (
    FlyoverAdapter,
    GeoAdapter,
    IpAdapter,
    IpifyAdapter,
    IpWhoIsAdapter,
    IssFlyoverAdapter,
)
from api_config import Settings, load_settings
from api_errors import FlyoverError
from api_structures import PassPrediction

FAILURE_PREFIX = "It didn't work!"

PassCallback = Callable[[FlyoverError | None, list[PassPrediction] | None], None]


# --- Core Logic ---

def next_iss_times_for_my_location(
    ip_adapter: IpAdapter | None = None,
    geo_adapter: GeoAdapter | None = None,
    flyover_adapter: FlyoverAdapter | None = None,
) -> list[PassPrediction]:
    """
    Chains the three lookups: public IP, then coordinates, then fly-over times.
    The first failing step ends the run; its error is re-raised with the same
    type and a fixed prefix. The pass list is returned exactly as the
    prediction service sent it.
    """
    ip_adapter = ip_adapter or IpifyAdapter()
    geo_adapter = geo_adapter or IpWhoIsAdapter()
    flyover_adapter = flyover_adapter or IssFlyoverAdapter()

    try:
        ip = ip_adapter.fetch_my_ip()
        coords = geo_adapter.fetch_coords_by_ip(ip)
        return flyover_adapter.fetch_flyover_times(coords)
    except FlyoverError as e:
        raise e.with_prefix(FAILURE_PREFIX) from e


def next_iss_times_with_callback(callback: PassCallback, **adapters) -> None:
    """Error-first callback form: callback(error, None) or callback(None, passes)."""
    try:
        passes = next_iss_times_for_my_location(**adapters)
    except FlyoverError as e:
        callback(e, None)
        return
    callback(None, passes)


async def next_iss_times_async(**adapters) -> list[PassPrediction]:
    """Awaitable form; the blocking chain runs in a worker thread."""
    return await asyncio.to_thread(next_iss_times_for_my_location, **adapters)


# --- Output ---

def format_pass(flyover: PassPrediction, tz: tzinfo | None = None) -> str:
    """Renders a pass as a readable line in local time."""
    rise = flyover.rise_datetime(tz)
    return (f"Next pass at {rise.strftime('%a %b %d %Y %H:%M:%S %Z')} "
            f"for {flyover.duration} seconds!")


def print_passes(passes: list[PassPrediction], tz: tzinfo | None = None):
    for flyover in passes:
        print(format_pass(flyover, tz))


def print_failure(error: FlyoverError):
    print(error.message)


def build_adapters(settings: Settings, verbose: bool) -> dict:
    return {
        'ip_adapter': IpifyAdapter(settings.ip_url, settings.timeout, verbose=verbose),
        'geo_adapter': IpWhoIsAdapter(settings.geo_url, settings.timeout, verbose=verbose),
        'flyover_adapter': IssFlyoverAdapter(settings.flyover_url, settings.timeout, verbose=verbose),
    }


# --- Entry Points ---

def parse_args(argv=None, description: str = "ISS Fly-over Finder") -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=f"{description}: upcoming ISS passes for your current location.")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help="Enable verbose mode to see the exact API calls being made.")
    return parser.parse_args(argv)


def _prepare(argv, description: str) -> tuple[Settings, dict] | None:
    args = parse_args(argv, description)
    try:
        settings = load_settings()
    except ValueError as e:
        print(e)
        return None
    return settings, build_adapters(settings, args.verbose)


def main(argv=None) -> int:
    """Callback-driven entry point."""
    prepared = _prepare(argv, "ISS Fly-over Finder")
    if prepared is None:
        return 0
    settings, adapters = prepared

    def on_done(error, passes):
        if error:
            print_failure(error)
            return
        print_passes(passes, settings.tz)

    next_iss_times_with_callback(on_done, **adapters)
    return 0


def main_async(argv=None) -> int:
    """Awaitable-driven entry point."""
    prepared = _prepare(argv, "ISS Fly-over Finder (async)")
    if prepared is None:
        return 0
    settings, adapters = prepared

    async def run():
        try:
            passes = await next_iss_times_async(**adapters)
        except FlyoverError as e:
            print_failure(e)
            return
        print_passes(passes, settings.tz)

    asyncio.run(run())
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
