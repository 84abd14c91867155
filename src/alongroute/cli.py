"""
Along-Route Finder — Interactive CLI
====================================
Thin wrapper around the alongroute library.

Usage:
    alongroute                              # interactive mode
    alongroute "_p~iF~ps|U_ulLnnqC"         # decode a polyline
    alongroute route.json places.json       # rank places along a route

Configuration is read from environment variables:
    ALONGROUTE_RADIUS_M          Search radius in meters (default 1000)
    ALONGROUTE_MAX_ROUTE_POINTS  Route down-sampling cap (default 500)
    ALONGROUTE_PRECISION         Polyline precision (default 5)
    ALONGROUTE_LOG_LEVEL         Logging level (default WARNING)
"""

import json
import logging
import os
import sys
from pathlib import Path

from alongroute import AlongRoute
from alongroute.exceptions import (
    AlongRouteError,
    InsufficientRouteLength,
    MalformedPolyline,
)
from alongroute.models import Coordinate
from alongroute.polyline import DEFAULT_PRECISION
from alongroute.proximity import DEFAULT_MAX_ROUTE_POINTS, DEFAULT_RADIUS_M

_BANNER = """\
╔══════════════════════════════════════╗
║        Along-Route Finder            ║
║  Polyline + Point → Distance         ║
╚══════════════════════════════════════╝
Type 'q' to quit.
"""

_QUIT = ("q", "quit", "exit")


def _client_from_env() -> AlongRoute:
    """Build a client from ALONGROUTE_* variables; raises ValueError."""
    return AlongRoute(
        radius_m=float(os.environ.get("ALONGROUTE_RADIUS_M", DEFAULT_RADIUS_M)),
        max_route_points=int(
            os.environ.get("ALONGROUTE_MAX_ROUTE_POINTS", DEFAULT_MAX_ROUTE_POINTS)
        ),
        precision=int(os.environ.get("ALONGROUTE_PRECISION", DEFAULT_PRECISION)),
    )


def _parse_point(raw: str) -> Coordinate:
    lat, lng = (float(part) for part in raw.split(","))
    return Coordinate(lat, lng)


def _load_json(path: str) -> dict:
    with Path(path).open(encoding="utf-8") as fh:
        return json.load(fh)


def _run_interactive(client: AlongRoute) -> None:
    print(_BANNER)

    # -- Route ----------------------------------------------------------
    while True:
        try:
            raw_polyline = input("\nEncoded polyline: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if raw_polyline.lower() in _QUIT:
            print("Bye!")
            return
        try:
            route = client.decode(raw_polyline)
        except MalformedPolyline as exc:
            print(f"  ✗ {exc}")
            continue
        if len(route) < 2:
            print("  ✗ Route needs at least two points.")
            continue
        print(f"  ✓ Decoded {len(route)} points")
        break

    # -- Points ---------------------------------------------------------
    while True:
        try:
            raw_point = input("Point (lat,lng):  ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if raw_point.lower() in _QUIT:
            print("Bye!")
            break
        try:
            point = _parse_point(raw_point)
        except ValueError:
            print(f"  ✗ Expected 'lat,lng', got '{raw_point}'")
            continue

        distance = client.distance_to_route(point, route)
        marker = "✓" if distance <= client.radius_m else "✗"
        print(f"  {marker} {distance:,.1f} m from route")


def _print_ranked(client: AlongRoute, route_path: str, places_path: str) -> None:
    results = client.find_from_responses(
        _load_json(route_path), _load_json(places_path)
    )
    if not results:
        print(f"No places within {client.radius_m:.0f} m of the route.")
        return
    for result in results:
        name = result.attributes.get("name", "")
        print(f"{result.distance_from_route:>10.1f} m  {result.id!s:<14} {name}")


def main() -> None:
    """Entry point — supports both CLI args and interactive mode."""
    try:
        logging.basicConfig(
            level=os.environ.get("ALONGROUTE_LOG_LEVEL", "WARNING").upper(),
            format="%(levelname)s %(name)s: %(message)s",
        )
        client = _client_from_env()
    except ValueError as exc:
        print(f"Error: invalid configuration: {exc}", file=sys.stderr)
        sys.exit(2)

    args = sys.argv[1:]
    try:
        if len(args) == 1:
            for coord in client.decode(args[0]):
                print(f"{coord.lat},{coord.lng}")
        elif len(args) == 2:
            _print_ranked(client, args[0], args[1])
        elif not args:
            _run_interactive(client)
        else:
            print(__doc__, file=sys.stderr)
            sys.exit(2)
    except (OSError, json.JSONDecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    except InsufficientRouteLength as exc:
        print(f"Route too short: {exc}", file=sys.stderr)
        sys.exit(1)
    except AlongRouteError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
