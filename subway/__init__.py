"""Shortest subway routes and their fares."""

from .domain import Line, Section, Station
from .exceptions import (
    DisconnectedStationsError,
    SameStationError,
    StationNotFoundError,
    SubwayPathError,
)
from .fare import FareCalculator
from .pathfinding import PathFinder, RoutePath, SubwayGraph, find_path

__all__ = [
    "Station",
    "Section",
    "Line",
    "SubwayGraph",
    "PathFinder",
    "RoutePath",
    "find_path",
    "FareCalculator",
    "SubwayPathError",
    "SameStationError",
    "StationNotFoundError",
    "DisconnectedStationsError",
]
