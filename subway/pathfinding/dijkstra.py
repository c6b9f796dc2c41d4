"""Dijkstra pathfinding for subway routes."""

import logging
from dataclasses import dataclass, field

import networkx as nx

from ..domain import Line, Section, Station
from ..exceptions import (
    DisconnectedStationsError,
    SameStationError,
    StationNotFoundError,
)
from ..fare import FareCalculator
from .graph import SubwayGraph

logger = logging.getLogger(__name__)


@dataclass
class SegmentInfo:
    """One traversed section of a route."""

    from_station: Station
    to_station: Station
    distance: int
    section: Section
    line: Line


@dataclass
class RoutePath:
    """Result of pathfinding."""

    stations: list[Station]
    total_distance: int
    max_surcharge: int
    fare: int | None = None
    segments: list[SegmentInfo] = field(default_factory=list)

    @property
    def sections(self) -> list[Section]:
        return [segment.section for segment in self.segments]

    @property
    def lines(self) -> list[Line]:
        """Lines used by the route, in travel order, without repeats."""
        used = []
        for segment in self.segments:
            if segment.line not in used:
                used.append(segment.line)
        return used

    @property
    def station_names(self) -> list[str]:
        return [station.name for station in self.stations]


def aggregate_distance(segments: list[SegmentInfo]) -> int:
    """Sum of the distances of the traversed sections."""
    return sum(segment.distance for segment in segments)


def aggregate_surcharge(segments: list[SegmentInfo]) -> int:
    """
    Highest surcharge among the lines of the traversed sections.

    A rider crossing several lines pays the single highest surcharge, not
    their sum.
    """
    if not segments:
        raise AssertionError("Cannot aggregate the surcharge of an empty route")
    return max(segment.line.surcharge for segment in segments)


class PathFinder:
    """
    Find shortest routes in the subway network using Dijkstra's algorithm.

    Uses NetworkX's optimized implementation, which weighs each pair of
    stations by its lightest parallel section. The section actually
    travelled is that lightest one (earliest registered on ties), kept so
    its line's surcharge can be charged.
    """

    def __init__(self, graph: SubwayGraph, fare_calculator: FareCalculator | None = None):
        """
        Initialize pathfinder with a subway graph.

        Args:
            graph: SubwayGraph instance
            fare_calculator: Fare calculator (default tariff if omitted)
        """
        self.graph = graph.graph
        self._subway_graph = graph
        self.fare_calculator = fare_calculator or FareCalculator()

    def find_path(self, source: Station, target: Station, age: int) -> RoutePath:
        """
        Find the shortest route between two stations and its fare.

        Args:
            source: Departure station
            target: Arrival station
            age: Age of the rider

        Returns:
            RoutePath with stations, distance, surcharge and fare

        Raises:
            SameStationError: source and target are the same station
            StationNotFoundError: source or target is not in the graph
            DisconnectedStationsError: no route connects the stations
        """
        route = self.find_shortest_path(source, target)
        route.fare = self.fare_calculator.calculate(
            route.total_distance, route.max_surcharge, age
        )
        return route

    def find_shortest_path(self, source: Station, target: Station) -> RoutePath:
        """Find the shortest route between two stations, without its fare."""
        self._validate(source, target)

        try:
            path = nx.dijkstra_path(self.graph, source, target, weight="weight")
        except nx.NetworkXNoPath:
            logger.info("No route between %s and %s", source, target)
            raise DisconnectedStationsError(source, target) from None

        segments = []
        for i in range(len(path) - 1):
            edge = self._lightest_edge(path[i], path[i + 1])
            segments.append(SegmentInfo(
                from_station=path[i],
                to_station=path[i + 1],
                distance=edge["weight"],
                section=edge["section"],
                line=edge["line"],
            ))

        return RoutePath(
            stations=path,
            total_distance=aggregate_distance(segments),
            max_surcharge=aggregate_surcharge(segments),
            segments=segments,
        )

    def _validate(self, source: Station, target: Station) -> None:
        if source is target:
            logger.info("Rejected route search from %s to itself", source)
            raise SameStationError(source)
        for station in (source, target):
            if station not in self.graph:
                logger.info("Rejected route search: unknown station %s", station)
                raise StationNotFoundError(station)

    def _lightest_edge(self, station: Station, neighbor: Station) -> dict:
        """Pick the lowest-weight parallel edge, earliest registered on ties."""
        edges = self.graph.adj[station][neighbor].values()
        return min(edges, key=lambda data: (data["weight"], data["order"]))


def find_path(graph: SubwayGraph, source: Station, target: Station, age: int) -> RoutePath:
    """Find the shortest route and its fare on a built graph."""
    return PathFinder(graph).find_path(source, target, age)


def format_route(route: RoutePath, separator: str = "→") -> str:
    """Format the stations of a route as a single string."""
    return separator.join(route.station_names)
