"""Subway graph construction from lines and their sections."""

import logging
from collections.abc import Iterable

import networkx as nx

from ..domain import Line, Section, Station

logger = logging.getLogger(__name__)


class SubwayGraph:
    """
    Weighted multigraph of the subway network.

    Nodes are stations, edges are line sections. Every edge keeps its
    section, its owning line and its registration order; parallel edges
    between the same pair of stations are never merged.
    """

    def __init__(self, directed: bool = False):
        """
        Initialize empty graph.

        Args:
            directed: Only allow travel from up-station to down-station
        """
        self.directed = directed
        self.graph = nx.MultiDiGraph() if directed else nx.MultiGraph()
        self._lines: list[Line] = []

    @classmethod
    def from_lines(cls, lines: Iterable[Line], directed: bool = False) -> "SubwayGraph":
        """Build a graph holding every station and section of the given lines."""
        subway_graph = cls(directed=directed)
        for line in lines:
            subway_graph.add_line(line)
        logger.debug(
            "Built subway graph: %d lines, %d stations, %d sections",
            len(subway_graph._lines),
            subway_graph.graph.number_of_nodes(),
            subway_graph.graph.number_of_edges(),
        )
        return subway_graph

    def add_line(self, line: Line) -> None:
        """Add the stations and sections of one line."""
        self._lines.append(line)

        # add_node on an existing station is a no-op
        for station in line.stations:
            self.graph.add_node(station)

        for section in line.sections:
            self.graph.add_edge(
                section.up_station,
                section.down_station,
                weight=section.distance,
                section=section,
                line=line,
                order=self.graph.number_of_edges(),
            )

    def get_stations(self) -> list[Station]:
        """Get list of all stations."""
        return list(self.graph.nodes())

    def get_lines(self) -> list[Line]:
        """Get lines in registration order."""
        return list(self._lines)

    def has_station(self, station: Station) -> bool:
        """Check if a station exists in the graph."""
        return station in self.graph

    def get_neighbors(self, station: Station) -> list[Station]:
        """Get stations reachable through a single section."""
        if station not in self.graph:
            return []
        return list(self.graph.adj[station])

    def get_edges(self, station1: Station, station2: Station) -> list[dict]:
        """Get data of every edge from station1 to station2, in registration order."""
        if not self.graph.has_edge(station1, station2):
            return []
        edges = self.graph.adj[station1][station2].values()
        return sorted((dict(data) for data in edges), key=lambda data: data["order"])

    def get_sections(self) -> list[Section]:
        """Get all sections in registration order."""
        edges = sorted(self.graph.edges(data=True), key=lambda edge: edge[2]["order"])
        return [data["section"] for _, _, data in edges]

    def __contains__(self, station: Station) -> bool:
        return station in self.graph

    def __len__(self) -> int:
        """Return number of stations."""
        return len(self.graph)


def build_graph(lines: Iterable[Line], directed: bool = False) -> SubwayGraph:
    """Build a SubwayGraph from lines."""
    return SubwayGraph.from_lines(lines, directed=directed)
