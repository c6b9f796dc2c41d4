"""Pathfinding module for finding subway routes."""

from .dijkstra import PathFinder, RoutePath, SegmentInfo, find_path
from .graph import SubwayGraph, build_graph

__all__ = ["SubwayGraph", "build_graph", "PathFinder", "RoutePath", "SegmentInfo", "find_path"]
