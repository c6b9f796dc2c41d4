"""
Subway Path - Main entry point.

Usage:
    cat queries.csv | python -m subway.main --lines data/lines.csv
    python -m subway.main queries.csv
    python -m subway.main --help

Each query row is: query_id,source,target,age
"""

import argparse
import csv
import logging
import sys
from pathlib import Path

from subway.config import LINES_FILE, LOG_LEVEL
from subway.domain import Station
from subway.exceptions import SubwayPathError
from subway.network import load_lines
from subway.pathfinding import PathFinder, SubwayGraph
from subway.pathfinding.dijkstra import format_route

logger = logging.getLogger(__name__)


def build_station_index(graph: SubwayGraph) -> dict[str, Station]:
    """Map station names to the stations of the graph."""
    return {station.name: station for station in graph.get_stations()}


def process_query(
    query_id: str,
    source_name: str,
    target_name: str,
    age: str,
    pathfinder: PathFinder,
    stations: dict[str, Station],
) -> str:
    """
    Process a single route query and return formatted output.

    Args:
        query_id: ID of the query
        source_name: Departure station name
        target_name: Arrival station name
        age: Age of the rider, as read from the input
        pathfinder: PathFinder over the loaded network
        stations: Station index by name

    Returns:
        Formatted output string
    """
    prefix = f"{query_id},{source_name},{target_name}"

    # Unknown names still resolve to one Station per name, so the same
    # unknown name on both sides is reported as the same station
    unknown: dict[str, Station] = {}
    source = stations.get(source_name) or unknown.setdefault(source_name, Station(source_name))
    target = stations.get(target_name) or unknown.setdefault(target_name, Station(target_name))

    # Route errors come before age errors
    try:
        route = pathfinder.find_shortest_path(source, target)
    except SubwayPathError as e:
        return f"{prefix},{e.code}"

    try:
        route.fare = pathfinder.fare_calculator.calculate(
            route.total_distance, route.max_surcharge, int(age)
        )
    except ValueError:
        logger.info("Query %s: invalid age %r", query_id, age)
        return f"{prefix},INVALID_AGE"

    return (
        f'{prefix},{route.total_distance},{route.max_surcharge},{route.fare},'
        f'"{format_route(route)}"'
    )


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Subway Path - Shortest subway routes and their fares"
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Input CSV file of queries (default: stdin)",
    )
    parser.add_argument(
        "--lines",
        type=Path,
        default=LINES_FILE,
        help="Path to lines CSV",
    )
    parser.add_argument(
        "--directed",
        action="store_true",
        help="Only travel sections from up-station to down-station",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: SUBWAY_LOG_LEVEL or WARNING)",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if not args.lines.exists():
        print(f"Error: Lines file not found: {args.lines}", file=sys.stderr)
        sys.exit(1)

    lines = load_lines(args.lines)
    graph = SubwayGraph.from_lines(lines, directed=args.directed)
    pathfinder = PathFinder(graph)
    stations = build_station_index(graph)

    # Read input
    if args.input:
        input_file = open(args.input, encoding="utf-8")
    else:
        input_file = sys.stdin

    try:
        reader = csv.reader(input_file)
        for row in reader:
            if len(row) < 4:
                continue

            query_id = row[0].strip()

            # Skip header
            if query_id.lower() == "query_id":
                continue

            output = process_query(
                query_id,
                row[1].strip(),
                row[2].strip(),
                row[3].strip(),
                pathfinder,
                stations,
            )
            print(output)
    finally:
        if args.input:
            input_file.close()


if __name__ == "__main__":
    main()
