"""Subway lines loaded from CSV."""

import csv
import logging
from pathlib import Path

from .domain import Line, Section, Station

logger = logging.getLogger(__name__)


def load_lines(filepath: str | Path) -> list[Line]:
    """
    Load lines and their sections from CSV.

    Expected columns: line, surcharge, up_station, down_station, distance
    Optional columns: color

    Each row is one section. Stations with the same name are the same
    Station object across all lines. Malformed rows are skipped.
    """
    filepath = Path(filepath)
    stations: dict[str, Station] = {}
    lines: dict[str, Line] = {}
    rows_skipped = 0

    def register(station: Station) -> None:
        if station.name not in stations:
            station.id = len(stations) + 1
            stations[station.name] = station

    with open(filepath, encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for row in reader:
            try:
                line_name = row["line"].strip()
                up_name = row["up_station"].strip()
                down_name = row["down_station"].strip()
                distance = int(row["distance"])
                surcharge = int(row.get("surcharge") or 0)
                if not line_name or not up_name or not down_name:
                    raise ValueError("empty name")

                # Stations are registered only once the row is valid
                up_station = stations.get(up_name) or Station(up_name)
                down_station = (
                    up_station if down_name == up_name
                    else stations.get(down_name) or Station(down_name)
                )
                section = Section(up_station, down_station, distance)

                line = lines.get(line_name)
                if line is None:
                    line = Line(
                        name=line_name,
                        surcharge=surcharge,
                        color=(row.get("color") or "").strip(),
                    )
                    lines[line_name] = line
                elif line.surcharge != surcharge:
                    logger.warning(
                        "Line %s: surcharge %d ignored, keeping %d",
                        line_name, surcharge, line.surcharge,
                    )
                register(up_station)
                register(down_station)
                line.sections.append(section)
            except (ValueError, KeyError, TypeError, AttributeError) as e:
                rows_skipped += 1
                logger.warning("Skipped row %d of %s: %s", reader.line_num, filepath, e)
                continue

    logger.debug(
        "Loaded %d lines and %d stations from %s (%d rows skipped)",
        len(lines), len(stations), filepath, rows_skipped,
    )
    return list(lines.values())


def find_station(lines: list[Line], name: str) -> Station | None:
    """Find a station of the given lines by name."""
    for line in lines:
        for station in line.stations:
            if station.name == name:
                return station
    return None
