"""Stations, sections and lines of the subway network."""

from dataclasses import dataclass, field


@dataclass(eq=False)
class Station:
    """
    Subway station.

    Stations compare by identity: two Station objects with the same name are
    still different vertices of the routing graph.
    """

    name: str
    id: int | None = None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Section:
    """Stretch of track between two adjacent stations of a line."""

    up_station: Station
    down_station: Station
    distance: int

    def __post_init__(self):
        if isinstance(self.distance, bool) or not isinstance(self.distance, int):
            raise ValueError(f"Section distance must be an integer: {self.distance!r}")
        if self.distance <= 0:
            raise ValueError(f"Section distance must be positive: {self.distance}")
        if self.up_station is self.down_station:
            raise ValueError(
                f"Section cannot start and end at the same station: {self.up_station}"
            )


@dataclass(eq=False)
class Line:
    """
    Subway line: an ordered chain of sections and its surcharge.

    Any rider whose route uses at least one section of the line pays the
    surcharge (only the highest one if the route crosses several lines).
    """

    name: str
    sections: list[Section] = field(default_factory=list)
    surcharge: int = 0
    color: str = ""

    def __post_init__(self):
        if isinstance(self.surcharge, bool) or not isinstance(self.surcharge, int):
            raise ValueError(f"Line surcharge must be an integer: {self.surcharge!r}")
        if self.surcharge < 0:
            raise ValueError(f"Line surcharge must not be negative: {self.surcharge}")

    @property
    def stations(self) -> list[Station]:
        """
        Stations of the line, from the terminal up-station downwards.

        Falls back to first-appearance order when the sections do not form
        a single chain.
        """
        in_order = list(dict.fromkeys(
            station
            for section in self.sections
            for station in (section.up_station, section.down_station)
        ))

        down_stations = {section.down_station for section in self.sections}
        next_section = {section.up_station: section for section in self.sections}
        heads = [s for s in in_order if s not in down_stations]
        if len(heads) != 1 or len(next_section) != len(self.sections):
            return in_order

        chain = [heads[0]]
        while chain[-1] in next_section:
            chain.append(next_section[chain[-1]].down_station)
            if len(chain) > len(in_order):
                return in_order
        if len(chain) != len(in_order):
            return in_order
        return chain

    def __len__(self) -> int:
        """Return number of sections."""
        return len(self.sections)
