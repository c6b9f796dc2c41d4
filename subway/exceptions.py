"""Errors raised while searching a route between two stations."""


class SubwayPathError(Exception):
    """Base error for route search failures."""

    def __init__(self, message: str, code: str = "PATH_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class SameStationError(SubwayPathError):
    """Departure and arrival are the same station."""

    def __init__(self, station):
        self.station = station
        super().__init__(
            f"Departure and arrival are the same station: {station}",
            code="SAME_STATION",
        )


class StationNotFoundError(SubwayPathError):
    """A station is not served by any line of the graph."""

    def __init__(self, station):
        self.station = station
        super().__init__(
            f"Station does not exist in the subway network: {station}",
            code="STATION_NOT_FOUND",
        )


class DisconnectedStationsError(SubwayPathError):
    """Both stations exist but no sequence of sections connects them."""

    def __init__(self, source, target):
        self.source = source
        self.target = target
        super().__init__(
            f"No route connects {source} and {target}",
            code="DISCONNECTED_STATIONS",
        )
