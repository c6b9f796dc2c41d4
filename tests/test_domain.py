"""Tests for domain module."""

import pytest

from subway.domain import Line, Section, Station


class TestStation:
    def test_identity_equality(self):
        assert Station("Gangnam") != Station("Gangnam")
        station = Station("Gangnam", id=1)
        assert station == station
        assert str(station) == "Gangnam"


class TestSection:
    def test_positive_distance(self):
        section = Section(Station("A"), Station("B"), 5)
        assert section.distance == 5

    @pytest.mark.parametrize("distance", [0, -3, 2.5, True])
    def test_invalid_distance(self, distance):
        with pytest.raises(ValueError):
            Section(Station("A"), Station("B"), distance)

    def test_same_station_rejected(self):
        station = Station("A")
        with pytest.raises(ValueError):
            Section(station, station, 5)


class TestLine:
    @pytest.fixture
    def stations(self):
        return [Station(name) for name in "ABCD"]

    def test_default_surcharge(self):
        assert Line("line1").surcharge == 0

    def test_negative_surcharge_rejected(self):
        with pytest.raises(ValueError):
            Line("line1", surcharge=-100)

    def test_stations_follow_chain(self, stations):
        a, b, c, d = stations
        # Sections registered out of order
        line = Line("line1", [Section(b, c, 3), Section(c, d, 4), Section(a, b, 2)])
        assert line.stations == [a, b, c, d]
        assert len(line) == 3

    def test_stations_without_chain(self, stations):
        a, b, c, d = stations
        line = Line("branch", [Section(a, b, 1), Section(a, c, 1), Section(d, c, 1)])
        assert line.stations == [a, b, c, d]

    def test_empty_line(self):
        assert Line("empty").stations == []

    def test_long_line_order(self):
        stations = [Station(f"S{i}") for i in range(3000)]
        sections = [Section(up, down, 1) for up, down in zip(stations, stations[1:])]
        line = Line("long", list(reversed(sections)))
        assert line.stations == stations
