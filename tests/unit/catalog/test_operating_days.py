"""Unit tests for operating-day helpers and catalog entities."""

from datetime import date

import pytest

from core.exceptions import CatalogValidationError
from src.catalog_bc.location.domain.entities.location import Location
from src.catalog_bc.transportation.domain.entities.transportation import (
    FLIGHT_TYPES,
    GROUND_TYPES,
    TransportationType,
    day_of_week,
    format_operating_days,
    parse_operating_days,
    validate_operating_days,
)


class TestValidateOperatingDays:
    def test_valid_days(self):
        assert validate_operating_days([1, 3, 5, 7]) == frozenset({1, 3, 5, 7})

    @pytest.mark.parametrize("days", [None, []])
    def test_empty(self, days):
        with pytest.raises(CatalogValidationError, match="cannot be empty"):
            validate_operating_days(days)

    @pytest.mark.parametrize("days", [[0], [8], [1, -1]])
    def test_out_of_range(self, days):
        with pytest.raises(CatalogValidationError, match="Invalid operating day"):
            validate_operating_days(days)

    def test_duplicates(self):
        with pytest.raises(CatalogValidationError, match="duplicates"):
            validate_operating_days([1, 2, 2])


class TestStoredForm:
    def test_format_sorts_ascending(self):
        assert format_operating_days({7, 1, 3}) == "1,3,7"

    def test_parse(self):
        assert parse_operating_days("1,3,5,7") == frozenset({1, 3, 5, 7})

    def test_parse_tolerates_blanks_and_junk(self):
        assert parse_operating_days(" 2, ,x,9,6 ") == frozenset({2, 6})

    def test_parse_empty(self):
        assert parse_operating_days("") == frozenset()
        assert parse_operating_days(None) == frozenset()


class TestDayOfWeek:
    def test_monday_is_one_sunday_is_seven(self):
        assert day_of_week(date(2025, 11, 24)) == 1
        assert day_of_week(date(2025, 11, 30)) == 7


class TestTransportationType:
    def test_only_flight_is_air(self):
        assert FLIGHT_TYPES == {TransportationType.FLIGHT}
        assert GROUND_TYPES == {TransportationType.BUS, TransportationType.SUBWAY, TransportationType.UBER}


class TestLocationCode:
    def test_normalize_code(self):
        assert Location.normalize_code("  ist ") == "IST"
