"""
CYF Hotels API — Route Table Unit Tests
=========================================

What:  Tests for the declarative route table and path parameter binding.

Test Strategy:
    ✅ Every documented route is present exactly once
    ✅ Item routes bind through a named SQL parameter
    ✅ Integer validation rejects anything but plain ASCII digits
    ✅ INTEGER range boundaries
"""

import pytest

from app.exceptions import ValidationError
from app.queries import (
    INT32_MAX,
    INT32_MIN,
    ROUTE_TABLE,
    RouteDefinition,
    parse_integer_param,
)


class TestRouteTable:

    def test_documented_paths(self):
        assert [d.path for d in ROUTE_TABLE] == [
            "/customers",
            "/customers/{id}",
            "/reservations",
            "/reservations/{id}",
            "/invoices",
            "/invoices/{id}",
            "/rooms",
            "/rooms/{number}",
            "/room_types",
        ]

    def test_route_names_are_unique(self):
        names = [d.name for d in ROUTE_TABLE]
        assert len(names) == len(set(names))

    @pytest.mark.parametrize(
        "definition", [d for d in ROUTE_TABLE if d.is_item], ids=lambda d: d.path
    )
    def test_item_routes_use_bind_parameter(self, definition):
        assert f"{{{definition.param_name}}}" in definition.path
        assert f":{definition.param_name}" in definition.sql
        assert "{" not in definition.sql

    @pytest.mark.parametrize(
        "definition", [d for d in ROUTE_TABLE if not d.is_item], ids=lambda d: d.path
    )
    def test_collection_routes_have_no_parameters(self, definition):
        assert definition.bind() == {}
        assert ":" not in definition.sql

    def test_rooms_filter_on_room_number(self):
        rooms = next(d for d in ROUTE_TABLE if d.path == "/rooms/{number}")
        assert "room_no = :number" in rooms.sql


class TestBind:

    def setup_method(self):
        self.definition = RouteDefinition(
            name="get_customer",
            path="/customers/{id}",
            sql="SELECT * FROM customers WHERE id = :id",
            summary="Get customer(s) by id",
            param_name="id",
        )

    def test_bind_returns_integer(self):
        assert self.definition.bind("17") == {"id": 17}

    def test_bind_missing_value_rejected(self):
        with pytest.raises(ValidationError, match="required"):
            self.definition.bind(None)

    def test_bind_rejects_sql_fragment(self):
        with pytest.raises(ValidationError) as exc_info:
            self.definition.bind("1 OR 1=1")

        assert exc_info.value.field == "id"
        assert exc_info.value.context["value"] == "1 OR 1=1"


class TestParseIntegerParam:

    @pytest.mark.parametrize("raw, expected", [
        ("0", 0),
        ("42", 42),
        ("-7", -7),
        ("007", 7),
        (str(INT32_MAX), INT32_MAX),
        (str(INT32_MIN), INT32_MIN),
    ])
    def test_valid_integers(self, raw, expected):
        assert parse_integer_param("id", raw) == expected

    @pytest.mark.parametrize("raw", [
        "",
        " 1",
        "1 ",
        "+1",
        "1_000",
        "1e3",
        "١٢",  # Arabic-Indic digits
        "--1",
        "1;",
        "'1'",
    ])
    def test_invalid_integers(self, raw):
        with pytest.raises(ValidationError, match="must be an integer"):
            parse_integer_param("id", raw)

    @pytest.mark.parametrize("raw", [str(INT32_MAX + 1), str(INT32_MIN - 1), "9" * 40])
    def test_out_of_range(self, raw):
        with pytest.raises(ValidationError, match="out of range"):
            parse_integer_param("number", raw)
