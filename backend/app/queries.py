"""
CYF Hotels API — Route Table
==============================

What:  Declarative mapping from GET path patterns to SQL templates.
How:   Each RouteDefinition names its path, its SQL and (for item routes) the
       path parameter that binds to the SQL's single named parameter.
       routes/hotels.py turns every entry into a FastAPI route.

Route Inventory:
    GET /customers            all customers (id, name, city, phone)
    GET /customers/{id}       customer(s) matching id
    GET /reservations         all reservations
    GET /reservations/{id}    reservation(s) matching id
    GET /invoices             all invoices
    GET /invoices/{id}        invoice(s) matching id
    GET /rooms                all rooms
    GET /rooms/{number}       room(s) matching room number
    GET /room_types           all room types

Binding rules:
    The path parameter is validated as an integer within the PostgreSQL
    INTEGER range and passed to the driver as a bind parameter (`:id`,
    `:number`). It is never formatted into the SQL text.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from app.exceptions import ValidationError

INT32_MIN = -2_147_483_648
INT32_MAX = 2_147_483_647

# ASCII digits only; int() alone would also accept "1_0", " 1", "+1" and
# non-ASCII digits.
_INTEGER_PATTERN = re.compile(r"-?[0-9]+")


def parse_integer_param(name: str, raw: str) -> int:
    """
    Validate a raw path segment as an integer key.

    Raises:
        ValidationError: Not an integer, or outside the INTEGER range.
    """
    if not _INTEGER_PATTERN.fullmatch(raw):
        raise ValidationError(
            message=f"Path parameter '{name}' must be an integer",
            field=name,
            context={"value": raw},
        )
    value = int(raw)
    if not INT32_MIN <= value <= INT32_MAX:
        raise ValidationError(
            message=f"Path parameter '{name}' is out of range",
            field=name,
            context={"value": raw, "min": INT32_MIN, "max": INT32_MAX},
        )
    return value


@dataclass(frozen=True)
class RouteDefinition:
    """
    One GET route and the query behind it.

    Attributes:
        name:       Route name (used for OpenAPI operation ids).
        path:       FastAPI path pattern, with zero or one `{param}`.
        sql:        SQL template; item routes use `:<param_name>`.
        summary:    One-line description for the API docs.
        param_name: Path parameter bound into `sql`, or None.
    """
    name: str
    path: str
    sql: str
    summary: str
    param_name: Optional[str] = None

    @property
    def is_item(self) -> bool:
        return self.param_name is not None

    def bind(self, raw: Optional[str] = None) -> Dict[str, Any]:
        """Turn the raw path segment into the bind parameters for `sql`."""
        if self.param_name is None:
            return {}
        if raw is None:
            raise ValidationError(
                message=f"Path parameter '{self.param_name}' is required",
                field=self.param_name,
            )
        return {self.param_name: parse_integer_param(self.param_name, raw)}


ROUTE_TABLE: Tuple[RouteDefinition, ...] = (
    RouteDefinition(
        name="list_customers",
        path="/customers",
        sql="SELECT id, name, city, phone FROM customers",
        summary="List all customers",
    ),
    RouteDefinition(
        name="get_customer",
        path="/customers/{id}",
        sql="SELECT * FROM customers WHERE id = :id",
        summary="Get customer(s) by id",
        param_name="id",
    ),
    RouteDefinition(
        name="list_reservations",
        path="/reservations",
        sql="SELECT * FROM reservations",
        summary="List all reservations",
    ),
    RouteDefinition(
        name="get_reservation",
        path="/reservations/{id}",
        sql="SELECT * FROM reservations WHERE id = :id",
        summary="Get reservation(s) by id",
        param_name="id",
    ),
    RouteDefinition(
        name="list_invoices",
        path="/invoices",
        sql="SELECT * FROM invoices",
        summary="List all invoices",
    ),
    RouteDefinition(
        name="get_invoice",
        path="/invoices/{id}",
        sql="SELECT * FROM invoices WHERE id = :id",
        summary="Get invoice(s) by id",
        param_name="id",
    ),
    RouteDefinition(
        name="list_rooms",
        path="/rooms",
        sql="SELECT * FROM rooms",
        summary="List all rooms",
    ),
    RouteDefinition(
        name="get_room",
        path="/rooms/{number}",
        sql="SELECT * FROM rooms WHERE room_no = :number",
        summary="Get room(s) by room number",
        param_name="number",
    ),
    RouteDefinition(
        name="list_room_types",
        path="/room_types",
        sql="SELECT * FROM room_types",
        summary="List all room types",
    ),
)
