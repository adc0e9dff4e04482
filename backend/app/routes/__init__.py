# Routes package init
"""
CYF Hotels API — API Routes Package
=====================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - hotels.py:  GET /customers, /reservations, /invoices, /rooms, /room_types
                  and their item lookups (built from app/queries.py)
    - health.py:  GET /health        (service health check)
    - static.py:  GET /              (static entry page) + static assets

Routes stay THIN: extract and validate the path parameter, call the query
executor, format the rows. SQL lives in the route table, not in handlers.
"""
