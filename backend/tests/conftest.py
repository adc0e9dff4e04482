"""
CYF Hotels API — Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── hotel_db: Fresh SQLite database (aiosqlite) with the hotel tables,
    │             installed as the process-wide engine
    ├── seeded_hotel_db: hotel_db plus a handful of known rows
    ├── unreachable_db: Process-wide engine pointing at a database that
    │                   cannot be opened
    ├── test_client: HTTPX AsyncClient talking to the FastAPI app
    └── slow_engine: Engine stand-in whose queries never finish
"""

import asyncio
import os
import tempfile

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="cyf_hotels_db_"), "test.db"
)
os.environ["STATIC_ROOT"] = tempfile.mkdtemp(prefix="cyf_hotels_static_")
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import text

from app import database


# ══════════════════════════════════════════════════════════════════════════
# Hotel Schema
# ══════════════════════════════════════════════════════════════════════════

HOTEL_SCHEMA = (
    """
    CREATE TABLE customers (
        id INTEGER PRIMARY KEY,
        name VARCHAR(30) NOT NULL,
        city VARCHAR(30),
        phone VARCHAR(20)
    )
    """,
    """
    CREATE TABLE room_types (
        room_type VARCHAR(30) PRIMARY KEY,
        def_rate NUMERIC(6, 2) NOT NULL,
        description VARCHAR(120)
    )
    """,
    """
    CREATE TABLE rooms (
        room_no INTEGER PRIMARY KEY,
        rate NUMERIC(6, 2) NOT NULL,
        room_type VARCHAR(30) REFERENCES room_types(room_type),
        no_guests INTEGER
    )
    """,
    """
    CREATE TABLE reservations (
        id INTEGER PRIMARY KEY,
        cust_id INTEGER REFERENCES customers(id),
        room_no INTEGER REFERENCES rooms(room_no),
        checkin_date DATE NOT NULL,
        checkout_date DATE,
        no_guests INTEGER,
        booking_date DATE
    )
    """,
    """
    CREATE TABLE invoices (
        id INTEGER PRIMARY KEY,
        res_id INTEGER REFERENCES reservations(id),
        total NUMERIC(6, 2) NOT NULL,
        invoice_date DATE NOT NULL,
        paid BOOLEAN NOT NULL DEFAULT FALSE
    )
    """,
)

SEED_ROWS = (
    "INSERT INTO customers (id, name, city, phone) VALUES "
    "(1, 'Alice', 'London', '555-1212'), "
    "(2, 'Bob', 'Manchester', '555-3434')",
    "INSERT INTO room_types (room_type, def_rate, description) VALUES "
    "('SINGLE', 85, 'Single room'), "
    "('DOUBLE', 110, 'Double room')",
    "INSERT INTO rooms (room_no, rate, room_type, no_guests) VALUES "
    "(101, 85, 'SINGLE', 1), "
    "(201, 110, 'DOUBLE', 2)",
    "INSERT INTO reservations "
    "(id, cust_id, room_no, checkin_date, checkout_date, no_guests, booking_date) VALUES "
    "(1, 1, 101, '2024-05-01', '2024-05-03', 1, '2024-04-01'), "
    "(2, 2, 201, '2024-06-10', '2024-06-12', 2, '2024-04-15')",
    "INSERT INTO invoices (id, res_id, total, invoice_date, paid) VALUES "
    "(1, 1, 170, '2024-05-03', 1)",
)


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def hotel_db(tmp_path):
    """
    Provides an empty hotel database as the process-wide engine.

    What:    A SQLite file per test with every hotel table created.
    How:     init_engine() with an aiosqlite URL; disposed after the test.
    """
    await database.dispose_engine()
    engine = database.init_engine(f"sqlite+aiosqlite:///{tmp_path / 'cyf_hotels.db'}")
    async with engine.begin() as conn:
        for statement in HOTEL_SCHEMA:
            await conn.execute(text(statement))
    yield engine
    await database.dispose_engine()


@pytest_asyncio.fixture
async def seeded_hotel_db(hotel_db):
    """hotel_db with two customers, rooms, reservations and one invoice."""
    async with hotel_db.begin() as conn:
        for statement in SEED_ROWS:
            await conn.execute(text(statement))
    return hotel_db


@pytest_asyncio.fixture
async def unreachable_db(tmp_path):
    """
    Provides a process-wide engine whose connections always fail.

    The database file lives in a directory that does not exist, so every
    connection attempt raises an OperationalError.
    """
    await database.dispose_engine()
    database.init_engine(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'cyf_hotels.db'}")
    yield
    await database.dispose_engine()


class SlowConnection:
    """Connection stand-in whose execute() sleeps far beyond any timeout."""

    def __init__(self):
        self.entered = False
        self.released = False

    async def __aenter__(self):
        self.entered = True
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.released = True
        return False

    async def execute(self, *args, **kwargs):
        await asyncio.sleep(30)


class SlowEngine:
    def __init__(self):
        self.connection = SlowConnection()

    def connect(self):
        return self.connection


@pytest.fixture
def slow_engine():
    """Engine stand-in for timeout tests; inspect .connection afterwards."""
    return SlowEngine()


# ══════════════════════════════════════════════════════════════════════════
# HTTP Client
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    What:    HTTPX AsyncClient configured to talk to our FastAPI app.
    How:     Uses ASGITransport to route requests directly to the app. The
             lifespan does not run; database fixtures install the engine.
             Dependency overrides are cleared afterwards.
    """
    from app.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
