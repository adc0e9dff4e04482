"""
CYF Hotels API — Application Package Initializer
==================================================

What: Marks the `app` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    A thin, read-only mapping layer between URL paths and SQL statements:

    ┌─────────────────────────────────────┐
    │        Routes (API Layer)           │  ← HTTP concerns, parameter binding
    ├─────────────────────────────────────┤
    │        Route Table (queries.py)     │  ← path pattern → SQL template
    ├─────────────────────────────────────┤
    │  Services (executor + formatter)    │  ← run query, rows → JSON
    ├─────────────────────────────────────┤
    │   Database (pool lifecycle)         │  ← one async engine per process
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
