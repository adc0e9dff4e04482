# Services package init
"""
CYF Hotels API — Services Layer
=================================

What:  Query execution and response formatting, independent of routing.

Service Inventory:
    - QueryExecutor: Runs one parameterized statement with a timeout against
      the shared pool; raises QueryError / QueryTimeoutError on failure
    - response_formatter: Rows → JSON array response
"""
