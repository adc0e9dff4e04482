# Middleware package init
"""
CYF Hotels API — Middleware Package
=====================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: Generate correlation ID for logging and error bodies
    2. Logging: Log request details with the generated request ID
    3. GZip / CORS: Applied by FastAPI's built-in middleware

    The order is reversed for responses, so the request ID header is set
    on the final response and the access log sees the final status code.
"""
