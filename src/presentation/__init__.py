"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers and endpoint definitions. The presentation
layer is thin - it dispatches commands/queries to the application layer and
translates results to HTTP responses.

Structure:
- routers/system.py: root and health
- routers/api/v1/: versioned API (auth, users, admin, superadmin)
- routers/api/middleware/: trace ID and authentication dependencies

The presentation layer depends on the application layer (dispatches
commands/queries) but contains NO business logic.
"""
