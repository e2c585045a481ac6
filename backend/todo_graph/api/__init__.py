"""API Layer — GraphQL schema, FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses

Design Decisions:
    - Thin resolvers delegate to OperationDispatch (no store calls in api/)
"""
