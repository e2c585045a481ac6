"""Pydantic Schemas — argument and response validation at the operation boundary.

Invariants:
    - Schemas validate at system boundary (operation arguments, REST responses)
    - Domain types from core/ are converted here, never leaked as-is

Design Decisions:
    - Separate from core: schemas are API contracts, core types are store values
"""
