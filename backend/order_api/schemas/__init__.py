"""Pydantic Schemas — request validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (client input)
    - Field-name compatibility shims are resolved here, not in services

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
