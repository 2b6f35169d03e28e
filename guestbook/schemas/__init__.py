"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - Schemas validate at the system boundary; stores validate comment content
    - Separate from models: schemas are API contracts, models are persistence
"""
