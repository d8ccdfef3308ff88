"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Derived fields (age, main photo url) computed from core/ rules, never stored

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
