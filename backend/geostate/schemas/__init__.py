"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Field names and aliases match the JSON contract consumed by the frontend

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
