"""Pydantic Schemas: request/response DTOs for the /medicos endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, responses)
    - Domain enums from core/ used for enum fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
