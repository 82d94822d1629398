"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Schemas describe the wire format; models/ describe persistence
    - Field constraints live in core/validate_user.py, not in schema declarations

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
