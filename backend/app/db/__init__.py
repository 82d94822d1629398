"""Database Metadata — SQLAlchemy declarative Base.

Invariants:
    - Holds table metadata only; engines and sessions live in infrastructure/database.py
"""
