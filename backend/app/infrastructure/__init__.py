"""Infrastructure Layer — database access, credential checks, and logging setup.

Invariants:
    - Infrastructure implements the protocols declared in core/repository_protocols.py
    - All database failures surface as StoreError

Design Decisions:
    - Concrete classes constructed once at startup and injected (no import-time side effects)
"""
