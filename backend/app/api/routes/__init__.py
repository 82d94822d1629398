"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes parse, call core/store, and return schemas; status mapping lives in error_handlers

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
