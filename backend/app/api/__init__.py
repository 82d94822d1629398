"""API Layer — FastAPI routes, dependencies, request parsing, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Success bodies are JSON; error bodies are plain text
"""
