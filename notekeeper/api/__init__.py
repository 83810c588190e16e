"""API Layer — FastAPI routes, principal dependency and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses

Design Decisions:
    - Thin routes delegate to services; Result.unwrap() raises the carried
      error and the global handler renders it
"""
