"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses (ICS/file downloads excepted)

Design Decisions:
    - Thin routes: direct ORM queries, calendar logic delegated to core/
"""
