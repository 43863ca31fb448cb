"""Core Layer — pure calendar logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from api/, infrastructure/, models/ or db/
    - All functions are pure and deterministic (given a fixed local timezone)

Design Decisions:
    - Functional core separated from the REST shell: routes load ORM rows,
      project them to CalendarEvent and hand them to core functions
"""
