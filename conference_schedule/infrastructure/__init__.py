"""Infrastructure Layer — database sessions, logging and attachment storage.

Invariants:
    - Infrastructure never imports from core/ calendar logic (errors excepted)
    - Every storage/driver exception is mapped to a ConferenceError subclass
"""
