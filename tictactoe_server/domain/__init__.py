"""Domain layer (pure logic).

- Keep game rules and state transitions here.
- Avoid I/O: no DB sessions, no HTTP/FastAPI.
- Prefer deterministic functions (time and identifiers passed in as arguments).
"""
