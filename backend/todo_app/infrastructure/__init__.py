"""Infrastructure Layer — database, security primitives, and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Store failures mapped to DatabaseError, token failures to InvalidTokenError
"""
