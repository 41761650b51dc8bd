"""Infrastructure Layer - database wiring and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or services/
    - All database failures mapped to DatabaseError
"""
