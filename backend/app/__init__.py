"""Application Package - Postgres-backed web backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
