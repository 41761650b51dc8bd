"""Database Metadata - declarative base for ORM entities.

Invariants:
    - No entities are registered by the composition root (entities=())
"""
