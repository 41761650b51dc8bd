"""Service Layer - request-handling collaborators injected into routes.

Invariants:
    - Services never import FastAPI routers
    - Each service exposes a get_* provider for Depends()
"""
