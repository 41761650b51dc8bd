"""API Layer - FastAPI routes and error handlers."""
