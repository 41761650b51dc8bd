"""App Service - greeting served by the root controller."""

from functools import lru_cache


class AppService:

    def get_hello(self) -> str:
        return "Hello World!"


@lru_cache
def get_app_service() -> AppService:
    """FastAPI dependency: one AppService per process."""
    return AppService()
