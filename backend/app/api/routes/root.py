"""Root Controller - GET / delegates to AppService.

Invariants:
    - Response is text/plain, body produced by AppService.get_hello()
    - AppService resolved via Depends (overridable in tests)
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.services.app_service import AppService, get_app_service

router = APIRouter(tags=["root"])


@router.get("/", response_class=PlainTextResponse)
async def get_hello(service: AppService = Depends(get_app_service)) -> str:
    return service.get_hello()
