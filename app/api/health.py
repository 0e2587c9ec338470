from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

LIVENESS_MESSAGE = "Odisha Healthcare AI Server running"


@router.get("/", response_class=PlainTextResponse)
def root_health_check() -> str:
    return LIVENESS_MESSAGE
