import logging

from fastapi import APIRouter, Depends

from app.core.errors import GatewayError, UpstreamError
from app.dependencies import get_transcript_service
from app.models.chat import TranscriptRequest, TranscriptResponse
from app.models.error import ERROR_RESPONSES
from app.services.transcript_service import TranscriptService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/send-chat", response_model=TranscriptResponse, responses=ERROR_RESPONSES)
async def send_chat(
    request: TranscriptRequest,
    transcript_service: TranscriptService = Depends(get_transcript_service),
) -> TranscriptResponse:
    try:
        return await transcript_service.send(
            chat_history=request.chat_history,
            to_email=request.to_email,
        )
    except GatewayError:
        raise
    except Exception as e:
        logger.exception("send-chat endpoint failed")
        raise UpstreamError("Failed to send email") from e
