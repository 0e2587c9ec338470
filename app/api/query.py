import logging

from fastapi import APIRouter, Depends

from app.core.errors import GatewayError, UpstreamError
from app.dependencies import get_query_service
from app.models.error import ERROR_RESPONSES
from app.models.query import QueryRequest, QueryResponse
from app.services.query_service import QueryService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/get-ai-response", response_model=QueryResponse, responses=ERROR_RESPONSES)
async def get_ai_response(
    request: QueryRequest,
    query_service: QueryService = Depends(get_query_service),
) -> QueryResponse:
    """
    Answer a health question in the caller's language.

    The query is prefixed with its language tag and sent to Gemini together
    with the fixed healthcare system instruction.
    """
    try:
        return await query_service.answer(query=request.query, lang=request.lang)
    except GatewayError:
        raise
    except Exception as e:
        logger.exception("get-ai-response endpoint failed")
        raise UpstreamError("Failed to call Gemini API") from e
