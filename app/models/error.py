from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


ERROR_RESPONSES: dict[int | str, dict] = {
    400: {"model": ErrorResponse, "description": "Missing or malformed request field"},
    500: {"model": ErrorResponse, "description": "Missing credential or upstream failure"},
}
