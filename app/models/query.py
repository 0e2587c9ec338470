from __future__ import annotations

from pydantic import BaseModel


class QueryRequest(BaseModel):
    query: str | None = None
    lang: str | None = None


class QueryResponse(BaseModel):
    success: bool = True
    answer: str
