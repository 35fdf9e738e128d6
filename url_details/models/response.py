from typing import Dict, Optional

from pydantic import BaseModel


class UrlDetailsResponse(BaseModel):
    title: str


class ErrorData(BaseModel):
    status: int
    params: Optional[Dict[str, str]] = None


class ErrorResponse(BaseModel):
    code: str
    message: str
    data: ErrorData
