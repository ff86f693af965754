"""Response envelope shared by every endpoint."""

from http import HTTPStatus
from typing import Any

from pydantic import BaseModel


class ApiResponse(BaseModel):
    """Envelope whose ``code`` mirrors the HTTP status."""

    code: int
    message: str
    payload: Any = None

    @classmethod
    def of(cls, code: int, payload: Any = None) -> "ApiResponse":
        return cls(code=code, message=HTTPStatus(code).phrase, payload=payload)
