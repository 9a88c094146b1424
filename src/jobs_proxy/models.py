"""Request and response models for the jobs proxy."""

import json
from typing import Any, Optional

from pydantic import BaseModel


class ProxyRequest(BaseModel):
    """An inbound request, independent of the hosting framework."""

    method: str
    body: Optional[bytes] = None


class ErrorResponse(BaseModel):
    """Client-safe error body."""

    error: str


class ProxyResponse(BaseModel):
    """An outbound response, independent of the hosting framework."""

    status_code: int
    headers: dict[str, str] = {}
    body: Any = None
    # Plain-text bodies are written as-is, everything else as JSON
    is_json: bool = True

    @property
    def content_type(self) -> str:
        if self.is_json:
            return "application/json"
        return "text/plain; charset=utf-8"

    def render(self) -> bytes:
        """Serialize the body for the wire."""
        if not self.is_json:
            return str(self.body or "").encode()
        return json.dumps(self.body).encode()

    @classmethod
    def from_json(
        cls, status_code: int, body: Any, headers: Optional[dict[str, str]] = None
    ) -> "ProxyResponse":
        return cls(status_code=status_code, body=body, headers=headers or {})

    @classmethod
    def error(cls, status_code: int, message: str) -> "ProxyResponse":
        return cls(status_code=status_code, body=ErrorResponse(error=message).model_dump())
