from typing import Any
from pydantic import BaseModel


class EmptyRequest(BaseModel):
    """Input contract for operations that take no fields"""


class Envelope(BaseModel):
    """
    Uniform response body.

    success is authoritative; error carries the stable failure kind.
    """

    success: bool
    message: str
    data: Any | None = None
    error: str | None = None

    def to_body(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)
