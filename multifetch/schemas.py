from pydantic import BaseModel, Field, TypeAdapter, ValidationError
from typing import List, Optional

from multifetch.fetch.base import DecodeError

ERROR_PREFIX = "Erreur: "

class FetchOutcome(BaseModel):
    ok: bool
    body: Optional[str] = Field(None, description="Response body, set when ok")
    error: Optional[str] = Field(None, description="Failure cause, set when not ok")

    @classmethod
    def success(cls, body: str) -> "FetchOutcome":
        return cls(ok=True, body=body)

    @classmethod
    def failure(cls, message: str) -> "FetchOutcome":
        return cls(ok=False, error=message)

    def to_legacy(self) -> str:
        """Render as the body itself, or an error string carrying ERROR_PREFIX."""
        if self.ok:
            return self.body
        return ERROR_PREFIX + self.error

class HealthResponse(BaseModel):
    status: str
    service: str

_url_batch = TypeAdapter(Optional[List[str]])

def decode_url_batch(raw: bytes) -> List[str]:
    """
    Parse a JSON array of URL strings, raising DecodeError on anything else.
    A JSON null is an empty batch.
    """
    try:
        urls = _url_batch.validate_json(raw)
    except ValidationError as e:
        raise DecodeError(f"expected a JSON array of strings: {e.error_count()} error(s)") from e
    return urls or []
