"""
Result value objects
====================
Immutable pydantic models returned by the facade. Field names are snake_case
in Python; ``to_payload()`` emits the camelCase names the HTTP layer puts on
the wire (``result``, ``executionTimeMs``, ``completionTime``).
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .errors import PlayfairError


class CipherMetadataResult(BaseModel):
    """Cipher output plus how long it took and when it finished."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    result: str = Field(
        ...,
        description="Cipher or plain letters produced by the operation.",
    )
    execution_time_ms: float = Field(
        ...,
        ge=0,
        alias="executionTimeMs",
        description="Wall-clock duration of the operation in milliseconds.",
    )
    completion_time: datetime = Field(
        ...,
        alias="completionTime",
        description="UTC timestamp taken when the operation returned.",
    )

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class CipherOutcome(BaseModel):
    """
    Tagged success/failure for callers that prefer branching over except.

    Exactly one of ``value`` / ``error_kind`` is set.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    value: Optional[str] = None
    error_kind: Optional[str] = Field(
        default=None,
        description="Machine-readable kind of the rejected input, e.g. 'empty_key'.",
    )
    message: Optional[str] = None

    @classmethod
    def success(cls, value: str) -> "CipherOutcome":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: PlayfairError) -> "CipherOutcome":
        return cls(ok=False, error_kind=error.kind, message=str(error))

    def unwrap(self) -> str:
        """Return the value, or raise ValueError for a failed outcome."""
        if not self.ok:
            raise ValueError(f"{self.error_kind}: {self.message}")
        return self.value
