from enum import Enum
from typing import Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    NonNegativeFloat,
    NonNegativeInt,
    model_validator,
)


class ProbeErrorKind(str, Enum):
    TIMEOUT = "timeout"
    EXTERNAL_TOOL_ERROR = "external_tool_error"
    UNPARSABLE_OUTPUT = "unparsable_output"
    HTTP_ERROR = "http_error"
    NETWORK_ERROR = "network_error"


class ProbeResult(BaseModel):
    """
    Outcome of exactly one probe: either a latency in milliseconds or a
    failure kind with a human-readable message.
    """

    model_config = ConfigDict(frozen=True)

    latency_ms: Optional[Union[NonNegativeInt, NonNegativeFloat]] = None
    error_kind: Optional[ProbeErrorKind] = None
    message: Optional[str] = None

    @model_validator(mode="after")
    def _check_outcome(self):
        if (self.latency_ms is None) == (self.error_kind is None):
            raise ValueError("ProbeResult needs exactly one of latency_ms or error_kind")
        return self

    @classmethod
    def success(cls, latency_ms: Union[int, float]) -> "ProbeResult":
        return cls(latency_ms=latency_ms)

    @classmethod
    def failure(cls, error_kind: ProbeErrorKind, message: str) -> "ProbeResult":
        return cls(error_kind=error_kind, message=message)

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    def describe(self) -> str:
        """
        Return the display text for this outcome, e.g. "14.2 ms" or "error: ...".
        """
        if self.ok:
            return f"{self.latency_ms} ms"
        return f"error: {self.message or ''}"
