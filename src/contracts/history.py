from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from contracts.probe_result import ProbeResult


class HistoryEntry(BaseModel):
    """
    A probe result stamped with the time the caller received it.
    """

    model_config = ConfigDict(frozen=True)

    captured_at: datetime
    target: str
    result: ProbeResult

    def render(self, time_format: str = "%H:%M:%S") -> str:
        return (
            f"{self.captured_at.strftime(time_format)} • {self.target} • "
            f"{self.result.describe()}"
        )


class SessionState(BaseModel):
    """
    Snapshot of a ping session as presented to its callers.
    """

    address: str
    variant: str
    is_pinging: bool = False
    error_text: Optional[str] = None
    results: List[str] = []


class PingRequest(BaseModel):
    address: Optional[str] = None


class PingResponse(BaseModel):
    entry: HistoryEntry
    line: str
    state: SessionState
