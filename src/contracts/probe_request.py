from enum import Enum

from pydantic import BaseModel, ConfigDict

from config.config import PROBE_TIMEOUT_SECONDS


class ProbeVariant(str, Enum):
    """
    Supported latency probe variants.
    """

    ICMP = "icmp"
    HTTP = "http"


class ProbeRequest(BaseModel):
    """
    A single latency measurement request against one target.
    """

    model_config = ConfigDict(frozen=True)

    target: str
    variant: ProbeVariant
    timeout_seconds: float = PROBE_TIMEOUT_SECONDS
