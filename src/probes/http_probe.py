import logging
import time

import httpx

from abstractions.probe import Probe
from config.config import Config
from contracts.probe_request import ProbeVariant
from core.exceptions import HttpStatusError, NetworkError

logger = logging.getLogger(__name__)


class HttpHeadProbe(Probe):
    """
    Measures latency as the wall-clock duration of one HEAD request,
    connection and TLS setup included.
    """

    variant = ProbeVariant.HTTP
    deadline_error = NetworkError

    def __init__(
        self,
        connect_timeout: float = Config.PROBE_TIMEOUT_SECONDS,
        read_timeout: float = Config.HTTP_READ_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport = None,  # Optional, used by tests
    ):
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self.transport = transport

    @property
    def deadline_seconds(self) -> float:
        return self.connect_timeout + self.read_timeout

    @property
    def timeout_seconds(self) -> float:
        return self.connect_timeout

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.read_timeout, connect=self.connect_timeout),
            follow_redirects=True,
            transport=self.transport,
        )

    async def _probe(self, target: str) -> int:
        try:
            async with self._client() as client:
                start = time.monotonic()
                resp = await client.head(target)
                elapsed_ms = int((time.monotonic() - start) * 1000)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise NetworkError(str(e) or type(e).__name__)

        if not resp.is_success:
            raise HttpStatusError(
                f"Unexpected code {resp.status_code} {resp.reason_phrase}".rstrip()
            )
        return elapsed_ms
