import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Type, Union

from contracts.probe_request import ProbeRequest, ProbeVariant
from contracts.probe_result import ProbeResult
from core.exceptions import ProbeError, ProbeTimeoutError

logger = logging.getLogger(__name__)


class Probe(ABC):
    """
    Abstract base class for single-shot latency probes.

    Implementations hold no state between calls. Each measurement runs under
    an explicit deadline; when it expires the in-flight work is cancelled and
    the result is a failure of ``deadline_error``.
    """

    variant: ProbeVariant
    deadline_error: Type[ProbeError] = ProbeTimeoutError

    @property
    @abstractmethod
    def deadline_seconds(self) -> float:
        """
        Upper bound on the wall-clock duration of one measurement.
        """

    @property
    @abstractmethod
    def timeout_seconds(self) -> float:
        """
        The fixed per-attempt timeout this probe applies.
        """

    @abstractmethod
    async def _probe(self, target: str) -> Union[int, float]:
        """
        Perform one measurement against target.

        Args:
            target (str): Trimmed, non-empty host or URL.

        Returns:
            Latency in milliseconds.

        Raises:
            ProbeError: On any failure; never a placeholder latency.
        """

    def _deadline_message(self, target: str) -> str:
        return f"Probe of {target} did not finish within {self.deadline_seconds:g}s"

    async def measure(self, target: str) -> ProbeResult:
        """
        Measure latency to target once and return the outcome.

        Args:
            target (str): Trimmed, non-empty host or URL.

        Returns:
            ProbeResult: Success with the latency, or the failure reason.
        """
        try:
            try:
                latency = await asyncio.wait_for(
                    self._probe(target), timeout=self.deadline_seconds
                )
            except asyncio.TimeoutError:
                logger.warning(f"{self.variant.value} probe deadline exceeded for {target}")
                raise self.deadline_error(self._deadline_message(target))
        except ProbeError as e:
            logger.warning(
                f"{self.variant.value} probe failed for {target}: {e.kind.value}: {e.message}"
            )
            return ProbeResult.failure(e.kind, e.message)
        logger.info(f"{self.variant.value} probe of {target}: {latency} ms")
        return ProbeResult.success(latency)

    async def measure_request(self, request: ProbeRequest) -> ProbeResult:
        if request.variant != self.variant:
            raise ValueError(
                f"{type(self).__name__} cannot serve {request.variant.value} requests"
            )
        if request.timeout_seconds != self.timeout_seconds:
            raise ValueError(
                f"{type(self).__name__} runs with a fixed {self.timeout_seconds:g}s timeout, "
                f"got {request.timeout_seconds:g}s"
            )
        return await self.measure(request.target)

    def submit(self, target: str) -> "asyncio.Task[ProbeResult]":
        """
        Schedule measure(target) as a task on the running event loop.
        """
        return asyncio.create_task(self.measure(target))
