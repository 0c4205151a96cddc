import asyncio
from collections import deque

from abstractions.probe import Probe
from contracts.probe_request import ProbeVariant
from contracts.probe_result import ProbeResult


class FakeProbe(Probe):
    """
    script: iterable of latencies (numbers) or ProbeResult failures returned
    in order. Raises if called more often than scripted.
    """

    variant = ProbeVariant.ICMP

    def __init__(self, script=(), gate: asyncio.Event = None):
        self.script = deque(script)
        self.gate = gate
        self.calls = []

    @property
    def deadline_seconds(self) -> float:
        return 5.0

    @property
    def timeout_seconds(self) -> float:
        return 5.0

    async def measure(self, target: str) -> ProbeResult:
        self.calls.append(target)
        if self.gate is not None:
            await self.gate.wait()
        outcome = self.script.popleft()
        if isinstance(outcome, ProbeResult):
            return outcome
        return ProbeResult.success(outcome)

    async def _probe(self, target: str):
        raise NotImplementedError
