import asyncio
import logging
from datetime import datetime
from typing import Callable, List, Optional

from abstractions.probe import Probe
from config.config import Config
from contracts.history import HistoryEntry, SessionState
from core.exceptions import SessionBusyError
from core.metrics_manager import MetricsManager

logger = logging.getLogger(__name__)

EMPTY_ADDRESS_ERROR = "Enter an address to ping"


class PingSession:
    """
    Caller-side state around a probe: the current address, the busy flag,
    the last input error and the result history (newest first).

    At most one probe is in flight per session.
    """

    def __init__(
        self,
        probe: Probe,
        address: Optional[str] = None,
        metrics_manager: Optional[MetricsManager] = None,
        clock: Callable[[], datetime] = datetime.now,
        time_format: str = Config.HISTORY_TIME_FORMAT,
    ):
        self.probe = probe
        self.address = address if address is not None else Config.DEFAULT_ADDRESS
        self.metrics_manager = metrics_manager
        self.clock = clock
        self.time_format = time_format
        self.is_pinging = False
        self.error_text: Optional[str] = None
        self.results: List[HistoryEntry] = []
        self._task: Optional[asyncio.Task] = None

    def start(self, address: Optional[str] = None) -> Optional[asyncio.Task]:
        """
        Validate the address and schedule one probe.

        Args:
            address (Optional[str]): New address; keeps the current one if None.

        Returns:
            The task resolving to the new HistoryEntry, or None if the address
            is empty (error_text is set instead).

        Raises:
            SessionBusyError: If a probe is already in flight.
        """
        if self.is_pinging:
            raise SessionBusyError("A probe is already in progress")
        if address is not None:
            self.address = address
        host = self.address.strip()
        if not host:
            self.error_text = EMPTY_ADDRESS_ERROR
            logger.info("Rejected empty address")
            return None

        self.error_text = None
        self.is_pinging = True
        if self.metrics_manager:
            self.metrics_manager.probe_started()
        self._task = asyncio.create_task(self._run(host))
        return self._task

    async def _run(self, host: str) -> HistoryEntry:
        try:
            result = await self.probe.submit(host)
            entry = HistoryEntry(captured_at=self.clock(), target=host, result=result)
            self.results.insert(0, entry)
            if self.metrics_manager:
                self.metrics_manager.record_result(self.probe.variant.value, result)
            logger.info(entry.render(self.time_format))
            return entry
        finally:
            if self.metrics_manager:
                self.metrics_manager.probe_stopped()
            self.is_pinging = False
            self._task = None

    async def ping(self, address: Optional[str] = None) -> Optional[HistoryEntry]:
        """
        Run one probe and wait for its history entry.
        """
        task = self.start(address)
        if task is None:
            return None
        return await task

    def snapshot(self) -> SessionState:
        return SessionState(
            address=self.address,
            variant=self.probe.variant.value,
            is_pinging=self.is_pinging,
            error_text=self.error_text,
            results=[entry.render(self.time_format) for entry in self.results],
        )
