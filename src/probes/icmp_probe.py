import asyncio
import logging
from typing import Optional

from abstractions.output_parser import PingOutputParser
from abstractions.probe import Probe
from config.config import Config
from contracts.probe_request import ProbeVariant
from core.exceptions import ExternalToolError, ProbeTimeoutError
from probes.regex_ping_parser import RegexPingOutputParser

logger = logging.getLogger(__name__)


class IcmpProbe(Probe):
    """
    Measures latency by running the system ping tool for a single echo.
    """

    variant = ProbeVariant.ICMP
    deadline_error = ProbeTimeoutError

    def __init__(
        self,
        ping_binary: Optional[str] = None,
        parser: Optional[PingOutputParser] = None,
        timeout: float = Config.PROBE_TIMEOUT_SECONDS,
    ):
        self.ping_binary = ping_binary or Config.PING_BINARY
        self.parser = parser or RegexPingOutputParser()
        self.timeout = timeout

    @property
    def deadline_seconds(self) -> float:
        return self.timeout

    @property
    def timeout_seconds(self) -> float:
        return self.timeout

    def _deadline_message(self, target: str) -> str:
        return "Ping did not finish in time"

    def build_command(self, target: str) -> list[str]:
        return [self.ping_binary, "-c", "1", target]

    async def _probe(self, target: str) -> float:
        cmd = self.build_command(target)
        logger.debug(f"Running {' '.join(cmd)}")
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
            )
        except (OSError, ValueError) as e:
            # ValueError: arguments the OS cannot pass, e.g. an embedded NUL
            raise ExternalToolError(f"Failed to run {self.ping_binary}: {e}")

        try:
            stdout, _ = await proc.communicate()
        finally:
            # Cancelled by the deadline: the process must not outlive the probe.
            if proc.returncode is None:
                logger.warning(f"Killing ping process {proc.pid} for {target}")
                try:
                    proc.kill()
                except ProcessLookupError:
                    pass
                await proc.wait()

        output = stdout.decode(errors="replace")
        if proc.returncode != 0:
            lines = output.splitlines()
            first_line = lines[0].strip() if lines else ""
            raise ExternalToolError(first_line or "Failed to run ping")

        return self.parser.parse_latency(output)
