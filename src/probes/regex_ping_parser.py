import re

from abstractions.output_parser import PingOutputParser
from core.exceptions import UnparsableOutputError

TIME_PATTERN = re.compile(r"time=([0-9.]+)\s*ms")


class RegexPingOutputParser(PingOutputParser):
    """
    Reads the first ``time=<n> ms`` token from iputils/BSD style ping output.
    """

    def __init__(self, pattern: re.Pattern = TIME_PATTERN):
        self.pattern = pattern

    def parse_latency(self, output: str) -> float:
        match = self.pattern.search(output)
        if match is None:
            raise UnparsableOutputError("Could not read the response time")
        try:
            return float(match.group(1))
        except ValueError:
            raise UnparsableOutputError(
                f"Could not read the response time from {match.group(0)!r}"
            )
