from abc import ABC, abstractmethod


class PingOutputParser(ABC):
    """
    Abstract base class for extracting a latency from ping tool output.
    """

    @abstractmethod
    def parse_latency(self, output: str) -> float:
        """
        Extract the round-trip time from the captured output of one echo.

        Args:
            output (str): Combined stdout/stderr text of the ping process.

        Returns:
            float: Latency in milliseconds.

        Raises:
            UnparsableOutputError: If no latency can be read from the output.
        """
