from contracts.probe_result import ProbeErrorKind


class ProbeError(Exception):
    """
    Base class for probe failures. Each subclass maps to one ProbeErrorKind.
    """

    kind: ProbeErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ProbeTimeoutError(ProbeError):
    kind = ProbeErrorKind.TIMEOUT


class ExternalToolError(ProbeError):
    kind = ProbeErrorKind.EXTERNAL_TOOL_ERROR


class UnparsableOutputError(ProbeError):
    kind = ProbeErrorKind.UNPARSABLE_OUTPUT


class HttpStatusError(ProbeError):
    kind = ProbeErrorKind.HTTP_ERROR


class NetworkError(ProbeError):
    kind = ProbeErrorKind.NETWORK_ERROR


class SessionBusyError(Exception):
    """
    Raised when a probe is requested while another one is still in flight.
    """
