import os

# Probe parameters are fixed, not environment-tunable.
PROBE_TIMEOUT_SECONDS = 5.0
HTTP_READ_TIMEOUT_SECONDS = 10.0

DEFAULT_ADDRESSES = {
    "icmp": "8.8.8.8",
    "http": "https://google.com",
}


class Config:
    """
    Configuration class for environment variables and default settings.
    """

    # Probe variant is fixed per deployment: "icmp" or "http"
    PROBE_VARIANT = os.environ.get("PROBE_VARIANT", "icmp").lower()
    PING_BINARY = os.environ.get("PING_BINARY", "ping")
    DEFAULT_ADDRESS = os.environ.get(
        "DEFAULT_ADDRESS", DEFAULT_ADDRESSES.get(PROBE_VARIANT, "8.8.8.8")
    )
    HISTORY_TIME_FORMAT = os.environ.get("HISTORY_TIME_FORMAT", "%H:%M:%S")

    PROBE_TIMEOUT_SECONDS = PROBE_TIMEOUT_SECONDS
    HTTP_READ_TIMEOUT_SECONDS = HTTP_READ_TIMEOUT_SECONDS
