import logging

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Gauge, Histogram

from contracts.probe_result import ProbeResult

logger = logging.getLogger(__name__)

LATENCY_BUCKETS_MS = (1, 5, 10, 25, 50, 100, 250, 500, 1000, 2500, 5000, 10000)


class MetricsManager:
    """
    Manager for recording probe outcomes and latencies as Prometheus metrics.
    """

    def __init__(self, registry: CollectorRegistry = REGISTRY):
        """
        Initialize the MetricsManager and set up Prometheus metrics.

        Args:
            registry: Collector registry to register metrics with. Tests pass a
                fresh CollectorRegistry to avoid duplicate registration.
        """
        self.registry = registry
        self.IN_FLIGHT = Gauge(
            "probe_in_flight", "Number of probes in flight", registry=registry
        )
        self.PROBE_RESULTS = Counter(
            "probe_results",
            "Probe outcomes by variant and result",
            ["variant", "outcome"],
            registry=registry,
        )
        self.PROBE_LATENCY = Histogram(
            "probe_latency_ms",
            "Measured probe latency in milliseconds",
            ["variant"],
            buckets=LATENCY_BUCKETS_MS,
            registry=registry,
        )
        logger.info("MetricsManager initialized.")

    def probe_started(self):
        self.IN_FLIGHT.inc()

    def probe_stopped(self):
        self.IN_FLIGHT.dec()

    def record_result(self, variant: str, result: ProbeResult):
        """
        Record the outcome of one probe.

        Args:
            variant (str): Probe variant name.
            result (ProbeResult): The probe outcome.
        """
        outcome = "success" if result.ok else result.error_kind.value
        self.PROBE_RESULTS.labels(variant=variant, outcome=outcome).inc()
        if result.ok:
            self.PROBE_LATENCY.labels(variant=variant).observe(result.latency_ms)
        logger.debug(f"Recorded {variant} probe outcome {outcome}")

    def get_in_flight(self):
        return self.IN_FLIGHT._value.get()

    def get_result_count(self, variant: str, outcome: str) -> float:
        return self.PROBE_RESULTS.labels(variant=variant, outcome=outcome)._value.get()
