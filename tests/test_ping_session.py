import asyncio
import unittest
from datetime import datetime

from prometheus_client import CollectorRegistry

from contracts.probe_result import ProbeErrorKind, ProbeResult
from core.exceptions import SessionBusyError
from core.metrics_manager import MetricsManager
from core.ping_session import EMPTY_ADDRESS_ERROR, PingSession
from fake_probe import FakeProbe


def fixed_clock():
    return datetime(2024, 5, 1, 12, 30, 45)


class TestPingSession(unittest.IsolatedAsyncioTestCase):
    async def test_empty_address_is_rejected_before_probe(self):
        probe = FakeProbe()
        session = PingSession(probe, address="   ")
        entry = await session.ping()
        self.assertIsNone(entry)
        self.assertEqual(session.error_text, EMPTY_ADDRESS_ERROR)
        self.assertEqual(probe.calls, [])
        self.assertFalse(session.is_pinging)
        self.assertEqual(session.results, [])

    async def test_address_is_trimmed(self):
        probe = FakeProbe([14.2])
        session = PingSession(probe, clock=fixed_clock)
        entry = await session.ping("  8.8.8.8 \n")
        self.assertEqual(probe.calls, ["8.8.8.8"])
        self.assertEqual(entry.target, "8.8.8.8")
        self.assertEqual(entry.render(), "12:30:45 • 8.8.8.8 • 14.2 ms")

    async def test_error_text_cleared_on_next_valid_ping(self):
        session = PingSession(FakeProbe([1.0]))
        await session.ping("")
        self.assertEqual(session.error_text, EMPTY_ADDRESS_ERROR)
        await session.ping("1.1.1.1")
        self.assertIsNone(session.error_text)

    async def test_results_are_prepended(self):
        session = PingSession(
            FakeProbe([10.0, ProbeResult.failure(ProbeErrorKind.TIMEOUT, "Ping did not finish in time")]),
            address="8.8.8.8",
            clock=fixed_clock,
        )
        await session.ping()
        await session.ping()
        self.assertEqual(len(session.results), 2)
        self.assertFalse(session.results[0].result.ok)
        self.assertTrue(session.results[1].result.ok)
        self.assertEqual(
            session.snapshot().results,
            [
                "12:30:45 • 8.8.8.8 • error: Ping did not finish in time",
                "12:30:45 • 8.8.8.8 • 10.0 ms",
            ],
        )

    async def test_single_flight(self):
        gate = asyncio.Event()
        session = PingSession(FakeProbe([5.0], gate=gate), address="8.8.8.8")
        task = session.start()
        await asyncio.sleep(0)
        self.assertTrue(session.is_pinging)
        self.assertTrue(session.snapshot().is_pinging)
        with self.assertRaises(SessionBusyError):
            session.start()
        gate.set()
        entry = await task
        self.assertEqual(entry.result.latency_ms, 5.0)
        self.assertFalse(session.is_pinging)
        self.assertEqual(len(session.results), 1)

    async def test_busy_flag_reset_after_failure(self):
        session = PingSession(
            FakeProbe([ProbeResult.failure(ProbeErrorKind.NETWORK_ERROR, "boom"), 2.0]),
            address="https://example.com",
        )
        first = await session.ping()
        self.assertFalse(session.is_pinging)
        self.assertEqual(first.result.message, "boom")
        second = await session.ping()
        self.assertTrue(second.result.ok)

    async def test_capture_time_is_assigned_by_session(self):
        times = iter([datetime(2024, 1, 1, 8, 0, 0), datetime(2024, 1, 1, 8, 0, 5)])
        session = PingSession(FakeProbe([1.0, 2.0]), address="h", clock=lambda: next(times))
        await session.ping()
        await session.ping()
        self.assertEqual(session.results[0].captured_at.second, 5)
        self.assertEqual(session.results[1].captured_at.second, 0)

    async def test_metrics_recorded(self):
        metrics = MetricsManager(registry=CollectorRegistry())
        session = PingSession(
            FakeProbe([3.0, ProbeResult.failure(ProbeErrorKind.UNPARSABLE_OUTPUT, "x")]),
            address="8.8.8.8",
            metrics_manager=metrics,
        )
        await session.ping()
        await session.ping()
        self.assertEqual(metrics.get_result_count("icmp", "success"), 1)
        self.assertEqual(metrics.get_result_count("icmp", "unparsable_output"), 1)
        self.assertEqual(metrics.get_in_flight(), 0)

    def test_default_address_from_config(self):
        session = PingSession(FakeProbe())
        self.assertEqual(session.snapshot().address, "8.8.8.8")
        self.assertEqual(session.snapshot().variant, "icmp")


if __name__ == "__main__":
    unittest.main()
