import argparse
import asyncio
import logging
import sys

from config.config import Config
from config.logging_config import setup_logging
from core.ping_session import PingSession
from core.probe_factory import ProbeFactory

# Set up logging at the start of the module
setup_logging()
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Measure round-trip latency to a host or URL once."
    )
    parser.add_argument(
        "address",
        nargs="?",
        default=Config.DEFAULT_ADDRESS,
        help=f"host or URL to probe (default: {Config.DEFAULT_ADDRESS})",
    )
    return parser


async def run(address: str) -> int:
    session = PingSession(ProbeFactory.create_probe(), address=address)
    entry = await session.ping()
    if entry is None:
        print(session.error_text, file=sys.stderr)
        return 2
    print(entry.render(session.time_format))
    return 0 if entry.result.ok else 1


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    return asyncio.run(run(args.address))


if __name__ == "__main__":
    sys.exit(main())
