"""
Probe factory for creating the configured probe variant.
"""
import logging
from typing import Optional

from abstractions.probe import Probe
from config.config import Config
from contracts.probe_request import ProbeVariant
from probes.http_probe import HttpHeadProbe
from probes.icmp_probe import IcmpProbe

logger = logging.getLogger(__name__)


class ProbeFactory:
    """
    Factory class for creating probe instances.
    """

    @staticmethod
    def create_probe(variant: Optional[str] = None, **kwargs) -> Probe:
        """
        Create a probe instance based on configuration.

        Args:
            variant (Optional[str]): Probe variant ("icmp" or "http").
                                     If None, uses Config.PROBE_VARIANT.
            **kwargs: Additional keyword arguments for the probe constructor.

        Returns:
            Probe: A probe instance.

        Raises:
            ValueError: If an unsupported variant is specified.
        """
        variant = (variant or Config.PROBE_VARIANT).lower()
        logger.info(f"Creating {variant} probe")

        if variant == ProbeVariant.ICMP.value:
            return IcmpProbe(**kwargs)
        elif variant == ProbeVariant.HTTP.value:
            return HttpHeadProbe(**kwargs)
        else:
            supported_types = [v.value for v in ProbeVariant]
            raise ValueError(
                f"Unsupported probe variant: {variant}. "
                f"Supported variants: {supported_types}"
            )


def get_default_probe() -> Probe:
    """
    Get the probe for the configured variant.
    """
    return ProbeFactory.create_probe()
