"""Adapter factory for creating host adapters."""

from typing import TYPE_CHECKING

from ..telemetry import get_logger

if TYPE_CHECKING:
    from pynvim import Nvim

    from .base import HostAdapter

logger = get_logger(__name__)


def create_adapter(adapter_type: str, nvim: "Nvim") -> "HostAdapter":
    """Create a host adapter.

    Args:
        adapter_type: Adapter type ("nvim")
        nvim: Attached pynvim session (the remote-plugin host passes one in)

    Returns:
        HostAdapter instance

    Raises:
        ValueError: If adapter type is unknown
    """
    if adapter_type == "nvim":
        from .nvim import NvimAdapter

        logger.debug("Creating nvim adapter")
        return NvimAdapter(nvim)

    raise ValueError(f"Unknown adapter type: {adapter_type}")
