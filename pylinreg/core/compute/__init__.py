"""
Shared compute infrastructure for pylinreg.

Domain backends live in regression/backends/; this package holds only
what they share.

Submodules:
    device: Hardware detection and device selection
    timing: Execution timing
    tolerances: Expected agreement between compute paths
"""

from pylinreg.core.compute.device import (
    DeviceInfo,
    detect_gpu,
    get_cpu_info,
    select_device,
)
from pylinreg.core.compute.timing import Timer
from pylinreg.core.compute.tolerances import ToleranceTier, select_tolerance

__all__ = [
    "DeviceInfo",
    "detect_gpu",
    "get_cpu_info",
    "select_device",
    "Timer",
    "ToleranceTier",
    "select_tolerance",
]
