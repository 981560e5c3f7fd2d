"""
Capability string constants for pylinreg.

This module is the SINGLE SOURCE OF TRUTH for capability strings.
Import from here, never use raw strings.

Usage:
    from pylinreg.core.capabilities import CAPABILITY_GPU_NATIVE

    if design.supports(CAPABILITY_GPU_NATIVE):
        backend = GPUTwoPassBackend()
"""

# Inputs arrived as PyTorch tensors on a GPU device
CAPABILITY_GPU_NATIVE = 'gpu_native'

# Data can be traversed more than once (two-pass algorithms need this)
CAPABILITY_REPEATABLE = 'repeatable'

ALL_CAPABILITIES = frozenset({
    CAPABILITY_GPU_NATIVE,
    CAPABILITY_REPEATABLE,
})

__all__ = [
    'CAPABILITY_GPU_NATIVE',
    'CAPABILITY_REPEATABLE',
    'ALL_CAPABILITIES',
]
