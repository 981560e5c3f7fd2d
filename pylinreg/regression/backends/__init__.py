"""
Regression backends.

Available backends:
    CPUTwoPassBackend: CPU reference implementation (numpy, float64)
    GPUTwoPassBackend: PyTorch implementation, imported on demand
"""

from pylinreg.regression.backends.cpu import CPUTwoPassBackend

__all__ = [
    "CPUTwoPassBackend",
]
