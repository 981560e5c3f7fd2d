"""
Tolerance tiers for numerical comparison.

Defines how closely each compute path is expected to agree with the
CPU float64 reference. Used by the test suite and by callers comparing
results across backends.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# CPU reference (two-pass, float64)
CPU_FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision reference',
)

# GPU with float64 (CUDA); reduction order differs from numpy
GPU_FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-10,
    name='gpu_fp64',
    description='GPU double precision, matches CPU up to summation order',
)

# GPU with float32 (MPS, or CUDA with use_fp64=False)
GPU_FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='gpu_fp32',
    description='GPU single precision',
)


def select_tolerance(backend_name: str) -> ToleranceTier:
    """Select the tolerance tier for a backend name such as 'gpu_two_pass_fp32'."""
    if 'gpu' in backend_name:
        if 'fp32' in backend_name:
            return GPU_FP32
        return GPU_FP64
    return CPU_FP64
