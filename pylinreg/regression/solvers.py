"""
Solver dispatch for simple linear regression.

This module provides the public fit() and statistics() functions and
backend selection.
"""

from typing import Any, Literal

from pylinreg.core.capabilities import CAPABILITY_GPU_NATIVE
from pylinreg.core.compute.device import select_device
from pylinreg.regression._diagnostics import compute_statistics
from pylinreg.regression.design import LineDesign
from pylinreg.regression.solution import LineSolution, FitStatistics
from pylinreg.regression.backends.cpu import CPUTwoPassBackend


BackendChoice = Literal['auto', 'cpu', 'gpu', 'cpu_two_pass', 'gpu_two_pass']


def fit(
    x: Any,
    y: Any = None,
    *,
    backend: BackendChoice = 'auto',
) -> LineSolution:
    """
    Least-squares fit of the line y = intercept + slope * x.

    Args:
        x: Predictor values, or a LineDesign, or (when y is omitted) a
            sequence of (x, y) pairs / an (n, 2) array.
        y: Response values, same length as x.
        backend: Computational backend:
            - 'auto': GPU only if the inputs are already GPU tensors
            - 'cpu' / 'cpu_two_pass': numpy float64 reference
            - 'gpu' / 'gpu_two_pass': PyTorch on CUDA or MPS

    Returns:
        LineSolution with intercept, slope, predict() and summary()

    Raises:
        ValidationError: If inputs are not numeric
        DimensionError: If inputs are not 1-D, or samples are not pairs
        LengthMismatchError: If x and y differ in length
        InsufficientSamplesError: If fewer than two observations

    Zero variance in x is not an error: slope and intercept come back as
    inf/nan and the solution carries a warning.

    Example:
        >>> from pylinreg import fit
        >>> line = fit([1, 2, 3, 4], [2, 4, 6, 8])
        >>> line.intercept, line.slope
        (0.0, 2.0)
        >>> fit([(1, 2), (2, 4), (3, 6)]).slope
        2.0
    """
    # This is the boundary: validate here, trust everywhere else
    design = _build_design(x, y)
    backend_impl = _get_backend(backend, design)
    result = backend_impl.solve(design)
    return LineSolution(_result=result, _design=design)


def statistics(
    x: Any,
    y: Any = None,
    *,
    backend: BackendChoice = 'auto',
) -> FitStatistics:
    """
    Fit a line and report its standard errors, RSS, ESS and R-squared.

    Accepts the same inputs as fit() and raises the same errors.

    Returns:
        FitStatistics; as_tuple() gives
        (se_intercept, se_slope, rss, ess, r_squared)

    Zero variance in x yields non-finite standard errors; zero variance
    in y yields r_squared = nan. Neither raises.
    """
    design = _build_design(x, y)
    line = fit(design, backend=backend)
    result = compute_statistics(design, line.params)
    return FitStatistics(_result=result, _fit=line)


def _build_design(x: Any, y: Any) -> LineDesign:
    if isinstance(x, LineDesign):
        if y is not None:
            raise ValueError("y must be None when x is a LineDesign")
        return x
    if y is None:
        return LineDesign.from_pairs(x)
    return LineDesign.from_arrays(x, y)


def _get_backend(choice: BackendChoice, design: LineDesign):
    """
    Select and instantiate the backend.

    Raises:
        ValueError: If unknown backend specified
        RuntimeError: If GPU requested but unavailable
    """
    if choice == 'auto':
        if design.supports(CAPABILITY_GPU_NATIVE):
            device = select_device('auto')
            if device.is_gpu:
                from pylinreg.regression.backends.gpu import GPUTwoPassBackend
                return GPUTwoPassBackend(
                    use_fp64=device.supports_fp64,
                    device=device.device_type,
                )
        return CPUTwoPassBackend()

    elif choice in ('cpu', 'cpu_two_pass'):
        return CPUTwoPassBackend()

    elif choice in ('gpu', 'gpu_two_pass'):
        device = select_device('gpu')
        from pylinreg.regression.backends.gpu import GPUTwoPassBackend
        return GPUTwoPassBackend(
            use_fp64=device.supports_fp64,
            device=device.device_type,
        )

    else:
        raise ValueError(f"Unknown backend: {choice!r}")
