"""
Generic result container for pylinreg computations.

Every backend returns a Result whose params field holds the domain payload
(LineParams, StatisticsParams). Metadata that would otherwise go to a log
travels with the result instead: info, timing, warnings, provenance.

Design decisions:
    - Generic over parameter payload P for type safety
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any
import platform

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Library and interpreter versions that produced a result."""
    from pylinreg import __version__

    return {
        'pylinreg_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Attributes:
        params: Domain-specific payload
        info: Structured metadata (method, n, device)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Versions of the software stack

    Examples:
        >>> Result(
        ...     params=LineParams(intercept=0.0, slope=2.0, ...),
        ...     info={'method': 'two_pass', 'n': 4},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_two_pass'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
