"""
Backends satisfy the Backend protocol structurally.
"""

from pylinreg.core.protocols import Backend
from pylinreg.regression.backends import CPUTwoPassBackend


def test_cpu_backend_is_backend():
    assert isinstance(CPUTwoPassBackend(), Backend)


def test_object_without_solve_is_not_backend():
    class NoSolve:
        name = 'none'

    assert not isinstance(NoSolve(), Backend)
