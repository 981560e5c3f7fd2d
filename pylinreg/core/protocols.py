"""
Core protocols for pylinreg.

Structural interfaces (Protocol, not ABC) that backends satisfy without
inheriting from anything.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pylinreg.core.result import Result

D = TypeVar('D', contravariant=True)  # Design type
P = TypeVar('P', covariant=True)  # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    A backend takes a validated design and produces a Result envelope.
    Backends are stateless: configuration is fixed at construction time,
    so one instance can serve any number of calls.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_two_pass'.
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.

        Raises:
            NumericalError: If the backend cannot produce a result
        """
        ...
