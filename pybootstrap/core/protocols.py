"""
Core protocols for pybootstrap.

Structural interfaces (Protocol rather than ABC) implemented by the resampling
backends.
"""

from typing import Protocol, TypeVar, runtime_checkable

P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for resampling backends.

    Each backend takes a frozen design and produces a Result envelope.
    Backends are stateless: all configuration is passed via the design
    or at construction time, which makes them easy to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{strategy}'
        Examples: 'cpu_sequential', 'cpu_parallel'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the resampling run.

        Args:
            design: Validated, frozen design

        Returns:
            Result envelope containing the payload and run metadata

        Raises:
            Whatever the user statistic raises; nothing is swallowed.
        """
        ...

