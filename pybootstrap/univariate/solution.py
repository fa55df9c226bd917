"""
Solution wrapper for bootstrap results.

BootstrapSolution wraps Result[BootParams] and provides convenient
accessors and a summary table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pybootstrap.core.result import Result
from pybootstrap.tuples import Distribution, TupledDistributions
from pybootstrap.univariate._common import BootParams

if TYPE_CHECKING:
    from pybootstrap.univariate.design import BootstrapDesign


@dataclass
class BootstrapSolution:
    """
    User-facing bootstrap results.
    """
    _result: Result[BootParams]
    _design: 'BootstrapDesign'

    # --- Core fields ---

    @property
    def distributions(self) -> Distribution | TupledDistributions:
        """Distribution (scalar statistic) or TupledDistributions."""
        return self._result.params.distributions

    @property
    def fields(self) -> tuple[Distribution, ...]:
        """The distributions as a tuple, whatever the statistic's shape."""
        dists = self.distributions
        if isinstance(dists, TupledDistributions):
            return tuple(dists)
        return (dists,)

    @property
    def nresamples(self) -> int:
        return self._result.params.nresamples

    @property
    def arity(self) -> int:
        return self._result.params.arity

    # --- Metadata ---

    @property
    def strategy(self) -> str:
        """'sequential' or 'parallel'."""
        return self._result.info['strategy']

    @property
    def workers(self) -> int:
        return self._result.info['workers']

    @property
    def seed(self) -> int | None:
        return self._design.seed

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Display ---

    def summary(self, confidence_level: float = 0.95) -> str:
        """
        Per-field summary of the bootstrap distributions.

        Produces:
            TWO-SAMPLE BOOTSTRAP (R = 1000, parallel, 8 workers)

                         mean     std. error          lower          upper
                t1*  -2.50000        0.41000       -3.33333       -1.66667
        """
        lines = [
            f"\nTWO-SAMPLE BOOTSTRAP (R = {self.nresamples}, "
            f"{self.strategy}, {self.workers} workers)\n"
        ]

        if self.nresamples == 0:
            lines.append("No resamples drawn.")
            return "\n".join(lines)

        header = (
            f"{'':>8s} {'mean':>14s} {'std. error':>14s} "
            f"{'lower':>14s} {'upper':>14s}"
        )
        lines.append(header)

        for i, dist in enumerate(self.fields):
            label = f"t{i+1}*"
            se = dist.standard_error() if len(dist) > 1 else float('nan')
            lower, upper = dist.confidence_interval(confidence_level)
            lines.append(
                f"{label:>8s} {dist.mean():14.5f} {se:14.5f} "
                f"{lower:14.5f} {upper:14.5f}"
            )

        lines.append("")
        lines.append(f"{int(round(confidence_level * 100))}% percentile intervals")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"BootstrapSolution(R={self.nresamples}, k={self.arity}, "
            f"strategy={self.strategy!r}, backend={self.backend_name!r})"
        )
