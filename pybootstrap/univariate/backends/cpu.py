"""
CPU backends for the two-sample bootstrap.

CPUSequentialBackend: one resample stream, evaluated in the calling thread.
CPUParallelBackend: the resample space split into contiguous shards, one
    per worker thread, merged back in shard order.

Both walk the same nested loop: ceil(sqrt(n)) resamples of `a`, each
paired with up to ceil(sqrt(n)) fresh resamples of `b`, stopping as soon
as the target count is reached. Resampling `a` then costs O(sqrt(n))
instead of O(n).
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable

import numpy as np

from pybootstrap.core.result import Result
from pybootstrap.core.compute.timing import Timer
from pybootstrap.tuples import TupledDistributionsBuilder
from pybootstrap.univariate._common import BootParams, ceil_sqrt, params_from
from pybootstrap.univariate.design import BootstrapDesign
from pybootstrap.univariate.resamples import Resamples
from pybootstrap.univariate.sample import Sample


def nested_resample(
    a_resamples: Resamples,
    b_resamples: Resamples,
    statistic: Callable[[Sample, Sample], Any],
    builder: TupledDistributionsBuilder,
    bound: int,
    count: int,
) -> TupledDistributionsBuilder:
    """
    Push exactly `count` statistic values into `builder`.

    Requires bound * bound >= count.
    """
    done = 0
    for _ in range(bound):
        if done == count:
            break
        a_resample = a_resamples.next()

        for _ in range(bound):
            if done == count:
                break
            builder.push(statistic(a_resample, b_resamples.next()))
            done += 1

    return builder


def _input_warnings(design: BootstrapDesign) -> list[str]:
    warnings_list: list[str] = []
    for name, sample in (('a', design.a), ('b', design.b)):
        if len(sample) == 1 and design.nresamples > 0:
            warnings_list.append(
                f"sample {name} has a single observation; "
                f"every resample of it is identical"
            )
    return warnings_list


class CPUSequentialBackend:
    """
    Single-threaded bootstrap.

    Both resample streams share one generator seeded from design.seed.
    """

    @property
    def name(self) -> str:
        return 'cpu_sequential'

    def solve(self, design: BootstrapDesign) -> Result[BootParams]:
        """Run the bootstrap and return Result[BootParams]."""
        timer = Timer()
        timer.start()

        n = design.nresamples
        bound = ceil_sqrt(n)
        rng = np.random.default_rng(design.seed)

        with timer.section('resampling'):
            builder = nested_resample(
                Resamples(design.a, rng=rng),
                Resamples(design.b, rng=rng),
                design.statistic,
                TupledDistributionsBuilder(n, arity=design.arity),
                bound,
                n,
            )

        with timer.section('complete'):
            params = params_from(builder.complete())

        timer.stop()

        return Result(
            params=params,
            info={
                'strategy': 'sequential',
                'workers': 1,
                'granularity': n,
                'sqrt_bound': bound,
                'n_a': len(design.a),
                'n_b': len(design.b),
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(_input_warnings(design)),
        )


class CPUParallelBackend:
    """
    Fork/join bootstrap over a thread pool.

    With w workers and g = n // w + 1, worker i produces the entries
    [i * g, min((i + 1) * g, n)) of the final distributions. Every worker
    owns its resample streams, its generator (spawned from one
    SeedSequence) and its builder; the only shared state is the two
    read-only samples and the statistic.

    Workers may be idle when n is small relative to w. An exception in
    any worker propagates after all workers have stopped; nothing partial
    is returned.
    """

    @property
    def name(self) -> str:
        return 'cpu_parallel'

    def solve(self, design: BootstrapDesign) -> Result[BootParams]:
        """Run the bootstrap and return Result[BootParams]."""
        timer = Timer()
        timer.start()

        n = design.nresamples
        workers = design.workers
        granularity = n // workers + 1
        bound = ceil_sqrt(granularity)
        seeds = np.random.SeedSequence(design.seed).spawn(workers)

        warnings_list = _input_warnings(design)
        if workers == 1:
            warnings_list.append(
                "parallel strategy requested with a single worker"
            )

        shards = []
        for i in range(workers):
            offset = i * granularity
            end = min(offset + granularity, n)
            shards.append(max(0, end - offset))

        with timer.section('resampling'):
            with ThreadPoolExecutor(max_workers=workers) as executor:
                futures = [
                    executor.submit(
                        self._run_shard, design, granularity, bound, count, seed,
                    )
                    for count, seed in zip(shards, seeds)
                ]
                # Index order, not completion order
                partials = [future.result() for future in futures]

        with timer.section('merge'):
            builder = TupledDistributionsBuilder(n, arity=design.arity)
            for partial in partials:
                builder.extend(partial)

        with timer.section('complete'):
            params = params_from(builder.complete())

        timer.stop()

        return Result(
            params=params,
            info={
                'strategy': 'parallel',
                'workers': workers,
                'granularity': granularity,
                'sqrt_bound': bound,
                'shard_sizes': tuple(shards),
                'n_a': len(design.a),
                'n_b': len(design.b),
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    @staticmethod
    def _run_shard(
        design: BootstrapDesign,
        granularity: int,
        bound: int,
        count: int,
        seed: np.random.SeedSequence,
    ) -> TupledDistributionsBuilder:
        rng = np.random.default_rng(seed)
        return nested_resample(
            Resamples(design.a, rng=rng),
            Resamples(design.b, rng=rng),
            design.statistic,
            TupledDistributionsBuilder(granularity, arity=design.arity),
            bound,
            count,
        )
