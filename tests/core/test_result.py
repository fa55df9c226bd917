"""
Tests for the Result[P] envelope and the Timer.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - has_warning() method
    - Timer sections accumulate and guard misuse
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pybootstrap.core.compute.timing import Timer
from pybootstrap.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResult:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"strategy": "sequential"},
            timing={"total_seconds": 0.01},
            backend_name="cpu_sequential",
        )
        assert result.params.value == 42.0
        assert result.info["strategy"] == "sequential"
        assert result.backend_name == "cpu_sequential"
        assert result.warnings == ()

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="x")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "y"

    def test_has_warning(self):
        result = Result(
            params=FakeParams(1.0),
            info={},
            timing=None,
            backend_name="x",
            warnings=("sample a has a single observation",),
        )
        assert result.has_warning("single observation")
        assert not result.has_warning("worker")


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section("resampling"):
            pass
        with timer.section("resampling"):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {"total_seconds", "resampling"}
        assert result["resampling"] >= 0.0

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()


class TestProtocols:

    def test_backends_satisfy_protocol(self):
        from pybootstrap.core.protocols import Backend
        from pybootstrap.univariate.backends import CPUParallelBackend, CPUSequentialBackend

        assert isinstance(CPUSequentialBackend(), Backend)
        assert isinstance(CPUParallelBackend(), Backend)
