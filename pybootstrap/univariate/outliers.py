"""
Tukey's fences for outlier classification.

Points beyond Q1 - 1.5 IQR or Q3 + 1.5 IQR are mild outliers; beyond
3 IQR they are severe.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

import numpy as np
from numpy.typing import NDArray

from pybootstrap.univariate.sample import Sample

MILD_FACTOR = 1.5
SEVERE_FACTOR = 3.0


class Label(str, Enum):
    LOW_SEVERE = "low_severe"
    LOW_MILD = "low_mild"
    NOT_AN_OUTLIER = "not_an_outlier"
    HIGH_MILD = "high_mild"
    HIGH_SEVERE = "high_severe"

    @property
    def is_outlier(self) -> bool:
        return self is not Label.NOT_AN_OUTLIER

    @property
    def is_severe(self) -> bool:
        return self in (Label.LOW_SEVERE, Label.HIGH_SEVERE)


@dataclass(frozen=True)
class Fences:
    """Classification thresholds, in ascending order."""
    low_severe: float
    low_mild: float
    high_mild: float
    high_severe: float

    def classify(self, x: float) -> Label:
        if x < self.low_severe:
            return Label.LOW_SEVERE
        if x < self.low_mild:
            return Label.LOW_MILD
        if x > self.high_severe:
            return Label.HIGH_SEVERE
        if x > self.high_mild:
            return Label.HIGH_MILD
        return Label.NOT_AN_OUTLIER


@dataclass(frozen=True)
class LabeledSample:
    """
    A sample with one Label per observation, in sample order.
    """
    sample: Sample
    fences: Fences
    labels: tuple[Label, ...]

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self) -> Iterator[tuple[float, Label]]:
        return zip((float(x) for x in self.sample), self.labels)

    def count(self) -> dict[Label, int]:
        """Number of observations per label (every label present)."""
        counts = {label: 0 for label in Label}
        for label in self.labels:
            counts[label] += 1
        return counts

    @property
    def n_outliers(self) -> int:
        return sum(1 for label in self.labels if label.is_outlier)

    def outlier_mask(self) -> NDArray[np.bool_]:
        return np.array([label.is_outlier for label in self.labels], dtype=bool)


def tukey(sample: Sample) -> LabeledSample:
    """
    Classify every observation of `sample` with Tukey's fences.

    Args:
        sample: Sample with at least one observation

    Returns:
        LabeledSample with fences derived from the sample quartiles
    """
    if not isinstance(sample, Sample):
        sample = Sample(sample)
    q1, _, q3 = sample.percentiles().quartiles
    iqr = q3 - q1
    fences = Fences(
        low_severe=q1 - SEVERE_FACTOR * iqr,
        low_mild=q1 - MILD_FACTOR * iqr,
        high_mild=q3 + MILD_FACTOR * iqr,
        high_severe=q3 + SEVERE_FACTOR * iqr,
    )
    labels = tuple(fences.classify(float(x)) for x in sample)
    return LabeledSample(sample=sample, fences=fences, labels=labels)
