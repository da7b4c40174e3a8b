"""Statistics: median of a series."""

from typing import Sequence

import numpy as np

from .base import Statistic
from .results import ScalarResult


class MedianStatistic(Statistic):
    """Median as reports have always computed it.

    For an even count the two central values are averaged and the result
    truncated toward zero: ``[1, 2, 3, 4]`` gives 2, not 2.5, and
    ``[-2, -1]`` gives -1.  Use ExactMedianStatistic for the textbook value.
    """

    caption = "Median"

    def compute_value(self, xs: Sequence[float]) -> ScalarResult:
        self._require(xs)
        ordered = np.sort(np.asarray(xs, dtype=float))
        middle = len(ordered) // 2
        if len(ordered) % 2:
            return ScalarResult(float(ordered[middle]))
        halved = (ordered[middle] + ordered[middle - 1]) / 2
        # + 0.0 folds a truncated -0.0 into 0.0
        return ScalarResult(float(np.trunc(halved)) + 0.0)


class ExactMedianStatistic(Statistic):
    """Textbook median: the mean of the two central values for even counts."""

    caption = "Exact Median"

    def compute_value(self, xs: Sequence[float]) -> ScalarResult:
        self._require(xs)
        return ScalarResult(float(np.median(np.asarray(xs, dtype=float))))
