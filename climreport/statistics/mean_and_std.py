"""Statistic: arithmetic mean and sample standard deviation."""

from typing import Sequence

import numpy as np

from .base import Statistic
from .results import MeanAndStd


class MeanAndStdStatistic(Statistic):
    """Mean plus standard deviation with Bessel's correction.

    The deviation divides by ``n - 1``, so at least two values are needed.
    """

    caption = "Mean and Std"
    min_values = 2

    def compute_value(self, xs: Sequence[float]) -> MeanAndStd:
        self._require(xs)
        data = np.asarray(xs, dtype=float)
        return MeanAndStd(mean=float(data.mean()), std=float(data.std(ddof=1)))
