"""Abstract base class for statistic strategies."""

from abc import ABC, abstractmethod
from typing import Sequence

from ..errors import InsufficientDataError
from .results import StatisticResult


class Statistic(ABC):
    """Base class for all statistics a report can summarize with.

    Subclasses set ``caption`` (used as the report title) and implement
    ``compute_value``, a pure reduction of a numeric sequence.  Instances
    carry no state, so one instance may be shared between reports.
    """

    caption: str = ""
    # Shortest input compute_value accepts.
    min_values: int = 1

    @abstractmethod
    def compute_value(self, xs: Sequence[float]) -> StatisticResult:
        """Reduce *xs* to a summary result."""

    def _require(self, xs: Sequence[float]) -> None:
        """Raise InsufficientDataError if *xs* is shorter than min_values."""
        if len(xs) < self.min_values:
            raise InsufficientDataError(self.caption, len(xs), self.min_values)

    @classmethod
    def name(cls) -> str:
        return cls.__name__
