"""Tests for the Statistic and Formalization base classes."""

import pytest

from climreport.errors import InsufficientDataError
from climreport.formalizations.base import Formalization
from climreport.formalizations.markdown import MarkdownFormalization
from climreport.statistics.base import Statistic
from climreport.statistics.median import MedianStatistic
from climreport.statistics.results import ScalarResult


class _Count(Statistic):
    caption = "Count"
    min_values = 3

    def compute_value(self, xs):
        self._require(xs)
        return ScalarResult(len(xs))


def test_statistic_is_abstract():
    with pytest.raises(TypeError):
        Statistic()


def test_formalization_is_abstract():
    with pytest.raises(TypeError):
        Formalization()


def test_name_returns_class_name():
    assert Statistic.name() == "Statistic"
    assert MedianStatistic.name() == "MedianStatistic"
    assert MarkdownFormalization.name() == "MarkdownFormalization"


def test_require_accepts_minimum():
    assert _Count().compute_value([1.0, 2.0, 3.0]) == ScalarResult(3)


def test_require_rejects_short_input():
    with pytest.raises(InsufficientDataError) as exc_info:
        _Count().compute_value([1.0, 2.0])
    exc = exc_info.value
    assert exc.statistic == "Count"
    assert exc.count == 2
    assert exc.minimum == 3
    assert exc.field is None
