"""Tests for climreport.registry."""

from unittest.mock import patch

import pytest

from climreport import registry
from climreport.errors import UnknownStrategyError
from climreport.formalizations.html import (
    ClosedItemHtmlFormalization,
    EscapedHtmlFormalization,
    HtmlFormalization,
)
from climreport.formalizations.markdown import MarkdownFormalization
from climreport.statistics.mean_and_std import MeanAndStdStatistic
from climreport.statistics.median import ExactMedianStatistic, MedianStatistic


def test_available_statistics():
    assert registry.available_statistics() == ["exact_median", "mean_and_std", "median"]


def test_available_formalizations():
    assert registry.available_formalizations() == [
        "html",
        "html_closed",
        "html_escaped",
        "markdown",
    ]


@pytest.mark.parametrize(
    "key, cls",
    [
        ("mean_and_std", MeanAndStdStatistic),
        ("median", MedianStatistic),
        ("exact_median", ExactMedianStatistic),
    ],
)
def test_get_statistic(key, cls):
    assert type(registry.get_statistic(key)) is cls


@pytest.mark.parametrize(
    "key, cls",
    [
        ("html", HtmlFormalization),
        ("html_closed", ClosedItemHtmlFormalization),
        ("html_escaped", EscapedHtmlFormalization),
        ("markdown", MarkdownFormalization),
    ],
)
def test_get_formalization(key, cls):
    assert type(registry.get_formalization(key)) is cls


def test_get_unknown_statistic_raises():
    with pytest.raises(UnknownStrategyError) as exc_info:
        registry.get_statistic("mode")
    assert exc_info.value.key == "mode"
    assert str(exc_info.value) == (
        "unknown statistic 'mode' (valid: exact_median, mean_and_std, median)"
    )


def test_unknown_strategy_error_is_key_error():
    with pytest.raises(KeyError):
        registry.get_formalization("latex")


def test_register_statistic():
    class _Max(MedianStatistic):
        caption = "Maximum"

    with patch.dict(registry._STATISTICS):
        registry.register_statistic("max", _Max)
        assert type(registry.get_statistic("max")) is _Max
    assert "max" not in registry.available_statistics()


def test_register_existing_key_needs_replace():
    with patch.dict(registry._FORMALIZATIONS):
        with pytest.raises(ValueError, match="already registered"):
            registry.register_formalization("html", ClosedItemHtmlFormalization)
        registry.register_formalization(
            "html", ClosedItemHtmlFormalization, replace=True
        )
        assert type(registry.get_formalization("html")) is ClosedItemHtmlFormalization
    assert type(registry.get_formalization("html")) is HtmlFormalization
