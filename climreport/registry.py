"""Look up statistics and formalizations by their snake_case key."""

from typing import Dict, List, Type

from .errors import UnknownStrategyError
from .formalizations.base import Formalization
from .formalizations.html import (
    ClosedItemHtmlFormalization,
    EscapedHtmlFormalization,
    HtmlFormalization,
)
from .formalizations.markdown import MarkdownFormalization
from .statistics.base import Statistic
from .statistics.mean_and_std import MeanAndStdStatistic
from .statistics.median import ExactMedianStatistic, MedianStatistic

_STATISTICS: Dict[str, Type[Statistic]] = {
    "mean_and_std": MeanAndStdStatistic,
    "median": MedianStatistic,
    "exact_median": ExactMedianStatistic,
}

_FORMALIZATIONS: Dict[str, Type[Formalization]] = {
    "html": HtmlFormalization,
    "html_closed": ClosedItemHtmlFormalization,
    "html_escaped": EscapedHtmlFormalization,
    "markdown": MarkdownFormalization,
}


def _register(
    table: Dict[str, type], kind: str, key: str, cls: type, replace: bool
) -> None:
    if key in table and not replace:
        raise ValueError(f"{kind} {key!r} is already registered")
    table[key] = cls


def register_statistic(
    key: str, cls: Type[Statistic], replace: bool = False
) -> None:
    """Make *cls* available under *key*; existing keys need ``replace=True``."""
    _register(_STATISTICS, "statistic", key, cls, replace)


def register_formalization(
    key: str, cls: Type[Formalization], replace: bool = False
) -> None:
    """Make *cls* available under *key*; existing keys need ``replace=True``."""
    _register(_FORMALIZATIONS, "formalization", key, cls, replace)


def get_statistic(key: str) -> Statistic:
    try:
        cls = _STATISTICS[key]
    except KeyError:
        raise UnknownStrategyError("statistic", key, _STATISTICS) from None
    return cls()


def get_formalization(key: str) -> Formalization:
    try:
        cls = _FORMALIZATIONS[key]
    except KeyError:
        raise UnknownStrategyError("formalization", key, _FORMALIZATIONS) from None
    return cls()


def available_statistics() -> List[str]:
    return sorted(_STATISTICS)


def available_formalizations() -> List[str]:
    return sorted(_FORMALIZATIONS)
