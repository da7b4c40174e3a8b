"""Ready-made statistic and formalization pairings."""

from typing import Iterable

from .formalizations.html import HtmlFormalization
from .formalizations.markdown import MarkdownFormalization
from .measurement import Measurement
from .report_maker import make_report
from .statistics.mean_and_std import MeanAndStdStatistic
from .statistics.median import MedianStatistic


def mean_and_std_html_report(measurements: Iterable[Measurement]) -> str:
    return make_report(measurements, MeanAndStdStatistic(), HtmlFormalization())


def median_markdown_report(measurements: Iterable[Measurement]) -> str:
    return make_report(measurements, MedianStatistic(), MarkdownFormalization())


def mean_and_std_markdown_report(measurements: Iterable[Measurement]) -> str:
    return make_report(measurements, MeanAndStdStatistic(), MarkdownFormalization())


def median_html_report(measurements: Iterable[Measurement]) -> str:
    return make_report(measurements, MedianStatistic(), HtmlFormalization())
