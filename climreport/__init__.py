"""Statistical reports over temperature and humidity measurements."""

from .measurement import Measurement
from .report_maker import make_report
from .reports import (
    mean_and_std_html_report,
    mean_and_std_markdown_report,
    median_html_report,
    median_markdown_report,
)

__all__ = [
    "Measurement",
    "make_report",
    "mean_and_std_html_report",
    "mean_and_std_markdown_report",
    "median_html_report",
    "median_markdown_report",
]
