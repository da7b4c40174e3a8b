"""CLI entry point: reads measurements from stdin, prints a report to stdout."""

import sys

from .config import load_config
from .errors import ClimReportError
from .reader import parse_measurements
from .report_maker import make_report


def main() -> None:
    text = sys.stdin.read()
    if not text.strip():
        print("climreport: no measurements provided on stdin", file=sys.stderr)
        sys.exit(1)

    try:
        statistic, formalization = load_config().build()
        measurements = parse_measurements(text)
        report = make_report(measurements, statistic, formalization)
    except ClimReportError as exc:
        print(f"climreport: {exc}", file=sys.stderr)
        sys.exit(1)
    print(report)
