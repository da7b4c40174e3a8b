"""climreport-specific exceptions."""

from typing import Optional


class ClimReportError(Exception):
    """Base class for every error raised by climreport.

    The CLI catches this, prints the message and exits non-zero.
    """


class InsufficientDataError(ClimReportError):
    """Raised by a statistic whose input is shorter than it can reduce.

    ``field`` is filled in by the report orchestrator on the way out so the
    message names both the statistic and the measurement field.
    """

    def __init__(self, statistic: str, count: int, minimum: int) -> None:
        self.statistic = statistic
        self.count = count
        self.minimum = minimum
        self.field: Optional[str] = None
        super().__init__(statistic, count, minimum)

    def __str__(self) -> str:
        msg = (
            f"{self.statistic} needs at least {self.minimum} "
            f"value{'s' if self.minimum != 1 else ''}, got {self.count}"
        )
        if self.field is not None:
            msg += f" (field: {self.field})"
        return msg


class UnknownStrategyError(ClimReportError, KeyError):
    """Raised when a statistic or formalization key is not registered."""

    def __init__(self, kind: str, key: str, valid) -> None:
        self.kind = kind
        self.key = key
        self.valid = sorted(valid)
        super().__init__(kind, key)

    def __str__(self) -> str:
        return (
            f"unknown {self.kind} {self.key!r} "
            f"(valid: {', '.join(self.valid)})"
        )


class MeasurementFormatError(ClimReportError, ValueError):
    """Raised when a line of measurement input cannot be parsed."""

    def __init__(self, lineno: int, line: str) -> None:
        self.lineno = lineno
        self.line = line
        super().__init__(lineno, line)

    def __str__(self) -> str:
        return (
            f"line {self.lineno}: expected 'temperature humidity', "
            f"got {self.line!r}"
        )


class ConfigError(ClimReportError, ValueError):
    """Raised when a climreport configuration file cannot be used."""

    def __init__(self, origin: str, problem: str) -> None:
        self.origin = origin
        self.problem = problem
        super().__init__(origin, problem)

    def __str__(self) -> str:
        return f"{self.origin}: {self.problem}"
