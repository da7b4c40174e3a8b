"""Values produced by a statistic, each with its canonical text form."""

from dataclasses import dataclass
from typing import Union


def format_number(value: float) -> str:
    """Render *value* in its shortest general form (``2.0`` -> ``"2"``)."""
    return f"{float(value):.15g}"


@dataclass(frozen=True)
class ScalarResult:
    """A statistic that reduces to a single number, e.g. a median."""

    value: float

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class MeanAndStd:
    """Arithmetic mean together with the sample standard deviation."""

    mean: float
    std: float

    def __str__(self) -> str:
        return f"Mean = {format_number(self.mean)} Std = {format_number(self.std)}"


StatisticResult = Union[ScalarResult, MeanAndStd]
