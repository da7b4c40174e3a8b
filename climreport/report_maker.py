"""Combine one statistic with one formalization into a report string."""

from typing import Any, Iterable, List, Protocol, Sequence

from .errors import InsufficientDataError
from .measurement import MEASUREMENT_FIELDS, Measurement


class StatisticLike(Protocol):
    """Anything with a caption and a reduction; Statistic subclasses qualify."""

    caption: str

    def compute_value(self, xs: Sequence[float]) -> Any: ...


class FormalizationLike(Protocol):
    """The four rendering operations; Formalization subclasses qualify."""

    def make_caption(self, caption: str) -> str: ...

    def begin_list(self) -> str: ...

    def make_item(self, label: str, value_text: str) -> str: ...

    def end_list(self) -> str: ...


def _field_item(
    label: str,
    values: List[float],
    statistic: StatisticLike,
    formalization: FormalizationLike,
) -> str:
    """Render one list item holding *statistic* over a single field."""
    try:
        result = statistic.compute_value(values)
    except InsufficientDataError as exc:
        exc.field = label
        raise
    return formalization.make_item(label, str(result))


def make_report(
    measurements: Iterable[Measurement],
    statistic: StatisticLike,
    formalization: FormalizationLike,
) -> str:
    """Build a report summarizing every measurement field with *statistic*.

    *measurements* is consumed exactly once and never modified.  Fields are
    always emitted Temperature first, then Humidity.  Errors raised by the
    statistic propagate unchanged; no partial report is returned.
    """
    records = list(measurements)
    parts = [
        formalization.make_caption(statistic.caption),
        formalization.begin_list(),
    ]
    for label, attribute in MEASUREMENT_FIELDS:
        values = [getattr(m, attribute) for m in records]
        parts.append(_field_item(label, values, statistic, formalization))
    parts.append(formalization.end_list())
    return "".join(parts)
