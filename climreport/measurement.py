"""The two-field measurement record summarized by every report."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Measurement:
    """One sample: a temperature and a humidity reading."""

    temperature: float
    humidity: float


# (label, attribute) for each summarized field, in report order.
MEASUREMENT_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("Temperature", "temperature"),
    ("Humidity", "humidity"),
)
