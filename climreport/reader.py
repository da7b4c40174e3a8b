"""Parse measurement text (one ``temperature humidity`` pair per line)."""

import re
from typing import List

from .errors import MeasurementFormatError
from .measurement import Measurement

_SEPARATOR = re.compile(r"[\s,]+")


def parse_measurements(text: str) -> List[Measurement]:
    """Parse *text* into measurements, in line order.

    Values may be separated by whitespace or commas.  Blank lines and lines
    starting with ``#`` are skipped.  Raises MeasurementFormatError for any
    other line that is not exactly two numbers.
    """
    result: List[Measurement] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        fields = _SEPARATOR.split(line)
        if len(fields) != 2:
            raise MeasurementFormatError(lineno, raw)
        try:
            temperature, humidity = (float(v) for v in fields)
        except ValueError:
            raise MeasurementFormatError(lineno, raw) from None
        result.append(Measurement(temperature=temperature, humidity=humidity))
    return result
