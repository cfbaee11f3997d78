"""Value parsers for percentage answers, photo names and attachment URLs."""

import re
from typing import Any, Optional, Union

Number = Union[int, float]

# Leading decimal number, the way a lenient float parse reads "45%" or "12.5 m"
_LEADING_NUMBER = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")
_FORMAT_JSON_SUFFIX = re.compile(r"\?format=json$", re.IGNORECASE)
_NAMESPACE_PREFIX = "uuid:"


def as_number(value: float) -> Number:
    """Collapse integral floats to int so 60.0 renders as 60."""
    return int(value) if value.is_integer() else value


def parse_number(value: Any) -> Number:
    """
    Read a numeric answer leniently: numbers pass through, strings are read up to the
    first non-numeric character. Anything else is 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        if value != value or value in (float("inf"), float("-inf")):
            return 0
        return as_number(float(value))
    match = _LEADING_NUMBER.match(str(value))
    if not match:
        return 0
    return as_number(float(match.group(1)))


def _strict_number(text: str) -> Optional[float]:
    # An empty side of a range reads as 0
    if not text.strip():
        return 0.0
    try:
        number = float(text)
    except ValueError:
        return None
    if number != number or number in (float("inf"), float("-inf")):
        return None
    return number


def parse_percentage(value: Any) -> Number:
    """
    Decode a percentage answer that is either a bare number or a `low_high` range.
    Ranges report their upper bound ("25_50" -> 50). Absent or unparsable -> 0.
    """
    if value is None or value == "" or value is False:
        return 0
    raw = str(value)
    if "_" in raw:
        parts = raw.split("_")
        if len(parts) == 2:
            low, high = _strict_number(parts[0]), _strict_number(parts[1])
            if low is not None and high is not None:
                return as_number(high)
    return parse_number(raw)


def resolve_cover_range(minimum: Any, maximum: Any) -> Number:
    """Percentage from a min/max answer pair: maximum if usable, else minimum, else 0."""
    return parse_percentage(maximum) or parse_percentage(minimum) or 0


def image_name(identifier: str, direction: str, original_filename: Any) -> str:
    """
    Storage filename for a direction photo: `{identifier}-{direction}.jpg`.
    Empty when no photo was captured for that direction.
    """
    if not original_filename:
        return ""
    clean = (identifier or "").replace(_NAMESPACE_PREFIX, "", 1)
    return f"{clean}-{direction.lower()}.jpg"


def strip_format_query(url: Optional[str]) -> str:
    """Drop the trailing `?format=json` the attachment API appends to download URLs."""
    if not url:
        return ""
    return _FORMAT_JSON_SUFFIX.sub("", url)
