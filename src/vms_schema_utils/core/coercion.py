"""Input coercion helpers shared by the field factories.

Each helper returns ``None`` when the input cannot be coerced, leaving the
choice between "use the default" and "fail" to the caller.
"""

from __future__ import annotations

import copy
import math
import numbers
from datetime import date, datetime, time, timezone
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

# Beyond this magnitude a float carries no fractional digits worth rounding
_ROUNDING_LIMIT = 1e15


def is_blank(value: Any) -> bool:
    """True for ``None`` and strings that are empty after trimming."""
    return value is None or (isinstance(value, str) and not value.strip())


def clean_string(value: Any) -> str:
    """Trim a string; anything that is not a string becomes ``""``."""
    return value.strip() if isinstance(value, str) else ""


def to_number(value: Any) -> int | float | None:
    """Coerce numbers and numeric strings, rejecting booleans and non-finite values.

    >>> to_number(" 42 ")
    42
    >>> to_number("4.5")
    4.5
    >>> to_number("abc") is None
    True
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, (numbers.Real, Decimal)):
        number = float(value)
        return number if math.isfinite(number) else None
    if isinstance(value, str):
        text = value.strip()
        if not text or "_" in text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def to_bool(value: Any) -> bool | None:
    """Accept booleans and the strings ``"true"``/``"false"`` in any case."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text == "true":
            return True
        if text == "false":
            return False
    return None


def round_fixed(value: float, places: int) -> float:
    """Round half away from zero to ``places`` decimals.

    Works on the exact binary value of the float, so the result matches
    fixed-point formatting of the same number (``12.1234567`` -> ``12.123457``).
    """
    if not math.isfinite(value) or abs(value) >= _ROUNDING_LIMIT:
        return float(value)
    quantum = Decimal(1).scaleb(-places)
    # Below the limit the integer part has at most 15 digits.
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, places + 17)
        return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def parse_iso(value: Any) -> datetime | None:
    """Parse an ISO-8601 date or datetime string, or pass through date objects."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def as_utc(moment: datetime) -> datetime:
    """Make a datetime comparable: naive values are taken as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def iso_string(value: Any) -> str:
    """Render an accepted date input as its ISO string."""
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value).strip()


def now_iso() -> str:
    """Current UTC time as an ISO string with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def fresh(value: Any) -> Any:
    """Independent copy of a default so callers never share mutable state."""
    return copy.deepcopy(value)


def format_bound(number: int | float) -> str:
    """Display a numeric bound the way users type it (``1e9`` -> ``1000000000``)."""
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)
