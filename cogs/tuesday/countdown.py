"""Countdown to the next occurrence of a weekday.

All functions are pure except countdown_message, which reads the local
clock once when no ``now`` is supplied.
"""

import calendar
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Optional

from .constants import TUESDAY, WEEKDAY_NAMES
from .units import UnitMatcher, extract_multiplier


def days_until(weekday: int, target: int) -> int:
    """Days from ``weekday`` to the next ``target`` weekday (Monday=0).

    Always 1-7: on the target day itself the next one is a week away.
    """
    return (target - weekday - 1) % 7 + 1


def first_weekday_of_january(year: int, target: int) -> date:
    """Date of the first ``target`` weekday in January of ``year``."""
    new_year = date(year, 1, 1)
    return new_year + timedelta(days=(target - new_year.weekday()) % 7)


def next_occurrence(now: datetime, target: int = TUESDAY) -> datetime:
    """Midnight at the start of the next ``target`` weekday after ``now``.

    If stepping forward runs past the end of the year, the first matching
    weekday of the following January is used. The result keeps ``now``'s tzinfo.
    """
    ordinal = now.timetuple().tm_yday + days_until(now.weekday(), target)
    days_in_year = 366 if calendar.isleap(now.year) else 365

    if ordinal > days_in_year:
        day = first_weekday_of_january(now.year + 1, target)
    else:
        day = date(now.year, 1, 1) + timedelta(days=ordinal - 1)

    return datetime.combine(day, time.min, tzinfo=now.tzinfo)


def milliseconds_until(now: datetime, then: datetime) -> int:
    """Signed whole milliseconds from ``now`` to ``then``, truncated toward zero."""
    diff = then - now
    micros = (diff.days * 86400 + diff.seconds) * 1_000_000 + diff.microseconds
    millis = abs(micros) // 1000
    return millis if micros >= 0 else -millis


def format_count(count: float) -> str:
    """Render a count in plain decimal digits, dropping the ``.0`` of whole numbers.

    Uses the shortest round-trip digits, never an exponent.
    """
    text = format(Decimal(repr(count)), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_countdown(diff_ms: int, multiplier: float, unit_label: str, target: int = TUESDAY) -> str:
    """Build the sentence e.g. ``"156 hours until Tuesday."``."""
    count = diff_ms / multiplier
    return f"{format_count(count)} {unit_label} until {WEEKDAY_NAMES[target]}."


def countdown_message(
    text: str,
    matcher: UnitMatcher,
    now: Optional[datetime] = None,
    target: int = TUESDAY,
) -> str:
    """Countdown sentence for a message, in the unit the message asks for.

    Args:
        text: Lowercase message content
        matcher: Compiled unit tables
        now: Current local time; read from the clock when omitted
        target: Weekday to count down to (Monday=0)

    Returns:
        The reply sentence, without any role mention
    """
    if now is None:
        now = datetime.now()

    diff_ms = milliseconds_until(now, next_occurrence(now, target))
    multiplier, unit_label = extract_multiplier(text, matcher)
    return format_countdown(diff_ms, multiplier, unit_label, target)
