"""Unit extraction for countdown replies.

Turns free text such as "how many kiloseconds until tuesday" into a divisor
for a millisecond duration plus the label to print next to the result.
"""

import re
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .constants import TIME_UNITS, SI_PREFIXES, DEFAULT_TIME_INDEX, BASE_POWER


@dataclass(frozen=True)
class UnitMatcher:
    """Compiled duration and prefix patterns.

    Built once when the cog loads and shared read-only afterwards.

    Attributes:
        time_patterns: One compiled pattern per duration unit, in table order
        time_plurals: Plural display name per duration unit
        time_seconds: Length of each duration unit in seconds
        si_patterns: One compiled pattern per metric prefix, in table order
        si_names: Alias of each metric prefix
        si_powers: Power of ten of each metric prefix
        default_index: Duration unit used when the text names none
    """
    time_patterns: Tuple[re.Pattern, ...]
    time_plurals: Tuple[str, ...]
    time_seconds: Tuple[int, ...]
    si_patterns: Tuple[re.Pattern, ...]
    si_names: Tuple[str, ...]
    si_powers: Tuple[int, ...]
    default_index: int = DEFAULT_TIME_INDEX

    def time_matches(self, text: str) -> List[int]:
        """Indices of every duration unit found in ``text``."""
        return [i for i, pattern in enumerate(self.time_patterns) if pattern.search(text)]

    def si_matches(self, text: str) -> List[int]:
        """Indices of every metric prefix found in ``text``."""
        return [i for i, pattern in enumerate(self.si_patterns) if pattern.search(text)]


def build_unit_matcher(
    time_units: Sequence[Tuple[str, str, int]] = TIME_UNITS,
    prefixes: Sequence[Tuple[str, int]] = SI_PREFIXES,
    default_index: int = DEFAULT_TIME_INDEX,
) -> UnitMatcher:
    """Compile the unit tables into a UnitMatcher.

    Args:
        time_units: (pattern, plural, seconds) rows, smallest unit first
        prefixes: (alias, power) rows
        default_index: Row of ``time_units`` used when nothing matches

    Returns:
        UnitMatcher ready for extract_multiplier

    Raises:
        re.error: If a pattern is malformed
        ValueError: If the tables are empty or default_index is out of range
    """
    if not time_units:
        raise ValueError("At least one duration unit is required")
    if not 0 <= default_index < len(time_units):
        raise ValueError(f"default_index {default_index} out of range for {len(time_units)} units")

    return UnitMatcher(
        time_patterns=tuple(re.compile(pattern) for pattern, _, _ in time_units),
        time_plurals=tuple(plural for _, plural, _ in time_units),
        time_seconds=tuple(seconds for _, _, seconds in time_units),
        si_patterns=tuple(re.compile(alias) for alias, _ in prefixes),
        si_names=tuple(alias for alias, _ in prefixes),
        si_powers=tuple(power for _, power in prefixes),
        default_index=default_index,
    )


def extract_multiplier(text: str, matcher: UnitMatcher) -> Tuple[float, str]:
    """Find the unit a message asks for.

    The largest duration unit mentioned wins, falling back to hours. Every
    metric prefix mentioned is applied, so "kilo" and "mega" together scale
    by 10^9 and the label reads "kilomega...".

    Args:
        text: Lowercase message content
        matcher: Compiled unit tables

    Returns:
        (multiplier, unit_label) where dividing a millisecond duration by
        multiplier gives the count in unit_label
    """
    time_matches = matcher.time_matches(text)
    time_index = time_matches[-1] if time_matches else matcher.default_index

    si_power = BASE_POWER
    unit_label = ""
    for i in matcher.si_matches(text):
        si_power += matcher.si_powers[i]
        unit_label += matcher.si_names[i]
    unit_label += matcher.time_plurals[time_index]

    multiplier = float(matcher.time_seconds[time_index]) * 10.0 ** si_power
    return multiplier, unit_label
