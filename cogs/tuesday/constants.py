"""Tuesday countdown constants.

Lookup tables for the units a countdown can be expressed in. Table order
matters: later duration units are larger and win when several match, and
matched prefixes are concatenated into the label in table order.
"""

# Duration units: (regex pattern, plural name, length in seconds)
# Bare "day" must not match inside "tuesday" itself
TIME_UNITS = (
    (r"sec", "seconds", 1),
    (r"min", "minutes", 60),
    (r"hour", "hours", 3600),
    (r"(?<![a-z])day|days", "days", 86400),
    (r"week", "weeks", 604800),
    (r"year", "years", 31557600),  # 365.25 days
)

DEFAULT_TIME_INDEX = 2  # hours

# Metric prefixes: (alias, power of ten)
SI_PREFIXES = (
    ("yocto", -24),
    ("zepto", -21),
    ("atto", -18),
    ("femto", -15),
    ("pico", -12),
    ("nano", -9),
    ("micro", -6),
    ("milli", -3),
    ("centi", -2),
    ("deci", -1),
    ("deca", 1),
    ("hecto", 2),
    ("kilo", 3),
    ("mega", 6),
    ("giga", 9),
    ("tera", 12),
    ("peta", 15),
    ("exa", 18),
    ("zetta", 21),
    ("yotta", 24),
)

# Countdowns are measured in milliseconds, units are in seconds
BASE_POWER = 3

WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)
TUESDAY = 1
