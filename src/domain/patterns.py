"""
Field patterns - Regular expressions used by the profile validator.

Character classes are spelled out explicitly (``[0-9]`` rather than ``\\d``)
so non-ASCII digits and letters never satisfy a rule. Whole-value patterns
are applied with ``fullmatch``; a trailing newline never slips past them.
"""

import re

ALPHANUMERIC = re.compile(r"[A-Za-z0-9]+")

ALPHANUMERIC_WITH_FIRST_CAPITAL_LETTER = re.compile(r"[A-Z][A-Za-z0-9]*")

EMAIL = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9-]+(\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}")

SPECIAL_CHARACTERS = "@$!%*?&"

LOWERCASE = re.compile(r"[a-z]")
UPPERCASE = re.compile(r"[A-Z]")
DIGIT = re.compile(r"[0-9]")
SPECIAL = re.compile(r"[@$!%*?&]")

# All character-class requirements at once; also rejects characters outside the allowed set
PASSWORD = re.compile(r"(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[@$!%*?&])[A-Za-z0-9@$!%*?&]{6,}")

ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
ISO_DATE_FORMAT = "%Y-%m-%d"
