"""
NIC encoding rules and constants.

These constants describe how a Sri Lankan National Identity Card number
encodes the holder's birth year, day of year and gender.
"""

import re


# Identifier patterns (tested against the uppercased input, in this order)
LEGACY_PATTERN = re.compile(r'^[0-9]{9}[VX]$')  # 9 digits + V/X letter
MODERN_PATTERN = re.compile(r'^[0-9]{12}$')  # 12 digits, no letter

# Field positions (0-based slices)
LEGACY_YEAR_SLICE = slice(0, 2)
LEGACY_DAY_CODE_SLICE = slice(2, 5)
MODERN_YEAR_SLICE = slice(0, 4)
MODERN_DAY_CODE_SLICE = slice(4, 7)

# Day-of-year codes above this are female, shifted by this amount
FEMALE_DAY_OFFSET = 500

# Two-digit legacy years below this are 20xx, the rest 19xx
CENTURY_PIVOT = 50

# Claimed birth dates this many days off the decoded date still match
DATE_TOLERANCE_DAYS = 1

DATE_FORMAT = "%Y-%m-%d"

# Failure reasons
REASON_INVALID_FORMAT = "invalid NIC format"
REASON_DATE_MISMATCH = "input details are incorrect, can't do the id card validation"
REASON_GENDER_MISMATCH = "gender mismatch: NIC indicates {expected}, received {received}"
