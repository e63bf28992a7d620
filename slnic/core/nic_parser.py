"""
Sri Lankan NIC decoder.

This module handles:
1. Classifying an identity number as legacy (9 digits + V/X) or modern (12 digits)
2. Extracting the year and day-of-year code fields
3. Decoding gender from the day-of-year code (+500 for female holders)
4. Composing the calendar date of birth
"""

import logging
from datetime import date, timedelta
from typing import Optional, Tuple

from ..config import ValidatorConfig, default_config
from .identity import DerivedIdentity, Gender, NICFormat
from .rules import (
    CENTURY_PIVOT,
    FEMALE_DAY_OFFSET,
    LEGACY_DAY_CODE_SLICE,
    LEGACY_PATTERN,
    LEGACY_YEAR_SLICE,
    MODERN_DAY_CODE_SLICE,
    MODERN_PATTERN,
    MODERN_YEAR_SLICE,
)

logger = logging.getLogger(__name__)


def classify(identity_number: str) -> NICFormat:
    """Determine which NIC scheme an identity number uses.

    The input is uppercased but not trimmed, so surrounding whitespace
    makes it INVALID.

    Args:
        identity_number: Raw identity number

    Returns:
        NICFormat.LEGACY, NICFormat.MODERN or NICFormat.INVALID
    """
    if not isinstance(identity_number, str):
        return NICFormat.INVALID

    normalized = identity_number.upper()
    if LEGACY_PATTERN.fullmatch(normalized):
        return NICFormat.LEGACY
    if MODERN_PATTERN.fullmatch(normalized):
        return NICFormat.MODERN
    return NICFormat.INVALID


def extract_fields(identity_number: str, nic_format: NICFormat) -> Tuple[int, int]:
    """Pull the raw year field and day-of-year code out of a classified number.

    Legacy numbers carry a 2-digit year, modern numbers a 4-digit year.

    Returns:
        Tuple of (year_field, day_code)

    Raises:
        ValueError: If nic_format is INVALID
    """
    if nic_format == NICFormat.LEGACY:
        year_slice, day_slice = LEGACY_YEAR_SLICE, LEGACY_DAY_CODE_SLICE
    elif nic_format == NICFormat.MODERN:
        year_slice, day_slice = MODERN_YEAR_SLICE, MODERN_DAY_CODE_SLICE
    else:
        raise ValueError("Cannot extract fields from an invalid NIC")

    return int(identity_number[year_slice]), int(identity_number[day_slice])


def decode_day_code(day_code: int, female_offset: int = FEMALE_DAY_OFFSET) -> Tuple[Gender, int]:
    """Split a day-of-year code into gender and actual day of year.

    Codes strictly above the offset belong to female holders. Out-of-range
    days are passed through unchanged.

    Returns:
        Tuple of (gender, day_of_year)
    """
    if day_code > female_offset:
        return Gender.FEMALE, day_code - female_offset
    return Gender.MALE, day_code


def resolve_year(two_digit_year: int, pivot: int = CENTURY_PIVOT) -> int:
    """Expand a legacy 2-digit year to four digits."""
    if two_digit_year < pivot:
        return 2000 + two_digit_year
    return 1900 + two_digit_year


def compose_date(year: int, day_of_year: int) -> date:
    """Calendar date for a 1-based day of year.

    Days past the end of the year roll into the next one, and day 0 is
    the last day of the previous year.

    Raises:
        ValueError: If the year cannot be represented
        OverflowError: If the result falls outside the supported range
    """
    return date(year, 1, 1) + timedelta(days=day_of_year - 1)


def mask_nic(identity_number: object) -> str:
    """Hide all but the last three characters of an identity number."""
    text = str(identity_number)
    if len(text) <= 3:
        return '*' * len(text)
    return '*' * (len(text) - 3) + text[-3:]


class NICParser:
    """Decodes birth date and gender from NIC numbers."""

    def __init__(self, config: Optional[ValidatorConfig] = None):
        self.config = config or default_config

    def _label(self, identity_number: str) -> str:
        if self.config.mask_identity_in_logs:
            return mask_nic(identity_number)
        return str(identity_number)

    def parse(self, identity_number: str) -> DerivedIdentity:
        """Decode an identity number.

        Never raises; anything that cannot be decoded comes back as an
        invalid DerivedIdentity.

        Args:
            identity_number: Pre-trimmed identity number

        Returns:
            DerivedIdentity with gender and date of birth when valid
        """
        nic_format = classify(identity_number)
        if nic_format == NICFormat.INVALID:
            logger.debug("NIC %s matches neither format", self._label(identity_number))
            return DerivedIdentity.invalid()

        year_field, day_code = extract_fields(identity_number, nic_format)
        if nic_format == NICFormat.LEGACY:
            birth_year = resolve_year(year_field, self.config.century_pivot)
        else:
            birth_year = year_field

        gender, day_of_year = decode_day_code(day_code, self.config.female_day_offset)

        try:
            date_of_birth = compose_date(birth_year, day_of_year)
        except (ValueError, OverflowError) as e:
            logger.debug(
                "NIC %s encodes an unrepresentable date (year %d, day %d): %s",
                self._label(identity_number), birth_year, day_of_year, e
            )
            return DerivedIdentity.invalid(nic_format)

        logger.debug(
            "Decoded %s NIC %s: year=%d day_code=%03d gender=%s dob=%s",
            nic_format.value, self._label(identity_number), birth_year,
            day_code, gender.value, date_of_birth.isoformat()
        )

        return DerivedIdentity(
            nic_format=nic_format,
            valid=True,
            gender=gender,
            date_of_birth=date_of_birth,
            birth_year=birth_year,
            day_code=day_code,
            day_of_year=day_of_year,
        )


def parse_nic(identity_number: str, config: Optional[ValidatorConfig] = None) -> DerivedIdentity:
    """Decode an identity number with the given (or default) configuration."""
    return NICParser(config).parse(identity_number)
