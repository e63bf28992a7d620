"""
Validation module for NIC identity claims.

Provides the cross-check of claimed gender and date of birth against the
values decoded from a NIC number.
"""

from .nic_validator import (
    NICValidator,
    validate_claim,
    check_dates_within_tolerance,
    parse_claimed_date,
    days_between,
)


__all__ = [
    'NICValidator',
    'validate_claim',
    'check_dates_within_tolerance',
    'parse_claimed_date',
    'days_between',
]
