"""Core NIC data model and decoder."""

from .identity import (
    NICFormat,
    Gender,
    FailureKind,
    ValidationOutcome,
    DerivedIdentity,
    ValidationClaim,
    ValidationResult,
)
from .nic_parser import (
    NICParser,
    classify,
    extract_fields,
    decode_day_code,
    resolve_year,
    compose_date,
    mask_nic,
    parse_nic,
)
from .verification import IdentityForm, VerificationStatus

__all__ = [
    # Value objects
    'NICFormat',
    'Gender',
    'FailureKind',
    'ValidationOutcome',
    'DerivedIdentity',
    'ValidationClaim',
    'ValidationResult',

    # Decoding
    'NICParser',
    'classify',
    'extract_fields',
    'decode_day_code',
    'resolve_year',
    'compose_date',
    'mask_nic',
    'parse_nic',

    # Form state
    'IdentityForm',
    'VerificationStatus',
]
