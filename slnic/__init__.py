"""slnic - Decode and validate Sri Lankan National Identity Card numbers."""

__version__ = "0.1.0"

from .core import (
    NICFormat,
    Gender,
    FailureKind,
    ValidationOutcome,
    DerivedIdentity,
    ValidationClaim,
    ValidationResult,
    NICParser,
    parse_nic,
    IdentityForm,
    VerificationStatus,
)
from .config import ValidatorConfig
from .validation import NICValidator, validate_claim
from .api import validate_identity

__all__ = [
    'NICFormat',
    'Gender',
    'FailureKind',
    'ValidationOutcome',
    'DerivedIdentity',
    'ValidationClaim',
    'ValidationResult',
    'NICParser',
    'parse_nic',
    'IdentityForm',
    'VerificationStatus',
    'ValidatorConfig',
    'NICValidator',
    'validate_claim',
    'validate_identity',
]
