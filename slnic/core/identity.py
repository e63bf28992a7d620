"""Value objects produced and consumed by the NIC engine."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from .rules import DATE_FORMAT


class NICFormat(Enum):
    """Lexical form of an identity number."""
    LEGACY = "legacy"  # 9 digits + V/X
    MODERN = "modern"  # 12 digits
    INVALID = "invalid"


class Gender(Enum):
    """Gender encoded in the day-of-year code."""
    MALE = "male"
    FEMALE = "female"

    def display(self) -> str:
        """Capitalised label as printed on receipts."""
        return self.value.capitalize()


class FailureKind(Enum):
    """Why a claim did not validate."""
    FORMAT_ERROR = "format_error"
    GENDER_MISMATCH = "gender_mismatch"
    DATE_MISMATCH = "date_mismatch"


class ValidationOutcome(Enum):
    VALID = "valid"
    INVALID = "invalid"


@dataclass(frozen=True)
class DerivedIdentity:
    """Data decoded from an identity number.

    When ``valid`` is False none of the derived fields are set.
    """
    nic_format: NICFormat
    valid: bool = False
    gender: Optional[Gender] = None
    date_of_birth: Optional[date] = None
    birth_year: Optional[int] = None
    day_code: Optional[int] = None
    day_of_year: Optional[int] = None

    def date_of_birth_str(self) -> Optional[str]:
        """Date of birth as ``YYYY-MM-DD``."""
        if self.date_of_birth is None:
            return None
        return self.date_of_birth.strftime(DATE_FORMAT)

    @classmethod
    def invalid(cls, nic_format: NICFormat = NICFormat.INVALID) -> 'DerivedIdentity':
        return cls(nic_format=nic_format, valid=False)


@dataclass(frozen=True)
class ValidationClaim:
    """Details the user typed in, to be checked against the NIC."""
    identity_number: str
    claimed_gender: str
    claimed_date_of_birth: str


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking a claim.

    ``reason`` and ``failure`` are only set for INVALID outcomes.
    """
    outcome: ValidationOutcome
    reason: Optional[str] = None
    failure: Optional[FailureKind] = None
    derived: Optional[DerivedIdentity] = None

    @property
    def is_valid(self) -> bool:
        return self.outcome == ValidationOutcome.VALID

    @classmethod
    def success(cls, derived: DerivedIdentity) -> 'ValidationResult':
        return cls(outcome=ValidationOutcome.VALID, derived=derived)

    @classmethod
    def failed(
        cls,
        failure: FailureKind,
        reason: str,
        derived: Optional[DerivedIdentity] = None
    ) -> 'ValidationResult':
        return cls(
            outcome=ValidationOutcome.INVALID,
            reason=reason,
            failure=failure,
            derived=derived,
        )
