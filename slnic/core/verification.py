"""
Caller-side verification state for a user-information form.

The validator is stateless. A form that collects the NIC number, gender and
date of birth tracks whether those three values have been verified, and
drops back to UNVALIDATED whenever one of them is edited.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .identity import Gender, ValidationClaim, ValidationResult


class VerificationStatus(Enum):
    """Verification state of the identity fields on a form."""
    UNVALIDATED = "unvalidated"
    VALIDATED = "validated"
    FAILED = "failed"


TRACKED_FIELDS = ('nic_number', 'gender', 'date_of_birth')


@dataclass
class IdentityForm:
    """Identity fields of a user-information form and their verification state."""
    nic_number: str = ''
    gender: str = ''
    date_of_birth: str = ''
    status: VerificationStatus = VerificationStatus.UNVALIDATED
    last_reason: Optional[str] = None
    last_result: Optional[ValidationResult] = field(default=None, repr=False)

    @property
    def is_verified(self) -> bool:
        return self.status == VerificationStatus.VALIDATED

    def update(self, **fields: str) -> bool:
        """Change one or more identity fields.

        Returns:
            True if any value actually changed (and the status was reset)
        """
        unknown = set(fields) - set(TRACKED_FIELDS)
        if unknown:
            raise TypeError(f"Unknown form fields: {', '.join(sorted(unknown))}")

        changed = False
        for name, value in fields.items():
            if getattr(self, name) != value:
                setattr(self, name, value)
                changed = True

        if changed:
            self.status = VerificationStatus.UNVALIDATED
            self.last_reason = None
            self.last_result = None
        return changed

    def to_claim(self) -> ValidationClaim:
        return ValidationClaim(
            identity_number=self.nic_number,
            claimed_gender=self.gender,
            claimed_date_of_birth=self.date_of_birth,
        )

    def verify(self, validator) -> ValidationResult:
        """Validate the current fields and record the outcome.

        Args:
            validator: Object with a ``validate(ValidationClaim)`` method

        Returns:
            The ValidationResult from the validator
        """
        result = validator.validate(self.to_claim())
        self.last_result = result
        if result.is_valid:
            self.status = VerificationStatus.VALIDATED
            self.last_reason = None
        else:
            self.status = VerificationStatus.FAILED
            self.last_reason = result.reason
        return result

    def summary_lines(self) -> List[str]:
        """Customer identity lines for an order receipt."""
        if not self.nic_number:
            return []

        try:
            gender = Gender(self.gender).display()
        except ValueError:
            gender = self.gender.capitalize() if self.gender else 'N/A'

        lines = [
            f"NIC Number: {self.nic_number}",
            f"Gender: {gender}",
            f"Date of Birth: {self.date_of_birth or 'N/A'}",
        ]
        if self.is_verified:
            lines.append("Verified Identity")
        return lines
