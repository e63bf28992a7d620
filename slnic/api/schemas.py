"""Request/response models for callers that exchange plain payloads."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.identity import ValidationClaim, ValidationResult


class IdentityCheckRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    identity_number: str = Field(alias='identityNumber')
    claimed_gender: str = Field(alias='claimedGender')
    claimed_date_of_birth: str = Field(alias='claimedDateOfBirth')

    def to_claim(self) -> ValidationClaim:
        return ValidationClaim(
            identity_number=self.identity_number,
            claimed_gender=self.claimed_gender,
            claimed_date_of_birth=self.claimed_date_of_birth,
        )


class IdentityCheckResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    valid: bool
    reason: Optional[str] = None
    failure: Optional[str] = None
    gender: Optional[str] = None
    date_of_birth: Optional[str] = Field(default=None, alias='dateOfBirth')

    @classmethod
    def from_result(cls, result: ValidationResult) -> 'IdentityCheckResponse':
        """Build a response, including decoded fields whenever the NIC decoded."""
        derived = result.derived
        decoded = derived is not None and derived.valid
        return cls(
            valid=result.is_valid,
            reason=result.reason,
            failure=result.failure.value if result.failure else None,
            gender=derived.gender.value if decoded else None,
            date_of_birth=derived.date_of_birth_str() if decoded else None,
        )

    def to_payload(self) -> Dict[str, Any]:
        """camelCase dict without unset keys.

        Keys are ``valid``, ``reason``, ``gender`` and ``dateOfBirth``, plus
        ``failure`` (``format_error``, ``gender_mismatch`` or
        ``date_mismatch``) on invalid results so callers can branch on the
        kind of failure without parsing ``reason``.
        """
        return self.model_dump(by_alias=True, exclude_none=True)
