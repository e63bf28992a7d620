"""Function-level interface used by the application layer."""

from typing import Any, Mapping, Optional

from ..config import ValidatorConfig
from ..core.identity import ValidationClaim
from ..validation import NICValidator
from .schemas import IdentityCheckRequest, IdentityCheckResponse


def validate_identity(
    identity_number: str,
    claimed_gender: str,
    claimed_date_of_birth: str,
    config: Optional[ValidatorConfig] = None
) -> IdentityCheckResponse:
    """Validate an identity claim and return a serialisable response.

    Args:
        identity_number: NIC number, already trimmed
        claimed_gender: "male" or "female"
        claimed_date_of_birth: Date of birth as YYYY-MM-DD

    Returns:
        IdentityCheckResponse; call ``to_payload()`` for the dict form.
        Arguments of the wrong type produce an invalid response, not an error.
    """
    claim = ValidationClaim(
        identity_number=identity_number,
        claimed_gender=claimed_gender,
        claimed_date_of_birth=claimed_date_of_birth,
    )
    result = NICValidator(config).validate(claim)
    return IdentityCheckResponse.from_result(result)


def check_request(
    request: IdentityCheckRequest,
    config: Optional[ValidatorConfig] = None
) -> IdentityCheckResponse:
    result = NICValidator(config).validate(request.to_claim())
    return IdentityCheckResponse.from_result(result)


def validate_payload(
    payload: Mapping[str, Any],
    config: Optional[ValidatorConfig] = None
) -> IdentityCheckResponse:
    """Validate a camelCase payload (identityNumber, claimedGender, claimedDateOfBirth).

    Raises:
        pydantic.ValidationError: If required keys are missing
    """
    return check_request(IdentityCheckRequest.model_validate(payload), config)


__all__ = [
    'IdentityCheckRequest',
    'IdentityCheckResponse',
    'validate_identity',
    'validate_payload',
    'check_request',
]
