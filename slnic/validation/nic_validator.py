"""
Cross-checks user-supplied gender and date of birth against a NIC number.

Every outcome, including malformed input, is returned as a
ValidationResult; nothing here raises for bad user data.
"""

import logging
from datetime import date, datetime
from typing import Optional

from ..config import ValidatorConfig, default_config
from ..core.identity import (
    DerivedIdentity,
    FailureKind,
    ValidationClaim,
    ValidationResult,
)
from ..core.nic_parser import NICParser, mask_nic
from ..core.rules import (
    DATE_FORMAT,
    REASON_DATE_MISMATCH,
    REASON_GENDER_MISMATCH,
    REASON_INVALID_FORMAT,
)

logger = logging.getLogger(__name__)


def parse_claimed_date(value: str) -> Optional[date]:
    """Parse a ``YYYY-MM-DD`` date, returning None if it is not one."""
    if not isinstance(value, str):
        return None
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return None


def days_between(first: date, second: date) -> int:
    """Absolute number of whole days between two dates."""
    return abs((first - second).days)


def check_dates_within_tolerance(
    derived: date,
    claimed: str,
    tolerance_days: int
) -> bool:
    """
    Check whether a claimed date of birth matches the decoded one.

    An exact string match always passes. Otherwise the claimed value must
    parse as a date no more than ``tolerance_days`` away.

    Args:
        derived: Date of birth decoded from the NIC
        claimed: Date of birth the user entered
        tolerance_days: Allowed difference in days

    Returns:
        True if the dates match
    """
    if derived.strftime(DATE_FORMAT) == claimed:
        return True

    claimed_date = parse_claimed_date(claimed)
    if claimed_date is None:
        return False

    return days_between(derived, claimed_date) <= tolerance_days


class NICValidator:
    """Validates identity claims against the data encoded in a NIC."""

    def __init__(self, config: Optional[ValidatorConfig] = None):
        """Initialize the validator.

        Args:
            config: Validation settings (defaults to the global config)
        """
        self.config = config or default_config
        self.parser = NICParser(self.config)

    def decode(self, identity_number: str) -> DerivedIdentity:
        return self.parser.parse(identity_number)

    def validate(self, claim: ValidationClaim) -> ValidationResult:
        """
        Check a claim against its identity number.

        Steps:
        1. Reject numbers matching neither NIC format
        2. Compare the decoded gender (exact, lowercase tokens)
        3. Compare the decoded date of birth, allowing the configured tolerance

        Args:
            claim: Identity number plus the gender and date of birth to check

        Returns:
            ValidationResult; INVALID results carry a reason and failure kind
        """
        label = self._label(claim.identity_number)
        derived = self.decode(claim.identity_number)

        if not derived.valid:
            logger.debug("Rejected %s: invalid format", label)
            return ValidationResult.failed(
                FailureKind.FORMAT_ERROR, REASON_INVALID_FORMAT, derived
            )

        if derived.gender.value != claim.claimed_gender:
            logger.debug(
                "Rejected %s: gender %s does not match claimed %r",
                label, derived.gender.value, claim.claimed_gender
            )
            reason = REASON_GENDER_MISMATCH.format(
                expected=derived.gender.value,
                received=claim.claimed_gender,
            )
            return ValidationResult.failed(FailureKind.GENDER_MISMATCH, reason, derived)

        if not check_dates_within_tolerance(
            derived.date_of_birth,
            claim.claimed_date_of_birth,
            self.config.tolerance_days
        ):
            logger.debug(
                "Rejected %s: date of birth %s does not match claimed %r",
                label, derived.date_of_birth_str(), claim.claimed_date_of_birth
            )
            return ValidationResult.failed(
                FailureKind.DATE_MISMATCH, REASON_DATE_MISMATCH, derived
            )

        logger.debug("Validated %s", label)
        return ValidationResult.success(derived)

    def _label(self, identity_number: str) -> str:
        if self.config.mask_identity_in_logs:
            return mask_nic(identity_number)
        return str(identity_number)


def validate_claim(
    identity_number: str,
    claimed_gender: str,
    claimed_date_of_birth: str,
    config: Optional[ValidatorConfig] = None
) -> ValidationResult:
    """Validate a single claim without constructing a validator first."""
    claim = ValidationClaim(
        identity_number=identity_number,
        claimed_gender=claimed_gender,
        claimed_date_of_birth=claimed_date_of_birth,
    )
    return NICValidator(config).validate(claim)
