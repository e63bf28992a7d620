"""Tests for the function-level interface."""

import pytest
from pydantic import ValidationError

from slnic.api import (
    IdentityCheckRequest,
    IdentityCheckResponse,
    validate_identity,
    validate_payload,
)


def test_valid_payload():
    """Test the payload for a matching claim."""
    response = validate_identity("199212345678", "male", "1992-05-02")

    assert isinstance(response, IdentityCheckResponse)
    assert response.to_payload() == {
        'valid': True,
        'gender': 'male',
        'dateOfBirth': '1992-05-02',
    }


def test_format_error_payload():
    """Test that invalid numbers have no decoded fields."""
    payload = validate_identity("8812345678V", "male", "1988-05-02").to_payload()

    assert payload == {
        'valid': False,
        'reason': 'invalid NIC format',
        'failure': 'format_error',
    }


def test_mismatch_payload_includes_decoded_fields():
    """Test that a gender mismatch still reports the decoded values."""
    payload = validate_identity("199212345678", "female", "1992-05-02").to_payload()

    assert payload['valid'] is False
    assert payload['failure'] == 'gender_mismatch'
    assert payload['gender'] == 'male'
    assert payload['dateOfBirth'] == '1992-05-02'


def test_validate_camel_case_payload():
    response = validate_payload({
        'identityNumber': '923455123V',
        'claimedGender': 'male',
        'claimedDateOfBirth': '1992-12-10',
    })
    assert response.valid is True


def test_payload_missing_field():
    """Test that incomplete payloads are rejected."""
    with pytest.raises(ValidationError):
        validate_payload({'identityNumber': '923455123V'})


def test_request_to_claim():
    request = IdentityCheckRequest(
        identity_number='923455123V',
        claimed_gender='male',
        claimed_date_of_birth='1992-12-10',
    )
    claim = request.to_claim()
    assert claim.identity_number == '923455123V'
    assert claim.claimed_date_of_birth == '1992-12-10'


def test_non_string_arguments_return_result():
    """Test that wrongly typed arguments give an invalid response instead of raising."""
    bad_nic = validate_identity(None, "male", "1992-05-02")
    assert bad_nic.valid is False
    assert bad_nic.failure == 'format_error'

    bad_gender = validate_identity("199212345678", None, "1992-05-02")
    assert bad_gender.valid is False
    assert bad_gender.failure == 'gender_mismatch'

    bad_dob = validate_identity("199212345678", "male", None)
    assert bad_dob.valid is False
    assert bad_dob.failure == 'date_mismatch'


def test_payload_failure_key_only_on_invalid():
    """Test that the failure kind is added to invalid payloads only."""
    assert 'failure' not in validate_identity("923455123V", "male", "1992-12-10").to_payload()
    payload = validate_identity("923455123V", "male", "1992-12-20").to_payload()
    assert payload['failure'] == 'date_mismatch'
