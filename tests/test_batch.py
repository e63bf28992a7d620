"""Tests for batch validation from CSV files."""

import pandas as pd
import pytest

from slnic.exceptions import BatchFileError
from slnic.utils.batch import load_claims, load_numbered_claims, run_batch, save_report


SAMPLE_CSV = """nic,gender,dob
923455123V,male,1992-12-10
199212345678,female,1992-05-02
8812345678V,male,1988-05-02
001230000V,male,2000-05-02
199212345678,male,1992-05-09
"""


@pytest.fixture
def sample_csv_file(tmp_path):
    """Create a temporary claims file for testing."""
    path = tmp_path / "claims.csv"
    path.write_text(SAMPLE_CSV)
    return path


def test_load_claims_keeps_text(sample_csv_file):
    """Test that NIC numbers keep their leading zeros."""
    claims = load_claims(sample_csv_file)

    assert len(claims) == 5
    assert claims[0].identity_number == "923455123V"
    assert claims[3].identity_number == "001230000V"
    assert claims[1].claimed_gender == "female"


def test_run_batch_counts(sample_csv_file):
    """Test per-row outcomes and summary counts."""
    report = run_batch(load_claims(sample_csv_file))

    assert report.total == 5
    assert report.valid_count == 2
    assert report.invalid_count == 3
    assert report.failure_counts() == {
        'gender_mismatch': 1,
        'format_error': 1,
        'date_mismatch': 1,
    }
    assert [row.line for row in report.rows] == [2, 3, 4, 5, 6]


def test_report_frame(sample_csv_file):
    report = run_batch(load_claims(sample_csv_file))
    frame = report.to_frame()

    assert list(frame['outcome']) == ['valid', 'invalid', 'invalid', 'valid', 'invalid']
    assert frame.loc[2, 'decoded_dob'] == ''
    assert frame.loc[3, 'decoded_dob'] == '2000-05-02'


def test_save_report(sample_csv_file, tmp_path):
    report = run_batch(load_claims(sample_csv_file))
    out = save_report(report, tmp_path / "report.csv")

    saved = pd.read_csv(out, dtype=str, keep_default_na=False)
    assert len(saved) == 5
    assert saved.loc[0, 'nic'] == '923455123V'


def test_missing_file(tmp_path):
    with pytest.raises(BatchFileError):
        load_claims(tmp_path / "nope.csv")


def test_missing_column(tmp_path):
    """Test a file without the dob column."""
    path = tmp_path / "bad.csv"
    path.write_text("nic,gender\n923455123V,male\n")

    with pytest.raises(BatchFileError, match="dob"):
        load_claims(path)


def test_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("")

    with pytest.raises(BatchFileError):
        load_claims(path)


def test_blank_line_keeps_file_line_numbers(tmp_path):
    """Test that rows after a blank line report their real line in the file."""
    path = tmp_path / "gaps.csv"
    path.write_text(
        "nic,gender,dob\n"
        "923455123V,male,1992-12-10\n"
        "\n"
        "199212345678,male,1992-05-02\n"
    )

    numbered = load_numbered_claims(path)
    assert [line for line, _ in numbered] == [2, 4]

    report = run_batch(numbered)
    assert [row.line for row in report.rows] == [2, 4]
    assert list(report.to_frame()['line']) == [2, 4]
    assert report.valid_count == 2


def test_short_row_is_date_mismatch(tmp_path):
    """Test that a row missing its dob reads as an empty date."""
    path = tmp_path / "short.csv"
    path.write_text("nic,gender,dob\n923455123V,male\n")

    claims = load_claims(path)
    assert claims[0].claimed_date_of_birth == ''

    report = run_batch(claims)
    assert report.failure_counts() == {'date_mismatch': 1}
