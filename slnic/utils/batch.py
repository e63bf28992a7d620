"""Validate many identity claims from a CSV file."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

import pandas as pd

from ..core.identity import ValidationClaim, ValidationResult
from ..exceptions import BatchFileError
from ..validation import NICValidator

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ('nic', 'gender', 'dob')


@dataclass
class BatchRow:
    """One validated row of a batch file."""
    line: int
    claim: ValidationClaim
    result: ValidationResult


@dataclass
class BatchReport:
    """Results for a whole batch file."""
    rows: List[BatchRow] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.rows)

    @property
    def valid_count(self) -> int:
        return sum(1 for row in self.rows if row.result.is_valid)

    @property
    def invalid_count(self) -> int:
        return self.total - self.valid_count

    def failure_counts(self) -> Dict[str, int]:
        """Number of rows per failure kind."""
        counts = Counter(
            row.result.failure.value
            for row in self.rows
            if row.result.failure is not None
        )
        return dict(counts)

    def to_frame(self) -> pd.DataFrame:
        """Tabular view of the report, one row per claim."""
        records = []
        for row in self.rows:
            derived = row.result.derived
            decoded = derived is not None and derived.valid
            records.append({
                'line': row.line,
                'nic': row.claim.identity_number,
                'gender': row.claim.claimed_gender,
                'dob': row.claim.claimed_date_of_birth,
                'outcome': row.result.outcome.value,
                'failure': row.result.failure.value if row.result.failure else '',
                'reason': row.result.reason or '',
                'decoded_gender': derived.gender.value if decoded else '',
                'decoded_dob': derived.date_of_birth_str() if decoded else '',
            })
        return pd.DataFrame(records, columns=[
            'line', 'nic', 'gender', 'dob', 'outcome', 'failure',
            'reason', 'decoded_gender', 'decoded_dob',
        ])


def load_numbered_claims(filepath: Union[str, Path]) -> List[Tuple[int, ValidationClaim]]:
    """
    Read claims from a CSV file with ``nic``, ``gender`` and ``dob`` columns.

    All cells are read as text so NIC numbers keep their leading zeros.
    Cells are taken verbatim, whitespace included. Rows with every field
    empty (blank lines) are skipped; missing trailing fields read as empty.

    Returns:
        List of (file line number, claim) tuples, the header being line 1

    Raises:
        BatchFileError: If the file is missing, unreadable or lacks a column
    """
    path = Path(filepath)
    if not path.exists():
        raise BatchFileError(f"File not found: {path}")

    try:
        df = pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=False,
            skip_blank_lines=False,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise BatchFileError(f"Could not read {path}: {e}") from e

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise BatchFileError(f"{path} is missing column(s): {', '.join(missing)}")

    df = df[list(REQUIRED_COLUMNS)].fillna('')
    # Blank lines are kept by the reader so the index still maps to file lines
    df = df[(df != '').any(axis=1)]

    claims = [
        (
            int(index) + 2,
            ValidationClaim(
                identity_number=record['nic'],
                claimed_gender=record['gender'],
                claimed_date_of_birth=record['dob'],
            ),
        )
        for index, record in zip(df.index, df.to_dict('records'))
    ]
    logger.info("Loaded %d claims from %s", len(claims), path)
    return claims


def load_claims(filepath: Union[str, Path]) -> List[ValidationClaim]:
    """Read claims from a CSV file, without their line numbers."""
    return [claim for _, claim in load_numbered_claims(filepath)]


def run_batch(
    claims: Iterable[Union[ValidationClaim, Tuple[int, ValidationClaim]]],
    validator: Optional[NICValidator] = None
) -> BatchReport:
    """Validate each claim in order.

    Claims may be given with their file line numbers, as returned by
    ``load_numbered_claims``. Bare claims are numbered as consecutive data
    rows after the header line.
    """
    validator = validator or NICValidator()
    report = BatchReport()

    for index, item in enumerate(claims):
        if isinstance(item, ValidationClaim):
            line, claim = index + 2, item
        else:
            line, claim = item
        result = validator.validate(claim)
        report.rows.append(BatchRow(line=line, claim=claim, result=result))

    logger.info(
        "Batch complete: %d valid, %d invalid",
        report.valid_count, report.invalid_count
    )
    return report


def save_report(report: BatchReport, filepath: Union[str, Path]) -> Path:
    """Write the report as CSV and return the path written."""
    path = Path(filepath)
    report.to_frame().to_csv(path, index=False)
    return path
