"""Batch helpers for validating claims in bulk."""

from .batch import (
    BatchReport,
    BatchRow,
    load_claims,
    load_numbered_claims,
    run_batch,
    save_report,
)

__all__ = [
    'BatchReport',
    'BatchRow',
    'load_claims',
    'load_numbered_claims',
    'run_batch',
    'save_report',
]
