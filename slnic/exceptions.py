"""Exceptions raised by slnic.

Validation failures are returned as results, not raised. These cover
problems with files and configuration around the validator.
"""


class SlnicError(Exception):
    """Base class for slnic errors."""


class BatchFileError(SlnicError):
    """Raised when a batch claims file cannot be read or has the wrong columns."""
