"""Configuration for NIC parsing and validation."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .core.rules import CENTURY_PIVOT, DATE_TOLERANCE_DAYS, FEMALE_DAY_OFFSET


@dataclass
class ValidatorConfig:
    """Configuration for the NIC parser and validator."""

    # Date matching
    tolerance_days: int = DATE_TOLERANCE_DAYS

    # Decoding
    century_pivot: int = CENTURY_PIVOT
    female_day_offset: int = FEMALE_DAY_OFFSET

    # Logging
    mask_identity_in_logs: bool = True

    def __post_init__(self):
        """Reject settings the decoder cannot work with."""
        if self.tolerance_days < 0:
            raise ValueError(f"tolerance_days must be >= 0, got {self.tolerance_days}")
        if not 0 <= self.century_pivot <= 100:
            raise ValueError(f"century_pivot must be within 0-100, got {self.century_pivot}")
        if self.female_day_offset <= 0:
            raise ValueError(f"female_day_offset must be positive, got {self.female_day_offset}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'ValidatorConfig':
        """Build a config from ``SLNIC_*`` environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            ValidatorConfig with any overrides applied
        """
        env = os.environ if environ is None else environ
        kwargs = {}

        if env.get('SLNIC_TOLERANCE_DAYS'):
            kwargs['tolerance_days'] = int(env['SLNIC_TOLERANCE_DAYS'])
        if env.get('SLNIC_CENTURY_PIVOT'):
            kwargs['century_pivot'] = int(env['SLNIC_CENTURY_PIVOT'])
        if env.get('SLNIC_MASK_LOGS'):
            kwargs['mask_identity_in_logs'] = env['SLNIC_MASK_LOGS'].lower() not in ('0', 'false', 'no')

        return cls(**kwargs)


# Global configuration instance
default_config = ValidatorConfig()
