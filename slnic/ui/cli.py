"""Command-line interface for slnic."""

import argparse
import json
import logging
import sys
from typing import Optional

from .. import __version__
from ..api import IdentityCheckResponse
from ..config import ValidatorConfig
from ..core.identity import DerivedIdentity, ValidationClaim
from ..exceptions import BatchFileError
from ..utils.batch import BatchReport, load_numbered_claims, run_batch, save_report
from ..validation import NICValidator

logger = logging.getLogger(__name__)


def print_derived(identity_number: str, derived: DerivedIdentity) -> None:
    """Print the fields decoded from a NIC number.

    Args:
        identity_number: The number as entered
        derived: Result of decoding it
    """
    print("\n" + "=" * 60)
    print("NIC DETAILS")
    print("=" * 60)
    print(f"NIC Number:             {identity_number}")
    print(f"Format:                 {derived.nic_format.value}")
    if derived.valid:
        print(f"Gender:                 {derived.gender.display()}")
        print(f"Date of Birth:          {derived.date_of_birth_str()}")
        print(f"Birth Year:             {derived.birth_year}")
        print(f"Day Code:               {derived.day_code:03d}")
    else:
        print("Status:                 invalid NIC format")
    print("=" * 60 + "\n")


def print_batch_summary(report: BatchReport) -> None:
    """Print per-row outcomes and totals for a batch run."""
    print("\nBATCH RESULTS:")
    print("-" * 60)
    for row in report.rows:
        outcome = "VALID" if row.result.is_valid else "INVALID"
        line = f"{row.line:>5}. {row.claim.identity_number:<14} {outcome}"
        if row.result.reason:
            line += f" ({row.result.reason})"
        print(line)
    print("-" * 60)

    print(f"Total Claims:           {report.total:,}")
    print(f"Valid:                  {report.valid_count:,}")
    print(f"Invalid:                {report.invalid_count:,}")
    for failure, count in sorted(report.failure_counts().items()):
        print(f"  {failure + ':':<22}{count:,}")
    print()


def build_validator(args: argparse.Namespace) -> NICValidator:
    config = ValidatorConfig.from_env()
    if args.tolerance_days is not None:
        config = ValidatorConfig(
            tolerance_days=args.tolerance_days,
            century_pivot=config.century_pivot,
            female_day_offset=config.female_day_offset,
            mask_identity_in_logs=config.mask_identity_in_logs,
        )
    return NICValidator(config)


def decode_command(args: argparse.Namespace) -> int:
    """Execute the decode command.

    Returns:
        Exit code (0 if the number decoded, 1 otherwise)
    """
    derived = build_validator(args).decode(args.nic)

    if args.json:
        payload = {'nic': args.nic, 'format': derived.nic_format.value, 'valid': derived.valid}
        if derived.valid:
            payload['gender'] = derived.gender.value
            payload['dateOfBirth'] = derived.date_of_birth_str()
        print(json.dumps(payload))
    else:
        print_derived(args.nic, derived)

    return 0 if derived.valid else 1


def validate_command(args: argparse.Namespace) -> int:
    """Execute the validate command.

    Returns:
        Exit code (0 if the claim is valid, 1 otherwise)
    """
    claim = ValidationClaim(
        identity_number=args.nic,
        claimed_gender=args.gender,
        claimed_date_of_birth=args.dob,
    )
    result = build_validator(args).validate(claim)

    if args.json:
        print(json.dumps(IdentityCheckResponse.from_result(result).to_payload()))
    elif result.is_valid:
        print("VALID")
    else:
        print(f"INVALID: {result.reason}")

    return 0 if result.is_valid else 1


def batch_command(args: argparse.Namespace) -> int:
    """Execute the batch command.

    Returns:
        Exit code (0 if the file was processed, 1 on file errors)
    """
    try:
        claims = load_numbered_claims(args.file)
    except BatchFileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    report = run_batch(claims, build_validator(args))

    if args.json:
        print(report.to_frame().to_json(orient='records'))
    else:
        print_batch_summary(report)

    if args.output:
        path = save_report(report, args.output)
        print(f"Report written to {path}", file=sys.stderr)

    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='slnic',
        description='Decode and validate Sri Lankan National Identity Card numbers.',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output'
    )

    parser.add_argument(
        '--tolerance-days',
        type=int,
        default=None,
        help='Days a claimed date of birth may differ from the NIC (default: 1)'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands'
    )

    decode_parser = subparsers.add_parser(
        'decode',
        help='Show the gender and date of birth encoded in a NIC number'
    )
    decode_parser.add_argument('nic', help='NIC number (9 digits + V/X, or 12 digits)')
    decode_parser.add_argument('--json', action='store_true', help='Print JSON')

    validate_parser = subparsers.add_parser(
        'validate',
        help='Check a gender and date of birth against a NIC number'
    )
    validate_parser.add_argument('nic', help='NIC number')
    validate_parser.add_argument(
        '-g', '--gender',
        required=True,
        help='Claimed gender ("male" or "female")'
    )
    validate_parser.add_argument(
        '-d', '--dob',
        required=True,
        help='Claimed date of birth (YYYY-MM-DD)'
    )
    validate_parser.add_argument('--json', action='store_true', help='Print JSON')

    batch_parser = subparsers.add_parser(
        'batch',
        help='Validate claims from a CSV file with nic, gender and dob columns'
    )
    batch_parser.add_argument('file', help='Path to the CSV file')
    batch_parser.add_argument('-o', '--output', help='Write the results to this CSV file')
    batch_parser.add_argument('--json', action='store_true', help='Print JSON')

    return parser


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error or failed validation)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == 'decode':
            return decode_command(args)
        elif args.command == 'validate':
            return validate_command(args)
        elif args.command == 'batch':
            return batch_command(args)
    except ValueError as e:
        # Bad SLNIC_* environment settings or --tolerance-days
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 1


if __name__ == '__main__':
    sys.exit(main())
