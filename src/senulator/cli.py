"""
Command-line interface for senulator.

Provides commands for:
- Generating SenML records from YAML request definitions
- Listing available request definitions
- Validating a definition without generating
"""

import argparse
import random
import sys

from .config import get_default_seed
from .errors import SenulatorError
from .exporters.console_exporter import create_console_log_exporter
from .exporters.file_exporter import FileLogExporter
from .exporters.otlp_exporter import create_otlp_log_exporter
from .exporters.senml_exporter import FORMATS, SenMLFileExporter, encode
from .generators.log_generator import GenerationLogger
from .generators.request import GenerationRequest
from .requests.request_loader import RequestLoader

_DEFAULT_ENDPOINT = "http://localhost:4318"
_DEFAULT_LOG_FILE = "senulator_logs.jsonl"
_LOG_EXPORTERS = ("none", "console", "file", "otlp")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="senulator",
        description="Generate realistic, random sensor data as SenML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print one day of water meter readings as SenML JSON
  senulator generate --request water_meter --seed 42

  # Write JSON lines to a file, generating units in parallel
  senulator generate --request thermostat --workers 2 --format jsonl --output-file out.jsonl

  # Check a definition and show its record count
  senulator validate --request thermostat
        """,
    )

    parser.add_argument(
        "--log-exporter",
        choices=_LOG_EXPORTERS,
        default="none",
        help="Where to export generation diagnostics (default: none)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=_DEFAULT_LOG_FILE,
        help=f"Diagnostics file for --log-exporter file (default: {_DEFAULT_LOG_FILE})",
    )
    parser.add_argument(
        "--endpoint",
        type=str,
        default=_DEFAULT_ENDPOINT,
        help=f"OTLP HTTP endpoint for --log-exporter otlp (default: {_DEFAULT_ENDPOINT})",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    generate_parser = subparsers.add_parser("generate", help="Generate SenML records")
    generate_parser.add_argument(
        "--request",
        type=str,
        required=True,
        help="Request definition name (without .yaml extension)",
    )
    generate_parser.add_argument(
        "--requests-dir",
        type=str,
        default=None,
        help="Folder with request YAML files (default: built-in sample definitions)",
    )
    generate_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible output (default: SENULATOR_SEED or time-based)",
    )
    generate_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Generate units on this many threads",
    )
    generate_parser.add_argument(
        "--format",
        choices=FORMATS,
        default="json",
        help="SenML encoding (default: json)",
    )
    generate_parser.add_argument(
        "--compact",
        action="store_true",
        help="Omit base fields that repeat the previous record (--format json only)",
    )
    generate_parser.add_argument(
        "--output-file",
        type=str,
        default=None,
        help="Output file path (default: print to stdout)",
    )

    list_parser = subparsers.add_parser("list", help="List available request definitions")
    list_parser.add_argument(
        "--requests-dir",
        type=str,
        default=None,
        help="Folder with request YAML files (default: built-in sample definitions)",
    )

    validate_parser = subparsers.add_parser("validate", help="Validate a request definition")
    validate_parser.add_argument(
        "--request",
        type=str,
        required=True,
        help="Request definition name (without .yaml extension)",
    )
    validate_parser.add_argument(
        "--requests-dir",
        type=str,
        default=None,
        help="Folder with request YAML files (default: built-in sample definitions)",
    )

    return parser


def _create_log_exporter(args: argparse.Namespace):
    if args.log_exporter == "console":
        return create_console_log_exporter()
    if args.log_exporter == "file":
        return FileLogExporter(args.log_file)
    if args.log_exporter == "otlp":
        return create_otlp_log_exporter(args.endpoint)
    return None


def _load_request(loader: RequestLoader, name: str) -> GenerationRequest:
    try:
        return loader.load(name)
    except FileNotFoundError:
        available = loader.list_requests()
        print(f"Request not found: {name}")
        print(f"   Available requests: {', '.join(available)}")
        sys.exit(1)


def cmd_generate(args: argparse.Namespace):
    """Generate records for a request definition."""
    exporter = _create_log_exporter(args)
    gen_logger = GenerationLogger(exporter) if exporter is not None else None

    try:
        loader = RequestLoader(args.requests_dir)
        request = _load_request(loader, args.request)

        seed = args.seed if args.seed is not None else get_default_seed()
        rng = random.Random(seed) if seed is not None else random.Random()
        records = request.generate(rng, max_workers=args.workers)

        if gen_logger is not None:
            gen_logger.log_summary(request.name, len(records), len(request.units))

        if args.output_file:
            SenMLFileExporter(args.output_file, fmt=args.format, compact=args.compact).export(
                records
            )
            print(f"Generated {len(records)} records for {request.name}")
            for unit in request.units:
                print(f"   {unit.name} ({unit.symbol}): final reading {unit.reading:.4f}")
            print(f"   Output: {args.output_file}")
        else:
            text = encode(records, fmt=args.format, compact=args.compact)
            sys.stdout.write(text if text.endswith("\n") else text + "\n")

    except KeyboardInterrupt:
        print("\nGeneration interrupted")
        sys.exit(0)
    except SenulatorError as e:
        print(f"\nError: {e}")
        sys.exit(1)
    finally:
        if gen_logger is not None:
            gen_logger.shutdown()


def cmd_list(args: argparse.Namespace):
    """List available request definitions."""
    loader = RequestLoader(args.requests_dir)
    names = loader.list_requests()

    if not names:
        print("No requests found.")
        print(f"Looking in: {loader.requests_dir}")
        return

    print("Available requests:")
    print()
    for name in names:
        try:
            request = loader.load(name)
        except SenulatorError as e:
            print(f"  - {name} (invalid: {e})")
            continue
        units = ", ".join(f"{u.name} [{u.symbol}]" for u in request.units)
        print(f"  - {name}")
        print(f"     Base name: {request.name}")
        print(f"     Window: {request.duration}s, Units: {units}")
        print()


def cmd_validate(args: argparse.Namespace):
    """Validate a request definition and show its shape."""
    loader = RequestLoader(args.requests_dir)
    try:
        request = _load_request(loader, args.request)
    except SenulatorError as e:
        print(f"Validation failed: {e}")
        sys.exit(1)

    print("Request loaded successfully")
    print(f"   Base name: {request.name}")
    print(f"   Version: {request.version}")
    print(f"   Window: {request.start} .. {request.end} ({request.duration}s)")
    print(f"   Record count: {request.record_count}")
    for unit in request.units:
        bounds = []
        if unit.use_floor:
            bounds.append(f"floor={unit.floor}")
        if unit.use_ceiling:
            bounds.append(f"ceiling={unit.ceiling}")
        print(
            f"   - {unit.name} [{unit.symbol}] every {unit.interval}s, "
            f"{len(unit.categories)} categories"
            + (f", {', '.join(bounds)}" if bounds else "")
        )


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "generate" and args.compact and args.format != "json":
        parser.error("--compact applies to --format json only")

    if args.command == "generate":
        cmd_generate(args)
    elif args.command == "list":
        cmd_list(args)
    elif args.command == "validate":
        cmd_validate(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
