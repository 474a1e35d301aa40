"""
me3 CLI — validate me.json files from the command line.
"""

import argparse
import json
import sys
from typing import Optional

from me3 import __version__
from me3.config import Settings, configure_logging
from me3.validators import validation_engine
from me3.validators.constraints import ME3_FILENAME, describe_constraints
from me3.validators.models import ValidationResult


def validate_source(source: str) -> ValidationResult:
    """Validate a file path, or stdin when ``source`` is '-'."""
    if source == "-":
        return validation_engine.parse(sys.stdin.read())
    return validation_engine.load(source)


def format_result(source: str, result: ValidationResult) -> str:
    """Human-readable report: one line per violation."""
    if result.valid:
        return f"OK {source}"
    return "\n".join(f"{source}: {v.field}: {v.message}" for v in result.violations)


def run_validate(args: argparse.Namespace) -> int:
    """Validate every source; exit 1 if any is invalid."""
    results = {source: validate_source(source) for source in args.paths}

    if args.json:
        payload = {
            source: result.model_dump(mode="json", exclude={"profile"})
            for source, result in results.items()
        }
        print(json.dumps(payload, indent=2))
    else:
        for source, result in results.items():
            if result.valid and args.quiet:
                continue
            print(format_result(source, result))

    return 0 if all(r.valid for r in results.values()) else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="me3-validate",
        description="Validate me3 profile documents (me.json).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "paths",
        nargs="*",
        default=[ME3_FILENAME],
        help=f"Files to validate ('-' reads stdin). Default: ./{ME3_FILENAME}",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only report invalid files")
    parser.add_argument(
        "--protocol",
        action="store_true",
        help="Print the protocol's limits, enums and patterns, then exit",
    )
    parser.add_argument("--log-level", default="warning", help="Log level (default: warning)")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(Settings(LOG_LEVEL=args.log_level))

    if args.protocol:
        print(json.dumps(describe_constraints(), indent=2))
        return 0

    return run_validate(args)


if __name__ == "__main__":
    sys.exit(main())
