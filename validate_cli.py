#!/usr/bin/env python3
"""
Scheduler Options CLI

Command-line tool for checking a scheduled report's `scheduler_options`
value against the scheduling rules, and for inspecting the code sets the
rules are checked against.

Usage:
    python validate_cli.py validate '<json>'
    python validate_cli.py validate --file options.json
    python validate_cli.py list-codes codes/srodow

Options:
    --code-sets PATH   Code-set JSON document (default: CODE_SETS_FILE setting)
    --log-level LEVEL  Log level (default: WARNING)
    --version          Show project name and version
"""
import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from report_scheduler.app.config import get_settings
from report_scheduler.app.logging_config import configure_logging
from report_scheduler.app.services.code_set_cache import CodeSetCache
from report_scheduler.app.services.code_sources import CodeSourceError, JsonFileCodeMapSource
from report_scheduler.app.services.validator_registry import EntityValidatorRegistry
from report_scheduler.app.validators.scheduled_report import SCHEDULER_OPTIONS


def cmd_validate(source: JsonFileCodeMapSource, payload: str) -> bool:
    """Validate a scheduler_options payload."""
    validator = EntityValidatorRegistry.create_validator("scheduled_report", code_source=source)

    if validator.validate({SCHEDULER_OPTIONS: payload}):
        print(f"✅ {SCHEDULER_OPTIONS} is valid")
        return True

    for error in validator.get_errors():
        print(f"❌ {error.field}: {error.message}")
    return False


def cmd_list_codes(source: JsonFileCodeMapSource, endpoint: str) -> bool:
    """List the valid codes of a code-set endpoint."""
    codes = CodeSetCache(source).lookup(endpoint)
    if not codes:
        print(f"❌ No codes for endpoint '{endpoint}'")
        return False

    for code in codes:
        print(code)
    print(f"\nTotal: {len(codes)} code(s)")
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description=f"{settings.PROJECT_NAME} scheduler options CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python validate_cli.py validate '{"frequency": "Weekly", "frequency_option": {"day_of_week": "Mon,Fri"}, "period": "MTD"}'
  python validate_cli.py validate --file options.json
  python validate_cli.py list-codes codes/srofrequency
        """
    )
    parser.add_argument("--code-sets", default=settings.CODE_SETS_FILE, help="Code-set JSON document")
    parser.add_argument("--log-level", default="WARNING", help="Log level")
    parser.add_argument("--version", action="version", version=f"{settings.PROJECT_NAME} {settings.VERSION}")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # validate
    validate_parser = subparsers.add_parser("validate", help="Validate scheduler options")
    payload_group = validate_parser.add_mutually_exclusive_group(required=True)
    payload_group.add_argument("payload", nargs="?", help="scheduler_options JSON text")
    payload_group.add_argument("--file", type=Path, help="File holding scheduler_options JSON")

    # list-codes
    codes_parser = subparsers.add_parser("list-codes", help="List the codes of an endpoint")
    codes_parser.add_argument("endpoint", help="Endpoint (e.g., codes/srodow)")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    configure_logging(args.log_level, enable_file_logging=settings.LOG_TO_FILE)
    source = JsonFileCodeMapSource(args.code_sets, ttl=settings.CODE_SETS_CACHE_TTL)

    try:
        if args.command == "validate":
            payload = args.file.read_text(encoding="utf-8") if args.file else args.payload
            success = cmd_validate(source, payload)
        else:
            success = cmd_list_codes(source, args.endpoint)
    except CodeSourceError as e:
        print(f"❌ {e.message}")
        return 2
    except OSError as e:
        print(f"❌ {e}")
        return 2

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
