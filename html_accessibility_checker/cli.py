# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Command-line interface for the html_accessibility_checker package.

This module provides a command-line interface for auditing HTML files and
adding missing alt text.
"""

import sys
import argparse
import logging
from typing import Any, Dict, List, Optional

from html_accessibility_checker import __version__
from html_accessibility_checker.api import (
    audit_html_accessibility,
    fix_missing_alt_text,
)
from html_accessibility_checker.audit.registry import FAMILY_ORDER
from html_accessibility_checker.audit.report_generator import REPORT_FORMATS
from html_accessibility_checker.utils.config import config_manager, load_config_file
from html_accessibility_checker.utils.logging_helper import (
    ConfigurationError,
    set_package_log_level,
    setup_logger,
)

# Set up module-level logger
logger = setup_logger(__name__)


def configure_logging(debug: bool = False, quiet: bool = False) -> None:
    """Configure logging based on debug and quiet flags."""
    if quiet:
        level = logging.ERROR
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(level=level)
    logging.getLogger().setLevel(level)
    set_package_log_level(level)


def _add_standardized_arguments(parser: argparse.ArgumentParser) -> None:
    """Add standardized arguments that are common across all commands."""
    parser.add_argument("--input", "-i", required=True, help="Input HTML file path")
    parser.add_argument(
        "--output",
        "-o",
        help="Output file path. If not provided, results go to stdout or the input file",
    )

    # Common options
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only output reports, suppress other output",
    )
    parser.add_argument("--config", "-c", help="Path to configuration file")


def _add_audit_arguments(parser: argparse.ArgumentParser) -> None:
    """Add accessibility audit arguments to the audit command parser."""
    _add_standardized_arguments(parser)

    parser.add_argument(
        "--format",
        "-f",
        choices=list(REPORT_FORMATS),
        default=None,
        help="Output format for audit report (default: text)",
    )
    parser.add_argument(
        "--severity",
        choices=["high", "medium", "low"],
        default=None,
        help="Minimum severity level to include in report (default: low)",
    )
    parser.add_argument(
        "--families",
        help=f"Comma-separated list of check families to run ({', '.join(FAMILY_ORDER)})",
    )


def _add_fix_alt_arguments(parser: argparse.ArgumentParser) -> None:
    """Add alt text repair arguments to the fix-alt command parser."""
    _add_standardized_arguments(parser)

    parser.add_argument(
        "--line", type=int, help="1-based line number of the image to fix"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print suggested alt text without modifying any file",
    )
    parser.add_argument("--profile", help="AWS profile name to use for credentials")
    parser.add_argument("--model-id", help="Bedrock model ID to use")


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="html-a11y",
        description="Check HTML source for accessibility issues and add missing alt text.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    audit_parser = subparsers.add_parser(
        "audit",
        help="Audit HTML for accessibility issues",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    _add_audit_arguments(audit_parser)

    fix_alt_parser = subparsers.add_parser(
        "fix-alt",
        help="Generate alt text for images that lack it",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    _add_fix_alt_arguments(fix_alt_parser)

    # Version information
    parser.add_argument(
        "--version", action="store_true", help="Show version information"
    )

    return parser


def parse_arguments(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    """Parse command-line arguments and load any configuration file."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"HTML Accessibility Checker v{__version__}")
        sys.exit(0)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    configure_logging(debug=args.debug, quiet=args.quiet)

    args_dict = vars(args)

    if args_dict.get("config"):
        config_path = args_dict["config"]
        try:
            logger.info(f"Loading configuration from {config_path}")
            config_manager.load_user_config(load_config_file(config_path))
        except ConfigurationError as e:
            logger.error(f"Configuration error: {e}")
            print(f"Error: {e}")
            sys.exit(1)

    return args_dict


def run_audit_command(args: Dict[str, Any]) -> int:
    """Run the accessibility audit command."""
    try:
        options = {
            "min_severity": args.get("severity"),
            "report_format": args.get("format"),
        }
        if args.get("families"):
            options["families"] = [f.strip() for f in args["families"].split(",")]

        if not args.get("quiet"):
            logger.info(f"Auditing HTML for accessibility: {args['input']}")

        result = audit_html_accessibility(
            html_path=args["input"], options=options, output_path=args.get("output")
        )

        if not args.get("output"):
            print(result["report"])
        elif not args.get("quiet"):
            print(f"Audit report saved to: {result['report_path']}")

        return 0

    except Exception as e:
        logger.error(f"Error in accessibility audit: {e}")
        if not args.get("quiet"):
            print(f"Error: {e}")
        return 1


def run_fix_alt_command(args: Dict[str, Any]) -> int:
    """Run the alt text repair command."""
    try:
        options = {
            "profile": args.get("profile"),
            "model_id": args.get("model_id"),
        }

        result = fix_missing_alt_text(
            html_path=args["input"],
            options=options,
            output_path=args.get("output"),
            line=args.get("line"),
            dry_run=args.get("dry_run", False),
        )

        for item in result["results"]:
            line_number = item["line_index"] + 1
            if item["success"]:
                label = "(decorative)" if item["decorative"] else f'"{item["alt_text"]}"'
                print(f"Line {line_number}: {item['image_src']} -> {label}")
            else:
                print(f"Line {line_number}: failed - {item['error']}")

        if not result["results"]:
            print("No images without alt text found")
        elif result["output_path"] and not args.get("quiet"):
            print(f"Updated file: {result['output_path']}")

        return 0 if result["failed"] == 0 else 1

    except Exception as e:
        logger.error(f"Error fixing alt text: {e}")
        if not args.get("quiet"):
            print(f"Error: {e}")
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    try:
        args = parse_arguments(argv)

        if args["command"] == "audit":
            return run_audit_command(args)
        elif args["command"] == "fix-alt":
            return run_fix_alt_command(args)
        else:
            print("No command specified")
            return 1

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
