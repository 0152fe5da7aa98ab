from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides.
"""

import argparse
from typing import Any, Dict

from detect_file.utils.i18n import SUPPORTED_LOCALES, i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the detect-file CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="detect-file",
        description=i18n.t("app.description"),
    )

    p.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help=i18n.t("cli.args.paths"),
    )

    # --- Resolution Options ---
    p.add_argument(
        "--nocase",
        action="store_true",
        default=None,
        help=i18n.t("cli.args.nocase"),
    )

    # --- Output ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        default=None,
        help=i18n.t("cli.args.json"),
    )
    p.add_argument(
        "--locale",
        choices=SUPPORTED_LOCALES,
        default=None,
        help=i18n.t("cli.args.locale"),
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump"),
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help=i18n.t("cli.args.save"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Flags the user did not pass map to None so they do not shadow the
    persisted configuration.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "nocase": args.nocase,
        "json_output": args.json_output,
        "locale": args.locale,
    }
    return overrides
