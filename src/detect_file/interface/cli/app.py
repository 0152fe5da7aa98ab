from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, persisted file, environment, CLI flags), resolution of every
requested path and result rendering.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from detect_file.core.resolver import ResolveOptions, Resolver
from detect_file.core.validator import validate_config
from detect_file.domain.config import (
    apply_env_overrides,
    get_default_config,
    load_config,
    save_config,
)
from detect_file.domain.models import ResolveResult
from detect_file.infra.logging import LoggingConfig, configure_logging, get_logger
from detect_file.interface.cli import args as cli_args
from detect_file.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 if every path resolved, 1 if any did not, 2 on usage errors.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Configuration hierarchy: defaults/persisted -> environment -> flags
    base_conf = get_default_config() if args.use_defaults else load_config()
    base_conf = apply_env_overrides(base_conf)
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 2. Logging bootstrap (console stderr, optional file) and UI language
    logging_conf = LoggingConfig.for_cli(clean_conf["log_level"], args.debug, args.log_file)
    configure_logging(logging_conf, force=True)
    i18n.load_locale(clean_conf["locale"])

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config:
        save_config(clean_conf)

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    if not args.paths:
        msg = i18n.t("cli.errors.no_paths")
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 3. Resolution phase
    resolver = Resolver()
    options = ResolveOptions(nocase=clean_conf["nocase"])
    logger.debug(f"Resolving {len(args.paths)} path(s) with {options} ({resolver.convention.name}).")

    results = [resolver.detect_detailed(p, options) for p in args.paths]

    # 4. Rendering phase
    if clean_conf["json_output"]:
        print(json.dumps([r.to_dict() for r in results], ensure_ascii=False, indent=2))
    else:
        _print_human_summary(results)

    return 0 if all(r.ok for r in results) else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-None override values into the base configuration.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(results: List[ResolveResult]) -> None:
    """Print resolved paths to stdout and misses to stderr."""
    for result in results:
        if result.ok:
            print(result.path)
        else:
            print(i18n.t("cli.status.not_found", path=result.requested), file=sys.stderr)

    if len(results) > 1:
        resolved = sum(1 for r in results if r.ok)
        logger.info(i18n.t("cli.status.summary", resolved=resolved, total=len(results)))


if __name__ == "__main__":
    sys.exit(main())
