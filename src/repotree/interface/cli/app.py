from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, configuration resolution
(defaults, user config file, CLI overrides), logging bootstrap, locale
selection, and dispatch to the tree client or the HTTP service.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from repotree.core.services.fetcher import fetch_and_render
from repotree.core.services.validator import validate_config
from repotree.domain.config import get_default_config, load_config
from repotree.infra.logging import LoggingConfig, configure_logging, get_logger
from repotree.interface.cli import args as cli_args
from repotree.interface.output import ConsoleOutput
from repotree.utils.i18n import i18n

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
        int: 0 on success, 1 when the command ends in an error state,
             2 on configuration errors, 130 when interrupted.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve configuration (defaults < user file < CLI)
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console on stderr, optional rotating file)
    configure_logging(LoggingConfig(
        level=clean_conf["log_level"],
        console=True,
        log_file=clean_conf["log_file"],
    ))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # 4. Locale selection
    if clean_conf["locale"] != i18n.locale and not i18n.load_locale(clean_conf["locale"]):
        print(f"ERROR: {i18n.t('cli.errors.unknown_locale', locale=clean_conf['locale'])}", file=sys.stderr)
        return 2

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 5. Command dispatch
    try:
        if args.command == "serve":
            from repotree.interface.api.app import serve

            serve(clean_conf)
            return 0

        ok = fetch_and_render(
            args.repo_url,
            ConsoleOutput(),
            server_url=clean_conf["server_url"],
            timeout=clean_conf["request_timeout"],
            max_depth=clean_conf["max_depth"],
        )
        return 0 if ok else 1

    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return 130
    except Exception as e:
        msg = i18n.t("cli.errors.pipeline_fail", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge override values into the base configuration.

    Only keys already present in `base` are merged, and None values mean
    "not given on the command line".

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
