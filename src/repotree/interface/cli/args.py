from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the `repotree fetch` and `repotree serve` command schemas and
translates parsed namespaces into configuration overrides.
"""

import argparse
from typing import Any, Dict

from repotree.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the RepoTree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )
    common.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )
    common.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump"),
    )
    common.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )

    p = argparse.ArgumentParser(
        prog="repotree",
        description=i18n.t("app.description"),
    )
    sub = p.add_subparsers(dest="command", required=True)

    # --- Client ---
    fetch = sub.add_parser("fetch", parents=[common], help=i18n.t("cli.commands.fetch"))
    fetch.add_argument("repo_url", help=i18n.t("cli.args.repo_url"))
    fetch.add_argument(
        "-s", "--server",
        dest="server_url",
        default=None,
        help=i18n.t("cli.args.server"),
    )
    fetch.add_argument(
        "--timeout",
        dest="request_timeout",
        type=float,
        default=None,
        help=i18n.t("cli.args.timeout"),
    )
    fetch.add_argument(
        "--max-depth",
        dest="max_depth",
        type=int,
        default=None,
        help=i18n.t("cli.args.max_depth"),
    )
    fetch.add_argument(
        "--locale",
        dest="locale",
        default=None,
        help=i18n.t("cli.args.locale"),
    )

    # --- Server ---
    serve = sub.add_parser("serve", parents=[common], help=i18n.t("cli.commands.serve"))
    serve.add_argument("--host", dest="host", default=None, help=i18n.t("cli.args.host"))
    serve.add_argument("--port", dest="port", type=int, default=None, help=i18n.t("cli.args.port"))
    serve.add_argument("--branch", dest="branch", default=None, help=i18n.t("cli.args.branch"))

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Options absent from the chosen sub-command map to None and are ignored
    by the merge step.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    for key in ("server_url", "request_timeout", "max_depth", "locale", "host", "port", "branch", "log_file"):
        overrides[key] = getattr(args, key, None)

    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
