from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Sub-command selection and positional arguments.
2. Mapping of CLI options to configuration keys.
3. Handling of boolean flags (store_true).
"""

import pytest

from repotree.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_fetch_options_mapping():
    args = parse_args([
        "fetch", "https://github.com/octo/hello",
        "--server", "http://srv:9000",
        "--timeout", "2.5",
        "--max-depth", "3",
        "--locale", "en",
    ])

    overrides = args_to_overrides(args)

    assert args.command == "fetch"
    assert args.repo_url == "https://github.com/octo/hello"
    assert overrides["server_url"] == "http://srv:9000"
    assert overrides["request_timeout"] == 2.5
    assert overrides["max_depth"] == 3
    assert overrides["locale"] == "en"
    assert overrides["port"] is None


def test_serve_options_mapping():
    args = parse_args(["serve", "--host", "127.0.0.1", "--port", "9090", "--branch", "dev", "--debug"])

    overrides = args_to_overrides(args)

    assert args.command == "serve"
    assert overrides["host"] == "127.0.0.1"
    assert overrides["port"] == 9090
    assert overrides["branch"] == "dev"
    assert overrides["log_level"] == "DEBUG"
    assert overrides["server_url"] is None


def test_common_flags_on_both_commands():
    for argv in (["fetch", "u", "--use-defaults", "--dump-config"], ["serve", "--use-defaults", "--dump-config"]):
        args = parse_args(argv)
        assert args.use_defaults is True
        assert args.dump_config is True


def test_defaults_are_none_in_overrides():
    """The merge step in app.py treats None as 'not given'."""
    overrides = args_to_overrides(parse_args(["fetch", "u"]))

    assert all(v is None for v in overrides.values())
    assert "log_level" not in overrides


def test_command_is_required():
    with pytest.raises(SystemExit):
        parse_args([])
