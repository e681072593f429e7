from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. CSV and NAME:KIND parsing.
3. Flags that were not given stay out of the overrides.
"""

from podproject.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_boolean_flags_mapping():
    args = parse_args(["Foo", "--development", "--absolute", "--mirror"])

    overrides = args_to_overrides(args)

    assert overrides["development"] is True
    assert overrides["absolute"] is True
    assert overrides["reflect_file_system_structure"] is True


def test_cli_value_arguments():
    args = parse_args([
        "/pods/Foo",
        "-n", "Foo/Core",
        "--project-dir", "/pods",
        "--symroot", "/tmp/build",
        "--podfile", "/app/Podfile",
    ])

    overrides = args_to_overrides(args)

    assert args.pod_dir == "/pods/Foo"
    assert overrides["pod_name"] == "Foo/Core"
    assert overrides["project_dir"] == "/pods"
    assert overrides["symroot"] == "/tmp/build"
    assert overrides["podfile_path"] == "/app/Podfile"


def test_cli_configuration_parsing():
    args = parse_args(["Foo", "-c", "Beta:release", "--configuration", "QA:debug", "-c", "Staging"])

    overrides = args_to_overrides(args)

    assert overrides["configurations"] == {"Beta": "release", "QA": "debug", "Staging": "release"}


def test_cli_csv_exclude_parsing():
    args = parse_args(["Foo", "--exclude", r"^\., \.tmp$ ,"])

    overrides = args_to_overrides(args)

    assert overrides["exclude_patterns"] == [r"^\.", r"\.tmp$"]


def test_cli_omitted_flags_are_not_overrides():
    args = parse_args(["Foo"])

    assert args_to_overrides(args) == {}
    assert args.json_output is False
    assert args.debug is False
    assert args.config_file is None
    assert args.log_file is None
