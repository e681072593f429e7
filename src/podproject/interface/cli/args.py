from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by `validate_config`.
"""

import argparse
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="podproject",
        description="Register a Pod directory into a Pods project and print the resulting group tree.",
    )

    p.add_argument("pod_dir", help="Root directory of the Pod to register.")

    # --- Pod registration ---
    p.add_argument(
        "-n", "--name",
        dest="pod_name",
        default=None,
        help="Pod name (defaults to the directory name). May be a 'Pod/Subspec' path.",
    )
    p.add_argument(
        "--development",
        action="store_true",
        help="Register the Pod under 'Development Pods'.",
    )
    p.add_argument(
        "--absolute",
        action="store_true",
        help="Store the Pod group path as absolute.",
    )
    p.add_argument(
        "--mirror",
        action="store_true",
        help="Create one group per directory between the Pod root and each file.",
    )

    # --- Project ---
    p.add_argument(
        "--project-dir",
        dest="project_dir",
        default=None,
        help="Directory holding Pods.xcodeproj (defaults to the Pod's parent directory).",
    )
    p.add_argument("--symroot", default=None, help="Override the SYMROOT build setting.")
    p.add_argument("--podfile", dest="podfile_path", default=None, help="Path of the Podfile to reference.")
    p.add_argument(
        "-c", "--configuration",
        dest="configurations",
        action="append",
        default=None,
        metavar="NAME:KIND",
        help="Extra build configuration, KIND is debug or release. Repeatable.",
    )
    p.add_argument("--exclude", dest="exclude_patterns", default=None, help="Comma separated exclude regexes.")

    # --- Configuration and diagnostics ---
    p.add_argument("--config-file", dest="config_file", default=None, help="JSON configuration file.")
    p.add_argument("--json", dest="json_output", action="store_true", help="Print a JSON summary.")
    p.add_argument("--debug", action="store_true", help="Elevate logging verbosity to DEBUG.")
    p.add_argument("--log-file", dest="log_file", default=None, help="Also write logs to this file.")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Flags that were not given are left out so they do not mask values loaded
    from a configuration file.
    """
    overrides: Dict[str, Any] = {}

    if args.pod_name is not None:
        overrides["pod_name"] = args.pod_name
    if args.development:
        overrides["development"] = True
    if args.absolute:
        overrides["absolute"] = True
    if args.mirror:
        overrides["reflect_file_system_structure"] = True

    if args.project_dir is not None:
        overrides["project_dir"] = args.project_dir
    if args.symroot is not None:
        overrides["symroot"] = args.symroot
    if args.podfile_path is not None:
        overrides["podfile_path"] = args.podfile_path
    if args.configurations:
        overrides["configurations"] = _parse_configurations(args.configurations)
    if args.exclude_patterns:
        overrides["exclude_patterns"] = _split_csv(args.exclude_patterns)

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _parse_configurations(values: List[str]) -> Dict[str, str]:
    """'Beta:release' -> {'Beta': 'release'}; a missing kind defaults to release."""
    out: Dict[str, str] = {}
    for value in values:
        name, _, kind = value.rpartition(":")
        if not name:
            name, kind = kind, "release"
        out[name.strip()] = kind.strip()
    return out


def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    if value is None:
        return None
    return [x.strip() for x in value.split(",") if x.strip()]
