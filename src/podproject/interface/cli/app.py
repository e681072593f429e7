from __future__ import annotations

"""
Command Line Interface Application Controller.

Orchestrates a CLI run: logging bootstrap, configuration resolution (defaults,
JSON file, command-line overrides), Pod registration and result rendering.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from podproject.core.analysis.tree_renderer import render_project_tree
from podproject.core.services.installer import RegistrationResult, register_pod_directory
from podproject.domain.config import load_config, validate_config
from podproject.domain.errors import ProjectError
from podproject.infra.logging import LoggingConfig, configure_logging, get_logger
from podproject.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 1 on project errors, 2 when the Pod directory is missing.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 1. Resolve configuration (defaults < file < flags)
    raw_conf = load_config(args.config_file)
    raw_conf.update(cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf)
    for w in warnings:
        print(f"WARNING: {w}", file=sys.stderr)

    # 2. Pre-flight input verification
    pod_dir = os.path.abspath(args.pod_dir)
    if not os.path.isdir(pod_dir):
        msg = f"Pod directory does not exist: {pod_dir}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 3. Registration
    logger.info(f"Registering Pod directory: {pod_dir}")
    try:
        result = register_pod_directory(pod_dir, clean_conf)
    except ProjectError as e:
        logger.error(f"Project error: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    # 4. Output rendering
    if args.json_output:
        print(json.dumps(_json_payload(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)
    return 0

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _json_payload(result: RegistrationResult) -> Dict[str, Any]:
    payload = result.to_summary()
    payload["tree"] = render_project_tree(result.project.main_group)
    return payload


def _print_human_summary(result: RegistrationResult) -> None:
    for line in render_project_tree(result.project.main_group):
        print(line)
    print()
    print(f"Pod: {result.pod_name}")
    print(f"Files registered: {result.files_added}")
    print(f"Variant groups: {result.variant_groups}")


if __name__ == "__main__":
    sys.exit(main())
