from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: resolution of the configuration hierarchy
(defaults, persisted session, command-line overrides), logging bootstrap,
verb dispatch and result rendering. The controller owns no traversal
logic; every verb delegates to the core services.

Exit codes:
    0   success
    1   negative result (invalid path, paths differ) or runtime failure
    2   usage error or inaccessible root
    130 interrupted
"""

import argparse
import json
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple

from fswalker.core.analysis.tree_builder import get_nested_structure
from fswalker.core.analysis.tree_renderer import render_tree
from fswalker.core.services.listing import list_paths
from fswalker.core.services.search import traverse_fs
from fswalker.core.services.size import get_directory_size
from fswalker.core.traversal.reporters import FailureCollector
from fswalker.core.validation.config_validator import validate_config
from fswalker.core.validation.path_structure import (
    PathKind,
    classify_path,
    normalize_path,
    paths_equal,
)
from fswalker.domain.config import get_default_config, load_config, save_config
from fswalker.domain.search_models import SearchConfig
from fswalker.infra.fs import normalize_input_path, write_lines
from fswalker.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
    shutdown_logging,
)
from fswalker.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_NEGATIVE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# A verb returns its exit code and the output lines (or JSON payload)
CommandOutcome = Tuple[int, Any]

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve base configuration (Default vs Persistent state)
    base_conf = get_default_config() if args.use_defaults else load_config()

    # 3. Map, merge and validate command-line overrides
    overrides = cli_args.args_to_overrides(args)
    clean_conf, warnings = validate_config(_merge_config(base_conf, overrides), strict=False)

    # 4. Logging bootstrap (stderr, plus optional rotating file)
    log_file = args.log_file
    if not log_file and clean_conf["save_error_log"]:
        log_file = get_default_log_path()
    configure_logging(
        LoggingConfig(level=clean_conf["log_level"], console=True, log_file=log_file),
        force=True,
    )

    try:
        for w in warnings:
            logger.warning(f"Configuration Constraint: {w}")

        if args.save_config:
            save_config(clean_conf)

        if args.dump_config:
            print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
            return EXIT_OK

        if not args.command:
            parser.print_usage(sys.stderr)
            print(f"{parser.prog}: error: a command is required", file=sys.stderr)
            return EXIT_USAGE

        return _dispatch(args, clean_conf)
    finally:
        shutdown_logging()

# -----------------------------------------------------------------------------
# DISPATCH
# -----------------------------------------------------------------------------

def _dispatch(args: argparse.Namespace, conf: Dict[str, Any]) -> int:
    """Run the selected verb and emit its output."""
    handlers: Dict[str, Callable[[argparse.Namespace, Dict[str, Any]], CommandOutcome]] = {
        "dir": _run_dir,
        "search": _run_search,
        "check": _run_check,
        "compare": _run_compare,
    }
    as_json = conf["output_format"] == "json"

    logger.debug(f"Dispatching '{args.command}' with roots={conf['root_paths']}")
    try:
        code, payload = handlers[args.command](args, conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.critical(f"Command '{args.command}' failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_NEGATIVE

    if payload is None:
        return code

    lines = json.dumps(payload, ensure_ascii=False, indent=2).splitlines() if as_json else payload
    if not _emit(lines, args.output_file):
        return EXIT_NEGATIVE
    return code

# -----------------------------------------------------------------------------
# VERBS
# -----------------------------------------------------------------------------

def _run_dir(args: argparse.Namespace, conf: Dict[str, Any]) -> CommandOutcome:
    marker = conf["hidden_marker"]
    as_json = conf["output_format"] == "json"
    lines: List[str] = []
    results: List[Dict[str, Any]] = []
    code = EXIT_OK

    for raw_root in conf["root_paths"]:
        root = normalize_input_path(raw_root, fallback=".")
        collector = FailureCollector()
        entry: Dict[str, Any] = {"root": root}

        if args.size:
            total = get_directory_size(root, on_error=collector, hidden_marker=marker)
            entry["size"] = total
            lines.append(f"{total}\t{root}")
        elif args.tree:
            nodes = get_nested_structure(root, on_error=collector, hidden_marker=marker)
            entry["children"] = [n.to_dict() for n in nodes] if nodes is not None else None
            if nodes is not None:
                lines.extend(render_tree(nodes, root_label=root))
        else:
            paths = list_paths(
                root,
                include_files=not args.dirs_only,
                include_dirs=not args.files_only,
                on_error=collector,
                hidden_marker=marker,
            )
            entry["paths"] = paths
            lines.extend(paths)

        entry["errors"] = collector.messages
        results.append(entry)
        if collector.root_failed:
            code = EXIT_USAGE

    return code, ({"results": results} if as_json else lines)


def _run_search(args: argparse.Namespace, conf: Dict[str, Any]) -> CommandOutcome:
    config = SearchConfig.from_mapping(conf)
    if config.is_empty:
        print("ERROR: search needs --file and/or --dir.", file=sys.stderr)
        return EXIT_USAGE, None

    roots = [normalize_input_path(r, fallback=".") for r in conf["root_paths"]]
    collector = FailureCollector()
    result = traverse_fs(roots, config, on_error=collector, hidden_marker=conf["hidden_marker"])

    code = EXIT_USAGE if collector.root_failed else EXIT_OK
    if conf["output_format"] == "json":
        payload = result.to_dict()
        payload["errors"] = collector.messages
        return code, payload

    data = result.to_dict()
    lines = [f"file\t{p}" for p in data["filesFound"]] + [f"dir\t{p}" for p in data["dirsFound"]]
    return code, lines


def _run_check(args: argparse.Namespace, conf: Dict[str, Any]) -> CommandOutcome:
    kinds = [(p, classify_path(p)) for p in args.paths]
    code = EXIT_OK if all(k is not PathKind.INVALID for _, k in kinds) else EXIT_NEGATIVE

    if conf["output_format"] == "json":
        return code, [
            {"path": p, "valid": k is not PathKind.INVALID, "kind": k.value}
            for p, k in kinds
        ]
    return code, [f"{k.value}\t{p}" for p, k in kinds]


def _run_compare(args: argparse.Namespace, conf: Dict[str, Any]) -> CommandOutcome:
    same = paths_equal(args.path_a, args.path_b)
    code = EXIT_OK if same else EXIT_NEGATIVE

    if conf["output_format"] == "json":
        return code, {
            "pathA": args.path_a,
            "pathB": args.path_b,
            "normalizedA": normalize_path(args.path_a),
            "normalizedB": normalize_path(args.path_b),
            "equal": same,
        }
    return code, ["same" if same else "different"]

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of override values into the base configuration.

    Only known keys with a non-None value are merged.
    """
    out = dict(base)
    keys_to_merge = [
        "root_paths", "target_file", "target_dir", "hidden_marker",
        "output_format", "log_level", "save_error_log",
    ]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _emit(lines: List[str], output_file: Optional[str]) -> bool:
    """Print lines to stdout, or persist them when an output file is set."""
    if not output_file:
        for line in lines:
            print(line)
        return True

    ok, err = write_lines(output_file, lines)
    if not ok:
        logger.error(f"Could not write output to {output_file}: {err}")
        print(f"ERROR: cannot write {output_file}: {err}", file=sys.stderr)
        return False
    logger.info(f"Output written to {output_file}")
    return True


if __name__ == "__main__":
    sys.exit(main())
