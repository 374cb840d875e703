from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema (verbs, flags, defaults) and translates the
parsed namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from fswalker.domain.constants import APP_NAME, APP_VERSION

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the fswalker CLI.

    Global flags are accepted both before and after the verb.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Walk directory trees, search them by name, and check path strings.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    _add_global_flags(p, suppress=False)

    # Subcommands re-declare the globals without defaults, so a flag given
    # before the verb is not reset by the subparser.
    shared = argparse.ArgumentParser(add_help=False)
    _add_global_flags(shared, suppress=True)

    sub = p.add_subparsers(dest="command", metavar="COMMAND")

    # --- dir ---
    p_dir = sub.add_parser(
        "dir", parents=[shared],
        help="List, render or measure the contents of directories.",
    )
    p_dir.add_argument("paths", nargs="*", metavar="PATH", help="Root directories (default: config).")
    mode = p_dir.add_mutually_exclusive_group()
    mode.add_argument("--tree", action="store_true", help="Render the hierarchy as a tree.")
    mode.add_argument("--size", action="store_true", help="Print the total size of files in bytes.")
    kind = p_dir.add_mutually_exclusive_group()
    kind.add_argument("--files-only", action="store_true", help="List files only.")
    kind.add_argument("--dirs-only", action="store_true", help="List directories only.")

    # --- search ---
    p_search = sub.add_parser(
        "search", parents=[shared],
        help="Find files or directories by exact name.",
    )
    p_search.add_argument("paths", nargs="*", metavar="PATH", help="Root directories (default: config).")
    p_search.add_argument("--file", dest="target_file", default=None, help="File name to look for.")
    p_search.add_argument("--dir", dest="target_dir", default=None, help="Directory name to look for.")

    # --- check ---
    p_check = sub.add_parser(
        "check", parents=[shared],
        help="Validate the structure of path strings (no disk access).",
    )
    p_check.add_argument("paths", nargs="+", metavar="PATH")

    # --- compare ---
    p_compare = sub.add_parser(
        "compare", parents=[shared],
        help="Tell whether two path strings denote the same location.",
    )
    p_compare.add_argument("path_a", metavar="PATH_A")
    p_compare.add_argument("path_b", metavar="PATH_B")

    return p


def _add_global_flags(p: argparse.ArgumentParser, *, suppress: bool) -> None:
    """Attach the flags shared by every verb."""
    def _default(value: Any) -> Any:
        return argparse.SUPPRESS if suppress else value

    # --- Format Selection ---
    p.add_argument(
        "--json", dest="json_output", action="store_true", default=_default(False),
        help="Emit machine-readable JSON.",
    )
    p.add_argument(
        "-o", "--output", dest="output_file", default=_default(None), metavar="FILE",
        help="Write results to FILE instead of stdout.",
    )
    p.add_argument(
        "--hidden-marker", dest="hidden_marker", default=_default(None), metavar="CHAR",
        help="Entries whose name starts with CHAR are skipped (default: '.').",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults", action="store_true", default=_default(False),
        help="Ignore the persisted configuration.",
    )
    p.add_argument(
        "--save-config", action="store_true", default=_default(False),
        help="Persist the resolved configuration as the last session.",
    )
    p.add_argument(
        "--dump-config", action="store_true", default=_default(False),
        help="Print the resolved configuration and exit.",
    )
    p.add_argument(
        "--debug", action="store_true", default=_default(False),
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file", dest="log_file", default=_default(None), metavar="FILE",
        help="Also write diagnostics to a rotating log file.",
    )

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a domain configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset. Unset values are None.
    """
    overrides: Dict[str, Any] = {}

    paths = getattr(args, "paths", None)
    overrides["root_paths"] = list(paths) if paths and args.command in ("dir", "search") else None

    overrides["target_file"] = getattr(args, "target_file", None)
    overrides["target_dir"] = getattr(args, "target_dir", None)
    overrides["hidden_marker"] = args.hidden_marker

    if args.json_output:
        overrides["output_format"] = "json"
    if args.debug:
        overrides["log_level"] = "DEBUG"
    if args.log_file:
        overrides["save_error_log"] = True

    return overrides

