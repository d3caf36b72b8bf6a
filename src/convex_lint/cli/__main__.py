"""
Main Entry Point for the convex-lint CLI.

This module handles argument parsing and dispatches to the handlers in
``convex_lint.cli.handlers``.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from convex_lint import __version__
from convex_lint.cli.handlers import handle_check, handle_rules


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 clean, 1 violations or failures, 2 bad configuration).
  """
  parser = argparse.ArgumentParser(description="convex-lint: Static checks for Convex function code")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: CHECK ---
  cmd_check = subparsers.add_parser("check", help="Lint a Python file or directory")
  cmd_check.add_argument("path", type=Path, help="Input source file or directory")
  cmd_check.add_argument("--enable", nargs="+", default=None, help="Run only these rules")
  cmd_check.add_argument("--disable", nargs="+", default=None, help="Skip these rules")
  cmd_check.add_argument("--exclude", nargs="+", default=None, help="Glob patterns of paths to skip")
  cmd_check.add_argument("--json", action="store_true", help="Print violations as JSON to stdout")

  # --- Command: RULES ---
  cmd_rules = subparsers.add_parser("rules", help="List available rules")
  cmd_rules.add_argument("--json", action="store_true", help="Print rule metadata as JSON")

  args = parser.parse_args(argv)

  if args.command == "check":
    return handle_check(
      args.path,
      enable=args.enable,
      disable=args.disable,
      exclude=args.exclude,
      json_mode=args.json,
    )

  if args.command == "rules":
    return handle_rules(json_mode=args.json)

  return 0
