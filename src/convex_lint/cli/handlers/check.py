"""
Check Command Handler.

Runs the lint engine over files or directories and renders the violations
as a Rich table or as JSON.
"""

import json
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table

from convex_lint.config import LintConfig
from convex_lint.core.engine import LintEngine, LintResult
from convex_lint.utils.console import console, log_error, log_info, log_success


def handle_check(
  path: Path,
  enable: Optional[List[str]] = None,
  disable: Optional[List[str]] = None,
  exclude: Optional[List[str]] = None,
  json_mode: bool = False,
) -> int:
  """
  Lints a file or directory.

  Args:
      path: Input source file or directory.
      enable: Restrict the run to these rules.
      disable: Skip these rules.
      exclude: Extra glob patterns of paths to skip.
      json_mode: If True, output JSON to stdout and suppress informational logs.

  Returns:
      int: 0 if clean, 1 on violations or unreadable input, 2 on invalid configuration.
  """
  if not path.exists():
    log_error(f"Path not found: {path}")
    return 1

  search_dir = path if path.is_dir() else path.parent
  try:
    config = LintConfig.load(enable=enable, disable=disable, exclude=exclude, search_path=search_dir)
  except (ValidationError, ValueError) as e:
    log_error(f"Invalid configuration: {escape(str(e))}")
    return 2

  engine = LintEngine(config=config)

  if not json_mode:
    log_info(f"Checking [path]{path}[/path] with {len(engine.rules)} rule(s)...")

  results = engine.run_path(path)
  violations = [v for r in results for v in r.violations]
  failed = [r for r in results if not r.success]

  if json_mode:
    print(json.dumps(_to_json(results), indent=2))
    return 1 if violations or failed else 0

  for result in failed:
    for error in result.errors:
      log_error(f"{result.path}: {escape(error)}")

  if violations:
    table = Table(title="Convex lint violations")
    table.add_column("Location", style="bold blue")
    table.add_column("Rule", style="bold magenta")
    table.add_column("Message")

    for v in violations:
      table.add_row(f"{v.path}:{v.line}:{v.column}", v.rule, v.message)

    console.print(table)

  console.print(f"[bold]Checked {len(results)} file(s)[/bold]")
  console.print(f"Violations:    [red]{len(violations)}[/red]")
  console.print(f"Parse errors:  [red]{len(failed)}[/red]")

  if not violations and not failed:
    log_success("No problems found.")
    return 0
  return 1


def _to_json(results: List[LintResult]) -> List[dict]:
  """
  Flattens results into a JSON-serializable list.

  Violations come first as dicts with ``path``, ``line``, ``column``, ``rule``,
  ``message``; files that failed to parse follow with an ``error`` key.
  """
  output = []
  for result in results:
    for v in result.violations:
      output.append(v.model_dump(mode="json", include={"path", "line", "column", "rule", "message"}))
  for result in results:
    for error in result.errors:
      output.append({"path": result.path, "error": error})
  return output
