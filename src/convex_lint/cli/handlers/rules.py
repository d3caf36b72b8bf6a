"""
Rules Command Handler.

Lists the registered rules and their declared metadata.
"""

import json

from rich.table import Table

from convex_lint.core.registry import PLUGIN_NAME, PLUGIN_VERSION, describe_rules
from convex_lint.utils.console import console


def handle_rules(json_mode: bool = False) -> int:
  """
  Prints the rule table.

  Args:
      json_mode: If True, print a JSON list to stdout instead of a table.

  Returns:
      int: Always 0.
  """
  rules = describe_rules()

  if json_mode:
    print(json.dumps(rules, indent=2))
    return 0

  table = Table(title=f"{PLUGIN_NAME} {PLUGIN_VERSION}")
  table.add_column("Rule", style="bold magenta")
  table.add_column("Type", style="cyan")
  table.add_column("Fixable", style="dim")
  table.add_column("Description")

  for rule in rules:
    table.add_row(rule["name"], rule["type"], str(rule["fixable"] or "-"), rule["description"])

  console.print(table)
  return 0
