"""
convex-lint Package.

Static-analysis rules for Convex-style backend code. The rules inspect
libcst syntax trees and flag legacy function registrations, registrations
without an ``args`` validator, and database accessor calls missing an
explicit table name.

Usage
-----

.. code-block:: python

    import convex_lint

    for violation in convex_lint.lint("doc = ctx.db.get(doc_id)"):
        print(violation.format())
    # <string>:1:6: explicit-table-ids: Use explicit table name: ...

Hosts that bring their own traversal use the rule table directly:

.. code-block:: python

    from convex_lint import get_plugin

    plugin = get_plugin()
    rule = plugin.rules["require-args-validator"]
    hooks = rule.hooks(context)  # {"Call": callback}
"""

from typing import List, Optional, Sequence

from convex_lint.config import LintConfig
from convex_lint.core.context import RuleContext, Violation
from convex_lint.core.engine import LintEngine, LintResult
from convex_lint.core.registry import PLUGIN_VERSION, get_plugin, get_rule, get_rules

__version__ = PLUGIN_VERSION


def lint(code: str, rules: Optional[Sequence[str]] = None) -> List[Violation]:
  """
  Lints a string of Python code.

  Args:
      code (str): The source code to check.
      rules (Sequence[str], optional): Rule identifiers to run. Defaults to all.

  Returns:
      List[Violation]: Reports sorted by position.

  Raises:
      ValueError: If the code cannot be parsed or a rule is unknown.
  """
  result = LintEngine(rules=rules).run(code)
  if not result.success:
    raise ValueError("\n".join(result.errors))
  return result.violations


__all__ = [
  "LintConfig",
  "LintEngine",
  "LintResult",
  "RuleContext",
  "Violation",
  "__version__",
  "get_plugin",
  "get_rule",
  "get_rules",
  "lint",
]
