"""
Lint Engine.

Drives the registered rules over a source module:

1.  **Parsing**: ``libcst.parse_module``. Syntax errors become result errors,
    not exceptions.
2.  **Metadata**: ``PositionProvider`` resolves line/column for reports.
3.  **Hook collection**: every active rule gets its own ``RuleContext`` and
    returns a mapping of node class name to callback.
4.  **Dispatch**: a single visitor walks the tree once and calls every hook
    registered for the node's class.

A fresh context is built for each run, so repeated runs over the same code
produce identical reports.
"""

from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

import libcst as cst
from libcst.metadata import MetadataWrapper, PositionProvider
from pydantic import BaseModel, Field

from convex_lint.config import LintConfig
from convex_lint.core.context import RuleContext, Violation
from convex_lint.core.registry import Hook, Rule, get_rule

# Directory names never descended into when walking a tree.
SKIPPED_DIRS = frozenset({"node_modules", "__pycache__"})


class LintResult(BaseModel):
  """
  Outcome of linting a single module.
  """

  path: Optional[str] = Field(default=None, description="Source file, None for in-memory code.")
  violations: List[Violation] = Field(default_factory=list, description="Reports, sorted by position.")
  errors: List[str] = Field(default_factory=list, description="Parse or read failures.")
  success: bool = Field(default=True, description="False if the module could not be analysed.")

  @property
  def has_violations(self) -> bool:
    """True if any rule reported."""
    return len(self.violations) > 0


class _HookDispatcher(cst.CSTVisitor):
  """
  Visits every node and forwards it to the hooks keyed by its class name.
  """

  def __init__(self, hooks: Dict[str, List[Hook]]):
    self._hooks = hooks

  def on_visit(self, node: cst.CSTNode) -> bool:
    for hook in self._hooks.get(type(node).__name__, ()):
      hook(node)
    return True


class LintEngine:
  """
  Runs a selection of rules over source code, files or directories.
  """

  def __init__(self, rules: Optional[Sequence[str]] = None, config: Optional[LintConfig] = None):
    """
    Initializes the Engine.

    Args:
        rules: Explicit rule identifiers. Overrides ``config`` when given.
        config: Configuration; defaults select every registered rule.

    Raises:
        ValueError: If a rule identifier is not registered.
    """
    self.config = config or LintConfig()
    selected = list(rules) if rules is not None else self.config.active_rules
    self.rules: List[Rule] = []
    for name in selected:
      rule = get_rule(name)
      if rule is None:
        raise ValueError(f"Unknown rule: '{name}'")
      self.rules.append(rule)

  def run(self, code: str, path: Optional[str] = None) -> LintResult:
    """
    Lints a source string.

    Args:
        code: Python source text.
        path: Label stamped on violations.

    Returns:
        LintResult: Violations sorted by (line, column, rule).
    """
    try:
      module = cst.parse_module(code)
    except cst.ParserSyntaxError as e:
      return LintResult(path=path, errors=[f"Parse error: {e.message} (line {e.raw_line})"], success=False)

    wrapper = MetadataWrapper(module)
    positions = wrapper.resolve(PositionProvider)

    def locate(node: cst.CSTNode) -> Tuple[int, int]:
      code_range = positions.get(node)
      if code_range is None:
        return 0, 0
      return code_range.start.line, code_range.start.column

    violations: List[Violation] = []
    hooks: Dict[str, List[Hook]] = defaultdict(list)
    for rule in self.rules:
      context = RuleContext(rule.name, violations.append, locate=locate, path=path)
      for kind, hook in rule.hooks(context).items():
        hooks[kind].append(hook)

    wrapper.module.visit(_HookDispatcher(hooks))

    violations.sort(key=lambda v: (v.line, v.column, v.rule))
    return LintResult(path=path, violations=violations)

  def run_file(self, path: Path) -> LintResult:
    """
    Lints one file from disk.

    Args:
        path: Python source file.

    Returns:
        LintResult: The result; read failures are recorded in ``errors``.
    """
    try:
      code = path.read_text("utf-8")
    except (OSError, UnicodeDecodeError) as e:
      return LintResult(path=str(path), errors=[f"Read error: {e}"], success=False)
    return self.run(code, path=str(path))

  def run_path(self, path: Union[str, Path]) -> List[LintResult]:
    """
    Lints a file or every ``*.py`` file below a directory.

    Paths matching ``config.exclude`` are skipped, and directory walks never
    enter hidden directories (``.venv``, ``.git``) or ``node_modules``.

    Args:
        path: File or directory.

    Returns:
        List[LintResult]: One result per linted file, in sorted path order.
    """
    root = Path(path)
    if root.is_file():
      files = [root]
    else:
      files = [f for f in sorted(root.rglob("*.py")) if not _in_skipped_dir(f.relative_to(root))]
    return [self.run_file(f) for f in files if not self.config.is_excluded(f)]


def _in_skipped_dir(relative: Path) -> bool:
  """True if any parent directory of ``relative`` is hidden or a vendored package tree."""
  return any(part.startswith(".") or part in SKIPPED_DIRS for part in relative.parts[:-1])
