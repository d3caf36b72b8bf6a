"""
Rule Context and Violation Records.

A ``RuleContext`` is the only capability a rule receives. It is created per
file and per rule by the engine and exposes ``report`` as the sink for
diagnostics. Rules hold no other state.
"""

from typing import Callable, Optional, Tuple

import libcst as cst
from pydantic import BaseModel, Field

from convex_lint.core.classifier import node_kind
from convex_lint.enums import NodeKind

# Maps a node to its (line, column) start position.
Locator = Callable[[cst.CSTNode], Tuple[int, int]]
Reporter = Callable[["Violation"], None]


class Violation(BaseModel):
  """
  A single diagnostic emitted by a rule.
  """

  rule: str = Field(..., description="Identifier of the rule that reported.")
  message: str = Field(..., description="Human readable explanation.")
  line: int = Field(default=0, description="1-based start line, 0 when unknown.")
  column: int = Field(default=0, description="0-based start column.")
  node_kind: NodeKind = Field(default=NodeKind.OTHER, description="Kind of the anchored node.")
  path: Optional[str] = Field(default=None, description="Source file, if linting from disk.")

  def format(self) -> str:
    """
    Renders the violation as ``path:line:col: rule: message``.

    Returns:
        str: One-line representation.
    """
    location = f"{self.path or '<string>'}:{self.line}:{self.column}"
    return f"{location}: {self.rule}: {self.message}"


class RuleContext:
  """
  Per-file capability handed to a rule's ``create`` function.
  """

  def __init__(
    self,
    rule_name: str,
    reporter: Reporter,
    locate: Optional[Locator] = None,
    path: Optional[str] = None,
  ):
    """
    Initializes the context.

    Args:
        rule_name: Identifier stamped on every violation.
        reporter: Sink receiving each violation.
        locate: Resolves source positions. Positions default to 0:0 without it.
        path: Source file being linted.
    """
    self.rule_name = rule_name
    self.path = path
    self._reporter = reporter
    self._locate = locate

  def report(self, node: cst.CSTNode, message: str) -> None:
    """
    Reports a violation anchored at ``node``.

    Args:
        node: The offending node or sub-node.
        message: Diagnostic text.
    """
    line, column = self._locate(node) if self._locate else (0, 0)
    self._reporter(
      Violation(
        rule=self.rule_name,
        message=message,
        line=line,
        column=column,
        node_kind=node_kind(node),
        path=self.path,
      )
    )
