"""
Rule: no-old-registered-function-syntax.

Flags Convex registrations that receive a bare function instead of a
configuration object::

    get_user = query(lambda ctx, args: ...)                 # reported
    get_user = query({"args": {...}, "handler": get_impl})  # ok
"""

from typing import Dict

import libcst as cst

from convex_lint.core.classifier import argument_kind, first_argument, is_registration_call, node_kind
from convex_lint.core.context import RuleContext
from convex_lint.core.registry import Hook, register_rule
from convex_lint.enums import NodeKind

RULE_NAME = "no-old-registered-function-syntax"
MESSAGE = "Use object syntax with 'handler' property instead of passing a function directly"


@register_rule(RULE_NAME, "Prefer object syntax for registered Convex functions")
def create(context: RuleContext) -> Dict[str, Hook]:
  """
  Builds the ``Call`` hook for one file.

  Args:
      context: Reporting capability.

  Returns:
      Dict[str, Hook]: The visitation hooks.
  """

  def visit_call(node: cst.Call) -> None:
    if node_kind(node) is not NodeKind.CALL or not is_registration_call(node):
      return

    arg = first_argument(node)
    if arg is None:
      return

    # Names are not resolved to their definitions.
    if argument_kind(arg) is NodeKind.FUNCTION_LITERAL:
      context.report(arg.value, MESSAGE)

  return {"Call": visit_call}
