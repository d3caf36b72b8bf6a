"""
Rule: explicit-table-ids.

Flags database accessor calls written in the legacy form that omits the
table name::

    ctx.db.get(user_id)              # reported
    ctx.db.get("users", user_id)     # ok
    ctx.db.patch(user_id, changes)   # reported

Old and new forms are told apart by argument count alone.
"""

from typing import Dict

import libcst as cst

from convex_lint.core.classifier import is_accessor_call, member_name, node_kind, positional_args
from convex_lint.core.context import RuleContext
from convex_lint.core.registry import Hook, register_rule
from convex_lint.core.vocabulary import LEGACY_ARITY
from convex_lint.enums import NodeKind

RULE_NAME = "explicit-table-ids"

MESSAGES: Dict[str, str] = {
  "get": "Use explicit table name: ctx.db.get(tableName, id) instead of ctx.db.get(id)",
  "patch": "Use explicit table name: ctx.db.patch(tableName, id, updates) instead of ctx.db.patch(id, updates)",
  "replace": "Use explicit table name: ctx.db.replace(tableName, id, doc) instead of ctx.db.replace(id, doc)",
  "delete": "Use explicit table name: ctx.db.delete(tableName, id) instead of ctx.db.delete(id)",
}


@register_rule(RULE_NAME, "Require explicit table names in database operations")
def create(context: RuleContext) -> Dict[str, Hook]:
  """
  Builds the ``Call`` hook for one file.

  Args:
      context: Reporting capability.

  Returns:
      Dict[str, Hook]: The visitation hooks.
  """

  def visit_call(node: cst.Call) -> None:
    if node_kind(node) is not NodeKind.CALL or not is_accessor_call(node.func):
      return

    method = member_name(node.func)
    if len(positional_args(node)) == LEGACY_ARITY[method]:
      context.report(node, MESSAGES[method])

  return {"Call": visit_call}
