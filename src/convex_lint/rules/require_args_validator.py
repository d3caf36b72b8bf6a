"""
Rule: require-args-validator.

Flags object-syntax registrations that define a ``handler`` but no ``args``
validator. Objects without a handler are left alone, they may be partial
configs merged elsewhere.
"""

from typing import Dict

import libcst as cst

from convex_lint.core.classifier import argument_kind, first_argument, is_registration_call, node_kind, property_names
from convex_lint.core.context import RuleContext
from convex_lint.core.registry import Hook, register_rule
from convex_lint.core.vocabulary import ARGS_FIELD, HANDLER_FIELD
from convex_lint.enums import NodeKind

RULE_NAME = "require-args-validator"
MESSAGE = "Convex functions should have an 'args' validator"


@register_rule(RULE_NAME, "Require argument validators for Convex functions")
def create(context: RuleContext) -> Dict[str, Hook]:
  """
  Builds the ``Call`` hook for one file.

  Only direct, string-keyed properties of the config dict are inspected;
  ``**spread`` entries and computed keys are invisible.

  Args:
      context: Reporting capability.

  Returns:
      Dict[str, Hook]: The visitation hooks.
  """

  def visit_call(node: cst.Call) -> None:
    if node_kind(node) is not NodeKind.CALL or not is_registration_call(node):
      return

    config = first_argument(node)
    if argument_kind(config) is not NodeKind.OBJECT_LITERAL:
      return

    names = property_names(config.value)
    if HANDLER_FIELD not in names:
      return

    if ARGS_FIELD not in names:
      context.report(config.value, MESSAGE)

  return {"Call": visit_call}
