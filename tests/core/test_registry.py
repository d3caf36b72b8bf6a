"""
Tests for the Rule Registry and Plugin Surface.

Verifies registration, metadata declarations, the plugin identity and that
rules can be driven by a host through ``create(context)`` alone.
"""

import libcst as cst

from convex_lint.core.context import RuleContext, Violation
from convex_lint.core.registry import (
  _RULES,
  clear_rules,
  describe_rules,
  get_plugin,
  get_rule,
  get_rules,
  load_rules,
  register_rule,
)
from convex_lint.enums import NodeKind, RuleType

BUILTIN_RULES = [
  "explicit-table-ids",
  "no-old-registered-function-syntax",
  "require-args-validator",
]


def test_builtin_rules_registered():
  assert sorted(get_rules()) == BUILTIN_RULES


def test_plugin_identity_and_table():
  plugin = get_plugin()
  assert plugin.meta.name == "convex"
  assert plugin.meta.version == "0.1.0"
  assert sorted(plugin.rules) == BUILTIN_RULES


def test_rule_metadata_declarations():
  for rule in get_rules().values():
    assert rule.meta.type is RuleType.PROBLEM
    assert rule.meta.fixable == "code"
    assert rule.meta.docs.description


def test_describe_rules_serializable():
  described = {item["name"]: item for item in describe_rules()}
  assert described["explicit-table-ids"] == {
    "name": "explicit-table-ids",
    "type": "problem",
    "fixable": "code",
    "description": "Require explicit table names in database operations",
  }


def test_register_custom_rule():
  @register_rule("no-print", "Disallow print", rule_type=RuleType.SUGGESTION, fixable=None)
  def create(context):
    return {"Call": lambda node: None}

  rule = get_rule("no-print")
  assert rule is not None
  assert rule.meta.type is RuleType.SUGGESTION
  assert rule.meta.fixable is None
  assert rule.create is create


def test_clear_then_reload_restores_builtins():
  clear_rules()
  assert len(_RULES) == 0
  assert load_rules() == len(BUILTIN_RULES)
  assert sorted(get_rules()) == BUILTIN_RULES


def test_host_driven_hooks():
  """A host can call create() itself and feed nodes to the returned hooks."""
  reported = []
  context = RuleContext("require-args-validator", reported.append)
  hooks = get_rule("require-args-validator").hooks(context)

  assert list(hooks) == ["Call"]

  node = cst.parse_expression("mutation({'handler': fn})")
  hooks["Call"](node)
  hooks["Call"](node)

  assert len(reported) == 2
  assert all(isinstance(v, Violation) for v in reported)
  assert reported[0] == reported[1]
  assert reported[0].node_kind is NodeKind.OBJECT_LITERAL
  assert (reported[0].line, reported[0].column) == (0, 0)


def test_report_has_no_return_value():
  context = RuleContext("x", lambda v: None)
  assert context.report(cst.Name("a"), "msg") is None


def test_hooks_ignore_non_call_nodes():
  """Hooks fed something other than a call stay silent instead of raising."""
  reported = []
  for name in BUILTIN_RULES:
    hooks = get_rule(name).hooks(RuleContext(name, reported.append))
    for node in (cst.Name("query"), cst.parse_expression("ctx.db.get"), cst.Dict([])):
      hooks["Call"](node)

  assert reported == []
