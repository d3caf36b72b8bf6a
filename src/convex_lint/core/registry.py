"""
Rule Registry and Plugin Surface.

Rules register themselves with the ``register_rule`` decorator, which wraps a
``create(context)`` factory into a ``Rule`` definition. The registry is the
table exposed to hosts through ``get_plugin``::

    @register_rule("explicit-table-ids", "Require explicit table names in database operations")
    def create(context: RuleContext) -> Dict[str, Hook]:
      return {"Call": lambda node: ...}

Rule modules live in ``convex_lint.rules`` and are imported lazily on first
lookup.
"""

import importlib
import sys
from typing import Any, Callable, Dict, List, Optional

import libcst as cst
from pydantic import BaseModel, Field

from convex_lint.core.context import RuleContext
from convex_lint.enums import RuleType
from convex_lint.utils.console import log_warning

PLUGIN_NAME = "convex"
PLUGIN_VERSION = "0.1.0"

# A visitation hook, keyed in the mapping by libcst node class name ("Call").
Hook = Callable[[cst.CSTNode], None]
RuleFactory = Callable[[RuleContext], Dict[str, Hook]]


class RuleDocs(BaseModel):
  """Descriptive metadata of a rule."""

  description: str = Field(..., description="One-line summary of what the rule enforces.")


class RuleMeta(BaseModel):
  """
  Static declaration of a rule's category and capabilities.
  """

  type: RuleType = Field(RuleType.PROBLEM, description="Category tag.")
  docs: RuleDocs
  fixable: Optional[str] = Field(
    "code",
    description="Declared autofix capability. No fixer is shipped with the rules.",
  )


class Rule(BaseModel):
  """
  A registered rule: its identifier, metadata and hook factory.
  """

  name: str
  meta: RuleMeta
  create: RuleFactory

  def hooks(self, context: RuleContext) -> Dict[str, Hook]:
    """
    Instantiates the rule's visitation hooks for one file.

    Args:
        context: Per-file reporting capability.

    Returns:
        Dict[str, Hook]: Node class name -> callback.
    """
    return dict(self.create(context))


class PluginMeta(BaseModel):
  """Identity of the rule bundle."""

  name: str = PLUGIN_NAME
  version: str = PLUGIN_VERSION


class Plugin(BaseModel):
  """
  The object handed to a host: identity plus the rule table.
  """

  meta: PluginMeta = Field(default_factory=PluginMeta)
  rules: Dict[str, Rule] = Field(default_factory=dict)


# Global Registry
_RULES: Dict[str, Rule] = {}
_RULES_LOADED = False


def register_rule(
  name: str,
  description: str,
  rule_type: RuleType = RuleType.PROBLEM,
  fixable: Optional[str] = "code",
) -> Callable[[RuleFactory], RuleFactory]:
  """
  Decorator to register a ``create`` function as a rule.

  Args:
      name: Unique rule identifier (e.g. "require-args-validator").
      description: One-line description stored in ``meta.docs``.
      rule_type: Category tag.
      fixable: Declared autofix capability.

  Returns:
      The decorator, which returns the factory unchanged.
  """

  def decorator(func: RuleFactory) -> RuleFactory:
    if name in _RULES:
      log_warning(f"Rule '{name}' registered twice; keeping the latest definition.")
    _RULES[name] = Rule(
      name=name,
      meta=RuleMeta(type=rule_type, docs=RuleDocs(description=description), fixable=fixable),
      create=func,
    )
    return func

  return decorator


def load_rules() -> int:
  """
  Imports the built-in rule modules once.

  Returns:
      int: Number of registered rules.
  """
  global _RULES_LOADED
  if not _RULES_LOADED:
    already_imported = "convex_lint.rules" in sys.modules
    package = importlib.import_module("convex_lint.rules")

    # Registration happens at import time; re-run it after clear_rules().
    if already_imported:
      for module in package.RULE_MODULES:
        importlib.reload(module)

    _RULES_LOADED = True
  return len(_RULES)


def get_rule(name: str) -> Optional[Rule]:
  """
  Looks up a rule by identifier, loading built-in rules on first use.

  Args:
      name: Rule identifier.

  Returns:
      Optional[Rule]: The rule, or None if unknown.
  """
  load_rules()
  return _RULES.get(name)


def get_rules() -> Dict[str, Rule]:
  """
  Returns all registered rules in registration order.

  Returns:
      Dict[str, Rule]: A copy of the registry.
  """
  load_rules()
  return dict(_RULES)


def rule_names() -> List[str]:
  """Returns the identifiers of all registered rules."""
  return list(get_rules().keys())


def clear_rules() -> None:
  """Resets the registry. Primarily for testing."""
  global _RULES_LOADED
  _RULES.clear()
  _RULES_LOADED = False


def get_plugin() -> Plugin:
  """
  Builds the plugin object exposed to hosts.

  Returns:
      Plugin: ``meta`` (name "convex", version) and the rule table.
  """
  return Plugin(rules=get_rules())


def describe_rules() -> List[Dict[str, Any]]:
  """
  Serializes rule metadata for listings.

  Returns:
      List[Dict[str, Any]]: One dict per rule with name, type, fixable and description.
  """
  return [
    {
      "name": rule.name,
      "type": rule.meta.type.value,
      "fixable": rule.meta.fixable,
      "description": rule.meta.docs.description,
    }
    for rule in get_rules().values()
  ]
