"""
Enumerations for convex-lint.

This module defines the closed sets of tags used across the codebase for
syntax classification and rule categorization.
"""

from enum import Enum


class NodeKind(str, Enum):
  """
  Syntax node kinds inspected by the rules.

  Every libcst node maps to exactly one member via
  ``convex_lint.core.classifier.node_kind``. Anything the rules do not
  care about collapses to ``OTHER``.
  """

  IDENTIFIER = "identifier"  # cst.Name
  CALL = "call"  # cst.Call
  MEMBER_ACCESS = "member_access"  # cst.Attribute
  OBJECT_LITERAL = "object_literal"  # cst.Dict
  FUNCTION_LITERAL = "function_literal"  # cst.Lambda
  PROPERTY = "property"  # cst.DictElement
  SPREAD = "spread"  # cst.StarredDictElement, *args
  OTHER = "other"


class RuleType(str, Enum):
  """
  Category tag declared by each rule.
  """

  PROBLEM = "problem"
  SUGGESTION = "suggestion"
  LAYOUT = "layout"
