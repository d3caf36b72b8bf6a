"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Rule registry isolation so tests registering custom rules do not leak.
- Parsing helpers for call snippets.
"""

import sys
from pathlib import Path

import libcst as cst
import pytest

# Add src to path so we can import 'convex_lint' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from convex_lint.core import registry  # noqa: E402

# Load the built-in rules once so they form the baseline snapshot.
registry.load_rules()


@pytest.fixture(autouse=True)
def isolate_rule_registry():
  """Restores the rule registry after each test."""
  snapshot = dict(registry._RULES)
  loaded = registry._RULES_LOADED
  yield
  registry._RULES.clear()
  registry._RULES.update(snapshot)
  registry._RULES_LOADED = loaded


@pytest.fixture
def parse_call():
  """
  Parses a single call expression snippet into a ``cst.Call``.
  """

  def _parse(code: str) -> cst.Call:
    node = cst.parse_expression(code)
    assert isinstance(node, cst.Call), f"Not a call: {code}"
    return node

  return _parse
