"""
CLI Command Handlers.
"""

from convex_lint.cli.handlers.check import handle_check
from convex_lint.cli.handlers.rules import handle_rules

__all__ = ["handle_check", "handle_rules"]
