"""
Static vocabulary of the Convex function and database APIs.

These sets are fixed by the framework's public API surface and are only
used for membership tests.
"""

from typing import Dict, FrozenSet

REGISTRATION_FUNCTIONS: FrozenSet[str] = frozenset(
  {
    "query",
    "mutation",
    "action",
    "internalQuery",
    "internalMutation",
    "internalAction",
    "httpAction",
  }
)

DB_METHODS: FrozenSet[str] = frozenset({"get", "patch", "replace", "delete"})

# Attribute name of the context-bound database handle (ctx.db).
STORE_HANDLE = "db"

# Argument counts of the accessor forms that predate explicit table names.
LEGACY_ARITY: Dict[str, int] = {
  "get": 1,
  "patch": 2,
  "replace": 2,
  "delete": 1,
}

HANDLER_FIELD = "handler"
ARGS_FIELD = "args"
