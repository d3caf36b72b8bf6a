"""
Call-Shape Classifier.

Pure predicates over single libcst nodes. They decide whether a call is a
Convex function registration or a database accessor call, and expose the
small amount of structure the rules need (argument list, literal property
names).

All functions here are total: any node shape, including ``None``, yields a
"no match" answer instead of raising.

Recognised shapes::

    query(fn)                 # direct registration
    query(options)(fn)        # curried registration
    ctx.db.get(id)            # accessor call on the db handle
"""

from typing import Any, Dict, List, Optional, Type

import libcst as cst

from convex_lint.core.vocabulary import DB_METHODS, REGISTRATION_FUNCTIONS, STORE_HANDLE
from convex_lint.enums import NodeKind

_KIND_BY_TYPE: Dict[Type[cst.CSTNode], NodeKind] = {
  cst.Name: NodeKind.IDENTIFIER,
  cst.Call: NodeKind.CALL,
  cst.Attribute: NodeKind.MEMBER_ACCESS,
  cst.Dict: NodeKind.OBJECT_LITERAL,
  cst.Lambda: NodeKind.FUNCTION_LITERAL,
  cst.DictElement: NodeKind.PROPERTY,
  cst.StarredDictElement: NodeKind.SPREAD,
  cst.StarredElement: NodeKind.SPREAD,
}


def node_kind(node: Any) -> NodeKind:
  """
  Classifies a node into the closed set of kinds the rules inspect.

  Args:
      node: Any libcst node, or None.

  Returns:
      NodeKind: The matching kind, ``OTHER`` for everything else.
  """
  return _KIND_BY_TYPE.get(type(node), NodeKind.OTHER)


def argument_kind(arg: Optional[cst.Arg]) -> NodeKind:
  """
  Classifies a call argument, treating ``*xs`` as a spread.

  Args:
      arg: The argument wrapper from ``Call.args``.

  Returns:
      NodeKind: Kind of the argument value.
  """
  if not isinstance(arg, cst.Arg):
    return NodeKind.OTHER
  if arg.star:
    return NodeKind.SPREAD
  return node_kind(arg.value)


def positional_args(node: Any) -> List[cst.Arg]:
  """
  Returns the ordered argument list of a call.

  Keyword arguments and ``**kwargs`` are not part of the list; ``*xs`` is
  kept as a single spread argument.

  Args:
      node: A ``cst.Call`` node. Other shapes produce an empty list.

  Returns:
      List[cst.Arg]: Positional arguments in source order.
  """
  if not isinstance(node, cst.Call):
    return []
  return [arg for arg in node.args if arg.keyword is None and arg.star != "**"]


def first_argument(node: Any) -> Optional[cst.Arg]:
  """Returns the first positional argument of a call, if any."""
  args = positional_args(node)
  return args[0] if args else None


def identifier_name(node: Any) -> Optional[str]:
  """Returns the identifier text of a ``cst.Name``, or None."""
  if node_kind(node) is NodeKind.IDENTIFIER:
    return node.value
  return None


def member_name(node: Any) -> Optional[str]:
  """
  Returns the accessed property name of a member access (``obj.<name>``).

  Args:
      node: A ``cst.Attribute`` node.

  Returns:
      Optional[str]: The property name, or None for any other shape.
  """
  if node_kind(node) is not NodeKind.MEMBER_ACCESS:
    return None
  return identifier_name(node.attr)


def is_registration_call(node: Any) -> bool:
  """
  Decides whether a call registers a Convex function.

  Matches ``query(...)`` where the callee is a known registration name, and
  the curried form ``query(x)(...)``. The inner arguments of the curried
  form are not inspected. Member callees (``convex.query(...)``) never match.

  Args:
      node: A ``cst.Call`` node.

  Returns:
      bool: True if the call is a registration.
  """
  if node_kind(node) is not NodeKind.CALL:
    return False

  callee = node.func
  if node_kind(callee) is NodeKind.IDENTIFIER:
    return callee.value in REGISTRATION_FUNCTIONS

  if node_kind(callee) is NodeKind.CALL:
    return identifier_name(callee.func) in REGISTRATION_FUNCTIONS

  return False


def is_accessor_call(node: Any) -> bool:
  """
  Decides whether a member access names a database accessor method.

  Only the two-level chain ``<anything>.db.<method>`` matches. A bare
  ``db.get`` or an aliased handle (``database.get``) does not.

  Args:
      node: The callee of a call, expected to be a ``cst.Attribute``.

  Returns:
      bool: True if the access is ``<obj>.db.<get|patch|replace|delete>``.
  """
  if member_name(node) not in DB_METHODS:
    return False
  return member_name(node.value) == STORE_HANDLE


def property_key(element: Any) -> Optional[str]:
  """
  Extracts the literal key of a dict property.

  Only plain string literal keys count. Spreads (``**base``) and computed
  keys (names, calls, f-strings, numbers) return None.

  Args:
      element: A dict element node.

  Returns:
      Optional[str]: The key text, or None.
  """
  if node_kind(element) is not NodeKind.PROPERTY:
    return None

  key = element.key
  if isinstance(key, (cst.SimpleString, cst.ConcatenatedString)):
    value = key.evaluated_value
    if isinstance(value, str):
      return value
  return None


def property_names(node: Any) -> List[str]:
  """
  Lists the direct literal-keyed property names of an object literal.

  Args:
      node: A ``cst.Dict`` node.

  Returns:
      List[str]: Names in source order. Empty for any other shape.
  """
  if node_kind(node) is not NodeKind.OBJECT_LITERAL:
    return []

  names = []
  for element in node.elements:
    key = property_key(element)
    if key is not None:
      names.append(key)
  return names
