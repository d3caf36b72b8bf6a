"""
Built-in Rules Package.

Automatically discovers and imports every rule module in this package so that
their ``@register_rule`` decorators populate the registry. Adding a new file
here is enough to ship a new rule.
"""

import importlib
import pkgutil
from pathlib import Path
from types import ModuleType
from typing import List

from convex_lint.utils.console import log_warning

_pkg_dir = Path(__file__).parent

RULE_MODULES: List[ModuleType] = []

for _, module_name, _ in pkgutil.iter_modules([str(_pkg_dir)]):
  if module_name.startswith("_"):
    continue

  try:
    RULE_MODULES.append(importlib.import_module(f".{module_name}", package=__name__))
  except ImportError as e:
    # One broken rule module must not disable the others.
    log_warning(f"Failed to load rule module '{module_name}': {e}")
