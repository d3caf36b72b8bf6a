"""
Runtime Configuration Store.

Settings are read from the ``[tool.convex_lint]`` table of the nearest
``pyproject.toml`` and overridden by CLI arguments::

    [tool.convex_lint]
    disabled_rules = ["require-args-validator"]
    exclude = ["convex/_generated/*"]

Exclude patterns are relative to the directory holding ``pyproject.toml``.
"""

import fnmatch
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from convex_lint.core.registry import rule_names

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib


class LintConfig(BaseModel):
  """
  Configuration container for the lint engine.
  """

  enabled_rules: Optional[List[str]] = Field(None, description="Rules to run. None means every registered rule.")
  disabled_rules: List[str] = Field(default_factory=list, description="Rules to skip, applied after enabled_rules.")
  exclude: List[str] = Field(default_factory=list, description="Glob patterns of paths to skip.")
  root: Optional[Path] = Field(None, description="Directory exclude patterns are relative to (where pyproject.toml lives).")

  @field_validator("enabled_rules", "disabled_rules")
  @classmethod
  def validate_rule_names(cls, v: Optional[List[str]]) -> Optional[List[str]]:
    """
    Ensures every referenced rule is registered.

    Args:
        v: Rule identifiers from config or CLI.

    Returns:
        The identifiers, stripped.

    Raises:
        ValueError: If a rule is unknown.
    """
    if v is None:
      return v
    known = rule_names()
    cleaned = [name.strip() for name in v]
    unknown = [name for name in cleaned if name not in known]
    if unknown:
      raise ValueError(f"Unknown rule(s): {unknown}. Available rules: {known}")
    return cleaned

  @property
  def active_rules(self) -> List[str]:
    """
    Resolves the rules to run, in registry order.

    Returns:
        List[str]: Enabled minus disabled rule identifiers.
    """
    selected = rule_names() if self.enabled_rules is None else self.enabled_rules
    return [name for name in rule_names() if name in selected and name not in self.disabled_rules]

  def is_excluded(self, path: Path) -> bool:
    """
    Checks a path against the exclude globs.

    Patterns are matched against the path relative to ``root`` when the
    path lies below it, then against the path as given and its file name.

    Args:
        path: File path, matched in POSIX form.

    Returns:
        bool: True if any pattern matches.
    """
    candidates = [path.as_posix(), path.name]
    if self.root is not None:
      try:
        candidates.insert(0, path.resolve().relative_to(self.root.resolve()).as_posix())
      except ValueError:
        pass  # outside root

    return any(fnmatch.fnmatch(candidate, pattern) for pattern in self.exclude for candidate in candidates)

  @classmethod
  def load(
    cls,
    enable: Optional[List[str]] = None,
    disable: Optional[List[str]] = None,
    exclude: Optional[List[str]] = None,
    search_path: Optional[Path] = None,
  ) -> "LintConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        enable: Replaces ``enabled_rules`` when given.
        disable: Added to ``disabled_rules``.
        exclude: Added to ``exclude``.
        search_path: Directory to start searching for TOML config.

    Returns:
        LintConfig: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config, toml_dir = _load_toml_settings(start_dir)

    final_enabled = enable if enable else toml_config.get("enabled_rules")
    final_disabled = [*toml_config.get("disabled_rules", []), *(disable or [])]
    final_exclude = [*toml_config.get("exclude", []), *(exclude or [])]

    return cls(
      enabled_rules=final_enabled,
      disabled_rules=final_disabled,
      exclude=final_exclude,
      root=toml_dir or start_dir.resolve(),
    )


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches ``start_path`` and its parents for ``pyproject.toml``.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The ``tool.convex_lint`` table and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      with open(toml_path, "rb") as f:
        data = tomllib.load(f)
      return data.get("tool", {}).get("convex_lint", {}), parent

  return {}, None
