"""
Tests for the Lint Engine.

Verifies:
1.  All rules run together over one traversal.
2.  Repeated runs are identical (no state carried between runs).
3.  Unrelated calls never trigger any rule.
4.  Parse and read failures are captured, not raised.
5.  Directory walking and exclusion.
"""

from pathlib import Path

import pytest

import convex_lint
from convex_lint.config import LintConfig
from convex_lint.core.engine import LintEngine

SAMPLE = """
from convex import query, mutation, v

list_tasks = query(lambda ctx: ctx.db.query("tasks").collect())

toggle = mutation(
  {
    "handler": toggle_impl,
  }
)

async def toggle_impl(ctx, args):
  task = await ctx.db.get(args.id)
  await ctx.db.patch(args.id, {"done": not task.done})
"""


def test_all_rules_report_in_position_order():
  result = LintEngine().run(SAMPLE, path="tasks.py")

  assert result.success
  assert [(v.line, v.rule) for v in result.violations] == [
    (4, "no-old-registered-function-syntax"),
    (7, "require-args-validator"),
    (13, "explicit-table-ids"),
    (14, "explicit-table-ids"),
  ]
  assert all(v.path == "tasks.py" for v in result.violations)


def test_runs_are_idempotent():
  engine = LintEngine()
  first = engine.run(SAMPLE)
  second = engine.run(SAMPLE)
  assert first.violations == second.violations


def test_unrelated_calls_never_report():
  code = """
fetch(lambda: None)
fetch({"handler": fn})
client.db.fetch(doc_id)
requests.get(url)
"""
  assert LintEngine().run(code).violations == []


def test_rule_selection():
  result = LintEngine(rules=["explicit-table-ids"]).run(SAMPLE)
  assert {v.rule for v in result.violations} == {"explicit-table-ids"}


def test_config_disables_rules():
  config = LintConfig(disabled_rules=["explicit-table-ids", "require-args-validator"])
  result = LintEngine(config=config).run(SAMPLE)
  assert {v.rule for v in result.violations} == {"no-old-registered-function-syntax"}


def test_unknown_rule_raises():
  with pytest.raises(ValueError, match="Unknown rule"):
    LintEngine(rules=["no-such-rule"])


def test_parse_error_is_captured():
  result = LintEngine().run("query(lambda ctx:\n", path="broken.py")
  assert not result.success
  assert result.violations == []
  assert result.errors and result.errors[0].startswith("Parse error")


def test_run_file_unreadable(tmp_path):
  result = LintEngine().run_file(tmp_path / "missing.py")
  assert not result.success
  assert result.errors[0].startswith("Read error")


def test_run_path_walks_and_excludes(tmp_path):
  (tmp_path / "convex").mkdir()
  (tmp_path / "convex" / "tasks.py").write_text("ctx.db.get(doc_id)\n", encoding="utf-8")
  (tmp_path / "convex" / "_generated").mkdir()
  (tmp_path / "convex" / "_generated" / "api.py").write_text("ctx.db.get(doc_id)\n", encoding="utf-8")
  (tmp_path / "notes.txt").write_text("ctx.db.get(doc_id)\n", encoding="utf-8")

  engine = LintEngine(config=LintConfig(exclude=["*/_generated/*"]))
  results = engine.run_path(tmp_path)

  assert len(results) == 1
  assert results[0].path.endswith("tasks.py")
  assert len(results[0].violations) == 1


def test_lint_facade():
  violations = convex_lint.lint("doc = ctx.db.get(doc_id)")
  assert len(violations) == 1
  assert violations[0].format() == (
    "<string>:1:6: explicit-table-ids: "
    "Use explicit table name: ctx.db.get(tableName, id) instead of ctx.db.get(id)"
  )


def test_lint_facade_raises_on_syntax_error():
  with pytest.raises(ValueError, match="Parse error"):
    convex_lint.lint("def (:")


def test_run_path_applies_pyproject_excludes(tmp_path):
  (tmp_path / "pyproject.toml").write_text('[tool.convex_lint]\nexclude = ["convex/_generated/*"]\n', encoding="utf-8")
  (tmp_path / "convex" / "_generated").mkdir(parents=True)
  (tmp_path / "convex" / "tasks.py").write_text("ctx.db.get(doc_id)\n", encoding="utf-8")
  (tmp_path / "convex" / "_generated" / "api.py").write_text("ctx.db.get(doc_id)\n", encoding="utf-8")

  results = LintEngine(config=LintConfig.load(search_path=tmp_path)).run_path(tmp_path)

  assert len(results) == 1
  assert results[0].path.endswith("tasks.py")


def test_run_path_skips_hidden_and_vendored_dirs(tmp_path):
  for directory in (".venv/lib", ".git/hooks", "node_modules/pkg", "convex"):
    (tmp_path / directory).mkdir(parents=True)
    (tmp_path / directory / "mod.py").write_text("ctx.db.get(doc_id)\n", encoding="utf-8")

  results = LintEngine().run_path(tmp_path)

  assert [Path(r.path).relative_to(tmp_path).as_posix() for r in results] == ["convex/mod.py"]


def test_run_path_lints_explicit_file_in_hidden_dir(tmp_path):
  (tmp_path / ".scratch").mkdir()
  target = tmp_path / ".scratch" / "mod.py"
  target.write_text("ctx.db.get(doc_id)\n", encoding="utf-8")

  results = LintEngine().run_path(target)

  assert len(results) == 1
  assert len(results[0].violations) == 1
