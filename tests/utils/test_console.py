"""
Tests for the Console Proxy and Logging Helpers.
"""

import io

from rich.console import Console

from convex_lint.utils.console import console, log_error, log_success, reset_console, set_console


def test_backend_swap_routes_prints_and_logs():
  buffer = io.StringIO()
  replacement = Console(file=buffer, width=200, force_terminal=False)
  set_console(replacement)
  try:
    assert console.backend is replacement
    assert console.width == 200

    console.print("plain line")
    log_success("all clear")
    log_error("broken")
  finally:
    reset_console()

  output = buffer.getvalue()
  assert "plain line" in output
  assert "all clear" in output
  assert "broken" in output
  assert console.backend is not replacement
