"""
Console and Logging Utilities.

All diagnostics go through the standard ``logging`` library, rendered by a
``rich`` handler. The module-level ``console`` is a proxy so the output
destination (terminal, ``io.StringIO`` in tests) can be swapped with
``set_console`` while modules keep their imported reference.

Attributes:
    console (_ConsoleProxy): Stable reference to the active Rich Console.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

LOGGER_NAME = "convex_lint"
logger = logging.getLogger(LOGGER_NAME)

_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "green",
    "path": "bold blue",
    "rule": "bold magenta",
  }
)


class _ConsoleProxy:
  """
  Forwards printing to a swappable ``rich.console.Console`` backend.

  Swapping the backend also re-binds the package logger's ``RichHandler``
  so log records follow the console.

  Attributes:
      _backend (Console): The active Rich Console instance.
  """

  def __init__(self) -> None:
    self._backend: Console = Console(theme=_THEME)
    self._configure_logging()

  def set_backend(self, new_console: Console) -> None:
    """
    Injects a new Console backend and updates logging handlers.

    Args:
        new_console (Console): The new Rich Console instance to use.
    """
    self._backend = new_console
    self._configure_logging()

  def reset(self) -> None:
    """
    Replaces the backend with a fresh stdout console and re-binds logging.
    """
    self._backend = Console(theme=_THEME)
    self._configure_logging()

  @property
  def backend(self) -> Console:
    """
    Access the wrapped console.

    Returns:
        Console: The currently active Rich Console.
    """
    return self._backend

  def _configure_logging(self) -> None:
    """
    Points the ``convex_lint`` logger at the current backend.

    Any previous ``RichHandler`` is detached first so records are never
    written twice or to a stale console.
    """
    for handler in list(logger.handlers):
      if isinstance(handler, RichHandler):
        logger.removeHandler(handler)

    rich_handler = RichHandler(
      console=self._backend,
      show_time=False,
      omit_repeated_times=False,
      show_path=False,
      markup=True,
      rich_tracebacks=True,
    )
    logger.setLevel(logging.INFO)
    logger.addHandler(rich_handler)
    logger.propagate = False

  def print(self, *args: Any, **kwargs: Any) -> None:
    """
    Forwards ``print`` calls to the active backend.

    Args:
        *args: Renderables or strings for ``Console.print``.
        **kwargs: Options for ``Console.print`` (``style``, ``end``, ...).
    """
    self._backend.print(*args, **kwargs)

  def __getattr__(self, name: str) -> Any:
    """
    Forwards any other attribute lookup to the backend.

    Args:
        name (str): Attribute name.

    Returns:
        Any: The attribute of the active Rich Console.
    """
    return getattr(self._backend, name)


# Modules import this object; ``set_console`` swaps what it writes to.
console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Redirects console output and log records to ``new_console``.

  Tests use this to capture output in a ``Console(file=io.StringIO())``.

  Args:
      new_console (Console): The configured Rich console to use globally.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  """
  Restores logging and console output to stdout.
  """
  console.reset()


def log_info(msg: str) -> None:
  """
  Logs an informational message on the package logger.

  Args:
      msg (str): The message content. Can include rich markup like [bold].
  """
  logger.info(f"ℹ️  {msg}", extra={"markup": True})


def log_success(msg: str) -> None:
  """
  Logs a success message at the custom ``SUCCESS`` level.

  Args:
      msg (str): The message content.
  """
  logger.log(SUCCESS_LEVEL_NUM, f"✅ {msg}", extra={"markup": True})


def log_warning(msg: str) -> None:
  """
  Logs a warning message on the package logger.

  Args:
      msg (str): The message content.
  """
  logger.warning(f"⚠️  {msg}", extra={"markup": True})


def log_error(msg: str) -> None:
  """
  Logs an error message on the package logger.

  Args:
      msg (str): The message content. Callers escape untrusted text.
  """
  logger.error(f"❌ {msg}", extra={"markup": True})
