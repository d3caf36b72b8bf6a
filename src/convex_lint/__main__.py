"""
Entry point for module execution (``python -m convex_lint``).
"""

import sys
from convex_lint.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
