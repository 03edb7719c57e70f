"""
Entry point for module execution (``python -m ts2dart``).

This module delegates execution to the CLI handler in ``ts2dart.cli.__main__``.
"""

import sys
from ts2dart.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
