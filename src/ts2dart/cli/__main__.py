"""
Main Entry Point for the ts2dart CLI.

Usage: ``ts2dart FILE [FILE ...]``. The translation goes to stdout unless
``[tool.ts2dart] out`` names a file.
"""

import argparse
import sys
from typing import List, Optional

from ts2dart import __version__
from ts2dart.cli import commands


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, 1 for a translation failure).
  """
  parser = argparse.ArgumentParser(prog="ts2dart", description="ts2dart: TypeScript to Dart translator")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("files", nargs="+", help="TypeScript input files, translated in order")

  args = parser.parse_args(argv)
  return commands.handle_translate(args.files)


if __name__ == "__main__":
  sys.exit(main())
