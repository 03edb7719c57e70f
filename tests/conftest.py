"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Helpers that parse and translate TypeScript snippets.
- Console capture so tests can inspect log output.
"""

import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add src to path so we can import 'ts2dart' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from ts2dart.core.emitter import DartEmitter  # noqa: E402
from ts2dart.frontend.parser import parse_source_file  # noqa: E402
from ts2dart.utils.console import reset_console, set_console  # noqa: E402


@pytest.fixture
def translate():
  """Returns a function translating a TypeScript snippet to Dart text."""

  def _translate(text: str, file_name: str = "input.ts") -> str:
    return DartEmitter(parse_source_file(file_name, text)).emit_file()

  return _translate


@pytest.fixture
def parse():
  """Returns a function parsing a TypeScript snippet into a SourceFile."""

  def _parse(text: str, file_name: str = "input.ts"):
    return parse_source_file(file_name, text)

  return _parse


@pytest.fixture
def captured_console():
  """
  Redirects the global console into an in-memory recorder.

  Yields the recording Console; the default console is restored afterwards.
  """
  recorder = Console(record=True, file=io.StringIO(), width=1000)
  set_console(recorder)
  yield recorder
  reset_console()
