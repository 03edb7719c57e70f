"""
Translation Driver.

Runs the emitter over every file of a Program and joins the results.
"""

from typing import Iterable, Optional

from ts2dart.config import RuntimeConfig
from ts2dart.core.emitter import DartEmitter
from ts2dart.frontend.parser import parse_source_file
from ts2dart.frontend.program import Program, create_program
from ts2dart.utils.console import log_info


def translate_program(program: Program, config: Optional[RuntimeConfig] = None) -> str:
  """
  Translates each source file in order and concatenates the Dart text.

  Declaration files (``.d.ts``) are skipped unless
  ``config.exclude_declarations`` is False.

  Args:
      program: The parsed input files.
      config: Runtime settings (defaults apply when omitted).

  Returns:
      str: The Dart translation of all files.

  Raises:
      TranslationError: On the first construct that cannot be translated.
  """
  config = config or RuntimeConfig()
  parts = []
  for source_file in program.get_source_files():
    if config.exclude_declarations and source_file.is_declaration_file:
      log_info(f"Skipping declaration file {source_file.file_name}")
      continue
    log_info(f"Translating {source_file.file_name}")
    parts.append(DartEmitter(source_file).emit_file())
  return "".join(parts)


def translate_files(file_names: Iterable[str], config: Optional[RuntimeConfig] = None) -> str:
  """
  Reads, parses and translates a set of TypeScript files.

  Args:
      file_names: Input paths.
      config: Runtime settings; also supplies the compiler options.

  Returns:
      str: The Dart translation of all files.
  """
  config = config or RuntimeConfig()
  program = create_program(file_names, config.compiler_options())
  return translate_program(program, config)


def translate_source(text: str, file_name: str = "input.ts") -> str:
  """
  Translates a single TypeScript source string.

  Args:
      text: TypeScript source.
      file_name: Name used in diagnostics.

  Returns:
      str: The Dart translation.
  """
  return DartEmitter(parse_source_file(file_name, text)).emit_file()
