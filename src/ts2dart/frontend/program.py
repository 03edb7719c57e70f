"""
Program Construction.

Resolves a list of file names into an ordered set of parsed source files.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from ts2dart.config import CompilerOptions
from ts2dart.frontend.nodes import SourceFile
from ts2dart.frontend.parser import parse_source_file


class Program:
  """
  An ordered collection of parsed source files sharing one set of options.

  Attributes:
      options (CompilerOptions): Options the files were parsed with.
      source_files (Tuple[SourceFile, ...]): Files in input order.
  """

  def __init__(self, options: CompilerOptions, source_files: Iterable[SourceFile]) -> None:
    self.options = options
    self.source_files: Tuple[SourceFile, ...] = tuple(source_files)

  def get_source_files(self) -> Tuple[SourceFile, ...]:
    return self.source_files

  def get_source_file(self, file_name: str) -> Optional[SourceFile]:
    """Looks a file up by the name it was created with."""
    for source_file in self.source_files:
      if source_file.file_name == file_name:
        return source_file
    return None


def create_program(file_names: Iterable[str], options: Optional[CompilerOptions] = None) -> Program:
  """
  Reads and parses each file.

  Files are read as UTF-8 in the order given; repeated names are parsed once.

  Args:
      file_names: Paths of the TypeScript inputs.
      options: Front-end options (defaults to ES6 / CommonJS).

  Returns:
      Program: The parsed files.

  Raises:
      OSError: If a file cannot be read.
      SourceSyntaxError: If a file does not parse.
  """
  seen = set()
  ordered: List[str] = []
  for name in file_names:
    name = str(name)
    if name not in seen:
      seen.add(name)
      ordered.append(name)

  source_files = []
  for name in ordered:
    text = Path(name).read_text(encoding="utf-8")
    source_files.append(parse_source_file(name, text))
  return Program(options or CompilerOptions(), source_files)
