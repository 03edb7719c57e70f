"""
Translation Diagnostics.

Defines the fatal error taxonomy and the reporter that turns an offending
node into a location-qualified error.

All translation errors are fatal: once raised, the whole run is abandoned and
no output may be treated as valid. Locations are 0-based and rendered as
``file:line:column: message``.
"""

from typing import TYPE_CHECKING, NoReturn, Type

if TYPE_CHECKING:
  from ts2dart.frontend.nodes import Node


class TranslationError(Exception):
  """
  Base class for fatal, location-qualified translation failures.

  Attributes:
      file_name (str): Path of the offending source file.
      line (int): 0-based line of the offending construct.
      column (int): 0-based column of the offending construct.
      message (str): Human readable description.
  """

  def __init__(self, file_name: str, line: int, column: int, message: str) -> None:
    self.file_name = file_name
    self.line = line
    self.column = column
    self.message = message
    super().__init__(f"{file_name}:{line}:{column}: {message}")


class UnsupportedConstruct(TranslationError):
  """A node kind or operator with no Dart rendering."""


class StructuralInvariantViolation(TranslationError):
  """The tree does not have the shape the emitter relies on."""


class SourceSyntaxError(TranslationError):
  """The front end could not parse the input."""


class ConfigurationError(Exception):
  """Invalid ``[tool.ts2dart]`` settings."""


def report_error(
  node: "Node",
  message: str,
  error_class: Type[TranslationError] = UnsupportedConstruct,
) -> NoReturn:
  """
  Raises a translation error pointing at the first token of ``node``.

  Args:
      node: The offending syntax node.
      message: Description of the failure.
      error_class: The error category to raise.

  Raises:
      TranslationError: Always, as an instance of ``error_class``.
  """
  source_file = node.get_source_file()
  line, column = source_file.get_line_and_character_of_position(node.start)
  raise error_class(source_file.file_name, line, column, message)
