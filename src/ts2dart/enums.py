"""
Enumerations for ts2dart.

Compiler option values accepted by the front end and by ``[tool.ts2dart]``.
"""

from enum import Enum


class ScriptTarget(str, Enum):
  """
  ECMAScript language level the input is written against.

  The front end parses every level with the same grammar; the value is
  carried on the Program for callers that inspect it.
  """

  ES3 = "ES3"
  ES5 = "ES5"
  ES6 = "ES6"


class ModuleKind(str, Enum):
  """Module system the input is written against."""

  NONE = "None"
  COMMONJS = "CommonJS"
  AMD = "AMD"
