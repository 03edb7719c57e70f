"""
ts2dart Package.

A source-to-source translator from a subset of TypeScript to Dart.

Usage
-----

.. code-block:: python

    import ts2dart
    print(ts2dart.translate_source("var x: number = 1;"))
    #  num x = 1 ;

    from ts2dart import translate_files
    dart = translate_files(["a.ts", "b.ts"])

Any construct without a Dart rendering raises a ``TranslationError`` whose
message is ``file:line:column: description``.
"""

from ts2dart.config import CompilerOptions, RuntimeConfig
from ts2dart.core.engine import translate_files, translate_program, translate_source
from ts2dart.errors import (
  ConfigurationError,
  SourceSyntaxError,
  StructuralInvariantViolation,
  TranslationError,
  UnsupportedConstruct,
)
from ts2dart.frontend.program import create_program

__version__ = "0.0.1"

__all__ = [
  "CompilerOptions",
  "ConfigurationError",
  "RuntimeConfig",
  "SourceSyntaxError",
  "StructuralInvariantViolation",
  "TranslationError",
  "UnsupportedConstruct",
  "__version__",
  "create_program",
  "translate_files",
  "translate_program",
  "translate_source",
]
