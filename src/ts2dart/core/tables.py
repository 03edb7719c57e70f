"""
Mapping Tables.

Fixed TypeScript-to-Dart spellings for primitive types and keyword literals.
Operator spellings live on ``ts2dart.frontend.kinds.Token``.
"""

from typing import Dict

from ts2dart.frontend.kinds import SyntaxKind

PRIMITIVE_TYPES: Dict[SyntaxKind, str] = {
  SyntaxKind.NUMBER_KEYWORD: "num",
  SyntaxKind.STRING_KEYWORD: "String",
  SyntaxKind.VOID_KEYWORD: "void",
  SyntaxKind.BOOLEAN_KEYWORD: "bool",
  SyntaxKind.ANY_KEYWORD: "dynamic",
}

KEYWORD_LITERALS: Dict[SyntaxKind, str] = {
  SyntaxKind.TRUE_KEYWORD: "true",
  SyntaxKind.FALSE_KEYWORD: "false",
  SyntaxKind.NULL_KEYWORD: "null",
  SyntaxKind.THIS_KEYWORD: "this",
}

# Operators with no Dart counterpart. Reported at the expression node.
REJECTED_OPERATORS: Dict[SyntaxKind, str] = {
  SyntaxKind.DELETE_EXPRESSION: "delete operator is unsupported",
  SyntaxKind.VOID_EXPRESSION: "void operator is unsupported",
  SyntaxKind.TYPE_OF_EXPRESSION: "typeof operator is unsupported",
}
