"""
Syntax Kind and Operator Token Definitions.

Defines the closed set of node kinds the front end produces and the operator
tokens that may appear inside expression nodes.
"""

from enum import Enum


class SyntaxKind(str, Enum):
  """Enumeration of typed syntax node kinds."""

  # Structure
  SOURCE_FILE = "SourceFile"
  END_OF_FILE_TOKEN = "EndOfFileToken"
  UNSUPPORTED = "Unsupported"

  # Declarations
  VARIABLE_STATEMENT = "VariableStatement"
  VARIABLE_DECLARATION_LIST = "VariableDeclarationList"
  VARIABLE_DECLARATION = "VariableDeclaration"
  FUNCTION_DECLARATION = "FunctionDeclaration"
  CLASS_DECLARATION = "ClassDeclaration"
  HERITAGE_CLAUSE = "HeritageClause"
  CONSTRUCTOR = "Constructor"
  METHOD_DECLARATION = "MethodDeclaration"
  PROPERTY_DECLARATION = "PropertyDeclaration"
  PARAMETER = "Parameter"
  TYPE_PARAMETER = "TypeParameter"

  # Statements
  BLOCK = "Block"
  EMPTY_STATEMENT = "EmptyStatement"
  EXPRESSION_STATEMENT = "ExpressionStatement"
  IF_STATEMENT = "IfStatement"
  FOR_STATEMENT = "ForStatement"
  FOR_IN_STATEMENT = "ForInStatement"
  FOR_OF_STATEMENT = "ForOfStatement"
  WHILE_STATEMENT = "WhileStatement"
  DO_STATEMENT = "DoStatement"
  SWITCH_STATEMENT = "SwitchStatement"
  CASE_CLAUSE = "CaseClause"
  DEFAULT_CLAUSE = "DefaultClause"
  BREAK_STATEMENT = "BreakStatement"
  CONTINUE_STATEMENT = "ContinueStatement"
  RETURN_STATEMENT = "ReturnStatement"

  # Expressions
  IDENTIFIER = "Identifier"
  QUALIFIED_NAME = "QualifiedName"
  PARENTHESIZED_EXPRESSION = "ParenthesizedExpression"
  PROPERTY_ACCESS_EXPRESSION = "PropertyAccessExpression"
  ELEMENT_ACCESS_EXPRESSION = "ElementAccessExpression"
  CALL_EXPRESSION = "CallExpression"
  NEW_EXPRESSION = "NewExpression"
  BINARY_EXPRESSION = "BinaryExpression"
  PREFIX_UNARY_EXPRESSION = "PrefixUnaryExpression"
  POSTFIX_UNARY_EXPRESSION = "PostfixUnaryExpression"
  CONDITIONAL_EXPRESSION = "ConditionalExpression"
  DELETE_EXPRESSION = "DeleteExpression"
  VOID_EXPRESSION = "VoidExpression"
  TYPE_OF_EXPRESSION = "TypeOfExpression"

  # Literals and keywords
  NUMERIC_LITERAL = "NumericLiteral"
  STRING_LITERAL = "StringLiteral"
  REGULAR_EXPRESSION_LITERAL = "RegularExpressionLiteral"
  TRUE_KEYWORD = "TrueKeyword"
  FALSE_KEYWORD = "FalseKeyword"
  NULL_KEYWORD = "NullKeyword"
  THIS_KEYWORD = "ThisKeyword"

  # Types
  NUMBER_KEYWORD = "NumberKeyword"
  STRING_KEYWORD = "StringKeyword"
  VOID_KEYWORD = "VoidKeyword"
  BOOLEAN_KEYWORD = "BooleanKeyword"
  ANY_KEYWORD = "AnyKeyword"
  TYPE_REFERENCE = "TypeReference"


class Keyword(str, Enum):
  """Keywords recorded as node attributes rather than as child nodes."""

  VAR = "var"
  LET = "let"
  CONST = "const"
  EXTENDS = "extends"
  IMPLEMENTS = "implements"


class Token(str, Enum):
  """
  Enumeration of operator tokens.

  The value of each member is its source spelling, which the Dart output
  reuses unchanged.
  """

  # Arithmetic
  PLUS = "+"
  MINUS = "-"
  ASTERISK = "*"
  SLASH = "/"
  PERCENT = "%"
  ASTERISK_ASTERISK = "**"

  # Comparison / equality
  LESS_THAN = "<"
  GREATER_THAN = ">"
  LESS_THAN_EQUALS = "<="
  GREATER_THAN_EQUALS = ">="
  EQUALS_EQUALS = "=="
  EXCLAMATION_EQUALS = "!="
  EQUALS_EQUALS_EQUALS = "==="
  EXCLAMATION_EQUALS_EQUALS = "!=="
  INSTANCEOF = "instanceof"
  IN = "in"

  # Logical
  AMPERSAND_AMPERSAND = "&&"
  BAR_BAR = "||"
  QUESTION_QUESTION = "??"
  EXCLAMATION = "!"

  # Bitwise
  AMPERSAND = "&"
  BAR = "|"
  CARET = "^"
  TILDE = "~"
  LESS_THAN_LESS_THAN = "<<"
  GREATER_THAN_GREATER_THAN = ">>"
  GREATER_THAN_GREATER_THAN_GREATER_THAN = ">>>"

  # Assignment
  EQUALS = "="
  PLUS_EQUALS = "+="
  MINUS_EQUALS = "-="
  ASTERISK_EQUALS = "*="
  SLASH_EQUALS = "/="
  PERCENT_EQUALS = "%="
  ASTERISK_ASTERISK_EQUALS = "**="
  AMPERSAND_EQUALS = "&="
  BAR_EQUALS = "|="
  CARET_EQUALS = "^="
  LESS_THAN_LESS_THAN_EQUALS = "<<="
  GREATER_THAN_GREATER_THAN_EQUALS = ">>="
  GREATER_THAN_GREATER_THAN_GREATER_THAN_EQUALS = ">>>="
  AMPERSAND_AMPERSAND_EQUALS = "&&="
  BAR_BAR_EQUALS = "||="
  QUESTION_QUESTION_EQUALS = "??="

  # Update
  PLUS_PLUS = "++"
  MINUS_MINUS = "--"

  # Sequence
  COMMA = ","


def token_to_string(token: Token) -> str:
  """
  Returns the source spelling of an operator token.

  Args:
      token: The operator token.

  Returns:
      str: The operator text (e.g. ``"+="``).
  """
  return token.value


def string_to_token(text: str) -> Token:
  """
  Resolves operator text into a Token.

  Args:
      text: Operator spelling found in source.

  Returns:
      Token: The matching member.

  Raises:
      ValueError: If the spelling is not a known operator.
  """
  return Token(text)
