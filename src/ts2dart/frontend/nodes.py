"""
Typed Syntax Tree Nodes.

This module defines the immutable node classes produced by the front end.
Each class corresponds to one ``SyntaxKind`` and carries only the children
relevant to that kind, declared in source order so that ``get_children``
visits them the way they appear in the file.

Every node records three offsets into the file text:

- ``pos``: full start, i.e. the end of the previous token. Leading trivia
  (whitespace, comments) lives between ``pos`` and ``start``.
- ``start``: offset of the node's first token.
- ``end``: offset one past the node's last token.

Parents are weak back references filled in once the tree is complete
(see ``set_parent_pointers``); ownership always points from parent to child.
"""

from dataclasses import dataclass, field, fields
from functools import cached_property
from typing import ClassVar, Iterator, List, Optional, Tuple

from ts2dart.frontend.kinds import Keyword, SyntaxKind, Token
from ts2dart.frontend.scanner import (
  CommentRange,
  compute_line_starts,
  get_leading_comment_ranges,
  get_line_and_character_of_position,
)

_node = dataclass(frozen=True, eq=False, kw_only=True)


@_node
class Node:
  """Base class for all typed syntax nodes."""

  kind: ClassVar[SyntaxKind]

  pos: int
  start: int
  end: int
  parent: Optional["Node"] = field(default=None, init=False, repr=False)

  @property
  def kind_name(self) -> str:
    """Human readable kind, used in diagnostics."""
    return self.kind.value

  def get_source_file(self) -> "SourceFile":
    """
    Walks the parent chain up to the owning file.

    Returns:
        SourceFile: The root of the tree this node belongs to.

    Raises:
        ValueError: If the node is detached from any file.
    """
    node: Optional[Node] = self
    while node is not None:
      if isinstance(node, SourceFile):
        return node
      node = node.parent
    raise ValueError(f"{self.kind_name} node is not attached to a source file")

  def get_text(self) -> str:
    """Returns the source text spanned by the node's tokens."""
    return self.get_source_file().text[self.start : self.end]

  def get_leading_comment_ranges(self) -> List[CommentRange]:
    """Returns the comments between the node's full start and first token."""
    return get_leading_comment_ranges(self.get_source_file().text, self.pos)

  def get_children(self) -> Iterator["Node"]:
    """
    Yields the direct children in source order.

    Tuple-valued fields are flattened; non-node attributes are skipped.
    """
    for f in fields(self):
      if f.name == "parent":
        continue
      value = getattr(self, f.name)
      if isinstance(value, Node):
        yield value
      elif isinstance(value, tuple):
        for item in value:
          if isinstance(item, Node):
            yield item


def set_parent_pointers(root: Node) -> None:
  """
  Fills the ``parent`` back reference of every descendant of ``root``.

  Args:
      root: Tree root (usually a SourceFile).
  """
  stack = [root]
  while stack:
    node = stack.pop()
    for child in node.get_children():
      object.__setattr__(child, "parent", node)
      stack.append(child)


# --- Structure ---


@_node
class EndOfFileToken(Node):
  kind = SyntaxKind.END_OF_FILE_TOKEN


@_node
class SourceFile(Node):
  """Root node of one parsed file. Owns the full source text."""

  kind = SyntaxKind.SOURCE_FILE

  file_name: str
  text: str = field(repr=False)
  statements: Tuple[Node, ...] = ()
  end_of_file_token: Optional[EndOfFileToken] = None

  @property
  def is_declaration_file(self) -> bool:
    """True for ambient declaration files (``.d.ts``)."""
    return self.file_name.endswith(".d.ts")

  @cached_property
  def line_starts(self) -> List[int]:
    return compute_line_starts(self.text)

  def get_line_and_character_of_position(self, position: int) -> Tuple[int, int]:
    """
    Converts an offset into a 0-based (line, column) pair.

    Args:
        position: Character offset into ``text``.

    Returns:
        Tuple[int, int]: Line and column.
    """
    return get_line_and_character_of_position(self.line_starts, position)


@_node
class UnsupportedNode(Node):
  """
  Placeholder for source constructs the typed tree has no class for.

  It spans the whole construct so errors point at it; ``name`` describes the
  construct (e.g. ``ArrowFunction``).
  """

  kind = SyntaxKind.UNSUPPORTED

  name: str

  @property
  def kind_name(self) -> str:
    return self.name


# --- Expressions ---


@_node
class Identifier(Node):
  kind = SyntaxKind.IDENTIFIER

  text: str


@_node
class QualifiedName(Node):
  kind = SyntaxKind.QUALIFIED_NAME

  left: Node
  right: Identifier


@_node
class ParenthesizedExpression(Node):
  kind = SyntaxKind.PARENTHESIZED_EXPRESSION

  expression: Node


@_node
class PropertyAccessExpression(Node):
  kind = SyntaxKind.PROPERTY_ACCESS_EXPRESSION

  expression: Node
  name: Identifier


@_node
class ElementAccessExpression(Node):
  kind = SyntaxKind.ELEMENT_ACCESS_EXPRESSION

  expression: Node
  argument_expression: Node


@_node
class CallExpression(Node):
  kind = SyntaxKind.CALL_EXPRESSION

  expression: Node
  type_arguments: Tuple[Node, ...] = ()
  arguments: Tuple[Node, ...] = ()


@_node
class NewExpression(Node):
  kind = SyntaxKind.NEW_EXPRESSION

  expression: Node
  type_arguments: Tuple[Node, ...] = ()
  arguments: Tuple[Node, ...] = ()


@_node
class BinaryExpression(Node):
  kind = SyntaxKind.BINARY_EXPRESSION

  left: Node
  operator_token: Token
  right: Node


@_node
class PrefixUnaryExpression(Node):
  kind = SyntaxKind.PREFIX_UNARY_EXPRESSION

  operator: Token
  operand: Node


@_node
class PostfixUnaryExpression(Node):
  kind = SyntaxKind.POSTFIX_UNARY_EXPRESSION

  operand: Node
  operator: Token


@_node
class ConditionalExpression(Node):
  kind = SyntaxKind.CONDITIONAL_EXPRESSION

  condition: Node
  when_true: Node
  when_false: Node


@_node
class DeleteExpression(Node):
  kind = SyntaxKind.DELETE_EXPRESSION

  expression: Node


@_node
class VoidExpression(Node):
  kind = SyntaxKind.VOID_EXPRESSION

  expression: Node


@_node
class TypeOfExpression(Node):
  kind = SyntaxKind.TYPE_OF_EXPRESSION

  expression: Node


# --- Literals ---


@_node
class NumericLiteral(Node):
  kind = SyntaxKind.NUMERIC_LITERAL

  text: str


@_node
class StringLiteral(Node):
  """String literal. ``text`` holds the decoded value, not the source spelling."""

  kind = SyntaxKind.STRING_LITERAL

  text: str


@_node
class RegularExpressionLiteral(Node):
  """Regex literal. ``text`` is the full literal including slashes and flags."""

  kind = SyntaxKind.REGULAR_EXPRESSION_LITERAL

  text: str


@_node
class TrueKeyword(Node):
  kind = SyntaxKind.TRUE_KEYWORD


@_node
class FalseKeyword(Node):
  kind = SyntaxKind.FALSE_KEYWORD


@_node
class NullKeyword(Node):
  kind = SyntaxKind.NULL_KEYWORD


@_node
class ThisKeyword(Node):
  kind = SyntaxKind.THIS_KEYWORD


# --- Types ---


@_node
class NumberKeyword(Node):
  kind = SyntaxKind.NUMBER_KEYWORD


@_node
class StringKeyword(Node):
  kind = SyntaxKind.STRING_KEYWORD


@_node
class VoidKeyword(Node):
  kind = SyntaxKind.VOID_KEYWORD


@_node
class BooleanKeyword(Node):
  kind = SyntaxKind.BOOLEAN_KEYWORD


@_node
class AnyKeyword(Node):
  kind = SyntaxKind.ANY_KEYWORD


@_node
class TypeReference(Node):
  """A named type, optionally with type arguments (``Map<K, V>``)."""

  kind = SyntaxKind.TYPE_REFERENCE

  type_name: Node
  type_arguments: Optional[Tuple[Node, ...]] = None


@_node
class TypeParameter(Node):
  kind = SyntaxKind.TYPE_PARAMETER

  name: Identifier
  constraint: Optional[Node] = None


# --- Statements ---


@_node
class Block(Node):
  kind = SyntaxKind.BLOCK

  statements: Tuple[Node, ...] = ()


@_node
class EmptyStatement(Node):
  kind = SyntaxKind.EMPTY_STATEMENT


@_node
class ExpressionStatement(Node):
  kind = SyntaxKind.EXPRESSION_STATEMENT

  expression: Node


@_node
class IfStatement(Node):
  kind = SyntaxKind.IF_STATEMENT

  expression: Node
  then_statement: Node
  else_statement: Optional[Node] = None


@_node
class ForStatement(Node):
  kind = SyntaxKind.FOR_STATEMENT

  initializer: Optional[Node] = None
  condition: Optional[Node] = None
  incrementor: Optional[Node] = None
  statement: Node


@_node
class ForInStatement(Node):
  kind = SyntaxKind.FOR_IN_STATEMENT

  initializer: Node
  expression: Node
  statement: Node


@_node
class ForOfStatement(Node):
  kind = SyntaxKind.FOR_OF_STATEMENT

  initializer: Node
  expression: Node
  statement: Node


@_node
class WhileStatement(Node):
  kind = SyntaxKind.WHILE_STATEMENT

  expression: Node
  statement: Node


@_node
class DoStatement(Node):
  kind = SyntaxKind.DO_STATEMENT

  statement: Node
  expression: Node


@_node
class CaseClause(Node):
  kind = SyntaxKind.CASE_CLAUSE

  expression: Node
  statements: Tuple[Node, ...] = ()


@_node
class DefaultClause(Node):
  kind = SyntaxKind.DEFAULT_CLAUSE

  statements: Tuple[Node, ...] = ()


@_node
class SwitchStatement(Node):
  kind = SyntaxKind.SWITCH_STATEMENT

  expression: Node
  clauses: Tuple[Node, ...] = ()


@_node
class BreakStatement(Node):
  kind = SyntaxKind.BREAK_STATEMENT


@_node
class ContinueStatement(Node):
  kind = SyntaxKind.CONTINUE_STATEMENT


@_node
class ReturnStatement(Node):
  kind = SyntaxKind.RETURN_STATEMENT

  expression: Optional[Node] = None


# --- Declarations ---


@_node
class VariableDeclaration(Node):
  kind = SyntaxKind.VARIABLE_DECLARATION

  name: Node
  type: Optional[Node] = None
  initializer: Optional[Node] = None


@_node
class VariableDeclarationList(Node):
  kind = SyntaxKind.VARIABLE_DECLARATION_LIST

  flags: Keyword = Keyword.VAR
  declarations: Tuple[VariableDeclaration, ...] = ()


@_node
class VariableStatement(Node):
  kind = SyntaxKind.VARIABLE_STATEMENT

  declaration_list: VariableDeclarationList


@_node
class Parameter(Node):
  kind = SyntaxKind.PARAMETER

  dot_dot_dot_token: bool = False
  name: Node
  type: Optional[Node] = None
  initializer: Optional[Node] = None


@_node
class FunctionDeclaration(Node):
  kind = SyntaxKind.FUNCTION_DECLARATION

  name: Optional[Identifier] = None
  type_parameters: Optional[Tuple[TypeParameter, ...]] = None
  parameters: Tuple[Parameter, ...] = ()
  type: Optional[Node] = None
  body: Optional[Block] = None


@_node
class MethodDeclaration(Node):
  kind = SyntaxKind.METHOD_DECLARATION

  is_static: bool = False
  name: Node
  type_parameters: Optional[Tuple[TypeParameter, ...]] = None
  parameters: Tuple[Parameter, ...] = ()
  type: Optional[Node] = None
  body: Optional[Block] = None


@_node
class Constructor(Node):
  kind = SyntaxKind.CONSTRUCTOR

  parameters: Tuple[Parameter, ...] = ()
  body: Optional[Block] = None


@_node
class PropertyDeclaration(Node):
  kind = SyntaxKind.PROPERTY_DECLARATION

  is_static: bool = False
  name: Node
  type: Optional[Node] = None
  initializer: Optional[Node] = None


@_node
class HeritageClause(Node):
  kind = SyntaxKind.HERITAGE_CLAUSE

  token: Keyword
  types: Tuple[Node, ...] = ()


@_node
class ClassDeclaration(Node):
  kind = SyntaxKind.CLASS_DECLARATION

  name: Optional[Identifier] = None
  type_parameters: Optional[Tuple[TypeParameter, ...]] = None
  heritage_clauses: Optional[Tuple[HeritageClause, ...]] = None
  members: Tuple[Node, ...] = ()
