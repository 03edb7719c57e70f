"""
Dart Emitter.

Walks a typed ``SourceFile`` depth first and writes Dart source tokens.

Every visit does two things, in order:

1.  **Comment attachment**: leading comments of the node that were not yet
    written (see ``CommentTracker``) are copied verbatim.
2.  **Dispatch**: the handler registered for ``node.kind`` writes the node's
    tokens, recursing into children. Kinds without a handler are fatal.

Each token is written preceded by a single space; the output is not
pretty-printed. An emitter holds the state of one file and is discarded
afterwards.
"""

import json
from typing import Callable, Dict, Iterable, List, Optional

from ts2dart.core.comments import CommentTracker
from ts2dart.core.tables import KEYWORD_LITERALS, PRIMITIVE_TYPES, REJECTED_OPERATORS
from ts2dart.errors import StructuralInvariantViolation, report_error
from ts2dart.frontend.kinds import Keyword, SyntaxKind, token_to_string
from ts2dart.frontend.nodes import (
  BinaryExpression,
  Block,
  CallExpression,
  CaseClause,
  ClassDeclaration,
  ConditionalExpression,
  Constructor,
  DefaultClause,
  DoStatement,
  ElementAccessExpression,
  ExpressionStatement,
  ForInStatement,
  ForStatement,
  FunctionDeclaration,
  HeritageClause,
  Identifier,
  IfStatement,
  MethodDeclaration,
  NewExpression,
  Node,
  NumericLiteral,
  Parameter,
  ParenthesizedExpression,
  PostfixUnaryExpression,
  PrefixUnaryExpression,
  PropertyAccessExpression,
  PropertyDeclaration,
  QualifiedName,
  RegularExpressionLiteral,
  ReturnStatement,
  SourceFile,
  StringLiteral,
  SwitchStatement,
  TypeParameter,
  TypeReference,
  VariableDeclaration,
  VariableDeclarationList,
  VariableStatement,
  WhileStatement,
)
from ts2dart.frontend.scanner import get_leading_comment_ranges


def quote_dart_string(value: str) -> str:
  """
  Renders a string value as a double-quoted Dart literal.

  Args:
      value: The decoded string value.

  Returns:
      str: The literal, with ``$`` escaped against interpolation.
  """
  return json.dumps(value, ensure_ascii=False).replace("$", "\\$")


class DartEmitter:
  """
  Translates one source file into Dart text.

  Attributes:
      source_file (SourceFile): The file being translated.
  """

  def __init__(self, source_file: SourceFile) -> None:
    self.source_file = source_file
    self._text = source_file.text
    self._out: List[str] = []
    self._comments = CommentTracker()
    self._handlers: Dict[SyntaxKind, Callable[[Node], None]] = {
      SyntaxKind.SOURCE_FILE: self._visit_children,
      SyntaxKind.END_OF_FILE_TOKEN: self._visit_children,
      # Declarations
      SyntaxKind.VARIABLE_STATEMENT: self._visit_variable_statement,
      SyntaxKind.VARIABLE_DECLARATION_LIST: self._visit_variable_declaration_list,
      SyntaxKind.VARIABLE_DECLARATION: self._visit_variable_declaration,
      SyntaxKind.FUNCTION_DECLARATION: self._visit_function_declaration,
      SyntaxKind.CLASS_DECLARATION: self._visit_class_declaration,
      SyntaxKind.HERITAGE_CLAUSE: self._visit_heritage_clause,
      SyntaxKind.CONSTRUCTOR: self._visit_constructor,
      SyntaxKind.METHOD_DECLARATION: self._visit_method_declaration,
      SyntaxKind.PROPERTY_DECLARATION: self._visit_property_declaration,
      SyntaxKind.PARAMETER: self._visit_parameter,
      SyntaxKind.TYPE_PARAMETER: self._visit_type_parameter,
      # Statements
      SyntaxKind.BLOCK: self._visit_block,
      SyntaxKind.EMPTY_STATEMENT: lambda node: self.emit(";"),
      SyntaxKind.EXPRESSION_STATEMENT: self._visit_expression_statement,
      SyntaxKind.IF_STATEMENT: self._visit_if_statement,
      SyntaxKind.FOR_STATEMENT: self._visit_for_statement,
      SyntaxKind.FOR_IN_STATEMENT: self._visit_for_in_statement,
      SyntaxKind.FOR_OF_STATEMENT: self._visit_for_in_statement,
      SyntaxKind.WHILE_STATEMENT: self._visit_while_statement,
      SyntaxKind.DO_STATEMENT: self._visit_do_statement,
      SyntaxKind.SWITCH_STATEMENT: self._visit_switch_statement,
      SyntaxKind.CASE_CLAUSE: self._visit_case_clause,
      SyntaxKind.DEFAULT_CLAUSE: self._visit_default_clause,
      SyntaxKind.BREAK_STATEMENT: lambda node: self.emit("break ;"),
      SyntaxKind.CONTINUE_STATEMENT: lambda node: self.emit("continue ;"),
      SyntaxKind.RETURN_STATEMENT: self._visit_return_statement,
      # Expressions
      SyntaxKind.IDENTIFIER: self._visit_identifier,
      SyntaxKind.QUALIFIED_NAME: self._visit_qualified_name,
      SyntaxKind.PARENTHESIZED_EXPRESSION: self._visit_parenthesized_expression,
      SyntaxKind.PROPERTY_ACCESS_EXPRESSION: self._visit_property_access,
      SyntaxKind.ELEMENT_ACCESS_EXPRESSION: self._visit_element_access,
      SyntaxKind.CALL_EXPRESSION: self._visit_call,
      SyntaxKind.NEW_EXPRESSION: self._visit_new_expression,
      SyntaxKind.BINARY_EXPRESSION: self._visit_binary_expression,
      SyntaxKind.PREFIX_UNARY_EXPRESSION: self._visit_prefix_unary,
      SyntaxKind.POSTFIX_UNARY_EXPRESSION: self._visit_postfix_unary,
      SyntaxKind.CONDITIONAL_EXPRESSION: self._visit_conditional_expression,
      # Literals
      SyntaxKind.NUMERIC_LITERAL: self._visit_numeric_literal,
      SyntaxKind.STRING_LITERAL: self._visit_string_literal,
      SyntaxKind.REGULAR_EXPRESSION_LITERAL: self._visit_regex_literal,
      # Types
      SyntaxKind.TYPE_REFERENCE: self._visit_type_reference,
    }
    for kind, spelling in {**PRIMITIVE_TYPES, **KEYWORD_LITERALS}.items():
      self._handlers[kind] = self._emitter_for(spelling)
    for kind, message in REJECTED_OPERATORS.items():
      self._handlers[kind] = self._rejecter_for(message)

  # --- Output ---

  def emit_file(self) -> str:
    """
    Translates the whole file.

    Returns:
        str: The Dart text.

    Raises:
        TranslationError: On the first construct that cannot be translated.
    """
    self.visit(self.source_file)
    return "".join(self._out)

  def emit(self, text: str) -> None:
    """Appends one output token, preceded by a space."""
    self._out.append(" ")
    self._out.append(text)

  def _emitter_for(self, spelling: str) -> Callable[[Node], None]:
    return lambda node: self.emit(spelling)

  def _rejecter_for(self, message: str) -> Callable[[Node], None]:
    def reject(node: Node) -> None:
      report_error(node, message)

    return reject

  # --- Traversal ---

  def visit(self, node: Node) -> None:
    """
    Writes a node's unwritten leading comments, then the node itself.

    Args:
        node: Any typed node belonging to this emitter's file.

    Raises:
        UnsupportedConstruct: If the node kind has no Dart rendering.
    """
    self._emit_leading_comments(node)
    handler = self._handlers.get(node.kind)
    if handler is None:
      report_error(node, f"Unsupported node type {node.kind_name}")
    handler(node)

  def _emit_leading_comments(self, node: Node) -> None:
    ranges = get_leading_comment_ranges(self._text, node.pos)
    for comment in self._comments.take(ranges):
      self.emit(self._text[comment.pos : comment.end])
      if comment.has_trailing_new_line:
        self._out.append("\n")

  def visit_each(self, nodes: Iterable[Node]) -> None:
    for node in nodes:
      self.visit(node)

  def visit_list(self, nodes: Iterable[Node]) -> None:
    """Visits nodes with a ``,`` between adjacent elements."""
    for index, node in enumerate(nodes):
      if index > 0:
        self.emit(",")
      self.visit(node)

  def visit_function_like(self, parameters: Iterable[Parameter], body: Optional[Block]) -> None:
    self.emit("(")
    self.visit_list(parameters)
    self.emit(")")
    if body is None:
      self.emit(";")
    else:
      self.visit(body)

  def _visit_children(self, node: Node) -> None:
    self.visit_each(node.get_children())

  # --- Declarations ---

  def _visit_variable_statement(self, node: VariableStatement) -> None:
    self.visit(node.declaration_list)
    self.emit(";\n")

  def _visit_variable_declaration_list(self, node: VariableDeclarationList) -> None:
    self.visit_each(node.declarations)

  def _visit_variable_declaration(self, node: VariableDeclaration) -> None:
    if node.type is not None:
      self.visit(node.type)
    else:
      self.emit("var")
    self.visit(node.name)
    if node.initializer is not None:
      self.emit("=")
      self.visit(node.initializer)

  def _visit_function_declaration(self, node: FunctionDeclaration) -> None:
    if node.type_parameters is not None:
      report_error(node, "generic functions are unsupported")
    if node.type is not None:
      self.visit(node.type)
    self.visit(node.name)
    self.visit_function_like(node.parameters, node.body)

  def _visit_class_declaration(self, node: ClassDeclaration) -> None:
    self.emit("class")
    self.visit(node.name)
    if node.type_parameters is not None:
      self.emit("<")
      self.visit_list(node.type_parameters)
      self.emit(">")
    if node.heritage_clauses is not None:
      self.visit_each(node.heritage_clauses)
    self.emit("{")
    self.visit_each(node.members)
    self.emit("}")

  def _visit_heritage_clause(self, node: HeritageClause) -> None:
    if node.token == Keyword.EXTENDS:
      if len(node.types) > 1:
        report_error(node, "classes can only extend a single supertype")
      self.emit("extends")
    else:
      self.emit("implements")
    self.visit_list(node.types)

  def _visit_constructor(self, node: Constructor) -> None:
    parent = node.parent
    while parent is not None and not isinstance(parent, ClassDeclaration):
      parent = parent.parent
    if parent is None or parent.name is None:
      report_error(node, "cannot find outer class node", StructuralInvariantViolation)
    self.visit(parent.name)
    self.visit_function_like(node.parameters, node.body)

  def _visit_method_declaration(self, node: MethodDeclaration) -> None:
    if node.is_static:
      self.emit("static")
    if node.type is not None:
      self.visit(node.type)
    self.visit(node.name)
    self.visit_function_like(node.parameters, node.body)

  def _visit_property_declaration(self, node: PropertyDeclaration) -> None:
    if node.is_static:
      self.emit("static")
    if node.type is not None:
      self.visit(node.type)
    else:
      self.emit("var")
    self.visit(node.name)
    if node.initializer is not None:
      self.emit("=")
      self.visit(node.initializer)
    self.emit(";")

  def _visit_parameter(self, node: Parameter) -> None:
    if node.dot_dot_dot_token:
      report_error(node, "rest parameters are unsupported")
    # Defaulted parameters become Dart optional positional parameters.
    if node.initializer is not None:
      self.emit("[")
    if node.type is not None:
      self.visit(node.type)
    self.visit(node.name)
    if node.initializer is not None:
      self.emit("=")
      self.visit(node.initializer)
      self.emit("]")

  def _visit_type_parameter(self, node: TypeParameter) -> None:
    self.visit(node.name)
    if node.constraint is not None:
      self.emit("extends")
      self.visit(node.constraint)

  # --- Statements ---

  def _visit_block(self, node: Block) -> None:
    self.emit("{")
    self.visit_each(node.statements)
    self.emit("}")

  def _visit_expression_statement(self, node: ExpressionStatement) -> None:
    self.visit(node.expression)
    self.emit(";")

  def _visit_if_statement(self, node: IfStatement) -> None:
    self.emit("if (")
    self.visit(node.expression)
    self.emit(")")
    self.visit(node.then_statement)
    if node.else_statement is not None:
      self.emit("else")
      self.visit(node.else_statement)

  def _visit_for_statement(self, node: ForStatement) -> None:
    self.emit("for (")
    if node.initializer is not None:
      self.visit(node.initializer)
    self.emit(";")
    if node.condition is not None:
      self.visit(node.condition)
    self.emit(";")
    if node.incrementor is not None:
      self.visit(node.incrementor)
    self.emit(")")
    self.visit(node.statement)

  def _visit_for_in_statement(self, node: ForInStatement) -> None:
    # Dart's for-in iterates values, which matches for-of rather than for-in.
    self.emit("for (")
    self.visit(node.initializer)
    self.emit("in")
    self.visit(node.expression)
    self.emit(")")
    self.visit(node.statement)

  def _visit_while_statement(self, node: WhileStatement) -> None:
    self.emit("while (")
    self.visit(node.expression)
    self.emit(")")
    self.visit(node.statement)

  def _visit_do_statement(self, node: DoStatement) -> None:
    self.emit("do")
    self.visit(node.statement)
    self.emit("while (")
    self.visit(node.expression)
    self.emit(") ;")

  def _visit_switch_statement(self, node: SwitchStatement) -> None:
    self.emit("switch (")
    self.visit(node.expression)
    self.emit(") {")
    self.visit_each(node.clauses)
    self.emit("}")

  def _visit_case_clause(self, node: CaseClause) -> None:
    self.emit("case")
    self.visit(node.expression)
    self.emit(":")
    self.visit_each(node.statements)

  def _visit_default_clause(self, node: DefaultClause) -> None:
    self.emit("default :")
    self.visit_each(node.statements)

  def _visit_return_statement(self, node: ReturnStatement) -> None:
    self.emit("return")
    if node.expression is not None:
      self.visit(node.expression)
    self.emit(";")

  # --- Expressions ---

  def _visit_identifier(self, node: Identifier) -> None:
    self.emit(node.text)

  def _visit_qualified_name(self, node: QualifiedName) -> None:
    self.visit(node.left)
    self.emit(".")
    self.visit(node.right)

  def _visit_parenthesized_expression(self, node: ParenthesizedExpression) -> None:
    self.emit("(")
    self.visit(node.expression)
    self.emit(")")

  def _visit_property_access(self, node: PropertyAccessExpression) -> None:
    self.visit(node.expression)
    self.emit(".")
    self.visit(node.name)

  def _visit_element_access(self, node: ElementAccessExpression) -> None:
    self.visit(node.expression)
    self.emit("[")
    self.visit(node.argument_expression)
    self.emit("]")

  def _visit_call(self, node: CallExpression) -> None:
    self.visit(node.expression)
    self.emit("(")
    self.visit_list(node.arguments)
    self.emit(")")

  def _visit_new_expression(self, node: NewExpression) -> None:
    self.emit("new")
    self._visit_call(node)

  def _visit_binary_expression(self, node: BinaryExpression) -> None:
    self.visit(node.left)
    self.emit(token_to_string(node.operator_token))
    self.visit(node.right)

  def _visit_prefix_unary(self, node: PrefixUnaryExpression) -> None:
    self.emit(token_to_string(node.operator))
    self.visit(node.operand)

  def _visit_postfix_unary(self, node: PostfixUnaryExpression) -> None:
    self.visit(node.operand)
    self.emit(token_to_string(node.operator))

  def _visit_conditional_expression(self, node: ConditionalExpression) -> None:
    self.visit(node.condition)
    self.emit("?")
    self.visit(node.when_true)
    self.emit(":")
    self.visit(node.when_false)

  # --- Literals and types ---

  def _visit_numeric_literal(self, node: NumericLiteral) -> None:
    self.emit(node.text)

  def _visit_string_literal(self, node: StringLiteral) -> None:
    self.emit(quote_dart_string(node.text))

  def _visit_regex_literal(self, node: RegularExpressionLiteral) -> None:
    self.emit(node.text)

  def _visit_type_reference(self, node: TypeReference) -> None:
    self.visit(node.type_name)
    if node.type_arguments is not None:
      self.emit("<")
      self.visit_list(node.type_arguments)
      self.emit(">")
