"""
TypeScript Front End (tree-sitter lowering).

Parses TypeScript source with ``tree-sitter`` and lowers the concrete syntax
tree into the typed node model of ``ts2dart.frontend.nodes``.

The lowering is purely structural:

1.  **Parsing**: ``tree_sitter_typescript`` grammar (TSX grammar for ``.tsx``).
    Any ``ERROR`` or missing node aborts with ``SourceSyntaxError``.
2.  **Token index**: every non-comment leaf token is indexed so the full start
    of a node (end of the previous token) can be found by bisection.
3.  **Lowering**: one builder method per tree-sitter node type. Types with no
    typed counterpart become ``UnsupportedNode`` and are left for the emitter
    to reject, so the error points at the construct itself.

Tree-sitter reports byte offsets; the typed tree uses character offsets.
"""

import bisect
import dataclasses
import re
from typing import Callable, Dict, List, Optional, Tuple

import tree_sitter
import tree_sitter_typescript

from ts2dart.errors import SourceSyntaxError
from ts2dart.frontend.kinds import Keyword, Token, string_to_token
from ts2dart.frontend.nodes import (
  AnyKeyword,
  BinaryExpression,
  Block,
  BooleanKeyword,
  BreakStatement,
  CallExpression,
  CaseClause,
  ClassDeclaration,
  ConditionalExpression,
  Constructor,
  ContinueStatement,
  DefaultClause,
  DeleteExpression,
  DoStatement,
  ElementAccessExpression,
  EmptyStatement,
  EndOfFileToken,
  ExpressionStatement,
  FalseKeyword,
  ForInStatement,
  ForOfStatement,
  ForStatement,
  FunctionDeclaration,
  HeritageClause,
  Identifier,
  IfStatement,
  MethodDeclaration,
  NewExpression,
  Node,
  NullKeyword,
  NumberKeyword,
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
  StringKeyword,
  StringLiteral,
  SwitchStatement,
  ThisKeyword,
  TrueKeyword,
  TypeOfExpression,
  TypeParameter,
  TypeReference,
  UnsupportedNode,
  VariableDeclaration,
  VariableDeclarationList,
  VariableStatement,
  VoidExpression,
  VoidKeyword,
  WhileStatement,
  set_parent_pointers,
)
from ts2dart.frontend.scanner import compute_line_starts, get_line_and_character_of_position

TSNode = tree_sitter.Node

_LANGUAGES: Dict[str, tree_sitter.Language] = {}

# Descriptive names for tree-sitter node types that have no typed counterpart.
_UNSUPPORTED_NAMES: Dict[str, str] = {
  "abstract_class_declaration": "AbstractClassDeclaration",
  "abstract_method_signature": "AbstractMethodSignature",
  "ambient_declaration": "AmbientDeclaration",
  "array": "ArrayLiteralExpression",
  "array_pattern": "ArrayBindingPattern",
  "array_type": "ArrayType",
  "arrow_function": "ArrowFunction",
  "as_expression": "AsExpression",
  "await_expression": "AwaitExpression",
  "class": "ClassExpression",
  "class_static_block": "ClassStaticBlockDeclaration",
  "computed_property_name": "ComputedPropertyName",
  "debugger_statement": "DebuggerStatement",
  "decorator": "Decorator",
  "enum_declaration": "EnumDeclaration",
  "export_statement": "ExportDeclaration",
  "function": "FunctionExpression",
  "function_expression": "FunctionExpression",
  "function_signature": "FunctionSignature",
  "function_type": "FunctionType",
  "generator_function_declaration": "GeneratorFunctionDeclaration",
  "import_statement": "ImportDeclaration",
  "index_signature": "IndexSignature",
  "interface_declaration": "InterfaceDeclaration",
  "internal_module": "ModuleDeclaration",
  "intersection_type": "IntersectionType",
  "labeled_statement": "LabeledStatement",
  "literal_type": "LiteralType",
  "method_signature": "MethodSignature",
  "module": "ModuleDeclaration",
  "non_null_expression": "NonNullExpression",
  "object": "ObjectLiteralExpression",
  "object_pattern": "ObjectBindingPattern",
  "object_type": "TypeLiteral",
  "parenthesized_type": "ParenthesizedType",
  "private_property_identifier": "PrivateIdentifier",
  "satisfies_expression": "SatisfiesExpression",
  "spread_element": "SpreadElement",
  "super": "SuperKeyword",
  "template_string": "TemplateExpression",
  "this_type": "ThisType",
  "throw_statement": "ThrowStatement",
  "try_statement": "TryStatement",
  "tuple_type": "TupleType",
  "type_alias_declaration": "TypeAliasDeclaration",
  "type_assertion": "TypeAssertionExpression",
  "union_type": "UnionType",
  "with_statement": "WithStatement",
  "yield_expression": "YieldExpression",
}

_PREDEFINED_TYPES = {
  "number": NumberKeyword,
  "string": StringKeyword,
  "void": VoidKeyword,
  "boolean": BooleanKeyword,
  "any": AnyKeyword,
}

_DECLARATION_KEYWORDS = {"var", "let", "const"}

_SIMPLE_ESCAPES = {
  "n": "\n",
  "t": "\t",
  "r": "\r",
  "b": "\b",
  "f": "\f",
  "v": "\v",
  "0": "\0",
}

_ESCAPE_RE = re.compile(r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|[0-7]{1,3}|\r\n|[\s\S])")


def get_language(tsx: bool = False) -> tree_sitter.Language:
  """
  Loads (and caches) the TypeScript grammar.

  Args:
      tsx: Load the TSX dialect instead of plain TypeScript.

  Returns:
      tree_sitter.Language: The compiled grammar.
  """
  key = "tsx" if tsx else "typescript"
  if key not in _LANGUAGES:
    if tsx:
      _LANGUAGES[key] = tree_sitter.Language(tree_sitter_typescript.language_tsx())
    else:
      _LANGUAGES[key] = tree_sitter.Language(tree_sitter_typescript.language_typescript())
  return _LANGUAGES[key]


def parse_source_file(file_name: str, text: str) -> SourceFile:
  """
  Parses TypeScript text into a typed SourceFile.

  Args:
      file_name: Name reported in diagnostics. A ``.tsx`` suffix selects the TSX grammar.
      text: Full source text.

  Returns:
      SourceFile: Root of the typed tree, with parent pointers filled in.

  Raises:
      SourceSyntaxError: If the text does not parse cleanly.
  """
  source = text.encode("utf-8")
  parser = tree_sitter.Parser(get_language(file_name.endswith(".tsx")))
  tree = parser.parse(source)
  builder = TreeBuilder(file_name, text, source)
  return builder.build(tree.root_node)


def decode_string_literal(raw: str) -> str:
  """
  Decodes the value of a quoted string literal.

  Args:
      raw: Source spelling including the surrounding quotes.

  Returns:
      str: The literal's value with escapes resolved.
  """

  def replace(match: "re.Match[str]") -> str:
    body = match.group(1)
    if body in ("\n", "\r", "\r\n", "\u2028", "\u2029"):
      return ""
    if body.startswith("u{"):
      return chr(int(body[2:-1], 16))
    if body[0] in "ux" and len(body) > 1:
      return chr(int(body[1:], 16))
    if body[0] in "01234567" and body != "0":
      return chr(int(body, 8))
    return _SIMPLE_ESCAPES.get(body, body)

  value = _ESCAPE_RE.sub(replace, raw[1:-1])
  # Escaped surrogate pairs decode to two lone surrogates; join them.
  return value.encode("utf-16", "surrogatepass").decode("utf-16", "replace")


class _OffsetMap:
  """Converts UTF-8 byte offsets into character offsets."""

  def __init__(self, text: str, source: bytes) -> None:
    self._table: Optional[List[int]] = None
    if len(source) == len(text):
      return
    table = [0] * (len(source) + 1)
    offset = 0
    for index, ch in enumerate(text):
      width = len(ch.encode("utf-8"))
      for k in range(width):
        table[offset + k] = index
      offset += width
    table[offset] = len(text)
    self._table = table

  def __call__(self, byte_offset: int) -> int:
    if self._table is None:
      return byte_offset
    return self._table[byte_offset]


class TreeBuilder:
  """
  Lowers one tree-sitter tree into typed nodes.

  A builder is single use: create one per file.
  """

  def __init__(self, file_name: str, text: str, source: bytes) -> None:
    """
    Args:
        file_name: Name of the file being lowered.
        text: Decoded source text.
        source: UTF-8 encoding of ``text`` as handed to tree-sitter.
    """
    self.file_name = file_name
    self.text = text
    self._to_char = _OffsetMap(text, source)
    self._token_ends: List[int] = []
    self._handlers: Dict[str, Callable[[TSNode], Node]] = {
      # Statements
      "lexical_declaration": self._variable_statement,
      "variable_declaration": self._variable_statement,
      "expression_statement": self._expression_statement,
      "statement_block": self._block,
      "empty_statement": self._empty_statement,
      "if_statement": self._if_statement,
      "for_statement": self._for_statement,
      "for_in_statement": self._for_in_statement,
      "while_statement": self._while_statement,
      "do_statement": self._do_statement,
      "switch_statement": self._switch_statement,
      "break_statement": self._break_statement,
      "continue_statement": self._continue_statement,
      "return_statement": self._return_statement,
      "export_statement": self._export_statement,
      # Declarations
      "function_declaration": self._function_declaration,
      "class_declaration": self._class_declaration,
      # Expressions
      "identifier": self._identifier,
      "property_identifier": self._identifier,
      "shorthand_property_identifier": self._identifier,
      "undefined": self._identifier,
      "number": self._numeric_literal,
      "string": self._string_literal,
      "regex": self._regex_literal,
      "true": self._keyword(TrueKeyword),
      "false": self._keyword(FalseKeyword),
      "null": self._keyword(NullKeyword),
      "this": self._keyword(ThisKeyword),
      "parenthesized_expression": self._parenthesized_expression,
      "member_expression": self._member_expression,
      "subscript_expression": self._subscript_expression,
      "call_expression": self._call_expression,
      "new_expression": self._new_expression,
      "binary_expression": self._binary_expression,
      "assignment_expression": self._binary_expression,
      "augmented_assignment_expression": self._binary_expression,
      "sequence_expression": self._sequence_expression,
      "unary_expression": self._unary_expression,
      "update_expression": self._update_expression,
      "ternary_expression": self._ternary_expression,
      # Types
      "predefined_type": self._predefined_type,
      "type_identifier": self._type_reference,
      "nested_type_identifier": self._type_reference,
      "generic_type": self._type_reference,
    }

  # --- Entry ---

  def build(self, root: TSNode) -> SourceFile:
    """
    Lowers the ``program`` root node.

    Args:
        root: Root node of the tree-sitter parse tree.

    Returns:
        SourceFile: The typed tree.

    Raises:
        SourceSyntaxError: If the parse tree contains errors.
    """
    if root.has_error:
      self._raise_syntax_error(root)

    self._index_tokens(root)
    statements = tuple(self.visit(c) for c in self._named(root) if c.type != "hash_bang_line")

    length = len(self.text)
    eof = EndOfFileToken(pos=self._full_start(length), start=length, end=length)
    first_start = statements[0].start if statements else length
    source_file = SourceFile(
      pos=0,
      start=first_start,
      end=length,
      file_name=self.file_name,
      text=self.text,
      statements=statements,
      end_of_file_token=eof,
    )
    set_parent_pointers(source_file)
    return source_file

  def visit(self, node: TSNode) -> Node:
    """Lowers any tree-sitter node through the handler table."""
    handler = self._handlers.get(node.type)
    if handler is None:
      return self._unsupported(node)
    return handler(node)

  # --- Positions ---

  def _index_tokens(self, root: TSNode) -> None:
    ends: List[int] = []
    stack = [root]
    while stack:
      node = stack.pop()
      if node.type == "comment":
        continue
      if node.child_count == 0:
        if node.end_byte > node.start_byte:
          ends.append(self._to_char(node.end_byte))
        continue
      stack.extend(reversed(node.children))
    self._token_ends = sorted(ends)

  def _full_start(self, start: int) -> int:
    idx = bisect.bisect_right(self._token_ends, start)
    return self._token_ends[idx - 1] if idx > 0 else 0

  def _span(self, node: TSNode, end_node: Optional[TSNode] = None) -> Dict[str, int]:
    start = self._to_char(node.start_byte)
    end = self._to_char((end_node or node).end_byte)
    return {"pos": self._full_start(start), "start": start, "end": end}

  def _raise_syntax_error(self, root: TSNode) -> None:
    stack = [root]
    while stack:
      node = stack.pop()
      if node.type == "ERROR" or node.is_missing:
        offset = self._to_char(node.start_byte)
        line, column = get_line_and_character_of_position(compute_line_starts(self.text), offset)
        if node.is_missing:
          message = f"syntax error: missing '{node.type}'"
        else:
          snippet = self.text[offset : self._to_char(node.end_byte)].split("\n")[0][:20]
          message = f"syntax error near '{snippet}'"
        raise SourceSyntaxError(self.file_name, line, column, message)
      if node.has_error:
        stack.extend(reversed(node.children))
    raise SourceSyntaxError(self.file_name, 0, 0, "syntax error")

  # --- Helpers ---

  @staticmethod
  def _named(node: TSNode) -> List[TSNode]:
    return [c for c in node.named_children if c.type != "comment"]

  @staticmethod
  def _tokens(node: TSNode) -> List[str]:
    return [c.type for c in node.children if c.type != "comment"]

  def _unsupported(self, node: TSNode, name: Optional[str] = None) -> UnsupportedNode:
    if name is None:
      name = _UNSUPPORTED_NAMES.get(node.type)
    if name is None:
      name = "".join(part.capitalize() for part in node.type.split("_"))
    return UnsupportedNode(name=name, **self._span(node))

  def _keyword(self, cls: type) -> Callable[[TSNode], Node]:
    def build(node: TSNode) -> Node:
      return cls(**self._span(node))

    return build

  def _unwrap_parens(self, node: TSNode) -> Node:
    inner = self._named(node)
    if node.type == "parenthesized_expression" and inner:
      return self.visit(inner[0])
    return self.visit(node)

  def _optional(self, node: Optional[TSNode]) -> Optional[Node]:
    return self.visit(node) if node is not None else None

  def _list(self, node: Optional[TSNode]) -> Tuple[Node, ...]:
    if node is None:
      return ()
    return tuple(self.visit(c) for c in self._named(node))

  # --- Statements ---

  def _declaration_list(self, node: TSNode) -> VariableDeclarationList:
    tokens = self._tokens(node)
    flags = Keyword(tokens[0]) if tokens and tokens[0] in _DECLARATION_KEYWORDS else Keyword.VAR
    declarators = [c for c in self._named(node) if c.type == "variable_declarator"]
    span = self._span(node, declarators[-1] if declarators else None)
    return VariableDeclarationList(
      flags=flags,
      declarations=tuple(self._variable_declaration(d) for d in declarators),
      **span,
    )

  def _variable_declaration(self, node: TSNode) -> VariableDeclaration:
    return VariableDeclaration(
      name=self.visit(node.child_by_field_name("name")),
      type=self._type_annotation(node.child_by_field_name("type")),
      initializer=self._optional(node.child_by_field_name("value")),
      **self._span(node),
    )

  def _variable_statement(self, node: TSNode) -> VariableStatement:
    return VariableStatement(declaration_list=self._declaration_list(node), **self._span(node))

  def _expression_statement(self, node: TSNode) -> ExpressionStatement:
    return ExpressionStatement(expression=self.visit(self._named(node)[0]), **self._span(node))

  def _block(self, node: TSNode) -> Block:
    return Block(statements=self._list(node), **self._span(node))

  def _empty_statement(self, node: TSNode) -> EmptyStatement:
    return EmptyStatement(**self._span(node))

  def _if_statement(self, node: TSNode) -> IfStatement:
    else_statement = None
    alternative = node.child_by_field_name("alternative")
    if alternative is not None:
      else_statement = self.visit(self._named(alternative)[0])
    return IfStatement(
      expression=self._unwrap_parens(node.child_by_field_name("condition")),
      then_statement=self.visit(node.child_by_field_name("consequence")),
      else_statement=else_statement,
      **self._span(node),
    )

  def _for_clause(self, node: Optional[TSNode]) -> Optional[Node]:
    # Grammar versions disagree on whether header clauses are wrapped in statements.
    if node is None or node.type in ("empty_statement", ";"):
      return None
    if node.type == "expression_statement":
      return self.visit(self._named(node)[0])
    if node.type in ("lexical_declaration", "variable_declaration"):
      return self._declaration_list(node)
    return self.visit(node)

  def _for_statement(self, node: TSNode) -> ForStatement:
    increment = node.child_by_field_name("increment") or node.child_by_field_name("update")
    return ForStatement(
      initializer=self._for_clause(node.child_by_field_name("initializer")),
      condition=self._for_clause(node.child_by_field_name("condition")),
      incrementor=self._optional(increment),
      statement=self.visit(node.child_by_field_name("body")),
      **self._span(node),
    )

  def _for_in_statement(self, node: TSNode) -> Node:
    children = [c for c in node.children if c.type != "comment"]
    if any(c.type == "await" for c in children):
      return self._unsupported(node, "ForAwaitStatement")

    left = node.child_by_field_name("left")
    keyword = next((c for c in children if c.type in _DECLARATION_KEYWORDS), None)
    if keyword is not None:
      declaration = VariableDeclaration(name=self.visit(left), **self._span(left))
      initializer: Node = VariableDeclarationList(
        flags=Keyword(keyword.type),
        declarations=(declaration,),
        **self._span(keyword, left),
      )
    else:
      initializer = self.visit(left)

    is_for_of = any(c.type == "of" for c in children)
    cls = ForOfStatement if is_for_of else ForInStatement
    return cls(
      initializer=initializer,
      expression=self.visit(node.child_by_field_name("right")),
      statement=self.visit(node.child_by_field_name("body")),
      **self._span(node),
    )

  def _while_statement(self, node: TSNode) -> WhileStatement:
    return WhileStatement(
      expression=self._unwrap_parens(node.child_by_field_name("condition")),
      statement=self.visit(node.child_by_field_name("body")),
      **self._span(node),
    )

  def _do_statement(self, node: TSNode) -> DoStatement:
    return DoStatement(
      statement=self.visit(node.child_by_field_name("body")),
      expression=self._unwrap_parens(node.child_by_field_name("condition")),
      **self._span(node),
    )

  def _switch_statement(self, node: TSNode) -> SwitchStatement:
    clauses: List[Node] = []
    for clause in self._named(node.child_by_field_name("body")):
      if clause.type == "switch_case":
        value = clause.child_by_field_name("value")
        statements = [s for s in self._named(clause) if s.start_byte >= value.end_byte]
        clauses.append(
          CaseClause(
            expression=self.visit(value),
            statements=tuple(self.visit(s) for s in statements),
            **self._span(clause),
          )
        )
      elif clause.type == "switch_default":
        clauses.append(DefaultClause(statements=self._list(clause), **self._span(clause)))
      else:
        clauses.append(self.visit(clause))
    return SwitchStatement(
      expression=self._unwrap_parens(node.child_by_field_name("value")),
      clauses=tuple(clauses),
      **self._span(node),
    )

  def _break_statement(self, node: TSNode) -> BreakStatement:
    return BreakStatement(**self._span(node))

  def _continue_statement(self, node: TSNode) -> ContinueStatement:
    return ContinueStatement(**self._span(node))

  def _return_statement(self, node: TSNode) -> ReturnStatement:
    named = self._named(node)
    return ReturnStatement(expression=self.visit(named[0]) if named else None, **self._span(node))

  def _export_statement(self, node: TSNode) -> Node:
    declaration = node.child_by_field_name("declaration")
    if declaration is None or "default" in self._tokens(node):
      return self._unsupported(node)
    # Dart has no export modifier; the declaration absorbs the keyword's span.
    inner = self.visit(declaration)
    span = self._span(node)
    return dataclasses.replace(inner, pos=span["pos"], start=span["start"])

  # --- Declarations ---

  def _parameters(self, node: Optional[TSNode]) -> Tuple[Node, ...]:
    if node is None:
      return ()
    params: List[Node] = []
    for child in self._named(node):
      if child.type in ("required_parameter", "optional_parameter"):
        params.append(self._parameter(child))
      else:
        params.append(self.visit(child))
    return tuple(params)

  def _parameter(self, node: TSNode) -> Node:
    decorator = next((c for c in self._named(node) if c.type == "decorator"), None)
    if decorator is not None:
      return self._unsupported(decorator)

    pattern = node.child_by_field_name("pattern")
    if pattern.type == "this":
      return self._unsupported(node, "ThisParameter")

    is_rest = pattern.type == "rest_pattern"
    name = self.visit(self._named(pattern)[0]) if is_rest else self.visit(pattern)
    return Parameter(
      dot_dot_dot_token=is_rest,
      name=name,
      type=self._type_annotation(node.child_by_field_name("type")),
      initializer=self._optional(node.child_by_field_name("value")),
      **self._span(node),
    )

  def _type_parameters(self, node: Optional[TSNode]) -> Optional[Tuple[TypeParameter, ...]]:
    if node is None:
      return None
    params = []
    for child in self._named(node):
      constraint = child.child_by_field_name("constraint")
      constraint_type = None
      if constraint is not None:
        constraint_type = self.visit(self._named(constraint)[0])
      params.append(
        TypeParameter(
          name=self._identifier(child.child_by_field_name("name")),
          constraint=constraint_type,
          **self._span(child),
        )
      )
    return tuple(params)

  def _function_declaration(self, node: TSNode) -> FunctionDeclaration:
    return FunctionDeclaration(
      name=self._identifier(node.child_by_field_name("name")),
      type_parameters=self._type_parameters(node.child_by_field_name("type_parameters")),
      parameters=self._parameters(node.child_by_field_name("parameters")),
      type=self._type_annotation(node.child_by_field_name("return_type")),
      body=self._block(node.child_by_field_name("body")),
      **self._span(node),
    )

  def _class_declaration(self, node: TSNode) -> Node:
    named = self._named(node)
    decorator = next((c for c in named if c.type == "decorator"), None)
    if decorator is not None:
      return self._unsupported(decorator)

    heritage = next((c for c in named if c.type == "class_heritage"), None)
    body = node.child_by_field_name("body")
    return ClassDeclaration(
      name=self._identifier(node.child_by_field_name("name")),
      type_parameters=self._type_parameters(node.child_by_field_name("type_parameters")),
      heritage_clauses=self._heritage_clauses(heritage) if heritage is not None else None,
      members=tuple(self._class_member(m) for m in self._named(body)),
      **self._span(node),
    )

  def _heritage_clauses(self, node: TSNode) -> Tuple[HeritageClause, ...]:
    clauses = []
    for clause in self._named(node):
      if clause.type == "extends_clause":
        clauses.append(HeritageClause(token=Keyword.EXTENDS, types=self._extends_types(clause), **self._span(clause)))
      elif clause.type == "implements_clause":
        types = tuple(self.visit(t) for t in self._named(clause))
        clauses.append(HeritageClause(token=Keyword.IMPLEMENTS, types=types, **self._span(clause)))
    return tuple(clauses)

  def _extends_types(self, clause: TSNode) -> Tuple[Node, ...]:
    # Each supertype is an expression optionally followed by its type arguments.
    entries: List[List[TSNode]] = []
    for child in clause.named_children:
      if child.type == "comment":
        continue
      if child.type == "type_arguments" and entries:
        entries[-1].append(child)
      else:
        entries.append([child])

    types = []
    for entry in entries:
      type_arguments = self._list(entry[1]) if len(entry) > 1 else None
      types.append(
        TypeReference(
          type_name=self.visit(entry[0]),
          type_arguments=type_arguments,
          **self._span(entry[0], entry[-1]),
        )
      )
    return tuple(types)

  def _class_member(self, node: TSNode) -> Node:
    if node.type == "method_definition":
      return self._method_definition(node)
    if node.type == "public_field_definition":
      return self._field_definition(node)
    return self.visit(node)

  def _member_name(self, node: TSNode) -> Node:
    if node.type == "property_identifier":
      return self._identifier(node)
    if node.type in ("string", "number"):
      return self._unsupported(node, "LiteralPropertyName")
    return self.visit(node)

  def _method_definition(self, node: TSNode) -> Node:
    tokens = self._tokens(node)
    if "*" in tokens:
      return self._unsupported(node, "GeneratorMethod")
    if "get" in tokens:
      return self._unsupported(node, "GetAccessor")
    if "set" in tokens:
      return self._unsupported(node, "SetAccessor")

    name = node.child_by_field_name("name")
    parameters = self._parameters(node.child_by_field_name("parameters"))
    body = node.child_by_field_name("body")
    body_block = self._block(body) if body is not None else None

    if name.type == "property_identifier" and self._text(name) == "constructor":
      return Constructor(parameters=parameters, body=body_block, **self._span(node))

    return MethodDeclaration(
      is_static="static" in tokens,
      name=self._member_name(name),
      type_parameters=self._type_parameters(node.child_by_field_name("type_parameters")),
      parameters=parameters,
      type=self._type_annotation(node.child_by_field_name("return_type")),
      body=body_block,
      **self._span(node),
    )

  def _field_definition(self, node: TSNode) -> Node:
    decorator = next((c for c in self._named(node) if c.type == "decorator"), None)
    if decorator is not None:
      return self._unsupported(decorator)
    return PropertyDeclaration(
      is_static="static" in self._tokens(node),
      name=self._member_name(node.child_by_field_name("name")),
      type=self._type_annotation(node.child_by_field_name("type")),
      initializer=self._optional(node.child_by_field_name("value")),
      **self._span(node),
    )

  # --- Expressions ---

  def _text(self, node: TSNode) -> str:
    return self.text[self._to_char(node.start_byte) : self._to_char(node.end_byte)]

  def _identifier(self, node: TSNode) -> Identifier:
    return Identifier(text=self._text(node), **self._span(node))

  def _numeric_literal(self, node: TSNode) -> NumericLiteral:
    return NumericLiteral(text=self._text(node), **self._span(node))

  def _string_literal(self, node: TSNode) -> StringLiteral:
    return StringLiteral(text=decode_string_literal(self._text(node)), **self._span(node))

  def _regex_literal(self, node: TSNode) -> RegularExpressionLiteral:
    return RegularExpressionLiteral(text=self._text(node), **self._span(node))

  def _parenthesized_expression(self, node: TSNode) -> ParenthesizedExpression:
    return ParenthesizedExpression(expression=self.visit(self._named(node)[0]), **self._span(node))

  def _has_optional_chain(self, node: TSNode) -> bool:
    return any(c.type in ("optional_chain", "?.") for c in node.children)

  def _member_expression(self, node: TSNode) -> Node:
    if self._has_optional_chain(node):
      return self._unsupported(node, "OptionalChain")
    prop = node.child_by_field_name("property")
    if prop.type != "property_identifier":
      return self._unsupported(prop)
    return PropertyAccessExpression(
      expression=self.visit(node.child_by_field_name("object")),
      name=self._identifier(prop),
      **self._span(node),
    )

  def _subscript_expression(self, node: TSNode) -> Node:
    if self._has_optional_chain(node):
      return self._unsupported(node, "OptionalChain")
    return ElementAccessExpression(
      expression=self.visit(node.child_by_field_name("object")),
      argument_expression=self.visit(node.child_by_field_name("index")),
      **self._span(node),
    )

  def _call_expression(self, node: TSNode) -> Node:
    function = node.child_by_field_name("function")
    arguments = node.child_by_field_name("arguments")
    if arguments.type == "template_string":
      return self._unsupported(node, "TaggedTemplateExpression")
    if function.type == "import":
      return self._unsupported(node, "ImportCall")
    if self._has_optional_chain(node):
      return self._unsupported(node, "OptionalChain")
    return CallExpression(
      expression=self.visit(function),
      type_arguments=self._list(node.child_by_field_name("type_arguments")),
      arguments=self._list(arguments),
      **self._span(node),
    )

  def _new_expression(self, node: TSNode) -> NewExpression:
    return NewExpression(
      expression=self.visit(node.child_by_field_name("constructor")),
      type_arguments=self._list(node.child_by_field_name("type_arguments")),
      arguments=self._list(node.child_by_field_name("arguments")),
      **self._span(node),
    )

  @staticmethod
  def _token(text: str) -> Optional[Token]:
    try:
      return string_to_token(text)
    except ValueError:
      return None

  def _binary_expression(self, node: TSNode) -> Node:
    operator = node.child_by_field_name("operator")
    text = self._text(operator) if operator is not None else "="
    token = self._token(text)
    if token is None:
      return self._unsupported(node, f"BinaryExpression '{text}'")
    return BinaryExpression(
      left=self.visit(node.child_by_field_name("left")),
      operator_token=token,
      right=self.visit(node.child_by_field_name("right")),
      **self._span(node),
    )

  def _sequence_items(self, node: TSNode) -> List[TSNode]:
    items: List[TSNode] = []
    for child in self._named(node):
      if child.type == "sequence_expression":
        items.extend(self._sequence_items(child))
      else:
        items.append(child)
    return items

  def _sequence_expression(self, node: TSNode) -> Node:
    items = self._sequence_items(node)
    result = self.visit(items[0])
    for item in items[1:]:
      result = BinaryExpression(
        left=result,
        operator_token=Token.COMMA,
        right=self.visit(item),
        **self._span(items[0], item),
      )
    return result

  def _unary_expression(self, node: TSNode) -> Node:
    operator = self._text(node.child_by_field_name("operator"))
    argument = self.visit(node.child_by_field_name("argument"))
    span = self._span(node)
    if operator == "delete":
      return DeleteExpression(expression=argument, **span)
    if operator == "void":
      return VoidExpression(expression=argument, **span)
    if operator == "typeof":
      return TypeOfExpression(expression=argument, **span)
    token = self._token(operator)
    if token is None:
      return self._unsupported(node, f"PrefixUnaryExpression '{operator}'")
    return PrefixUnaryExpression(operator=token, operand=argument, **span)

  def _update_expression(self, node: TSNode) -> Node:
    operator = node.child_by_field_name("operator")
    argument = self.visit(node.child_by_field_name("argument"))
    token = string_to_token(self._text(operator))
    if operator.start_byte < node.child_by_field_name("argument").start_byte:
      return PrefixUnaryExpression(operator=token, operand=argument, **self._span(node))
    return PostfixUnaryExpression(operand=argument, operator=token, **self._span(node))

  def _ternary_expression(self, node: TSNode) -> ConditionalExpression:
    return ConditionalExpression(
      condition=self.visit(node.child_by_field_name("condition")),
      when_true=self.visit(node.child_by_field_name("consequence")),
      when_false=self.visit(node.child_by_field_name("alternative")),
      **self._span(node),
    )

  # --- Types ---

  def _type_annotation(self, node: Optional[TSNode]) -> Optional[Node]:
    if node is None:
      return None
    return self.visit(self._named(node)[0])

  def _predefined_type(self, node: TSNode) -> Node:
    text = self._text(node)
    cls = _PREDEFINED_TYPES.get(text)
    if cls is None:
      return self._unsupported(node, f"{text.capitalize()}Keyword")
    return cls(**self._span(node))

  def _entity_name(self, node: TSNode) -> Node:
    if node.type in ("nested_identifier", "nested_type_identifier", "member_expression"):
      named = self._named(node)
      return QualifiedName(
        left=self._entity_name(named[0]),
        right=self._identifier(named[-1]),
        **self._span(node),
      )
    return self._identifier(node)

  def _type_reference(self, node: TSNode) -> TypeReference:
    type_arguments = None
    name = node
    if node.type == "generic_type":
      name = node.child_by_field_name("name")
      type_arguments = tuple(self.visit(t) for t in self._named(node.child_by_field_name("type_arguments")))
    return TypeReference(type_name=self._entity_name(name), type_arguments=type_arguments, **self._span(node))
