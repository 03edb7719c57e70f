"""
Tests for the tree-sitter lowering.

Verifies that:
1.  Statements lower to the expected typed kinds.
2.  Full start / start offsets bracket leading trivia, in characters.
3.  Constructs without a typed class become descriptive UnsupportedNodes.
4.  String literal escapes are decoded.
5.  Parse errors raise SourceSyntaxError.
"""

import pytest

from ts2dart.errors import SourceSyntaxError
from ts2dart.frontend.kinds import Keyword, SyntaxKind, Token
from ts2dart.frontend.parser import decode_string_literal


def test_variable_statement_shape(parse):
  sf = parse("let x: number = 1;")
  (stmt,) = sf.statements

  assert stmt.kind == SyntaxKind.VARIABLE_STATEMENT
  decl_list = stmt.declaration_list
  assert decl_list.flags == Keyword.LET
  (decl,) = decl_list.declarations
  assert decl.name.text == "x"
  assert decl.type.kind == SyntaxKind.NUMBER_KEYWORD
  assert decl.initializer.text == "1"


def test_parent_pointers(parse):
  sf = parse("f(a);")
  call = sf.statements[0].expression
  arg = call.arguments[0]

  assert arg.parent is call
  assert call.parent is sf.statements[0]
  assert arg.get_source_file() is sf


def test_full_start_covers_leading_comment(parse):
  text = "var a = 1;\n// c\nvar b = 2;"
  sf = parse(text)
  second = sf.statements[1]

  assert second.pos == 10
  assert second.start == text.index("var b")
  assert [text[c.pos : c.end] for c in second.get_leading_comment_ranges()] == ["// c"]


def test_offsets_are_characters(parse):
  text = "var s = 'é'; var t = 1;"
  sf = parse(text)
  second = sf.statements[1]

  assert second.start == text.index("var t")
  assert second.get_text() == "var t = 1;"


def test_end_of_file_token(parse):
  text = "x;\n// end\n"
  sf = parse(text)

  assert sf.end_of_file_token.pos == 2
  assert sf.end_of_file_token.start == len(text)


def test_binary_and_assignment_operators(parse):
  sf = parse("a += b * c;")
  expr = sf.statements[0].expression

  assert expr.operator_token is Token.PLUS_EQUALS
  assert expr.right.operator_token is Token.ASTERISK


def test_update_expressions(parse):
  sf = parse("++i; i--;")
  prefix = sf.statements[0].expression
  postfix = sf.statements[1].expression

  assert prefix.kind == SyntaxKind.PREFIX_UNARY_EXPRESSION
  assert prefix.operator is Token.PLUS_PLUS
  assert postfix.kind == SyntaxKind.POSTFIX_UNARY_EXPRESSION
  assert postfix.operator is Token.MINUS_MINUS


def test_operator_keywords_get_own_kinds(parse):
  sf = parse("delete a.b; typeof a; void 0;")
  kinds = [s.expression.kind for s in sf.statements]

  assert kinds == [SyntaxKind.DELETE_EXPRESSION, SyntaxKind.TYPE_OF_EXPRESSION, SyntaxKind.VOID_EXPRESSION]


def test_for_of_declares_loop_variable(parse):
  sf = parse("for (const v of xs) {}")
  loop = sf.statements[0]

  assert loop.kind == SyntaxKind.FOR_OF_STATEMENT
  assert loop.initializer.kind == SyntaxKind.VARIABLE_DECLARATION_LIST
  assert loop.initializer.flags == Keyword.CONST
  assert loop.initializer.declarations[0].name.text == "v"
  assert loop.expression.text == "xs"


def test_class_members(parse):
  sf = parse("class A extends B implements I { static n: number = 0; constructor(x) {} m(): void {} }")
  cls = sf.statements[0]

  assert cls.name.text == "A"
  assert [h.token for h in cls.heritage_clauses] == [Keyword.EXTENDS, Keyword.IMPLEMENTS]
  prop, ctor, method = cls.members
  assert prop.kind == SyntaxKind.PROPERTY_DECLARATION and prop.is_static
  assert ctor.kind == SyntaxKind.CONSTRUCTOR
  assert ctor.parameters[0].name.text == "x"
  assert method.kind == SyntaxKind.METHOD_DECLARATION and not method.is_static
  assert method.type.kind == SyntaxKind.VOID_KEYWORD


def test_generic_type_reference(parse):
  sf = parse("var m: Map<string, ns.Item>;")
  ref = sf.statements[0].declaration_list.declarations[0].type

  assert ref.kind == SyntaxKind.TYPE_REFERENCE
  assert ref.type_name.text == "Map"
  first, second = ref.type_arguments
  assert first.kind == SyntaxKind.STRING_KEYWORD
  assert second.type_name.kind == SyntaxKind.QUALIFIED_NAME


def test_export_is_unwrapped(parse):
  sf = parse("export function f() {}")
  fn = sf.statements[0]

  assert fn.kind == SyntaxKind.FUNCTION_DECLARATION
  assert fn.start == 0


def test_rest_parameter_flag(parse):
  sf = parse("function f(a, ...xs) {}")
  params = sf.statements[0].parameters

  assert [p.dot_dot_dot_token for p in params] == [False, True]
  assert params[1].name.text == "xs"


@pytest.mark.parametrize(
  "text, name",
  [
    ("var f = () => 1;", "ArrowFunction"),
    ("var o = {};", "ObjectLiteralExpression"),
    ("var a = [1];", "ArrayLiteralExpression"),
  ],
)
def test_unsupported_initializers(parse, text, name):
  sf = parse(text)
  init = sf.statements[0].declaration_list.declarations[0].initializer

  assert init.kind == SyntaxKind.UNSUPPORTED
  assert init.kind_name == name


def test_interface_is_unsupported(parse):
  sf = parse("interface I { x: number; }")
  assert sf.statements[0].kind_name == "InterfaceDeclaration"


def test_declaration_file_flag(parse):
  assert parse("var x;", "lib.d.ts").is_declaration_file
  assert not parse("var x;", "lib.ts").is_declaration_file


@pytest.mark.parametrize(
  "raw, value",
  [
    ("'a\\nb'", "a\nb"),
    ('"\\x41\\u0042"', "AB"),
    ("'\\u{1F600}'", "\U0001f600"),
    ("'\\uD83D\\uDE00'", "\U0001f600"),
    ("'it\\'s'", "it's"),
    ("'a\\\nb'", "ab"),
    ("'\\q'", "q"),
  ],
)
def test_decode_string_literal(raw, value):
  assert decode_string_literal(raw) == value


def test_syntax_error(parse):
  with pytest.raises(SourceSyntaxError) as exc:
    parse("var = ;", "bad.ts")

  assert exc.value.file_name == "bad.ts"
  assert str(exc.value).startswith("bad.ts:0:")
