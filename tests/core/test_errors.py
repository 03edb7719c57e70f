"""
Tests for fatal translation errors.

Verifies that unsupported constructs abort with a location-qualified
``UnsupportedConstruct`` pointing at the offending node, and that structural
problems raise ``StructuralInvariantViolation``.
"""

import dataclasses

import pytest

from ts2dart.core.emitter import DartEmitter
from ts2dart.errors import StructuralInvariantViolation, TranslationError, UnsupportedConstruct
from ts2dart.frontend.nodes import Block, Constructor, EndOfFileToken, SourceFile, set_parent_pointers


@pytest.mark.parametrize(
  "source, message",
  [
    ("delete a.b;", "input.ts:0:0: delete operator is unsupported"),
    ("void 0;", "input.ts:0:0: void operator is unsupported"),
    ("var t = typeof x;", "input.ts:0:8: typeof operator is unsupported"),
    ("function f<T>(x: T): T { return x; }", "input.ts:0:0: generic functions are unsupported"),
    ("function f(...xs) {}", "input.ts:0:11: rest parameters are unsupported"),
    ("var f = () => 1;", "input.ts:0:8: Unsupported node type ArrowFunction"),
    ("x;\ntry { y(); } finally {}", "input.ts:1:0: Unsupported node type TryStatement"),
    ("class A { *g() {} }", "input.ts:0:10: Unsupported node type GeneratorMethod"),
    ("function f(this: Foo) {}", "input.ts:0:11: Unsupported node type ThisParameter"),
    ("class A { get x() { return 1; } }", "input.ts:0:10: Unsupported node type GetAccessor"),
    ("class A { set x(v) {} }", "input.ts:0:10: Unsupported node type SetAccessor"),
  ],
)
def test_unsupported_constructs(translate, source, message):
  with pytest.raises(UnsupportedConstruct) as exc:
    translate(source)

  assert str(exc.value) == message


def test_error_carries_location(translate):
  with pytest.raises(TranslationError) as exc:
    translate("var a = 1;\n  delete a.b;", "mod.ts")

  err = exc.value
  assert (err.file_name, err.line, err.column) == ("mod.ts", 1, 2)
  assert err.message == "delete operator is unsupported"


def test_multiple_extends_rejected(parse):
  sf = parse("class A extends B {}")
  cls = sf.statements[0]
  clause = cls.heritage_clauses[0]

  # Two supertypes in a single extends clause.
  wide = dataclasses.replace(clause, types=clause.types + clause.types)
  tree = dataclasses.replace(
    sf,
    statements=(dataclasses.replace(cls, heritage_clauses=(wide,)),),
  )
  set_parent_pointers(tree)

  with pytest.raises(UnsupportedConstruct) as exc:
    DartEmitter(tree).emit_file()
  assert "single supertype" in str(exc.value)


def test_constructor_without_class():
  text = "constructor() {}"
  ctor = Constructor(pos=0, start=0, end=16, parameters=(), body=Block(pos=13, start=14, end=16))
  sf = SourceFile(
    pos=0,
    start=0,
    end=16,
    file_name="x.ts",
    text=text,
    statements=(ctor,),
    end_of_file_token=EndOfFileToken(pos=16, start=16, end=16),
  )
  set_parent_pointers(sf)

  with pytest.raises(StructuralInvariantViolation) as exc:
    DartEmitter(sf).emit_file()
  assert str(exc.value) == "x.ts:0:0: cannot find outer class node"
