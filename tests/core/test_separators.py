"""
Property tests for comma separated lists.

An N element list produces exactly N-1 separators.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from ts2dart.core.engine import translate_source


@settings(max_examples=30, deadline=None)
@given(st.integers(min_value=0, max_value=12))
def test_call_arguments(n):
  args = ", ".join(f"a{i}" for i in range(n))
  out = translate_source(f"f({args});")

  assert out.count(",") == max(n - 1, 0)


@settings(max_examples=30, deadline=None)
@given(st.integers(min_value=0, max_value=12))
def test_parameters(n):
  params = ", ".join(f"p{i}: number" for i in range(n))
  out = translate_source(f"function f({params}) {{}}")

  assert out.count(",") == max(n - 1, 0)
  assert out.count("num") == n


@settings(max_examples=20, deadline=None)
@given(st.integers(min_value=1, max_value=8))
def test_type_arguments(n):
  args = ", ".join(["string"] * n)
  out = translate_source(f"var m: T<{args}>;")

  assert out.count(",") == n - 1
