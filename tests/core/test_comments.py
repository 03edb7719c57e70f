"""
Tests for leading comment attachment.

Verifies that:
1.  A comment shared by several nodes starting at the same offset is written once.
2.  The comment precedes the tokens of the node it leads.
3.  Comments trailing a token on the same line are not attached to the next node.
4.  Comments before end of file are written.
"""

from ts2dart.core.comments import CommentTracker
from ts2dart.frontend.scanner import CommentRange


def test_tracker_skips_seen_ranges():
  tracker = CommentTracker()
  first = [CommentRange(0, 4, True)]

  assert tracker.take(first) == first
  assert tracker.take(first) == []
  assert tracker.last_comment_idx == 0


def test_tracker_advances_per_range():
  tracker = CommentTracker()
  ranges = [CommentRange(3, 10), CommentRange(11, 18, True)]

  assert tracker.take(ranges) == ranges
  assert tracker.take([CommentRange(11, 18, True), CommentRange(20, 25)]) == [CommentRange(20, 25)]


def test_leading_comment_before_function(translate):
  out = translate("// comment\nfunction f() {}")

  assert out == " // comment\n f ( ) { }"
  assert out.count("// comment") == 1


def test_comment_between_statements(translate):
  out = translate("var a = 1;\n// two\nvar b = 2;")
  assert out == " var a = 1 ;\n // two\n var b = 2 ;\n"


def test_block_comment_shared_by_nested_nodes(translate):
  assert translate("/* c */ x;") == " /* c */ x ;"


def test_comment_inside_block(translate):
  out = translate("function f() {\n  // body\n  g();\n}")
  assert out == " f ( ) { // body\n g ( ) ; }"


def test_same_line_comment_is_dropped(translate):
  out = translate("var a = 1; // trailing\nvar b = 2;")
  assert "trailing" not in out


def test_comment_before_end_of_file(translate):
  assert translate("x;\n// end\n") == " x ; // end\n"
