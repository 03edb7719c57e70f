"""
Tests for the trivia scanner.

Verifies that:
1.  Comments on the line of the preceding token are not leading comments.
2.  Comments at file start are leading, after an optional shebang.
3.  Trailing newlines are recorded per comment.
4.  Line/column resolution treats CRLF as one break.
"""

from ts2dart.frontend.scanner import (
  CommentRange,
  compute_line_starts,
  get_leading_comment_ranges,
  get_line_and_character_of_position,
)


def test_comment_at_file_start_is_leading():
  assert get_leading_comment_ranges("// a\nx", 0) == [CommentRange(0, 4, True)]


def test_same_line_comment_trails_previous_token():
  assert get_leading_comment_ranges("x; // t\ny", 2) == []


def test_multiple_comments_after_line_break():
  text = "x;\n/* a */ /* b */\ny"
  ranges = get_leading_comment_ranges(text, 2)

  assert ranges == [CommentRange(3, 10, False), CommentRange(11, 18, True)]
  assert [text[r.pos : r.end] for r in ranges] == ["/* a */", "/* b */"]


def test_shebang_is_skipped():
  text = "#!/usr/bin/env node\n// c\nx"
  assert get_leading_comment_ranges(text, 0) == [CommentRange(20, 24, True)]


def test_scan_stops_at_first_token():
  assert get_leading_comment_ranges("x // not leading", 0) == []


def test_line_starts_crlf():
  assert compute_line_starts("a\r\nb\nc") == [0, 3, 5]


def test_line_and_character():
  starts = compute_line_starts("a\r\nb\nc")
  assert get_line_and_character_of_position(starts, 0) == (0, 0)
  assert get_line_and_character_of_position(starts, 4) == (1, 1)
  assert get_line_and_character_of_position(starts, 5) == (2, 0)
