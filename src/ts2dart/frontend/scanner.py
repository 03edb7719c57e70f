"""
Trivia Scanner.

Recovers comment and position metadata directly from source text.

Comments are not part of the typed tree. Instead, each node records its
*full start* (the offset right after the preceding token) and this module
scans the trivia between that offset and the node's first token:

- ``get_leading_comment_ranges``: comments that lead a node. A comment that
  shares a line with the preceding token is a trailing comment of that token,
  not a leading comment, unless scanning starts at the beginning of the file.
- ``compute_line_starts`` / ``get_line_and_character_of_position``: 0-based
  line/column resolution used by diagnostics.
"""

import bisect
from dataclasses import dataclass
from typing import List, Tuple

_UNICODE_LINE_BREAKS = "\u2028\u2029"
_LINE_BREAKS = frozenset("\n\r" + _UNICODE_LINE_BREAKS)
_SINGLE_LINE_WHITESPACE = frozenset(
  "\t\v\f \u0085\u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
  "\u2007\u2008\u2009\u200a\u200b\u202f\u205f\u3000\ufeff"
)


@dataclass(frozen=True)
class CommentRange:
  """A single comment span in source text."""

  pos: int
  """Offset of the first comment character (``/``)."""

  end: int
  """Offset one past the last comment character."""

  has_trailing_new_line: bool = False
  """True if a line break follows the comment before the next token."""


def is_line_break(ch: str) -> bool:
  """Returns True for the characters that terminate a source line."""
  return ch in _LINE_BREAKS


def _shebang_length(text: str) -> int:
  if not text.startswith("#!"):
    return 0
  idx = 2
  while idx < len(text) and not is_line_break(text[idx]):
    idx += 1
  return idx


def get_leading_comment_ranges(text: str, pos: int) -> List[CommentRange]:
  """
  Collects the comments that lead a node whose full start is ``pos``.

  Scanning stops at the first character that is neither whitespace nor part
  of a comment. Comments before the first line break are skipped (they trail
  the previous token) except at the very start of the file, where a shebang
  line is skipped as well.

  Args:
      text: Full source text of the file.
      pos: Full start offset of the node.

  Returns:
      List[CommentRange]: The leading comments in source order.
  """
  ranges: List[CommentRange] = []
  collecting = False
  if pos == 0:
    collecting = True
    pos = _shebang_length(text)

  pending_pos = pending_end = -1
  pending_new_line = False
  has_pending = False
  length = len(text)

  while 0 <= pos < length:
    ch = text[pos]
    if ch == "\r" or ch == "\n":
      if ch == "\r" and pos + 1 < length and text[pos + 1] == "\n":
        pos += 1
      pos += 1
      collecting = True
      if has_pending:
        pending_new_line = True
      continue

    if ch in _SINGLE_LINE_WHITESPACE:
      pos += 1
      continue

    if ch in _UNICODE_LINE_BREAKS:
      if has_pending:
        pending_new_line = True
      pos += 1
      continue

    if ch == "/" and pos + 1 < length and text[pos + 1] in "/*":
      is_line_comment = text[pos + 1] == "/"
      start = pos
      trailing_new_line = False
      pos += 2
      if is_line_comment:
        while pos < length:
          if is_line_break(text[pos]):
            trailing_new_line = True
            break
          pos += 1
      else:
        while pos < length:
          if text[pos] == "*" and pos + 1 < length and text[pos + 1] == "/":
            pos += 2
            break
          pos += 1
        else:
          pos = length

      if collecting:
        if has_pending:
          ranges.append(CommentRange(pending_pos, pending_end, pending_new_line))
        pending_pos, pending_end, pending_new_line = start, pos, trailing_new_line
        has_pending = True
      continue

    break

  if has_pending:
    ranges.append(CommentRange(pending_pos, pending_end, pending_new_line))
  return ranges


def compute_line_starts(text: str) -> List[int]:
  """
  Computes the offset at which each line of ``text`` begins.

  ``\\r\\n`` counts as a single break.

  Args:
      text: Source text.

  Returns:
      List[int]: Ascending line start offsets, always beginning with 0.
  """
  starts = [0]
  pos = 0
  length = len(text)
  while pos < length:
    ch = text[pos]
    pos += 1
    if ch == "\r":
      if pos < length and text[pos] == "\n":
        pos += 1
      starts.append(pos)
    elif ch == "\n" or ch in _UNICODE_LINE_BREAKS:
      starts.append(pos)
  return starts


def get_line_and_character_of_position(line_starts: List[int], position: int) -> Tuple[int, int]:
  """
  Resolves an offset into a 0-based ``(line, character)`` pair.

  Args:
      line_starts: Result of ``compute_line_starts``.
      position: Character offset into the source.

  Returns:
      Tuple[int, int]: The line index and the column within that line.
  """
  line = bisect.bisect_right(line_starts, position) - 1
  line = max(line, 0)
  return line, position - line_starts[line]
