"""
Leading Comment Attachment.

A comment leads every node that starts after it up to the next token, so the
same range is reported for a parent and its first descendants (and for a
token's siblings sharing a full start). The tracker remembers how far the
output has progressed so each comment is written once, at the first node
visited that owns it.
"""

from typing import Iterable, List

from ts2dart.frontend.scanner import CommentRange


class CommentTracker:
  """
  Per-file cursor over emitted comments.

  Attributes:
      last_comment_idx (int): Start offset of the last comment emitted, -1 before any.
  """

  def __init__(self) -> None:
    self.last_comment_idx = -1

  def take(self, ranges: Iterable[CommentRange]) -> List[CommentRange]:
    """
    Selects the ranges not yet emitted and advances the cursor past them.

    Args:
        ranges: Leading comment ranges of the node being visited, in source order.

    Returns:
        List[CommentRange]: The ranges to write, in source order.
    """
    fresh = []
    for comment in ranges:
      if comment.pos <= self.last_comment_idx:
        continue
      self.last_comment_idx = comment.pos
      fresh.append(comment)
    return fresh
