"""
TypeScript Front End.

Parses TypeScript with tree-sitter into an immutable typed syntax tree and
recovers comment and position metadata from the source text.
"""

from ts2dart.frontend.kinds import Keyword, SyntaxKind, Token, string_to_token, token_to_string
from ts2dart.frontend.nodes import Node, SourceFile
from ts2dart.frontend.parser import parse_source_file
from ts2dart.frontend.program import Program, create_program
from ts2dart.frontend.scanner import CommentRange, get_leading_comment_ranges

__all__ = [
  "CommentRange",
  "Keyword",
  "Node",
  "Program",
  "SourceFile",
  "SyntaxKind",
  "Token",
  "create_program",
  "get_leading_comment_ranges",
  "parse_source_file",
  "string_to_token",
  "token_to_string",
]
