"""
Pony Lexer.

Splits source text into a flat token stream. Whitespace is dropped; comments
are kept as tokens so the parser can attach them to the tree. Characters the
grammar does not recognise become ``ERROR`` tokens instead of raising, which
lets the parser recover around them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generator

from ponyfmt.core.syntax.grammar import get_grammar


class TokenKind(str, Enum):
  """Enumeration of Lexer Token Types."""

  BLOCK_COMMENT = "BLOCK_COMMENT"
  LINE_COMMENT = "LINE_COMMENT"
  STRING = "STRING"
  CHARACTER = "CHARACTER"
  NUMBER = "NUMBER"
  IDENTIFIER = "IDENTIFIER"
  KEYWORD = "KEYWORD"
  BOOLEAN = "BOOLEAN"
  CAPABILITY = "CAPABILITY"
  OPERATOR = "OPERATOR"
  WHITESPACE = "WHITESPACE"
  ERROR = "ERROR"
  EOF = "EOF"


COMMENT_TOKENS = frozenset({TokenKind.LINE_COMMENT, TokenKind.BLOCK_COMMENT})

# Leaf node kinds for token classes whose kind is not the token text itself.
_LEAF_KINDS = {
  TokenKind.BLOCK_COMMENT: "block_comment",
  TokenKind.LINE_COMMENT: "line_comment",
  TokenKind.STRING: "string",
  TokenKind.CHARACTER: "character",
  TokenKind.NUMBER: "number",
  TokenKind.IDENTIFIER: "identifier",
  TokenKind.BOOLEAN: "boolean",
  TokenKind.CAPABILITY: "capability",
  TokenKind.ERROR: "ERROR",
  TokenKind.EOF: "",
}


@dataclass(frozen=True)
class Token:
  """
  A lexical token.

  Attributes:
      kind (TokenKind): Token class.
      text (str): Exact source text.
      start (int): Offset of the first character.
      end (int): Offset one past the last character.
      line (int): 1-based line on which the token starts.
      end_line (int): 1-based line on which the token ends.
  """

  kind: TokenKind
  text: str
  start: int
  end: int
  line: int
  end_line: int

  @property
  def leaf_kind(self) -> str:
    """
    The syntax node kind used when this token becomes a tree leaf.

    Keywords and operators use their own text (``if``, ``=>``); every other
    class maps to a lowercase category name (``identifier``, ``string``).
    """
    if self.kind in (TokenKind.KEYWORD, TokenKind.OPERATOR):
      return self.text
    return _LEAF_KINDS[self.kind]

  @property
  def is_comment(self) -> bool:
    return self.kind in COMMENT_TOKENS


class Tokenizer:
  """
  Regex driven tokenizer over a complete source string.
  """

  def __init__(self, text: str):
    self.text = text
    self.grammar = get_grammar()

  def _classify_word(self, word: str) -> TokenKind:
    if word in self.grammar.booleans:
      return TokenKind.BOOLEAN
    if word in self.grammar.capabilities:
      return TokenKind.CAPABILITY
    if word in self.grammar.keywords:
      return TokenKind.KEYWORD
    return TokenKind.IDENTIFIER

  def tokenize(self) -> Generator[Token, None, None]:
    """
    Yields every significant token followed by a single EOF token.

    Yields:
        Token: Tokens in source order.
    """
    line_num = 1
    for mo in self.grammar.token_pattern.finditer(self.text):
      value = mo.group()
      kind = TokenKind(mo.lastgroup)
      newlines = value.count("\n")

      if kind == TokenKind.IDENTIFIER:
        kind = self._classify_word(value)

      if kind != TokenKind.WHITESPACE:
        yield Token(kind, value, mo.start(), mo.end(), line_num, line_num + newlines)
      line_num += newlines

    end = len(self.text)
    yield Token(TokenKind.EOF, "", end, end, line_num, line_num)
