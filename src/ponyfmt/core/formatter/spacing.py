"""
Token Spacing Rules.

Pure functions deciding what separates a token from the text before it and
what it asks for after itself. Decisions only depend on the token kind, the
last character written and the kind of the last token emitted.
"""

from enum import Enum
from typing import Optional

from ponyfmt.core.syntax.grammar import BINARY_KEYWORDS, BINARY_OPERATORS, get_grammar


class Spacing(str, Enum):
  """Separator decision for the token about to be emitted."""

  NONE = "none"  # glue to the previous token, dropping any pending space
  SPACE = "space"  # exactly one space unless at a line start
  NEWLINE = "newline"  # request a line break first
  PENDING = "pending"  # honour whatever was requested earlier


class PostAction(str, Enum):
  """Request issued after a token has been written."""

  NONE = "none"
  SPACE = "space"
  NEWLINE = "newline"
  BLANK_LINE = "blank_line"


NO_SPACE_BEFORE = frozenset({")", "]", ",", ";", ".", ":", '"', ".>", "~", "->", "^", "!"})

OPENING = frozenset({"(", "["})

SPACED_OPERATORS = frozenset(BINARY_OPERATORS) | {"=", "=>", "|", "&"}

LITERAL_KINDS = frozenset({"identifier", "number", "string", "character"})

SPACED_CATEGORIES = frozenset({"boolean", "capability", "line_comment", "block_comment"})

SPACE_AFTER_TOKENS = (
  frozenset({"=", ",", "|", "&", ";", ":"})
  | frozenset(BINARY_OPERATORS)
  | frozenset(BINARY_KEYWORDS)
  | frozenset(
    {
      "use",
      "trait",
      "class",
      "actor",
      "primitive",
      "interface",
      "struct",
      "type",
      "new",
      "fun",
      "be",
      "let",
      "var",
      "embed",
      "is",
    }
  )
)

# Characters that count as the start of a line for spacing purposes.
_FIRST_CHARS = frozenset({"\n", "(", "[", "{"})
_GLUE_AFTER = frozenset({".", '"', "("})
_SPACE_AFTER_CHARS = frozenset({",", "=", "+", "-", "*", "/"})
_CALL_POSITION_CHARS = frozenset({")", "]", '"', "'", "_"})


def is_first(last_char: Optional[str]) -> bool:
  """True if nothing, a newline or an opening bracket precedes the cursor."""
  return last_char is None or last_char in _FIRST_CHARS


def spacing(kind: str, last_char: Optional[str], last_kind: Optional[str] = None) -> Spacing:
  """
  Decides the separator before a token.

  Args:
      kind (str): Kind of the token about to be emitted (``"if"``, ``"identifier"``).
      last_char (Optional[str]): Last character in the output, None if empty.
      last_kind (Optional[str]): Kind of the previously emitted token.

  Returns:
      Spacing: The decision.
  """
  first = is_first(last_char)
  keywords = get_grammar().keywords

  if kind in OPENING:
    if first:
      return Spacing.NONE
    if last_kind in keywords:
      return Spacing.SPACE
    if last_char.isalnum() or last_char in _CALL_POSITION_CHARS:
      return Spacing.NONE
    return Spacing.PENDING

  if kind in NO_SPACE_BEFORE:
    return Spacing.NONE

  if kind == "then":
    return Spacing.NONE if first else Spacing.SPACE

  if kind == "end":
    return Spacing.NONE if first else Spacing.NEWLINE

  if kind in SPACED_OPERATORS or kind in keywords or kind in SPACED_CATEGORIES:
    return Spacing.NONE if first else Spacing.SPACE

  if kind in LITERAL_KINDS:
    if last_char is None or last_char in _GLUE_AFTER:
      return Spacing.NONE
    if last_char.isalnum() or last_char in _SPACE_AFTER_CHARS:
      return Spacing.SPACE
    return Spacing.PENDING

  return Spacing.PENDING


def post_action(kind: str) -> PostAction:
  """
  Decides what a token requests after itself.

  Args:
      kind (str): Kind of the token just written.

  Returns:
      PostAction: Line comments end the line, block comments leave a blank
      line, declaration keywords and separators ask for a space.
  """
  if kind == "line_comment":
    return PostAction.NEWLINE
  if kind == "block_comment":
    return PostAction.BLANK_LINE
  if kind in SPACE_AFTER_TOKENS:
    return PostAction.SPACE
  return PostAction.NONE
