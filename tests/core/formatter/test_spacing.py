"""
Tests for the token spacing table.
"""

import pytest

from ponyfmt.core.formatter.spacing import PostAction, Spacing, is_first, post_action, spacing


@pytest.mark.parametrize(
  "kind, last_char, expected",
  [
    (")", "a", Spacing.NONE),
    (",", "a", Spacing.NONE),
    (".", "a", Spacing.NONE),
    (":", "x", Spacing.NONE),
    ("^", "o", Spacing.NONE),
    ("=", "x", Spacing.SPACE),
    ("=>", ")", Spacing.SPACE),
    ("+", "a", Spacing.SPACE),
    ("|", "\n", Spacing.NONE),
    ("if", None, Spacing.NONE),
    ("let", "(", Spacing.NONE),
    ("boolean", "=", Spacing.SPACE),
    ("then", "e", Spacing.SPACE),
    ("end", "x", Spacing.NEWLINE),
    ("end", "\n", Spacing.NONE),
    ("identifier", ".", Spacing.NONE),
    ("identifier", "(", Spacing.NONE),
    ("string", '"', Spacing.NONE),
    ("identifier", "a", Spacing.SPACE),
    ("number", ",", Spacing.SPACE),
    ("identifier", ":", Spacing.PENDING),
    ("identifier", ">", Spacing.PENDING),
    ("?", ")", Spacing.PENDING),
  ],
)
def test_spacing_table(kind, last_char, expected):
  assert spacing(kind, last_char) == expected


def test_opening_bracket_depends_on_position():
  assert spacing("(", "o") == Spacing.NONE  # call
  assert spacing("[", "y") == Spacing.NONE  # type arguments
  assert spacing("(", "s", "is") == Spacing.SPACE  # after keyword
  assert spacing("(", "=") == Spacing.PENDING
  assert spacing("(", None) == Spacing.NONE


def test_is_first():
  assert is_first(None)
  assert is_first("\n")
  assert is_first("(")
  assert not is_first("a")


@pytest.mark.parametrize(
  "kind, expected",
  [
    ("line_comment", PostAction.NEWLINE),
    ("block_comment", PostAction.BLANK_LINE),
    ("=", PostAction.SPACE),
    (",", PostAction.SPACE),
    (":", PostAction.SPACE),
    ("actor", PostAction.SPACE),
    ("fun", PostAction.SPACE),
    ("is", PostAction.SPACE),
    ("<", PostAction.SPACE),
    ("identifier", PostAction.NONE),
    (")", PostAction.NONE),
    ("if", PostAction.NONE),
  ],
)
def test_post_action(kind, expected):
  assert post_action(kind) == expected
