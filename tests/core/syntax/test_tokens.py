"""
Tests for the Pony Tokenizer.

Verifies:
1. Keyword, capability and boolean classification of words.
2. Comments, strings and characters as single tokens.
3. Longest-match operators.
4. Unknown characters become ERROR tokens instead of raising.
5. Line tracking.
"""

from ponyfmt.core.syntax.tokens import Tokenizer, TokenKind


def kinds(text):
  return [t.kind for t in Tokenizer(text).tokenize()]


def texts(text):
  return [t.text for t in Tokenizer(text).tokenize() if t.kind != TokenKind.EOF]


def test_words_are_classified():
  assert kinds("actor Main iso true") == [
    TokenKind.KEYWORD,
    TokenKind.IDENTIFIER,
    TokenKind.CAPABILITY,
    TokenKind.BOOLEAN,
    TokenKind.EOF,
  ]


def test_gen_capability_and_primes():
  tokens = list(Tokenizer("#read x'").tokenize())
  assert tokens[0].kind == TokenKind.CAPABILITY
  assert tokens[1].kind == TokenKind.IDENTIFIER
  assert tokens[1].text == "x'"


def test_comments_are_single_tokens():
  tokens = list(Tokenizer("a // note\n/* multi\nline */ b").tokenize())
  assert [t.kind for t in tokens] == [
    TokenKind.IDENTIFIER,
    TokenKind.LINE_COMMENT,
    TokenKind.BLOCK_COMMENT,
    TokenKind.IDENTIFIER,
    TokenKind.EOF,
  ]
  assert tokens[1].text == "// note"
  assert tokens[2].end_line == 3


def test_unterminated_block_comment_runs_to_end():
  tokens = list(Tokenizer("x /* open").tokenize())
  assert tokens[1].kind == TokenKind.BLOCK_COMMENT
  assert tokens[1].text == "/* open"


def test_strings_and_characters():
  assert texts('"a \\" b" \'c\' """doc\nstring"""') == ['"a \\" b"', "'c'", '"""doc\nstring"""']


def test_longest_operator_wins():
  assert texts("a >= b => c .> d -~ e") == ["a", ">=", "b", "=>", "c", ".>", "d", "-~", "e"]


def test_numbers():
  assert texts("0x1F 0b101 1_000 3.14 2e10") == ["0x1F", "0b101", "1_000", "3.14", "2e10"]


def test_number_followed_by_method_call():
  assert texts("1.string()") == ["1", ".", "string", "(", ")"]


def test_unknown_character_is_error_token():
  tokens = list(Tokenizer("a $ b").tokenize())
  assert tokens[1].kind == TokenKind.ERROR
  assert tokens[1].leaf_kind == "ERROR"


def test_leaf_kinds():
  tokens = list(Tokenizer('if x "s"').tokenize())
  assert [t.leaf_kind for t in tokens[:-1]] == ["if", "identifier", "string"]


def test_line_numbers_and_offsets():
  tokens = list(Tokenizer("a\n\n  b").tokenize())
  assert (tokens[0].line, tokens[0].start, tokens[0].end) == (1, 0, 1)
  assert (tokens[1].line, tokens[1].start) == (3, 5)
  assert tokens[-1].kind == TokenKind.EOF
  assert tokens[-1].start == 6
