"""
Pony Lexical Grammar.

Holds the keyword, capability and operator vocabularies of the Pony language
together with the compiled token pattern built from them. The grammar is
immutable and loaded once per process through ``get_grammar``.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import FrozenSet, Pattern, Tuple

KEYWORDS = (
  "actor",
  "addressof",
  "and",
  "as",
  "be",
  "break",
  "class",
  "compile_error",
  "compile_intrinsic",
  "consume",
  "continue",
  "digestof",
  "do",
  "else",
  "elseif",
  "embed",
  "end",
  "error",
  "for",
  "fun",
  "if",
  "ifdef",
  "iftype",
  "in",
  "interface",
  "is",
  "isnt",
  "let",
  "match",
  "new",
  "not",
  "object",
  "or",
  "primitive",
  "recover",
  "repeat",
  "return",
  "struct",
  "then",
  "this",
  "trait",
  "try",
  "type",
  "until",
  "use",
  "var",
  "where",
  "while",
  "with",
  "xor",
)

CAPABILITIES = ("iso", "trn", "ref", "val", "box", "tag")

BOOLEANS = ("true", "false")

BINARY_OPERATORS = (
  "+",
  "-",
  "*",
  "/",
  "%",
  "%%",
  "<<",
  ">>",
  "==",
  "!=",
  "<",
  "<=",
  ">",
  ">=",
  "+~",
  "-~",
  "*~",
  "/~",
  "%~",
  "%%~",
  "<<~",
  ">>~",
  "==~",
  "!=~",
  "<~",
  "<=~",
  ">~",
  ">=~",
  "+?",
  "-?",
  "*?",
  "/?",
  "%?",
  "%%?",
)

BINARY_KEYWORDS = ("and", "or", "xor", "is", "isnt")

PUNCTUATION = (
  "=>",
  "->",
  ".>",
  "=",
  "(",
  ")",
  "[",
  "]",
  "{",
  "}",
  ",",
  ";",
  ":",
  ".",
  "~",
  "|",
  "&",
  "^",
  "!",
  "?",
  "@",
)

_PATTERN_DEFS = (
  ("BLOCK_COMMENT", r"/\*[\s\S]*?(?:\*/|\Z)"),
  ("LINE_COMMENT", r"//[^\n]*"),
  ("STRING", r'"""[\s\S]*?(?:"""|\Z)|"(?:[^"\\]|\\[\s\S])*"'),
  ("CHARACTER", r"'(?:[^'\\\n]|\\.)+'"),
  ("NUMBER", r"0[xX][0-9a-fA-F_]+|0[bB][01_]+|\d[\d_]*(?:\.\d[\d_]*)?(?:[eE][+-]?\d+)?"),
  ("IDENTIFIER", r"[A-Za-z_][A-Za-z0-9_]*'*"),
  ("CAPABILITY", r"#(?:read|send|share|alias|any)\b"),
  ("OPERATOR", None),
  ("WHITESPACE", r"\s+"),
  ("ERROR", r"."),
)


@dataclass(frozen=True)
class PonyGrammar:
  """
  Immutable lexical vocabulary of the Pony language.

  Attributes:
      keywords (FrozenSet[str]): Reserved words, reclassified from identifiers.
      capabilities (FrozenSet[str]): Reference capabilities (``iso``, ``val``...).
      booleans (FrozenSet[str]): The boolean literals.
      binary_operators (FrozenSet[str]): Symbolic and keyword infix operators.
      operators (Tuple[str, ...]): Every symbol token, longest first.
      token_pattern (Pattern[str]): Alternation of named groups, one per token class.
  """

  keywords: FrozenSet[str]
  capabilities: FrozenSet[str]
  booleans: FrozenSet[str]
  binary_operators: FrozenSet[str]
  operators: Tuple[str, ...]
  token_pattern: Pattern[str]


def _compile_pattern(operators: Tuple[str, ...]) -> Pattern[str]:
  parts = []
  for name, pattern in _PATTERN_DEFS:
    if pattern is None:
      pattern = "|".join(re.escape(op) for op in operators)
    parts.append(f"(?P<{name}>{pattern})")
  return re.compile("|".join(parts))


@lru_cache(maxsize=1)
def get_grammar() -> PonyGrammar:
  """
  Builds (once) and returns the shared Pony grammar.

  Returns:
      PonyGrammar: The cached grammar instance.
  """
  operators = tuple(sorted(set(BINARY_OPERATORS) | set(PUNCTUATION), key=len, reverse=True))
  return PonyGrammar(
    keywords=frozenset(KEYWORDS),
    capabilities=frozenset(CAPABILITIES),
    booleans=frozenset(BOOLEANS),
    binary_operators=frozenset(BINARY_OPERATORS) | frozenset(BINARY_KEYWORDS),
    operators=operators,
    token_pattern=_compile_pattern(operators),
  )
