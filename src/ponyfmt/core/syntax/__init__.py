"""
Pony Syntax Package.

Provides the lexer, parser and immutable node model used to read Pony source.

Modules:
    - ``grammar``: Keyword, capability and operator vocabularies.
    - ``tokens``: Regex tokenizer.
    - ``nodes``: ``SyntaxNode`` tree and ``NodeKind`` classification.
    - ``parser``: Error-tolerant recursive descent parser.
"""

from ponyfmt.core.syntax.nodes import NodeKind, SyntaxNode
from ponyfmt.core.syntax.parser import PonyParser, parse
from ponyfmt.core.syntax.tokens import Token, TokenKind, Tokenizer

__all__ = ["NodeKind", "SyntaxNode", "PonyParser", "parse", "Token", "TokenKind", "Tokenizer"]
