"""
Pony Recursive Descent Parser.

Parses Pony source into the concrete tree defined in `nodes.py`. The parser
never rejects Pony-looking input: when a construct cannot be parsed, the
tokens it consumed (plus the rest of that source line) are wrapped in an
``ERROR`` node and parsing resumes at the next item or statement. Comments
that sit between items, members or statements become leaves of their list;
comments anywhere else stay out of the tree and are recovered from the
source gaps during formatting.
"""

import logging
from typing import Callable, FrozenSet, List, Optional, Sequence

from ponyfmt.core.syntax.grammar import get_grammar
from ponyfmt.core.syntax.nodes import NodeKind, SyntaxNode
from ponyfmt.core.syntax.tokens import COMMENT_TOKENS, Token, TokenKind, Tokenizer
from ponyfmt.errors import ParseError

logger = logging.getLogger(__name__)

ENTITY_KEYWORDS = {
  "actor": NodeKind.ACTOR_DEFINITION,
  "class": NodeKind.CLASS_DEFINITION,
  "primitive": NodeKind.PRIMITIVE_DEFINITION,
  "trait": NodeKind.TRAIT_DEFINITION,
  "interface": NodeKind.INTERFACE_DEFINITION,
  "struct": NodeKind.STRUCT_DEFINITION,
}

METHOD_KEYWORDS = {
  "new": NodeKind.CONSTRUCTOR,
  "fun": NodeKind.METHOD,
  "be": NodeKind.BEHAVIOR,
}

FIELD_KEYWORDS = frozenset({"let", "var", "embed"})

TOP_LEVEL_KEYWORDS = frozenset(ENTITY_KEYWORDS) | {"use", "type"}

# Keywords that can never start a statement; every block ends before them.
HARD_STOPS = TOP_LEVEL_KEYWORDS | frozenset(METHOD_KEYWORDS)

UNARY_OPERATORS = frozenset({"-", "-~", "not", "addressof", "digestof"})

EXPRESSION_KEYWORDS = frozenset(
  {
    "this",
    "not",
    "consume",
    "if",
    "ifdef",
    "while",
    "for",
    "repeat",
    "match",
    "try",
    "recover",
    "with",
    "let",
    "var",
    "embed",
    "addressof",
    "digestof",
    "object",
  }
)

LITERAL_TOKENS = frozenset(
  {TokenKind.IDENTIFIER, TokenKind.NUMBER, TokenKind.STRING, TokenKind.CHARACTER, TokenKind.BOOLEAN}
)

JUMP_KEYWORDS = frozenset({"return", "break", "continue", "error", "compile_error"})

_IF_BODY_END = frozenset({"elseif", "else", "end"})
_LOOP_BODY_END = frozenset({"else", "end"})
_CASE_END = frozenset({"|", "else", "end"})
_END = frozenset({"end"})


def _node(kind: NodeKind, children: Sequence[SyntaxNode]) -> SyntaxNode:
  return SyntaxNode(kind.value, children[0].start, children[-1].end, tuple(children))


class _Unparsed(ParseError):
  """A construct failed to parse; recovered locally as an ``ERROR`` node."""


def _leaf(token: Token) -> SyntaxNode:
  return SyntaxNode(token.leaf_kind, token.start, token.end)


class PonyParser:
  """
  Parses one Pony source file.

  Recoverable failures inside the grammar are signalled with ``_Unparsed``
  and turned into ``ERROR`` nodes by the list parsers; only conditions that
  make the whole input unusable surface as ``ParseError``.
  """

  def __init__(self, source: str):
    if "\x00" in source:
      raise ParseError("Source contains NUL bytes and is not Pony text")
    self.source = source
    self.grammar = get_grammar()
    self.tokens: List[Token] = list(Tokenizer(source).tokenize())
    self.pos = 0
    self._prev_end_line = 1

  def parse(self) -> SyntaxNode:
    """
    Parses the whole source.

    Returns:
        SyntaxNode: A ``source_file`` node spanning the entire input.

    Raises:
        ParseError: If nesting exceeds the interpreter recursion limit.
    """
    try:
      return self._parse_source_file()
    except RecursionError as e:
      raise ParseError("Source is nested too deeply to parse") from e

  # --- Token navigation ---

  def _peek(self, offset: int = 0) -> Token:
    idx = self.pos
    seen = -1
    while True:
      tok = self.tokens[idx]
      if tok.kind not in COMMENT_TOKENS:
        seen += 1
        if seen == offset or tok.kind == TokenKind.EOF:
          return tok
      idx += 1

  def _advance(self) -> SyntaxNode:
    while self.tokens[self.pos].kind in COMMENT_TOKENS:
      self.pos += 1
    tok = self.tokens[self.pos]
    if tok.kind == TokenKind.EOF:
      raise _Unparsed("Unexpected end of file")
    self.pos += 1
    self._prev_end_line = tok.end_line
    return _leaf(tok)

  def _check(self, *texts: str) -> bool:
    tok = self._peek()
    return tok.kind in (TokenKind.KEYWORD, TokenKind.OPERATOR) and tok.text in texts

  def _check_kind(self, *kinds: TokenKind) -> bool:
    return self._peek().kind in kinds

  def _accept(self, *texts: str) -> Optional[SyntaxNode]:
    if self._check(*texts):
      return self._advance()
    return None

  def _expect(self, *texts: str) -> SyntaxNode:
    if not self._check(*texts):
      raise self._fail(f"Expected {' or '.join(repr(t) for t in texts)}")
    return self._advance()

  def _expect_kind(self, kind: TokenKind, what: str) -> SyntaxNode:
    if not self._check_kind(kind):
      raise self._fail(f"Expected {what}")
    return self._advance()

  def _fail(self, message: str) -> _Unparsed:
    tok = self._peek()
    found = repr(tok.text) if tok.kind != TokenKind.EOF else "end of file"
    return _Unparsed(f"{message}, got {found} on line {tok.line}")

  def _on_new_line(self, tok: Token) -> bool:
    return tok.line > self._prev_end_line

  def _collect_comments(self) -> List[SyntaxNode]:
    comments = []
    while self.tokens[self.pos].kind in COMMENT_TOKENS:
      comments.append(_leaf(self.tokens[self.pos]))
      self.pos += 1
    return comments

  def _is_terminator(self, tok: Token, terminators: FrozenSet[str]) -> bool:
    if tok.kind == TokenKind.EOF:
      return True
    if tok.kind == TokenKind.KEYWORD and tok.text in HARD_STOPS:
      return True
    return tok.kind in (TokenKind.KEYWORD, TokenKind.OPERATOR) and tok.text in terminators

  def _starts_expression(self, tok: Token) -> bool:
    if tok.kind in LITERAL_TOKENS:
      return True
    if tok.kind == TokenKind.KEYWORD:
      return tok.text in EXPRESSION_KEYWORDS
    return tok.kind == TokenKind.OPERATOR and tok.text in ("(", "[", "-", "-~", "@")

  # --- Recovery ---

  def _guarded(self, parse_fn: Callable[[], SyntaxNode]) -> SyntaxNode:
    """
    Runs a sub-parser, converting a failure into an ``ERROR`` node.

    The error region spans every token consumed by the failed attempt (at
    least one) and the remaining tokens on the line of the last of them.
    """
    start = self.pos
    try:
      return parse_fn()
    except _Unparsed as e:
      logger.debug("Recovering from parse failure: %s", e)
      return self._error_node(start, self.pos)

  def _error_node(self, start: int, fail: int) -> SyntaxNode:
    eof = len(self.tokens) - 1
    end = min(max(fail, start + 1), eof)
    line = self.tokens[end - 1].end_line
    while end < eof and self.tokens[end].line == line and not self.tokens[end].is_comment:
      end += 1

    self.pos = end
    self._prev_end_line = self.tokens[end - 1].end_line
    consumed = self.tokens[start:end]
    return SyntaxNode(
      NodeKind.ERROR.value,
      consumed[0].start,
      consumed[-1].end,
      tuple(_leaf(t) for t in consumed),
    )

  # --- Declarations ---

  def _parse_source_file(self) -> SyntaxNode:
    children: List[SyntaxNode] = []
    while True:
      children.extend(self._collect_comments())
      if self._check_kind(TokenKind.EOF):
        break
      children.append(self._guarded(self._parse_item))
    return SyntaxNode(NodeKind.SOURCE_FILE.value, 0, len(self.source), tuple(children))

  def _parse_item(self) -> SyntaxNode:
    if self._check("use"):
      return self._parse_use()
    if self._check("type"):
      return self._parse_type_alias()
    if self._check(*ENTITY_KEYWORDS):
      return self._parse_entity()
    return self._parse_statement()

  def _parse_use(self) -> SyntaxNode:
    children = [self._advance()]
    if self._check_kind(TokenKind.IDENTIFIER) and self._peek(1).text == "=":
      children.append(self._advance())
      children.append(self._advance())
    children.append(self._expect_kind(TokenKind.STRING, "a package string"))
    if self._check("if"):
      children.append(self._advance())
      children.append(self._parse_expression())
    return _node(NodeKind.USE_STATEMENT, children)

  def _parse_type_alias(self) -> SyntaxNode:
    children = [self._advance(), self._expect_kind(TokenKind.IDENTIFIER, "a type name")]
    if self._check("["):
      children.append(self._parse_type_parameters())
    children.append(self._expect("is"))
    children.append(self._parse_type())
    return _node(NodeKind.TYPE_ALIAS, children)

  def _parse_entity(self) -> SyntaxNode:
    keyword = self._peek().text
    children = [self._advance()]
    if self._check_kind(TokenKind.CAPABILITY):
      children.append(self._advance())
    children.append(self._expect_kind(TokenKind.IDENTIFIER, "a type name"))
    if self._check("["):
      children.append(self._parse_type_parameters())
    if self._check("is"):
      children.append(self._advance())
      children.append(self._parse_type())

    members = self._parse_members()
    if members is not None:
      children.append(members)
    return _node(ENTITY_KEYWORDS[keyword], children)

  def _parse_members(self) -> Optional[SyntaxNode]:
    children: List[SyntaxNode] = []
    expect_docstring = True
    while True:
      saved = self.pos
      comments = self._collect_comments()
      tok = self._peek()
      if tok.kind == TokenKind.EOF or (tok.kind == TokenKind.KEYWORD and tok.text in TOP_LEVEL_KEYWORDS):
        # Trailing comments belong to whatever follows the entity.
        self.pos = saved
        break
      children.extend(comments)
      if tok.kind == TokenKind.STRING and expect_docstring:
        children.append(self._advance())
        expect_docstring = False
        continue
      expect_docstring = False
      children.append(self._guarded(self._parse_member))

    if not children:
      return None
    return _node(NodeKind.MEMBERS, children)

  def _parse_member(self) -> SyntaxNode:
    if self._check(*FIELD_KEYWORDS):
      return self._parse_field()
    if self._check(*METHOD_KEYWORDS):
      return self._parse_method()
    raise self._fail("Expected a field or method")

  def _parse_field(self) -> SyntaxNode:
    children = [
      self._advance(),
      self._expect_kind(TokenKind.IDENTIFIER, "a field name"),
      self._expect(":"),
      self._parse_type(),
    ]
    if self._check("="):
      children.append(self._advance())
      children.append(self._parse_expression())
    return _node(NodeKind.FIELD, children)

  def _parse_method(self) -> SyntaxNode:
    keyword = self._peek().text
    children = [self._advance()]
    if self._check_kind(TokenKind.CAPABILITY):
      children.append(self._advance())
    children.append(self._expect_kind(TokenKind.IDENTIFIER, "a method name"))
    if self._check("["):
      children.append(self._parse_type_parameters())
    children.append(self._parse_parameters())
    if self._check(":"):
      children.append(self._advance())
      children.append(self._parse_type())
    if self._check("?"):
      children.append(self._advance())
    if self._check("=>"):
      children.append(self._advance())
      children.append(self._parse_block(frozenset()))
    return _node(METHOD_KEYWORDS[keyword], children)

  def _parse_parameters(self) -> SyntaxNode:
    children = [self._expect("(")]
    if not self._check(")"):
      children.append(self._parse_parameter())
      while self._check(","):
        children.append(self._advance())
        children.append(self._parse_parameter())
    children.append(self._expect(")"))
    return _node(NodeKind.PARAMETERS, children)

  def _parse_parameter(self) -> SyntaxNode:
    children = [
      self._expect_kind(TokenKind.IDENTIFIER, "a parameter name"),
      self._expect(":"),
      self._parse_type(),
    ]
    if self._check("="):
      children.append(self._advance())
      children.append(self._parse_expression())
    return _node(NodeKind.PARAMETER, children)

  # --- Types ---

  def _parse_type_parameters(self) -> SyntaxNode:
    children = [self._expect("["), self._parse_type_parameter()]
    while self._check(","):
      children.append(self._advance())
      children.append(self._parse_type_parameter())
    children.append(self._expect("]"))
    return _node(NodeKind.TYPE_PARAMETERS, children)

  def _parse_type_parameter(self) -> SyntaxNode:
    children = [self._expect_kind(TokenKind.IDENTIFIER, "a type parameter")]
    if self._check(":"):
      children.append(self._advance())
      children.append(self._parse_type())
    if self._check("="):
      children.append(self._advance())
      children.append(self._parse_type())
    return _node(NodeKind.TYPE_PARAMETER, children)

  def _parse_type_arguments(self) -> SyntaxNode:
    children = [self._expect("["), self._parse_type()]
    while self._check(","):
      children.append(self._advance())
      children.append(self._parse_type())
    children.append(self._expect("]"))
    return _node(NodeKind.TYPE_ARGUMENTS, children)

  def _parse_type(self) -> SyntaxNode:
    left = self._parse_type_atom()
    if self._check("->"):
      return _node(NodeKind.ARROW_TYPE, [left, self._advance(), self._parse_type()])
    return left

  def _parse_type_atom(self) -> SyntaxNode:
    if self._check("("):
      children = [self._advance(), self._parse_type()]
      kind = NodeKind.TUPLE_TYPE
      while self._check("|", "&", ","):
        if kind == NodeKind.TUPLE_TYPE and len(children) == 2:
          kind = {"|": NodeKind.UNION_TYPE, "&": NodeKind.INTERSECTION_TYPE}.get(self._peek().text, kind)
        children.append(self._advance())
        children.append(self._parse_type())
      children.append(self._expect(")"))
      self._parse_type_suffix(children)
      return _node(kind, children)

    if self._check("this"):
      return self._advance()

    children = [self._expect_kind(TokenKind.IDENTIFIER, "a type")]
    if self._check(".") and self._peek(1).kind == TokenKind.IDENTIFIER:
      children.append(self._advance())
      children.append(self._advance())
    if self._check("["):
      children.append(self._parse_type_arguments())
    if self._check_kind(TokenKind.CAPABILITY):
      children.append(self._advance())
    self._parse_type_suffix(children)
    return _node(NodeKind.BASE_TYPE, children)

  def _parse_type_suffix(self, children: List[SyntaxNode]) -> None:
    if self._check("^", "!"):
      children.append(self._advance())

  # --- Blocks & Statements ---

  def _parse_block(self, terminators: FrozenSet[str]) -> SyntaxNode:
    """
    Parses statements until a terminator keyword, a hard stop or EOF.

    Statements that fail to parse become ``ERROR`` children. Comments that
    directly precede the terminator are left for the enclosing construct.

    Raises:
        _Unparsed: If the block contains no statement at all.
    """
    children: List[SyntaxNode] = []
    has_statement = False
    while True:
      saved = self.pos
      comments = self._collect_comments()
      tok = self._peek()
      if self._is_terminator(tok, terminators):
        self.pos = saved
        break
      children.extend(comments)
      if tok.kind == TokenKind.OPERATOR and tok.text == ";":
        children.append(self._advance())
        continue
      children.append(self._guarded(self._parse_statement))
      has_statement = True

    if not has_statement:
      raise self._fail("Expected an expression")
    return _node(NodeKind.BLOCK, children)

  def _parse_statement(self) -> SyntaxNode:
    return self._parse_expression()

  def _parse_expression(self) -> SyntaxNode:
    left = self._parse_binary()
    if self._check("="):
      eq = self._advance()
      return _node(NodeKind.ASSIGNMENT_EXPRESSION, [left, eq, self._parse_expression()])
    return left

  def _is_binary_operator(self, tok: Token) -> bool:
    if tok.kind not in (TokenKind.OPERATOR, TokenKind.KEYWORD):
      return False
    if tok.text in ("-", "-~") and self._on_new_line(tok):
      # A minus starting a line begins a new statement.
      return False
    return tok.text in self.grammar.binary_operators

  def _parse_binary(self) -> SyntaxNode:
    left = self._parse_unary()
    while True:
      if self._check("as"):
        left = _node(NodeKind.AS_EXPRESSION, [left, self._advance(), self._parse_type()])
        continue
      if not self._is_binary_operator(self._peek()):
        return left
      op = self._advance()
      left = _node(NodeKind.BINARY_EXPRESSION, [left, op, self._parse_unary()])

  def _parse_unary(self) -> SyntaxNode:
    if self._check(*UNARY_OPERATORS):
      op = self._advance()
      return _node(NodeKind.UNARY_EXPRESSION, [op, self._parse_unary()])
    if self._check("consume"):
      children = [self._advance()]
      if self._check_kind(TokenKind.CAPABILITY):
        children.append(self._advance())
      children.append(self._parse_unary())
      return _node(NodeKind.CONSUME_EXPRESSION, children)
    if self._check(*FIELD_KEYWORDS):
      children = [self._advance(), self._expect_kind(TokenKind.IDENTIFIER, "a variable name")]
      if self._check(":"):
        children.append(self._advance())
        children.append(self._parse_type())
      return _node(NodeKind.VARIABLE_DECLARATION, children)
    return self._parse_postfix()

  def _parse_postfix(self) -> SyntaxNode:
    expr = self._parse_primary()
    while True:
      tok = self._peek()
      if self._check(".", "~", ".>"):
        dot = self._advance()
        name = self._expect_kind(TokenKind.IDENTIFIER, "a member name")
        expr = _node(NodeKind.MEMBER_EXPRESSION, [expr, dot, name])
      elif self._check("(") and not self._on_new_line(tok):
        expr = _node(NodeKind.CALL_EXPRESSION, [expr, self._parse_arguments()])
      elif self._check("[") and not self._on_new_line(tok):
        expr = _node(NodeKind.GENERIC_EXPRESSION, [expr, self._parse_type_arguments()])
      elif self._check("?") and expr.kind == NodeKind.CALL_EXPRESSION.value:
        expr = _node(NodeKind.CALL_EXPRESSION, list(expr.children) + [self._advance()])
      else:
        return expr

  def _parse_arguments(self) -> SyntaxNode:
    children = [self._expect("(")]
    if not self._check(")", "where"):
      children.append(self._parse_expression())
      while self._check(","):
        children.append(self._advance())
        children.append(self._parse_expression())
    if self._check("where"):
      children.append(self._advance())
      children.append(self._parse_named_argument())
      while self._check(","):
        children.append(self._advance())
        children.append(self._parse_named_argument())
    children.append(self._expect(")"))
    return _node(NodeKind.ARGUMENTS, children)

  def _parse_named_argument(self) -> SyntaxNode:
    return _node(
      NodeKind.NAMED_ARGUMENT,
      [
        self._expect_kind(TokenKind.IDENTIFIER, "an argument name"),
        self._expect("="),
        self._parse_expression(),
      ],
    )

  def _parse_primary(self) -> SyntaxNode:
    tok = self._peek()
    if tok.kind in LITERAL_TOKENS or self._check("this"):
      return self._advance()
    if self._check("("):
      return self._parse_tuple()
    if self._check("["):
      return self._parse_array()
    if self._check("@"):
      at = self._advance()
      if self._check_kind(TokenKind.STRING):
        name = self._advance()
      else:
        name = self._expect_kind(TokenKind.IDENTIFIER, "a foreign function name")
      return _node(NodeKind.FFI_IDENTIFIER, [at, name])
    if self._check("if", "ifdef"):
      return self._parse_if()
    if self._check("while"):
      return self._parse_while()
    if self._check("for"):
      return self._parse_for()
    if self._check("repeat"):
      return self._parse_repeat()
    if self._check("match"):
      return self._parse_match()
    if self._check("try"):
      return self._parse_try()
    if self._check("recover"):
      return self._parse_recover()
    if self._check("with"):
      return self._parse_with()
    if self._check(*JUMP_KEYWORDS):
      return self._parse_jump()
    raise self._fail("Expected an expression")

  def _parse_tuple(self) -> SyntaxNode:
    children = [self._advance(), self._parse_expression()]
    while self._check(",", ";"):
      children.append(self._advance())
      children.append(self._parse_expression())
    children.append(self._expect(")"))
    return _node(NodeKind.TUPLE_EXPRESSION, children)

  def _parse_array(self) -> SyntaxNode:
    children = [self._advance()]
    if self._check("as"):
      children.append(self._advance())
      children.append(self._parse_type())
      children.append(self._expect(":"))
    if not self._check("]"):
      children.append(self._parse_expression())
      while self._check(",", ";"):
        children.append(self._advance())
        children.append(self._parse_expression())
    children.append(self._expect("]"))
    return _node(NodeKind.ARRAY_LITERAL, children)

  def _parse_jump(self) -> SyntaxNode:
    children = [self._advance()]
    nxt = self._peek()
    if not self._on_new_line(nxt) and self._starts_expression(nxt):
      children.append(self._parse_expression())
    return _node(NodeKind.JUMP_STATEMENT, children)

  # --- Compound statements ---

  def _parse_if(self) -> SyntaxNode:
    children = [self._advance(), self._parse_block(frozenset({"then"})), self._expect("then")]
    children.append(self._parse_block(_IF_BODY_END))
    while self._check("elseif"):
      children.append(self._advance())
      children.append(self._parse_block(frozenset({"then"})))
      children.append(self._expect("then"))
      children.append(self._parse_block(_IF_BODY_END))
    if self._check("else"):
      children.append(self._advance())
      children.append(self._parse_block(_END))
    children.append(self._expect("end"))
    return _node(NodeKind.IF_STATEMENT, children)

  def _parse_loop_tail(self, children: List[SyntaxNode]) -> None:
    children.append(self._parse_block(_LOOP_BODY_END))
    if self._check("else"):
      children.append(self._advance())
      children.append(self._parse_block(_END))
    children.append(self._expect("end"))

  def _parse_while(self) -> SyntaxNode:
    children = [self._advance(), self._parse_block(frozenset({"do"})), self._expect("do")]
    self._parse_loop_tail(children)
    return _node(NodeKind.WHILE_STATEMENT, children)

  def _parse_for(self) -> SyntaxNode:
    children = [self._advance(), self._parse_postfix(), self._expect("in")]
    children.append(self._parse_block(frozenset({"do"})))
    children.append(self._expect("do"))
    self._parse_loop_tail(children)
    return _node(NodeKind.FOR_STATEMENT, children)

  def _parse_repeat(self) -> SyntaxNode:
    children = [self._advance(), self._parse_block(frozenset({"until"})), self._expect("until")]
    self._parse_loop_tail(children)
    return _node(NodeKind.REPEAT_STATEMENT, children)

  def _parse_match(self) -> SyntaxNode:
    children = [self._advance(), self._parse_block(_CASE_END)]
    while True:
      children.extend(self._collect_comments())
      if not self._check("|"):
        break
      children.append(self._parse_match_case())
    if self._check("else"):
      children.append(self._advance())
      children.append(self._parse_block(_END))
    children.append(self._expect("end"))
    return _node(NodeKind.MATCH_STATEMENT, children)

  def _parse_match_case(self) -> SyntaxNode:
    children = [self._advance(), self._parse_expression()]
    if self._check("if"):
      children.append(self._advance())
      children.append(self._parse_expression())
    children.append(self._expect("=>"))
    children.append(self._parse_block(_CASE_END))
    return _node(NodeKind.MATCH_CASE, children)

  def _parse_try(self) -> SyntaxNode:
    children = [self._advance(), self._parse_block(frozenset({"else", "then", "end"}))]
    if self._check("else"):
      children.append(self._advance())
      children.append(self._parse_block(frozenset({"then", "end"})))
    if self._check("then"):
      children.append(self._advance())
      children.append(self._parse_block(_END))
    children.append(self._expect("end"))
    return _node(NodeKind.TRY_STATEMENT, children)

  def _parse_recover(self) -> SyntaxNode:
    children = [self._advance()]
    if self._check_kind(TokenKind.CAPABILITY):
      children.append(self._advance())
    children.append(self._parse_block(_END))
    children.append(self._expect("end"))
    return _node(NodeKind.RECOVER_BLOCK, children)

  def _parse_with(self) -> SyntaxNode:
    children = [self._advance(), self._parse_expression()]
    while self._check(","):
      children.append(self._advance())
      children.append(self._parse_expression())
    children.append(self._expect("do"))
    children.append(self._parse_block(_END))
    children.append(self._expect("end"))
    return _node(NodeKind.WITH_STATEMENT, children)


def parse(source: str) -> SyntaxNode:
  """
  Parses Pony source text into a syntax tree.

  Args:
      source (str): Complete contents of a ``.pony`` file.

  Returns:
      SyntaxNode: The ``source_file`` root.

  Raises:
      ParseError: If the text is not Pony text or cannot be parsed at all.
  """
  return PonyParser(source).parse()
