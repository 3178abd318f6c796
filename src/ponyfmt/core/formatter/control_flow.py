"""
Control Flow Layout Rules.

Handles compound statements (``if``, ``while``, ``for``, ``repeat``, ``try``,
``recover``, ``with``, ``match``) and statement blocks. Heads stay on the
line of their keyword; bodies start on the next line one level deeper; clause
keywords (``else``, ``elseif``, ``until``, ``end``...) start a new line at the
level of the statement.
"""

from typing import Dict

from ponyfmt.core.formatter.base import Handler
from ponyfmt.core.formatter.structure_func import StructureFuncMixin
from ponyfmt.core.syntax.nodes import COMMENT_KINDS, NodeKind, SyntaxNode

CLAUSE_KEYWORDS = {
  NodeKind.IF_STATEMENT: frozenset({"elseif", "else", "end"}),
  NodeKind.WHILE_STATEMENT: frozenset({"else", "end"}),
  NodeKind.FOR_STATEMENT: frozenset({"else", "end"}),
  NodeKind.REPEAT_STATEMENT: frozenset({"until", "else", "end"}),
  NodeKind.TRY_STATEMENT: frozenset({"else", "then", "end"}),
  NodeKind.MATCH_STATEMENT: frozenset({"else", "end"}),
  NodeKind.RECOVER_BLOCK: frozenset({"end"}),
  NodeKind.WITH_STATEMENT: frozenset({"end"}),
}

# Keywords after which the next block is a body rather than a head.
BODY_OPENERS = frozenset({"then", "do", "else", "try", "repeat", "recover"})


class ControlFlowMixin(StructureFuncMixin):
  """
  Mixin for compound statements, match cases and blocks.

  Uses ``visit_arrow_body`` from ``StructureFuncMixin`` for match case bodies.
  """

  def _build_dispatch(self) -> Dict[NodeKind, Handler]:
    table = super()._build_dispatch()
    for kind in CLAUSE_KEYWORDS:
      table[kind] = self.visit_compound
    table[NodeKind.MATCH_CASE] = self.visit_match_case
    table[NodeKind.BLOCK] = self.visit_block
    return table

  def visit_block(self, node: SyntaxNode) -> None:
    self.visit_lines(node.children)

  def visit_compound(self, node: SyntaxNode) -> None:
    """
    Lays out a compound statement clause by clause.

    Args:
        node (SyntaxNode): Any statement kind listed in ``CLAUSE_KEYWORDS``.
    """
    clauses = CLAUSE_KEYWORDS.get(node.node_kind, frozenset({"end"}))
    expect_body = False

    for child in node.children:
      kind = child.node_kind

      if child.is_leaf:
        if kind in COMMENT_KINDS:
          if self.line_break_before(child):
            self.state.request_newline()
          else:
            self.state.request_space()
        elif child.kind in clauses:
          self.state.request_newline()
        self.visit(child)
        if child.kind in BODY_OPENERS:
          expect_body = True
        continue

      if kind == NodeKind.BLOCK and expect_body:
        self.state.request_newline()
        with self.state.indented():
          self.visit(child)
      elif kind == NodeKind.MATCH_CASE:
        self.state.request_newline()
        self.visit(child)
      else:
        with self.state.inline():
          self.visit(child)
      expect_body = False

  def visit_match_case(self, node: SyntaxNode) -> None:
    """
    Writes ``| pattern [if guard] =>`` inline, then places the body.
    """
    arrow = None
    for child in node.children:
      if arrow is not None:
        # A case body written below its pattern stays there.
        self.visit_arrow_body(arrow, child, allow_inline=not self.line_break_before(child))
        continue
      with self.state.inline():
        self.visit(child)
      if child.kind == "=>":
        arrow = child
