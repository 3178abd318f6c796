"""
Declaration Layout Rules.

Handles the top level of a file and the bodies of type definitions:

1.  **Blank Lines**: Which adjacent top-level items are separated by an empty
    line, decided by ``needs_blank_line``.
2.  **Indent Reset**: Every declaration starts at column zero, whatever an
    earlier malformed region left behind.
3.  **Members**: Fields, constructors, behaviours and methods each start on
    their own line one level inside their type.
"""

from typing import Dict, Optional

from ponyfmt.core.formatter.base import BaseWalker, Handler
from ponyfmt.core.syntax.nodes import COMMENT_KINDS, DECLARATION_KINDS, ENTITY_KINDS, NodeKind, SyntaxNode

# Entities with a body of members; anything after them gets a blank line.
_BODY_ENTITIES = frozenset(
  {
    NodeKind.CLASS_DEFINITION,
    NodeKind.ACTOR_DEFINITION,
    NodeKind.INTERFACE_DEFINITION,
    NodeKind.STRUCT_DEFINITION,
  }
)

# Kinds separated from any different following kind, except a trailing line comment.
_GROUPED_KINDS = frozenset({NodeKind.PRIMITIVE_DEFINITION, NodeKind.TYPE_ALIAS, NodeKind.TRAIT_DEFINITION})

# Grouped kinds whose runs stay tight.
_REPEATABLE_KINDS = frozenset({NodeKind.PRIMITIVE_DEFINITION, NodeKind.TYPE_ALIAS})


def needs_blank_line(previous: NodeKind, current: NodeKind) -> bool:
  """
  Decides whether two adjacent top-level items are separated by a blank line.

  Runs of ``use`` statements, primitives and type aliases stay tight; types
  with bodies are always set apart; a block comment is separated from the
  code that follows it.

  Args:
      previous (NodeKind): Kind of the earlier item.
      current (NodeKind): Kind of the item about to be written.

  Returns:
      bool: True for a blank line, False for a plain line break.
  """
  if previous == NodeKind.BLOCK_COMMENT:
    return current not in COMMENT_KINDS
  if previous in _BODY_ENTITIES:
    return True
  if previous in _GROUPED_KINDS:
    if current == NodeKind.LINE_COMMENT:
      return False
    return current != previous or previous not in _REPEATABLE_KINDS
  if previous == NodeKind.USE_STATEMENT:
    return current not in COMMENT_KINDS and current != NodeKind.USE_STATEMENT
  return False


class StructureMixin(BaseWalker):
  """
  Mixin for file-level layout and type definition bodies.
  """

  def _build_dispatch(self) -> Dict[NodeKind, Handler]:
    table = super()._build_dispatch()
    table[NodeKind.SOURCE_FILE] = self.visit_source_file
    table[NodeKind.MEMBERS] = self.visit_members
    for kind in ENTITY_KINDS:
      table[kind] = self.visit_entity
    for kind in (NodeKind.USE_STATEMENT, NodeKind.TYPE_ALIAS, NodeKind.FIELD):
      table[kind] = self.visit_inline
    return table

  def visit_source_file(self, node: SyntaxNode) -> None:
    """
    Lays out top-level items, one per line with blank lines per the table.

    Args:
        node (SyntaxNode): The ``source_file`` root.
    """
    previous: Optional[NodeKind] = None
    for child in node.children:
      kind = child.node_kind
      if kind in DECLARATION_KINDS:
        self.state.reset_indent()

      if previous is not None:
        if kind in COMMENT_KINDS and not self.line_break_before(child):
          self.state.request_space()
        else:
          self.state.request_newline(2 if needs_blank_line(previous, kind) else 1)

      self.visit(child)
      previous = kind

  def visit_entity(self, node: SyntaxNode) -> None:
    """
    Writes a type header on one line and its members indented below.
    """
    for child in node.children:
      if child.node_kind == NodeKind.MEMBERS:
        with self.state.indented():
          self.visit(child)
      else:
        with self.state.inline():
          self.visit(child)

  def visit_members(self, node: SyntaxNode) -> None:
    self.visit_lines(node.children, newline_first=True)
