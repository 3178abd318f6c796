"""
Call and Inline Expression Rules.

Argument lists are re-rendered on a single line: every argument is formatted
on its own, collapsed to one line, and the pieces are joined with ``", "``.
Named arguments follow a ``where`` separator. Lists holding comments or
multi-line literals are left to the generic walk, since collapsing them would
change the program text.
"""

from typing import Dict, List

from ponyfmt.core.formatter.base import BaseWalker, Handler
from ponyfmt.core.formatter.spacing import Spacing
from ponyfmt.core.syntax.nodes import COMMENT_KINDS, NodeKind, SyntaxNode

INLINE_KINDS = (
  NodeKind.PARAMETERS,
  NodeKind.TYPE_PARAMETERS,
  NodeKind.TYPE_ARGUMENTS,
  NodeKind.BASE_TYPE,
  NodeKind.TUPLE_TYPE,
  NodeKind.UNION_TYPE,
  NodeKind.INTERSECTION_TYPE,
  NodeKind.TUPLE_EXPRESSION,
  NodeKind.ARRAY_LITERAL,
)

_SEPARATORS = frozenset({"(", ")", ","})


class CallMixin(BaseWalker):
  """
  Mixin for argument lists, unary operators and inline-only constructs.
  """

  def _build_dispatch(self) -> Dict[NodeKind, Handler]:
    table = super()._build_dispatch()
    table[NodeKind.ARGUMENTS] = self.visit_arguments
    table[NodeKind.UNARY_EXPRESSION] = self.visit_unary
    for kind in INLINE_KINDS:
      table[kind] = self.visit_inline
    return table

  def visit_unary(self, node: SyntaxNode) -> None:
    """Writes a prefix operator; a minus is glued to its operand."""
    for child in node.children:
      self.visit(child)
      if child is node.children[0] and child.kind in ("-", "-~"):
        self.state.glue_next = True

  def visit_arguments(self, node: SyntaxNode) -> None:
    """
    Re-renders an argument list as ``(a, b where c = d)``.

    Args:
        node (SyntaxNode): An ``arguments`` node.
    """
    if not self._can_flatten(node):
      with self.state.inline():
        self.visit_children(node)
      return

    positional: List[str] = []
    named: List[str] = []
    target = positional
    for child in node.children:
      if child.is_leaf and child.kind in _SEPARATORS:
        continue
      if child.is_leaf and child.kind == "where":
        target = named
        continue
      text = self.render_fragment(child)
      if text:
        target.append(text)

    body = ", ".join(positional)
    if named:
      body = f"{body} where {', '.join(named)}" if body else f"where {', '.join(named)}"
    self.state.emit(f"({body})", Spacing.NONE, ")")

  def render_fragment(self, node: SyntaxNode) -> str:
    """
    Formats ``node`` with a fresh walker and collapses the result to one line.

    Args:
        node (SyntaxNode): Any subtree of the current source.

    Returns:
        str: The single-line rendering, empty if the node produced no text.
    """
    sub = type(self)(self.source, self.options)
    sub.state.last_byte = node.start
    sub.visit(node)
    lines = (line.strip() for line in sub.state.output.splitlines())
    return " ".join(line for line in lines if line)

  def _can_flatten(self, node: SyntaxNode) -> bool:
    previous = None
    for leaf in node.leaves():
      if leaf.node_kind in COMMENT_KINDS or "\n" in leaf.text(self.source):
        return False
      if previous is not None and self.source[previous.end : leaf.start].strip():
        # Comment between tokens
        return False
      previous = leaf
    return True
