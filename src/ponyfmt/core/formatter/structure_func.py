"""
Method Layout Rules.

Constructors, behaviours and methods keep their signature on one line. A
method body that is a single short line joins the signature line; every
other body moves to the following lines, one level deeper.
"""

from typing import Dict, Optional

from ponyfmt.core.formatter.base import BaseWalker, Handler
from ponyfmt.core.syntax.nodes import METHOD_KINDS, NodeKind, SyntaxNode

# Bodies at least this long always go on their own lines.
INLINE_BODY_LIMIT = 50


class StructureFuncMixin(BaseWalker):
  """
  Mixin for method-like members and other ``=>`` bodies.
  """

  def _build_dispatch(self) -> Dict[NodeKind, Handler]:
    table = super()._build_dispatch()
    for kind in METHOD_KINDS:
      table[kind] = self.visit_method
    return table

  def visit_method(self, node: SyntaxNode) -> None:
    """
    Writes the signature inline, then the body via ``visit_arrow_body``.

    Only ``fun`` bodies may stay on the signature line; constructor and
    behaviour bodies always start a block.

    Args:
        node (SyntaxNode): A constructor, behaviour or method.
    """
    arrow: Optional[SyntaxNode] = None
    for child in node.children:
      if arrow is not None:
        self.visit_arrow_body(arrow, child, allow_inline=node.node_kind == NodeKind.METHOD)
        continue

      if child.kind == "?":
        # Partial marker in a signature: ``fun f(): U32 ? =>``
        self.state.request_space()
      with self.state.inline():
        self.visit(child)
      if child.kind == "=>":
        arrow = child

  def fits_inline(self, arrow: SyntaxNode, body: SyntaxNode) -> bool:
    """
    True if ``body`` is a single short line and no comment sits before it.

    Where the body started in the source does not matter.
    """
    if self.source[arrow.end : body.start].strip():
      return False
    text = body.text(self.source).strip()
    return "\n" not in text and len(text) < INLINE_BODY_LIMIT

  def visit_arrow_body(self, arrow: SyntaxNode, body: SyntaxNode, allow_inline: bool = True) -> None:
    """
    Places the body following a ``=>`` token.

    Args:
        arrow (SyntaxNode): The ``=>`` leaf.
        body (SyntaxNode): The body block.
        allow_inline (bool): If False the body always goes on the next lines.
    """
    if allow_inline and self.fits_inline(arrow, body):
      self.state.request_space()
      with self.state.inline():
        self.visit(body)
      return

    self.state.request_newline()
    with self.state.indented():
      self.visit(body)
