"""
Syntax Tree Visualisation.

Renders a ``SyntaxNode`` tree as a `rich.tree.Tree` for the ``debug``
command. Each label shows the node kind and its 0-based ``row:col`` span;
leaves also show their source text.
"""

from bisect import bisect_right
from typing import List, Tuple

from rich.markup import escape
from rich.tree import Tree

from ponyfmt.core.syntax.nodes import SyntaxNode


class TreeVisualizer:
  """
  Builds rich trees for nodes of one source text.
  """

  def __init__(self, source: str):
    self.source = source
    self._line_starts: List[int] = [0]
    for idx, char in enumerate(source):
      if char == "\n":
        self._line_starts.append(idx + 1)

  def position(self, offset: int) -> Tuple[int, int]:
    """
    Converts an offset into a 0-based (row, column) pair.

    Args:
        offset (int): Character offset into the source.

    Returns:
        Tuple[int, int]: Row and column.
    """
    row = bisect_right(self._line_starts, offset) - 1
    return row, offset - self._line_starts[row]

  def label(self, node: SyntaxNode) -> str:
    start_row, start_col = self.position(node.start)
    end_row, end_col = self.position(node.end)
    text = f"[bold]{escape(node.kind)}[/bold]@{start_row}:{start_col}-{end_row}:{end_col}"
    if node.is_leaf:
      text += f" [green]{escape(repr(node.text(self.source)))}[/green]"
    return text

  def build(self, root: SyntaxNode) -> Tree:
    """
    Builds the rich tree for ``root``.

    Args:
        root (SyntaxNode): Subtree to render.

    Returns:
        Tree: Renderable tree.
    """
    tree = Tree(self.label(root))
    stack = [(root, tree)]
    while stack:
      node, branch = stack.pop()
      for child in node.children:
        stack.append((child, branch.add(self.label(child))))
    return tree
