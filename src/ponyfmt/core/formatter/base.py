"""
Base Formatter Walker.

This module provides the ``BaseWalker`` class, the foundation of the
``PonyFormatter``. It handles:

1.  **Traversal**: Depth-first walk over a ``SyntaxNode`` tree, dispatching
    each node kind to the rule registered for it by the mixins.
2.  **Token Emission**: Writing leaves through the spacing table and issuing
    their post-emission requests.
3.  **Source Tracking**: Advancing ``last_byte`` so text between nodes is
    processed exactly once.

Nodes without a registered rule fall back to a generic walk over their
children, so any tree, including one with unknown node kinds, can be printed.
"""

from typing import Callable, Dict, Iterable, List, Optional

from ponyfmt.config import FormatOptions
from ponyfmt.core.formatter.spacing import PostAction, Spacing, post_action, spacing
from ponyfmt.core.formatter.state import FormatterState
from ponyfmt.core.syntax.nodes import COMMENT_KINDS, NodeKind, SyntaxNode

Handler = Callable[[SyntaxNode], None]


class BaseWalker:
  """
  The base class for formatter traversal.

  Provides the dispatch loop and token emission used by the rule Mixins
  (StructureMixin, ControlFlowMixin, etc.).
  """

  def __init__(self, source: str, options: Optional[FormatOptions] = None):
    """
    Initializes the walker.

    Args:
        source: The text the tree was parsed from.
        options: Formatting options. Defaults are used when omitted.
    """
    self.source = source
    self.options = options or FormatOptions()
    self.state = FormatterState(indent_width=self.options.indent_width)
    self._parents: List[SyntaxNode] = []
    self._dispatch: Dict[NodeKind, Handler] = self._build_dispatch()

  def _build_dispatch(self) -> Dict[NodeKind, Handler]:
    """
    Returns the kind-to-rule table. Mixins extend it via ``super()``.
    """
    return {}

  def format(self, root: SyntaxNode) -> str:
    """
    Formats a whole tree.

    Args:
        root: Root node, normally ``source_file``.

    Returns:
        str: Formatted text ending in exactly one newline.
    """
    self.visit(root)
    return self.state.result()

  def visit(self, node: SyntaxNode) -> None:
    """
    Formats one node, consuming any source text in front of it first.
    """
    self.consume_gap(node.start)

    handler = self._dispatch.get(node.node_kind)
    if handler is None and node.is_leaf:
      self.emit_token(node)
    else:
      self._parents.append(node)
      try:
        (handler or self.visit_children)(node)
      finally:
        self._parents.pop()

    self.state.advance(node.end)

  def visit_children(self, node: SyntaxNode) -> None:
    for child in node.children:
      self.visit(child)

  def visit_inline(self, node: SyntaxNode) -> None:
    """Formats a node whose whole text stays on the current line."""
    with self.state.inline():
      self.visit_children(node)

  def visit_lines(self, children: Iterable[SyntaxNode], newline_first: bool = False) -> None:
    """
    Formats a sequence of items that each start on their own line.

    A comment on the same source line as the previous item stays there, and
    an item directly after ``;`` is not moved.

    Args:
        children: Items in source order.
        newline_first: Also break the line before the first item.
    """
    previous: Optional[SyntaxNode] = None
    for child in children:
      if child.node_kind in COMMENT_KINDS and not self.line_break_before(child):
        self.state.request_space()
      elif child.kind == ";":
        pass
      elif previous is None:
        if newline_first:
          self.state.request_newline()
      elif previous.kind != ";":
        self.state.request_newline()
      self.visit(child)
      previous = child

  def consume_gap(self, offset: int) -> None:
    """
    Processes unconsumed source text before ``offset``.

    The base walker only marks it consumed; ``InterveningContentMixin``
    re-injects comments and preserved line breaks.
    """
    self.state.advance(offset)

  def line_break_before(self, node: SyntaxNode) -> bool:
    """True if the unconsumed source before ``node`` contains a line break."""
    return "\n" in self.source[self.state.last_byte : node.start]

  @property
  def parent(self) -> Optional[SyntaxNode]:
    return self._parents[-1] if self._parents else None

  def emit_token(self, node: SyntaxNode) -> None:
    """
    Writes a leaf using the spacing table, then issues its post request.

    Inside a node that directly contains an ``ERROR`` child, ``then`` marks
    the start of a conditional body whose indent ``end`` will restore.
    """
    text = node.text(self.source)
    if not text:
      return

    kind = node.kind
    state = self.state
    parent = self.parent

    if kind == "then" and parent is not None and parent.has_error_child:
      state.arm_conditional()

    decision = spacing(kind, state.last_char, state.last_kind)
    if kind == "end":
      if decision == Spacing.NEWLINE:
        state.request_newline()
      state.restore_conditional_base()

    state.emit(text, decision, kind)

    action = post_action(kind)
    if action == PostAction.SPACE:
      state.request_space()
    elif action == PostAction.NEWLINE:
      state.request_newline(force=True)
    elif action == PostAction.BLANK_LINE:
      state.request_newline(2)
