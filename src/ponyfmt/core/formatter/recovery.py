"""
Malformed Region Recovery.

``ERROR`` nodes are printed from their source text rather than walked. Two
shapes get special treatment so that unfinished conditionals still read
sensibly:

1.  **Open conditional**: text starting with ``if`` and containing ``then``
    is split there; the head stays on one line and the remainder is
    processed again one level deeper.
2.  **Closing end**: text ending in ``end`` has its content printed, the
    indent restored, and ``end`` placed on its own line.

Anything else is printed line by line at the current indent.
"""

import re
from typing import Dict

from ponyfmt.core.formatter.base import BaseWalker, Handler
from ponyfmt.core.formatter.spacing import Spacing
from ponyfmt.core.syntax.nodes import NodeKind, SyntaxNode

_IF_HEAD = re.compile(r"^if\b")
_THEN = re.compile(r"\bthen\b")
_END_TAIL = re.compile(r"\bend$")


class ErrorRecoveryMixin(BaseWalker):
  """
  Mixin that renders ``ERROR`` nodes best-effort.
  """

  def _build_dispatch(self) -> Dict[NodeKind, Handler]:
    table = super()._build_dispatch()
    table[NodeKind.ERROR] = self.visit_error
    return table

  def visit_error(self, node: SyntaxNode) -> None:
    """
    Prints a malformed region.

    Inside an inline construct the region is collapsed onto the current
    line; elsewhere it is split into lines as described in the module doc.

    Args:
        node (SyntaxNode): An ``ERROR`` node, leaf or branch.
    """
    text = node.text(self.source)
    if self.state.inline_depth:
      flat = " ".join(text.split())
      self.state.emit(flat, Spacing.PENDING, NodeKind.ERROR.value)
      return

    self.recover_text(text)
    self.state.request_newline()

  def recover_text(self, text: str) -> None:
    """
    Emits malformed source text, applying the conditional heuristics.

    Args:
        text (str): Raw source of the region.
    """
    stripped = text.strip()
    if not stripped:
      return

    then = _THEN.search(stripped)
    if _IF_HEAD.match(stripped) and then:
      head = stripped[: then.start()].rstrip()
      self._emit_line(f"{head} then")
      self.state.open_conditional()
      self.recover_text(stripped[then.end() :])
      return

    if _END_TAIL.search(stripped):
      self.recover_text(stripped[: -len("end")])
      self.state.close_conditional()
      self._emit_line("end")
      return

    for line in stripped.splitlines():
      self._emit_line(line.strip())

  def _emit_line(self, line: str) -> None:
    if not line:
      return
    if not self.state.at_line_start():
      self.state.request_newline()
    self.state.emit(line, Spacing.PENDING, NodeKind.ERROR.value)
    self.state.request_newline()
