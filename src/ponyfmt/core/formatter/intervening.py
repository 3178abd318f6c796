"""
Intervening Content Handling.

Source text between two consecutive nodes is normally whitespace, but it
may hold comments the parser left out of the tree. Before each node the
walker hands that text here: comments are written back verbatim and line
breaks around them are kept.
"""

from ponyfmt.core.formatter.base import BaseWalker
from ponyfmt.core.formatter.spacing import Spacing


def _ends_in_line_comment(content: str) -> bool:
  return "//" in content.rsplit("\n", 1)[-1]


class InterveningContentMixin(BaseWalker):
  """
  Mixin overriding ``consume_gap`` to preserve comments and line breaks.
  """

  def consume_gap(self, offset: int) -> None:
    """
    Processes ``source[last_byte:offset]`` exactly once.

    Args:
        offset (int): Start of the node about to be formatted.
    """
    state = self.state
    if offset <= state.last_byte:
      return
    gap = self.source[state.last_byte : offset]
    state.advance(offset)

    content = gap.strip()
    if not content:
      if "\n" in gap and not state.inline_depth and not state.ends_with_whitespace():
        state.request_newline()
      return

    leading = gap[: len(gap) - len(gap.lstrip())]
    trailing = gap[len(gap.rstrip()) :]

    if "\n" in leading:
      state.request_newline()
    else:
      state.request_space()
    state.emit(content, Spacing.PENDING, "comment")

    if _ends_in_line_comment(content):
      state.request_newline(force=True)
    elif "\n" in trailing:
      state.request_newline()
    else:
      state.request_space()
