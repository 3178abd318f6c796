"""
Formatter Output State.

Holds the output buffer and the deferred-whitespace bookkeeping. Nothing is
written eagerly between tokens: rules *request* a space or newline and the
request is resolved by the next ``emit``, where a newline request always
wins over a space request. All indentation changes made by structural rules
go through ``indented`` so they are undone even when a rule exits early.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from ponyfmt.core.formatter.spacing import Spacing


@dataclass
class FormatterState:
  """
  Mutable state of one formatting pass.

  Attributes:
      output (str): Text produced so far.
      indent_level (int): Current nesting depth, never negative.
      indent_width (int): Spaces per indent level.
      needs_newline (int): Pending newlines (0, 1 or 2).
      needs_space (bool): Whether a single space is pending.
      last_byte (int): Source offset up to which input has been consumed.
      last_kind (Optional[str]): Kind of the most recently emitted token.
      in_conditional_context (bool): Set while recovering an unterminated ``if``.
      conditional_base_indent (Optional[int]): Indent to restore at the matching ``end``.
      inline_depth (int): >0 while rendering a construct that must stay on one line.
      glue_next (bool): Suppress the separator before the next token.
  """

  indent_width: int = 2
  output: str = ""
  indent_level: int = 0
  needs_newline: int = 0
  needs_space: bool = False
  last_byte: int = 0
  last_kind: Optional[str] = None
  in_conditional_context: bool = False
  conditional_base_indent: Optional[int] = None
  inline_depth: int = 0
  glue_next: bool = False

  @property
  def last_char(self) -> Optional[str]:
    return self.output[-1] if self.output else None

  def at_line_start(self) -> bool:
    return not self.output or self.output.endswith("\n")

  def ends_with_whitespace(self) -> bool:
    return bool(self.output) and self.output[-1] in " \n"

  def request_space(self) -> None:
    """Requests a single space before the next token unless a newline is pending."""
    if not self.needs_newline:
      self.needs_space = True

  def request_newline(self, count: int = 1, force: bool = False) -> None:
    """
    Requests ``count`` line breaks before the next token.

    Inside an inline region the request degrades to a space, unless
    ``force`` is set (used after line comments, which cannot share a line).

    Args:
        count (int): 1 for a line break, 2 for a blank line.
        force (bool): Honour the request even in inline mode.
    """
    if self.inline_depth and not force:
      self.request_space()
      return
    self.needs_newline = max(self.needs_newline, min(count, 2))
    self.needs_space = False

  def advance(self, offset: int) -> None:
    """Marks source text up to ``offset`` as consumed. Never moves backwards."""
    if offset > self.last_byte:
      self.last_byte = offset

  def emit(self, text: str, spacing: Spacing = Spacing.PENDING, kind: Optional[str] = None) -> None:
    """
    Resolves pending whitespace and appends ``text``.

    Args:
        text (str): Token or verbatim fragment to write. Empty text is ignored.
        spacing (Spacing): Separator decision for this token.
        kind (Optional[str]): Node kind recorded as ``last_kind``.
    """
    if not text:
      return

    if spacing == Spacing.NEWLINE:
      self.request_newline()
    if self.glue_next:
      self.glue_next = False
      if spacing != Spacing.NEWLINE:
        spacing = Spacing.NONE

    if self.needs_newline and self.output:
      trailing = len(self.output) - len(self.output.rstrip("\n"))
      missing = self.needs_newline - trailing
      if missing > 0:
        self.output += "\n" * missing
    elif not self.at_line_start():
      if spacing == Spacing.SPACE or (spacing == Spacing.PENDING and self.needs_space):
        self.output += " "

    self.needs_newline = 0
    self.needs_space = False

    if self.at_line_start():
      self.output += " " * (self.indent_level * self.indent_width)
    self.output += text
    self.last_kind = kind

  @contextmanager
  def indented(self, levels: int = 1) -> Iterator[None]:
    """
    Increases indentation for the duration of the block.

    Indent level and conditional-recovery state are restored on exit, so
    an unterminated construct inside cannot leak indentation outward.
    """
    saved = (self.indent_level, self.conditional_base_indent, self.in_conditional_context)
    self.indent_level += levels
    try:
      yield
    finally:
      self.indent_level, self.conditional_base_indent, self.in_conditional_context = saved

  @contextmanager
  def inline(self) -> Iterator[None]:
    """Keeps everything emitted in the block on the current line."""
    self.inline_depth += 1
    try:
      yield
    finally:
      self.inline_depth -= 1

  def reset_indent(self) -> None:
    """Returns to column zero and clears conditional recovery state."""
    self.indent_level = 0
    self.conditional_base_indent = None
    self.in_conditional_context = False

  def arm_conditional(self) -> None:
    """Remembers the current indent as the base to restore at ``end``."""
    self.in_conditional_context = True
    if self.conditional_base_indent is None:
      self.conditional_base_indent = self.indent_level

  def open_conditional(self) -> None:
    """Starts the body of an unterminated conditional one level deeper."""
    self.arm_conditional()
    self.indent_level += 1

  def close_conditional(self) -> None:
    """Ends a recovered conditional body, restoring the saved indent if any."""
    if self.conditional_base_indent is not None:
      self.indent_level = self.conditional_base_indent
    else:
      self.indent_level = max(0, self.indent_level - 1)
    self.conditional_base_indent = None
    self.in_conditional_context = False

  def restore_conditional_base(self) -> None:
    """Applies and clears a saved conditional base indent, if one exists."""
    if self.conditional_base_indent is not None:
      self.indent_level = self.conditional_base_indent
      self.conditional_base_indent = None
      self.in_conditional_context = False

  def result(self) -> str:
    """
    Returns the finished text: trailing whitespace removed, one final newline.
    """
    return self.output.rstrip() + "\n"
