"""
Error types raised by ponyfmt.

Malformed Pony code is never an error: the parser wraps unparseable regions
in ``ERROR`` nodes and the formatter reproduces them best-effort. Only input
that cannot be treated as Pony text at all raises.
"""


class ParseError(ValueError):
  """
  Raised when source text cannot be parsed into a syntax tree.

  This covers input that is not Pony text (e.g. binary data containing NUL
  bytes) and input nested deeply enough to exhaust the interpreter stack.
  """
