"""
Formatter Package.

This package provides the `PonyFormatter` class, composed of several mixins
handling specific aspects of layout:
- Structure: Top-level items and type bodies.
- StructureFunc: Method signatures and ``=>`` bodies.
- ControlFlow: Compound statements and blocks.
- Calls: Argument lists and inline expressions.
- Intervening: Comments and line breaks found between nodes.
- ErrorRecovery: Malformed regions.
"""

from typing import Optional

from ponyfmt.config import FormatOptions
from ponyfmt.core.formatter.base import BaseWalker
from ponyfmt.core.formatter.calls import CallMixin
from ponyfmt.core.formatter.control_flow import ControlFlowMixin
from ponyfmt.core.formatter.intervening import InterveningContentMixin
from ponyfmt.core.formatter.recovery import ErrorRecoveryMixin
from ponyfmt.core.formatter.structure import StructureMixin
from ponyfmt.core.syntax.nodes import SyntaxNode
from ponyfmt.errors import ParseError


class PonyFormatter(
  ErrorRecoveryMixin,
  InterveningContentMixin,
  ControlFlowMixin,
  CallMixin,
  StructureMixin,
  BaseWalker,
):
  """
  The tree printer for ponyfmt.

  Inherits its rules from the Mixins and the traversal from ``BaseWalker``.
  One instance formats one tree; create a new one per file.
  """

  pass


def format_tree(tree: SyntaxNode, source: str, options: Optional[FormatOptions] = None) -> str:
  """
  Prints a syntax tree in canonical layout.

  Never raises for any tree whose offsets refer to ``source``, including
  trees with ``ERROR`` nodes or unknown node kinds, as long as their depth
  stays within the interpreter recursion limit.

  Args:
      tree (SyntaxNode): Root of the tree, normally ``source_file``.
      source (str): The text the tree was parsed from.
      options (Optional[FormatOptions]): Layout options (indent width).

  Returns:
      str: Formatted text ending in exactly one newline.

  Raises:
      ParseError: If the tree is nested deeper than the walker can recurse.
  """
  try:
    return PonyFormatter(source, options).format(tree)
  except RecursionError as e:
    raise ParseError("Source is nested too deeply to format") from e


__all__ = ["PonyFormatter", "format_tree"]
