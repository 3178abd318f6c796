"""
Orchestration Engine for Formatting.

This module provides the `FormatEngine`, the driver used by the CLI and by
library callers. A run consists of:

1.  **Parsing**: Source text into a ``SyntaxNode`` tree. Malformed code is
    kept as ``ERROR`` regions; only unusable input fails.
2.  **Printing**: The tree through ``PonyFormatter``.
3.  **Reporting**: Packaging the output, whether it changed, and warnings
    about malformed regions into a ``FormatResult``.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ponyfmt.config import FormatOptions
from ponyfmt.core.format_result import FormatResult
from ponyfmt.core.formatter import format_tree
from ponyfmt.core.syntax import SyntaxNode, parse
from ponyfmt.errors import ParseError

logger = logging.getLogger(__name__)


class FormatEngine:
  """
  Formats Pony source text according to a set of options.
  """

  def __init__(self, options: Optional[FormatOptions] = None):
    """
    Initializes the engine.

    Args:
        options: Formatting options. Defaults are used when omitted.
    """
    self.options = options or FormatOptions()

  def parse(self, code: str) -> SyntaxNode:
    """
    Parses source text.

    Raises:
        ParseError: If the text cannot be parsed at all.
    """
    return parse(code)

  def run(self, code: str, path: Optional[Union[str, Path]] = None) -> FormatResult:
    """
    Formats one source text.

    Args:
        code (str): Complete source text.
        path (Optional[Union[str, Path]]): Origin of the text, for reporting.

    Returns:
        FormatResult: Output and diagnostics. ``success`` is False only when
        the text could not be parsed or is nested too deeply to print.
    """
    label = str(path) if path is not None else None
    try:
      tree = self.parse(code)
      formatted = format_tree(tree, code, self.options)
    except ParseError as e:
      return FormatResult(path=label, code=code, success=False, errors=[f"Parse error: {e}"])

    warnings = []
    regions = sum(1 for _ in tree.error_regions())
    if regions:
      where = label or "<source>"
      logger.debug("%s: %d malformed region(s)", where, regions)
      warnings.append(f"{regions} malformed region(s) formatted best-effort")

    return FormatResult(path=label, code=formatted, changed=formatted != code, warnings=warnings)


def format_source(source: str, options: Optional[FormatOptions] = None) -> str:
  """
  Formats Pony source text.

  Args:
      source (str): Complete source text.
      options (Optional[FormatOptions]): Layout options; default indent is 2.

  Returns:
      str: The formatted text, ending in exactly one newline.

  Raises:
      ParseError: If the text cannot be parsed or printed at all.
  """
  return format_tree(parse(source), source, options)
