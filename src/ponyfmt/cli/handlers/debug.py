"""
Debug Command Handler.

Prints the syntax tree of one file to stdout, to inspect what the parser
made of it (including ``ERROR`` regions).
"""

from pathlib import Path

from rich.console import Console

from ponyfmt.core.syntax import parse
from ponyfmt.errors import ParseError
from ponyfmt.utils.console import log_error
from ponyfmt.utils.visualizer import TreeVisualizer


def handle_debug(path: Path) -> int:
  """
  Handles the 'debug' command execution.

  Args:
      path (Path): File to parse.

  Returns:
      int: 0 on success, 1 if the file cannot be read or parsed.
  """
  try:
    source = path.read_text(encoding="utf-8")
  except (OSError, UnicodeDecodeError) as e:
    log_error(f"Failed to read {path}: {e}")
    return 1

  try:
    tree = parse(source)
  except ParseError as e:
    log_error(f"Failed to parse {path}: {e}")
    return 1

  Console().print(TreeVisualizer(source).build(tree))
  return 0
