"""
Main Entry Point for the ponyfmt CLI.

This module handles argument parsing and dispatches to command handlers
defined in `ponyfmt.cli.commands`.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from ponyfmt import __version__
from ponyfmt.cli import commands
from ponyfmt.utils.console import set_verbose


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(prog="ponyfmt", description="ponyfmt: Experimental Pony formatter")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: FMT ---
  cmd_fmt = subparsers.add_parser("fmt", help="Format .pony files")
  cmd_fmt.add_argument(
    "paths",
    nargs="*",
    type=Path,
    help="Files or directories to format (default: current directory)",
  )
  mode_group = cmd_fmt.add_mutually_exclusive_group()
  mode_group.add_argument("--write", action="store_true", help="Rewrite files in place")
  mode_group.add_argument(
    "--check",
    action="store_true",
    help="Exit with code 1 if any file would be reformatted",
  )
  cmd_fmt.add_argument("--indent", type=int, default=None, help="Spaces per indent level (default: from toml, else 2)")
  cmd_fmt.add_argument("--jobs", type=int, default=None, help="Worker threads (default: automatic)")

  # --- Command: DEBUG ---
  cmd_debug = subparsers.add_parser("debug", help="Print the syntax tree of a file")
  cmd_debug.add_argument("file", type=Path, help="Pony source file")

  args = parser.parse_args(argv)
  set_verbose(args.verbose)

  if args.command == "fmt":
    return commands.handle_fmt(args.paths, args.write, args.check, args.indent, args.jobs)

  elif args.command == "debug":
    return commands.handle_debug(args.file)

  return 0
