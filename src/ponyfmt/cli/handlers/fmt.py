"""
Fmt Command Handler.

This module implements the logic for the `ponyfmt fmt` command:
1. Configuration loading (pyproject.toml merged with CLI flags).
2. Expansion of paths into ``.pony`` files.
3. Formatting every file on a thread pool, independently.
4. Output per mode: print, rewrite changed files, or report differences.

A file that cannot be read or parsed is reported and skipped; the rest of
the batch still runs.
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError
from rich.table import Table

from ponyfmt.config import FormatOptions
from ponyfmt.core.engine import FormatEngine
from ponyfmt.core.format_result import FormatResult
from ponyfmt.enums import OutputMode
from ponyfmt.utils.console import console, log_error, log_info, log_success, log_warning
from ponyfmt.utils.files import collect_pony_files


def handle_fmt(
  paths: List[Path],
  write: bool = False,
  check: bool = False,
  indent: Optional[int] = None,
  jobs: Optional[int] = None,
) -> int:
  """
  Handles the 'fmt' command execution.

  Args:
      paths (List[Path]): Files or directories; the current directory if empty.
      write (bool): Rewrite changed files in place.
      check (bool): Only report files that would change.
      indent (Optional[int]): Indent width override.
      jobs (Optional[int]): Worker thread override.

  Returns:
      int: 1 if check mode found a difference or any file failed, else 0.
  """
  if write and check:
    log_error("--write and --check cannot be combined")
    return 2

  mode = OutputMode.WRITE if write else OutputMode.CHECK if check else OutputMode.STDOUT
  targets = list(paths) or [Path(".")]

  search_root = targets[0] if targets[0].is_dir() else targets[0].parent
  try:
    options = FormatOptions.load(indent_width=indent, mode=mode, jobs=jobs, search_path=search_root)
  except ValidationError as e:
    log_error(f"Invalid configuration: {e}")
    return 2

  files = collect_pony_files(targets)
  if not files:
    log_warning("No .pony files found.")
    return 0

  engine = FormatEngine(options)
  with ThreadPoolExecutor(max_workers=options.jobs) as pool:
    results = list(pool.map(lambda p: _format_single_file(p, engine), files))

  changed = 0
  for path, result in zip(files, results):
    if not result.success:
      continue
    for warning in result.warnings:
      log_warning(f"{path}: {warning}")

    if mode == OutputMode.STDOUT:
      print(f"===== {path} =====")
      print(result.code, end="")
    elif result.changed:
      changed += 1
      if mode == OutputMode.WRITE:
        _write_result(path, result)
      else:
        log_warning(f"Would reformat [path]{path}[/path]")

  failures = [r for r in results if not r.success]
  if failures:
    _print_failure_summary(failures)

  if mode == OutputMode.WRITE:
    log_info(f"{changed} of {len(files)} file(s) reformatted.")
  elif mode == OutputMode.CHECK:
    if changed:
      log_warning(f"{changed} of {len(files)} file(s) would be reformatted.")
      return 1
    log_success(f"All {len(files)} file(s) are formatted.")

  return 1 if failures else 0


def _format_single_file(path: Path, engine: FormatEngine) -> FormatResult:
  """
  Reads and formats one file. Never raises.

  Args:
      path (Path): File to format.
      engine (FormatEngine): Shared engine; stateless between runs.

  Returns:
      FormatResult: Result, with ``success`` False on read or parse failure.
  """
  try:
    code = path.read_text(encoding="utf-8")
  except (OSError, UnicodeDecodeError) as e:
    return FormatResult(path=str(path), success=False, errors=[f"Failed to read: {e}"])
  try:
    return engine.run(code, path)
  except Exception as e:
    log_error(f"Failed to format {path}: {e}")
    return FormatResult(path=str(path), success=False, errors=[str(e)])


def _write_result(path: Path, result: FormatResult) -> None:
  try:
    path.write_text(result.code, encoding="utf-8")
  except OSError as e:
    result.success = False
    result.errors.append(f"Failed to write: {e}")
    return
  log_success(f"Formatted [path]{path}[/path]")


def _print_failure_summary(failures: List[FormatResult]) -> None:
  """
  Renders a table of files that could not be formatted.

  Args:
      failures: Results with ``success`` False.
  """
  table = Table(title="Files Not Formatted")
  table.add_column("File", style="cyan")
  table.add_column("Issues", style="red")
  for res in failures:
    table.add_row(res.path or "<unknown>", "; ".join(res.errors) or "Unknown Error")
  console.print(table)
  log_error(f"{len(failures)} file(s) could not be formatted.")
