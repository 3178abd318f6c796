"""
Source File Discovery.

Expands the paths given on the command line into the list of ``.pony``
files to format.
"""

import logging
from pathlib import Path
from typing import Iterable, List

logger = logging.getLogger(__name__)

PONY_SUFFIX = ".pony"


def collect_pony_files(paths: Iterable[Path]) -> List[Path]:
  """
  Expands files and directories into ``.pony`` files.

  Directories are searched recursively and their files sorted. Explicit
  files without the ``.pony`` suffix are skipped, as are paths that do not
  exist. A file reached twice is listed once, at its first position.

  Args:
      paths (Iterable[Path]): Files and directories, in command line order.

  Returns:
      List[Path]: Files to format.
  """
  found: List[Path] = []
  seen = set()

  def add(path: Path) -> None:
    key = path.resolve()
    if key not in seen:
      seen.add(key)
      found.append(path)

  for path in paths:
    if path.is_dir():
      for candidate in sorted(path.rglob(f"*{PONY_SUFFIX}")):
        if candidate.is_file():
          add(candidate)
    elif path.is_file():
      if path.suffix == PONY_SUFFIX:
        add(path)
      else:
        logger.debug("Skipping non-Pony file %s", path)
    else:
      logger.warning("Path not found: %s", path)

  return found
