"""
Runtime Configuration Store.

Formatting options are resolved from three layers, later ones winning:
built-in defaults, the ``[tool.ponyfmt]`` table of the nearest
``pyproject.toml``, and explicit command line arguments.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from ponyfmt.enums import OutputMode

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

logger = logging.getLogger(__name__)

CONFIG_SECTION = "ponyfmt"


class FormatOptions(BaseModel):
  """
  Configuration container for a formatting run.
  """

  indent_width: int = Field(2, gt=0, description="Spaces per indentation level.")
  mode: OutputMode = Field(OutputMode.STDOUT, description="Where formatted output goes.")
  jobs: Optional[int] = Field(None, gt=0, description="Worker threads for batch runs. None picks a default.")

  @field_validator("mode", mode="before")
  @classmethod
  def validate_mode(cls, v: Any) -> Any:
    """
    Accepts output mode names case-insensitively.

    Args:
        v (Any): Raw value, an ``OutputMode`` or its name.

    Returns:
        Any: The normalised value for enum coercion.
    """
    if isinstance(v, str):
      return v.lower().strip()
    return v

  @classmethod
  def load(
    cls,
    indent_width: Optional[int] = None,
    mode: Optional[OutputMode] = None,
    jobs: Optional[int] = None,
    search_path: Optional[Path] = None,
  ) -> "FormatOptions":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        indent_width (Optional[int]): Override for the indent width.
        mode (Optional[OutputMode]): Output mode; not read from TOML.
        jobs (Optional[int]): Override for the worker count.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        FormatOptions: The fully resolved configuration object.

    Raises:
        pydantic.ValidationError: If a resolved value is out of range.
    """
    start_dir = search_path or Path.cwd()
    toml_config, toml_dir = _load_toml_settings(start_dir)
    if toml_dir:
      logger.debug("Using [tool.%s] from %s", CONFIG_SECTION, toml_dir / "pyproject.toml")

    final_indent = indent_width if indent_width is not None else toml_config.get("indent_width", 2)
    final_jobs = jobs if jobs is not None else toml_config.get("jobs")

    return cls(
      indent_width=final_indent,
      mode=mode or OutputMode.STDOUT,
      jobs=final_jobs,
    )


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches ``start_path`` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()
  if current.is_file():
    current = current.parent

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring unreadable %s: %s", toml_path, e)
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get(CONFIG_SECTION, {}), parent

  return {}, None
