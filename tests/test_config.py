"""
Tests for FormatOptions loading.

Verifies:
1. Defaults.
2. Validation of out-of-range values.
3. Reading ``[tool.ponyfmt]`` from the nearest pyproject.toml.
4. Explicit arguments overriding the file.
5. Unreadable files falling back to defaults.
"""

import pytest
from pydantic import ValidationError

from ponyfmt.config import FormatOptions
from ponyfmt.enums import OutputMode


def write_pyproject(directory, body):
  (directory / "pyproject.toml").write_text(body, encoding="utf-8")


def test_defaults():
  opts = FormatOptions()
  assert opts.indent_width == 2
  assert opts.mode == OutputMode.STDOUT
  assert opts.jobs is None


@pytest.mark.parametrize("kwargs", [{"indent_width": 0}, {"indent_width": -2}, {"jobs": 0}])
def test_out_of_range_values_rejected(kwargs):
  with pytest.raises(ValidationError):
    FormatOptions(**kwargs)


def test_mode_is_case_insensitive():
  assert FormatOptions(mode="WRITE").mode == OutputMode.WRITE


def test_load_reads_tool_section(tmp_path):
  write_pyproject(tmp_path, "[tool.ponyfmt]\nindent_width = 4\njobs = 3\n")
  sub = tmp_path / "src"
  sub.mkdir()
  opts = FormatOptions.load(search_path=sub)
  assert opts.indent_width == 4
  assert opts.jobs == 3


def test_explicit_arguments_win(tmp_path):
  write_pyproject(tmp_path, "[tool.ponyfmt]\nindent_width = 4\n")
  opts = FormatOptions.load(indent_width=8, mode=OutputMode.CHECK, search_path=tmp_path)
  assert opts.indent_width == 8
  assert opts.mode == OutputMode.CHECK


def test_missing_section_uses_defaults(tmp_path):
  write_pyproject(tmp_path, '[project]\nname = "demo"\n')
  opts = FormatOptions.load(search_path=tmp_path)
  assert opts.indent_width == 2


def test_invalid_toml_falls_back(tmp_path):
  write_pyproject(tmp_path, "[tool.ponyfmt\nindent_width = ")
  opts = FormatOptions.load(search_path=tmp_path)
  assert opts.indent_width == 2


def test_invalid_value_in_file_raises(tmp_path):
  write_pyproject(tmp_path, "[tool.ponyfmt]\nindent_width = 0\n")
  with pytest.raises(ValidationError):
    FormatOptions.load(search_path=tmp_path)
