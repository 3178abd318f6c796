"""
Tests for the FormatEngine driver.
"""

import pytest

from ponyfmt import FormatEngine, FormatOptions, ParseError, format_source


def test_run_reports_change():
  res = FormatEngine().run("x=1", path="a.pony")
  assert res.success
  assert res.changed
  assert res.code == "x = 1\n"
  assert res.path == "a.pony"
  assert res.warnings == []


def test_run_on_formatted_code_is_unchanged():
  res = FormatEngine().run("x = 1\n")
  assert not res.changed
  assert res.path is None


def test_run_uses_options():
  engine = FormatEngine(FormatOptions(indent_width=3))
  res = engine.run("if a then\nb\nend")
  assert res.code == "if a then\n   b\nend\n"


def test_parse_failure_is_captured():
  res = FormatEngine().run("actor\x00")
  assert not res.success
  assert res.has_errors
  assert res.errors[0].startswith("Parse error:")
  assert res.code == "actor\x00"


def test_format_source_raises_on_fatal_input():
  with pytest.raises(ParseError):
    format_source("\x00")


def test_malformed_regions_are_warnings():
  res = FormatEngine().run("if cond then\nbody")
  assert res.success
  assert res.code == "if cond then\n  body\n"
  assert res.warnings == ["1 malformed region(s) formatted best-effort"]


DEEP_UNARY = "x = " + "-" * 600 + "a"


def test_deep_nesting_is_captured():
  res = FormatEngine().run(DEEP_UNARY)
  assert not res.success
  assert "nested too deeply" in res.errors[0]
  assert res.code == DEEP_UNARY


def test_format_source_raises_parse_error_on_deep_nesting():
  with pytest.raises(ParseError):
    format_source(DEEP_UNARY)
