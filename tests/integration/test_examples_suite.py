"""
Integration Tests for Example Files.

Each ``<name>.input.pony`` in tests/examples is formatted and compared with
its ``<name>.expected.pony`` counterpart. The expected files must also be
fixed points of the formatter.
"""

from pathlib import Path

import pytest

from ponyfmt import FormatEngine

# Resolve path relative to this test file
EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


def _load_cases():
  """Discover input/expected pairs in tests/examples/"""
  if not EXAMPLES_DIR.exists():
    return []
  # Sort for deterministic order
  return sorted(EXAMPLES_DIR.glob("*.input.pony"))


def _expected_for(input_path: Path) -> Path:
  return input_path.with_name(input_path.name.replace(".input.pony", ".expected.pony"))


@pytest.mark.parametrize("input_path", _load_cases(), ids=lambda p: p.name.split(".")[0])
def test_example_formats_to_expected(input_path):
  engine = FormatEngine()
  source = input_path.read_text(encoding="utf-8")
  expected = _expected_for(input_path).read_text(encoding="utf-8")

  res = engine.run(source, path=input_path)

  assert res.success, res.errors
  assert res.warnings == []
  assert res.code == expected


@pytest.mark.parametrize("input_path", _load_cases(), ids=lambda p: p.name.split(".")[0])
def test_expected_output_is_stable(input_path):
  expected = _expected_for(input_path).read_text(encoding="utf-8")
  res = FormatEngine().run(expected)
  assert not res.changed
