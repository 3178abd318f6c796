"""
Tests for .pony file discovery.
"""

from ponyfmt.utils.files import collect_pony_files


def make(path, text="actor Main\n"):
  path.parent.mkdir(parents=True, exist_ok=True)
  path.write_text(text, encoding="utf-8")
  return path


def test_directories_are_searched_recursively(tmp_path):
  b = make(tmp_path / "b.pony")
  a = make(tmp_path / "pkg" / "a.pony")
  make(tmp_path / "notes.txt")
  assert collect_pony_files([tmp_path]) == sorted([a, b])


def test_explicit_non_pony_file_is_skipped(tmp_path):
  txt = make(tmp_path / "notes.txt")
  assert collect_pony_files([txt]) == []


def test_duplicates_keep_first_position(tmp_path):
  a = make(tmp_path / "a.pony")
  b = make(tmp_path / "b.pony")
  assert collect_pony_files([b, tmp_path, a]) == [b, a]


def test_missing_path_is_skipped(tmp_path, caplog):
  a = make(tmp_path / "a.pony")
  assert collect_pony_files([tmp_path / "missing.pony", a]) == [a]
  assert "Path not found" in caplog.text
