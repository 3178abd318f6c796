"""
Tests for the 'fmt' command handler.

Verifies:
1. Stdout mode prints formatted code only.
2. Check mode reports files without touching them.
3. Write mode rewrites only files that change.
4. A broken file is reported without aborting the batch.
"""

from unittest.mock import patch

from ponyfmt.cli.__main__ import main
from ponyfmt.cli.handlers.fmt import handle_fmt

MESSY = "actor Main\nnew create(env: Env) =>\nenv.out.print(\"Hi\")\n"
CLEAN = "actor Main\n  new create(env: Env) =>\n    env.out.print(\"Hi\")\n"


def test_stdout_mode_prints_code(tmp_path, capsys):
  f = tmp_path / "main.pony"
  f.write_text(MESSY, encoding="utf-8")

  assert handle_fmt([f]) == 0

  out = capsys.readouterr().out
  assert out == f"===== {f} =====\n{CLEAN}"
  assert f.read_text(encoding="utf-8") == MESSY


def test_check_mode_detects_changes(tmp_path, recording_console):
  (tmp_path / "messy.pony").write_text(MESSY, encoding="utf-8")
  (tmp_path / "clean.pony").write_text(CLEAN, encoding="utf-8")

  assert main(["fmt", "--check", str(tmp_path)]) == 1

  log = recording_console.export_text()
  assert "Would reformat" in log
  assert "messy.pony" in log
  assert "clean.pony" not in log
  assert (tmp_path / "messy.pony").read_text(encoding="utf-8") == MESSY


def test_check_mode_passes_on_clean_tree(tmp_path, recording_console):
  (tmp_path / "clean.pony").write_text(CLEAN, encoding="utf-8")
  assert handle_fmt([tmp_path], check=True) == 0
  assert "are formatted" in recording_console.export_text()


def test_write_mode_rewrites_changed_files(tmp_path, recording_console):
  messy = tmp_path / "messy.pony"
  clean = tmp_path / "clean.pony"
  messy.write_text(MESSY, encoding="utf-8")
  clean.write_text(CLEAN, encoding="utf-8")
  clean_mtime = clean.stat().st_mtime_ns

  assert handle_fmt([tmp_path], write=True) == 0

  assert messy.read_text(encoding="utf-8") == CLEAN
  assert clean.stat().st_mtime_ns == clean_mtime
  assert "1 of 2 file(s) reformatted" in recording_console.export_text()


def test_indent_override(tmp_path, capsys):
  f = tmp_path / "main.pony"
  f.write_text("if a then\nb\nend\n", encoding="utf-8")
  assert handle_fmt([f], indent=4) == 0
  assert capsys.readouterr().out.endswith("if a then\n    b\nend\n")


def test_broken_file_does_not_abort_batch(tmp_path, recording_console):
  bad = tmp_path / "a_bad.pony"
  good = tmp_path / "b_good.pony"
  bad.write_text("actor Main\x00", encoding="utf-8")
  good.write_text(MESSY, encoding="utf-8")

  assert handle_fmt([tmp_path], write=True, jobs=2) == 1

  assert good.read_text(encoding="utf-8") == CLEAN
  log = recording_console.export_text()
  assert "Files Not Formatted" in log
  assert "a_bad.pony" in log


def test_no_files_found(tmp_path, recording_console):
  assert handle_fmt([tmp_path]) == 0
  assert "No .pony files found" in recording_console.export_text()


def test_write_and_check_rejected(tmp_path, recording_console):
  assert handle_fmt([tmp_path], write=True, check=True) == 2


def test_invalid_indent_is_usage_error(tmp_path, recording_console):
  (tmp_path / "main.pony").write_text(CLEAN, encoding="utf-8")
  assert handle_fmt([tmp_path], indent=0) == 2
  assert "Invalid configuration" in recording_console.export_text()


def test_deeply_nested_file_does_not_abort_batch(tmp_path, recording_console):
  (tmp_path / "a_deep.pony").write_text("x = " + "-" * 600 + "a", encoding="utf-8")
  (tmp_path / "b_clean.pony").write_text(CLEAN, encoding="utf-8")

  assert handle_fmt([tmp_path], check=True) == 1

  log = recording_console.export_text()
  assert "a_deep.pony" in log
  assert "nested too deeply" in log


def test_unexpected_engine_failure_is_reported(tmp_path, recording_console):
  f = tmp_path / "main.pony"
  f.write_text(CLEAN, encoding="utf-8")

  with patch("ponyfmt.cli.handlers.fmt.FormatEngine.run", side_effect=RuntimeError("boom")):
    assert handle_fmt([f], check=True) == 1

  log = recording_console.export_text()
  assert "Failed to format" in log
  assert "Files Not Formatted" in log
