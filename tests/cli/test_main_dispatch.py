"""
Tests for CLI argument parsing and dispatch.
"""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from ponyfmt import __version__
from ponyfmt.cli.__main__ import main
from ponyfmt.utils.console import set_verbose


def test_fmt_dispatch_defaults():
  with patch("ponyfmt.cli.commands.handle_fmt", return_value=0) as mock_fmt:
    assert main(["fmt"]) == 0
  mock_fmt.assert_called_once_with([], False, False, None, None)


def test_fmt_dispatch_with_options():
  with patch("ponyfmt.cli.commands.handle_fmt", return_value=1) as mock_fmt:
    ret = main(["fmt", "src", "main.pony", "--check", "--indent", "4", "--jobs", "2"])
  assert ret == 1
  mock_fmt.assert_called_once_with([Path("src"), Path("main.pony")], False, True, 4, 2)


def test_write_and_check_are_exclusive():
  with patch("ponyfmt.cli.commands.handle_fmt") as mock_fmt:
    with pytest.raises(SystemExit) as exc:
      main(["fmt", "--write", "--check"])
  assert exc.value.code == 2
  mock_fmt.assert_not_called()


def test_debug_dispatch():
  with patch("ponyfmt.cli.commands.handle_debug", return_value=0) as mock_debug:
    assert main(["debug", "a.pony"]) == 0
  mock_debug.assert_called_once_with(Path("a.pony"))


def test_command_is_required():
  with pytest.raises(SystemExit) as exc:
    main([])
  assert exc.value.code == 2


def test_version(capsys):
  with pytest.raises(SystemExit) as exc:
    main(["--version"])
  assert exc.value.code == 0
  assert __version__ in capsys.readouterr().out


def test_verbose_flag_enables_debug():
  with patch("ponyfmt.cli.commands.handle_fmt", return_value=0):
    main(["-v", "fmt"])
  try:
    assert logging.getLogger().level == logging.DEBUG
  finally:
    set_verbose(False)
