"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- A recording console fixture for asserting on log output.
"""

import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add src to path so we can import 'ponyfmt' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from ponyfmt.utils.console import reset_console, set_console  # noqa: E402


@pytest.fixture
def recording_console():
  """
  Routes all ponyfmt diagnostics to an in-memory console for the test.

  Yields:
      Console: The recording console; use ``export_text()`` to read it.
  """
  capture = Console(record=True, width=200)
  set_console(capture)
  yield capture
  reset_console()
