"""
Enumerations for ponyfmt.
"""

from enum import Enum


class OutputMode(str, Enum):
  """
  Destination of formatted output for a batch run.
  """

  STDOUT = "stdout"  # print each file under a header
  WRITE = "write"  # rewrite changed files in place
  CHECK = "check"  # report differences, exit non-zero if any
