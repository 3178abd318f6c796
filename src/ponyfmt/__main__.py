"""
Entry point for module execution (``python -m ponyfmt``).
"""

import sys

from ponyfmt.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
