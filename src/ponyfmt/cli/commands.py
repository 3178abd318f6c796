"""
CLI Command Handlers Facade.

Re-exports handlers from `ponyfmt.cli.handlers` so the dispatcher and tests
have one module to import from and patch.
"""

from ponyfmt.cli.handlers.debug import handle_debug
from ponyfmt.cli.handlers.fmt import handle_fmt

__all__ = ["handle_debug", "handle_fmt"]
