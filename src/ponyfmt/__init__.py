"""
ponyfmt Package.

An experimental source code formatter for the Pony programming language.
Source text is parsed into an error-tolerant syntax tree and printed back in
a canonical layout; malformed regions are kept and reproduced best-effort.

Usage
-----

.. code-block:: python

    import ponyfmt
    print(ponyfmt.format_source('actor Main\\nnew create(env: Env) =>\\nenv.out.print("Hi")'))
    # actor Main
    #   new create(env: Env) =>
    #     env.out.print("Hi")

Engine Usage
^^^^^^^^^^^^

.. code-block:: python

    from ponyfmt import FormatEngine, FormatOptions

    engine = FormatEngine(FormatOptions(indent_width=4))
    res = engine.run(source, path="main.pony")
    if res.success and res.changed:
        print(res.code)
"""

__version__ = "0.1.0"

from ponyfmt.config import FormatOptions
from ponyfmt.core.engine import FormatEngine, format_source
from ponyfmt.core.format_result import FormatResult
from ponyfmt.core.formatter import PonyFormatter, format_tree
from ponyfmt.core.syntax import SyntaxNode, parse
from ponyfmt.enums import OutputMode
from ponyfmt.errors import ParseError

__all__ = [
  "FormatEngine",
  "FormatOptions",
  "FormatResult",
  "OutputMode",
  "ParseError",
  "PonyFormatter",
  "SyntaxNode",
  "format_source",
  "format_tree",
  "parse",
  "__version__",
]
