"""
Tests for the top-level blank line table.
"""

import pytest

from ponyfmt import format_source
from ponyfmt.core.formatter.structure import needs_blank_line
from ponyfmt.core.syntax.nodes import NodeKind as K


@pytest.mark.parametrize(
  "previous, current, expected",
  [
    (K.USE_STATEMENT, K.USE_STATEMENT, False),
    (K.USE_STATEMENT, K.ACTOR_DEFINITION, True),
    (K.USE_STATEMENT, K.LINE_COMMENT, False),
    (K.PRIMITIVE_DEFINITION, K.PRIMITIVE_DEFINITION, False),
    (K.PRIMITIVE_DEFINITION, K.TYPE_ALIAS, True),
    (K.PRIMITIVE_DEFINITION, K.LINE_COMMENT, False),
    (K.TYPE_ALIAS, K.TYPE_ALIAS, False),
    (K.TRAIT_DEFINITION, K.TRAIT_DEFINITION, True),
    (K.TRAIT_DEFINITION, K.LINE_COMMENT, False),
    (K.CLASS_DEFINITION, K.CLASS_DEFINITION, True),
    (K.CLASS_DEFINITION, K.LINE_COMMENT, True),
    (K.ACTOR_DEFINITION, K.PRIMITIVE_DEFINITION, True),
    (K.BLOCK_COMMENT, K.USE_STATEMENT, True),
    (K.BLOCK_COMMENT, K.LINE_COMMENT, False),
    (K.LINE_COMMENT, K.CLASS_DEFINITION, False),
    (K.LINE_COMMENT, K.LINE_COMMENT, False),
  ],
)
def test_blank_line_table(previous, current, expected):
  assert needs_blank_line(previous, current) is expected


def test_layout_of_mixed_file():
  source = 'use "a"\ntrait A\ntrait B\nprimitive P\nprimitive Q\n// note\nactor Main\n'
  expected = 'use "a"\n\ntrait A\n\ntrait B\n\nprimitive P\nprimitive Q\n// note\nactor Main\n'
  assert format_source(source) == expected
