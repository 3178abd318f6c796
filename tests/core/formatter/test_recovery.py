"""
Tests for printing malformed regions and unusual trees.
"""

import pytest

from ponyfmt import FormatEngine, format_source, format_tree
from ponyfmt.core.formatter.base import BaseWalker
from ponyfmt.core.syntax.nodes import NodeKind, SyntaxNode


def test_unterminated_if_is_indented():
  assert format_source("if cond then\nbody") == "if cond then\n  body\n"


def test_unterminated_if_inside_method():
  source = "actor Main\n  fun a() =>\n    if x then\n      foo()\n  fun b() => None\n"
  assert format_source(source) == source


def test_stray_end_is_kept():
  source = "if a then\nfoo()\nend\nend\n"
  assert format_source(source) == "if a then\n  foo()\nend\nend\n"


def test_error_node_ending_in_end():
  source = "foo()\nend"
  tree = SyntaxNode("source_file", 0, len(source), (SyntaxNode("ERROR", 0, len(source)),))
  assert format_tree(tree, source) == "foo()\nend\n"


def test_error_inside_inline_construct_is_flattened():
  source = "use x\n  y"
  use = SyntaxNode("use_statement", 0, 9, (SyntaxNode("use", 0, 3), SyntaxNode("ERROR", 4, 9)))
  tree = SyntaxNode("source_file", 0, 9, (use,))
  assert format_tree(tree, source) == "use x y\n"


def test_unknown_kinds_use_generic_walk():
  source = "a b"
  tree = SyntaxNode("weird", 0, 3, (SyntaxNode("mystery", 0, 1), SyntaxNode("identifier", 2, 3)))
  assert format_tree(tree, source) == "a b\n"


def test_engine_reports_malformed_regions():
  source = "actor Main\n  fun a() =>\n    if x then\n      foo()\n  fun b() => None\n"
  result = FormatEngine().run(source)
  assert result.success
  assert not result.changed
  assert len(result.warnings) == 1


class _DeepeningWalker(BaseWalker):
  """Walker whose blocks push the indent two levels and never pop it."""

  def _build_dispatch(self):
    return {NodeKind.BLOCK: self._open_block}

  def _open_block(self, node):
    self.state.indent_level += 2
    self.visit_children(node)


def _then_block_end(*leading):
  source = "a then\nb\nend"
  body = SyntaxNode("block", 7, 8, (SyntaxNode("identifier", 7, 8),))
  children = leading + (SyntaxNode("then", 2, 6), body, SyntaxNode("end", 9, 12))
  return source, SyntaxNode("weird", 0, len(source), children)


def test_end_restores_indent_saved_at_then():
  source, root = _then_block_end(SyntaxNode("ERROR", 0, 1))
  walker = _DeepeningWalker(source)
  assert walker.format(root) == "a then b\nend\n"
  assert walker.state.indent_level == 0
  assert walker.state.conditional_base_indent is None
  assert not walker.state.in_conditional_context


def test_then_without_error_sibling_saves_nothing():
  source, root = _then_block_end(SyntaxNode("identifier", 0, 1))
  walker = _DeepeningWalker(source)
  assert walker.format(root) == "a then b\n    end\n"
  assert walker.state.indent_level == 2


@pytest.mark.parametrize(
  "kind, text",
  [
    ("else", "else"),  # construct keyword
    ("let", "let"),  # keyword that requests a space after itself
    ("boolean", "true"),
    ("capability", "iso"),
    ("identifier", "x"),
    ("number", "1"),
    ("string", '"s"'),
    (")", ")"),
    ("line_comment", "// c"),
  ],
)
def test_end_leaf_starts_its_own_line(kind, text):
  source = f"{text} end"
  leaves = (SyntaxNode(kind, 0, len(text)), SyntaxNode("end", len(text) + 1, len(source)))
  root = SyntaxNode("weird", 0, len(source), leaves)
  assert BaseWalker(source).format(root) == f"{text}\nend\n"


@pytest.mark.parametrize("opening", ["(", "["])
def test_end_leaf_after_opening_bracket_is_glued(opening):
  source = f"{opening}end"
  root = SyntaxNode("weird", 0, len(source), (SyntaxNode(opening, 0, 1), SyntaxNode("end", 1, len(source))))
  assert BaseWalker(source).format(root) == f"{opening}end\n"
