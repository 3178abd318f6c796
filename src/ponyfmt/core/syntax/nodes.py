"""
Pony Syntax Tree Nodes.

The tree is concrete: every significant token of the source is a leaf, and
branches group leaves by grammatical role. Nodes are immutable and carry
half-open character offsets ``[start, end)`` into the source they came from,
so formatting is always a function of ``(tree, source)``.
"""

from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import Iterator, Tuple


class NodeKind(str, Enum):
  """
  Node kinds the formatter assigns behaviour to.

  Keyword and operator leaves use their literal text as kind and are not
  listed; any kind not listed here maps to ``OTHER`` through ``NodeKind.of``.
  """

  SOURCE_FILE = "source_file"
  USE_STATEMENT = "use_statement"
  TYPE_ALIAS = "type_alias"
  ACTOR_DEFINITION = "actor_definition"
  CLASS_DEFINITION = "class_definition"
  PRIMITIVE_DEFINITION = "primitive_definition"
  TRAIT_DEFINITION = "trait_definition"
  INTERFACE_DEFINITION = "interface_definition"
  STRUCT_DEFINITION = "struct_definition"
  MEMBERS = "members"
  FIELD = "field"
  CONSTRUCTOR = "constructor"
  METHOD = "method"
  BEHAVIOR = "behavior"
  PARAMETERS = "parameters"
  PARAMETER = "parameter"
  TYPE_PARAMETERS = "type_parameters"
  TYPE_PARAMETER = "type_parameter"
  TYPE_ARGUMENTS = "type_arguments"
  BASE_TYPE = "base_type"
  UNION_TYPE = "union_type"
  INTERSECTION_TYPE = "intersection_type"
  TUPLE_TYPE = "tuple_type"
  ARROW_TYPE = "arrow_type"
  BLOCK = "block"
  IF_STATEMENT = "if_statement"
  WHILE_STATEMENT = "while_statement"
  FOR_STATEMENT = "for_statement"
  REPEAT_STATEMENT = "repeat_statement"
  MATCH_STATEMENT = "match_statement"
  MATCH_CASE = "match_case"
  TRY_STATEMENT = "try_statement"
  RECOVER_BLOCK = "recover_block"
  WITH_STATEMENT = "with_statement"
  JUMP_STATEMENT = "jump_statement"
  ASSIGNMENT_EXPRESSION = "assignment_expression"
  VARIABLE_DECLARATION = "variable_declaration"
  BINARY_EXPRESSION = "binary_expression"
  UNARY_EXPRESSION = "unary_expression"
  AS_EXPRESSION = "as_expression"
  CONSUME_EXPRESSION = "consume_expression"
  CALL_EXPRESSION = "call_expression"
  MEMBER_EXPRESSION = "member_expression"
  GENERIC_EXPRESSION = "generic_expression"
  FFI_IDENTIFIER = "ffi_identifier"
  ARGUMENTS = "arguments"
  NAMED_ARGUMENT = "named_argument"
  ARRAY_LITERAL = "array_literal"
  TUPLE_EXPRESSION = "tuple_expression"
  LINE_COMMENT = "line_comment"
  BLOCK_COMMENT = "block_comment"
  IDENTIFIER = "identifier"
  NUMBER = "number"
  STRING = "string"
  CHARACTER = "character"
  BOOLEAN = "boolean"
  CAPABILITY = "capability"
  ERROR = "ERROR"
  OTHER = "other"

  @classmethod
  def of(cls, kind: str) -> "NodeKind":
    """
    Maps a raw kind string to its enum member, ``OTHER`` if unknown.

    Args:
        kind (str): Raw kind such as ``"if_statement"`` or ``"=>"``.

    Returns:
        NodeKind: The matching member.
    """
    try:
      return cls(kind)
    except ValueError:
      return cls.OTHER


ENTITY_KINDS = frozenset(
  {
    NodeKind.ACTOR_DEFINITION,
    NodeKind.CLASS_DEFINITION,
    NodeKind.PRIMITIVE_DEFINITION,
    NodeKind.TRAIT_DEFINITION,
    NodeKind.INTERFACE_DEFINITION,
    NodeKind.STRUCT_DEFINITION,
  }
)

DECLARATION_KINDS = ENTITY_KINDS | {NodeKind.USE_STATEMENT, NodeKind.TYPE_ALIAS}

METHOD_KINDS = frozenset({NodeKind.CONSTRUCTOR, NodeKind.METHOD, NodeKind.BEHAVIOR})

COMMENT_KINDS = frozenset({NodeKind.LINE_COMMENT, NodeKind.BLOCK_COMMENT})


@dataclass(frozen=True)
class SyntaxNode:
  """
  A node of the concrete syntax tree.

  Attributes:
      kind (str): Grammar kind (``"if_statement"``, ``"identifier"``, ``"=>"``).
      start (int): Offset of the first character covered.
      end (int): Offset one past the last character covered.
      children (Tuple[SyntaxNode, ...]): Ordered children, empty for leaves.
  """

  kind: str
  start: int
  end: int
  children: Tuple["SyntaxNode", ...] = field(default=())

  @property
  def is_leaf(self) -> bool:
    return not self.children

  @property
  def node_kind(self) -> NodeKind:
    return NodeKind.of(self.kind)

  def text(self, source: str) -> str:
    """
    Returns the source slice covered by this node.

    Args:
        source (str): The text the tree was parsed from.

    Returns:
        str: ``source[start:end]``, empty for inverted spans.
    """
    if self.end <= self.start:
      return ""
    return source[self.start : self.end]

  @cached_property
  def has_error(self) -> bool:
    """True if this node or any descendant is an ``ERROR`` node."""
    return self.kind == NodeKind.ERROR.value or any(c.has_error for c in self.children)

  @property
  def has_error_child(self) -> bool:
    """True if an immediate child is an ``ERROR`` node."""
    return any(c.kind == NodeKind.ERROR.value for c in self.children)

  def walk(self) -> Iterator["SyntaxNode"]:
    """
    Iterates the subtree in pre-order without recursion.

    Yields:
        SyntaxNode: This node, then its descendants in source order.
    """
    stack = [self]
    while stack:
      node = stack.pop()
      yield node
      stack.extend(reversed(node.children))

  def leaves(self) -> Iterator["SyntaxNode"]:
    """Yields the leaf nodes of this subtree in source order."""
    return (node for node in self.walk() if node.is_leaf)

  def error_regions(self) -> Iterator["SyntaxNode"]:
    """
    Yields outermost ``ERROR`` nodes, not descending into them.

    Yields:
        SyntaxNode: Each malformed region once.
    """
    stack = [self]
    while stack:
      node = stack.pop()
      if node.kind == NodeKind.ERROR.value:
        yield node
        continue
      stack.extend(reversed(node.children))
