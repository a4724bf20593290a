"""Resolved syntax tree consumed by the route matchers.

The tree is a closed set of node kinds. Calls carry the binding resolved by
the frontend that built the tree; bare identifiers and every other construct
only carry their span and children. :func:`walk` drives a depth-first
pre-order traversal and lets a single ``visit`` callable decide per node
whether its children are entered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Union

__all__ = [
    "MethodBinding",
    "CallNode",
    "NameNode",
    "ExpressionNode",
    "SyntaxNode",
    "Visit",
    "child_nodes",
    "iter_nodes",
    "walk",
]


@dataclass(frozen=True, slots=True)
class MethodBinding:
    """Resolved identity of the method a call invokes."""

    declaring_type: str
    name: str
    return_type: str | None = None

    @property
    def qualified_name(self) -> str:
        return f"{self.declaring_type}#{self.name}"


@dataclass(frozen=True, slots=True)
class NameNode:
    """Bare identifier such as ``APPLICATION_JSON``."""

    identifier: str
    start: int
    length: int


@dataclass(frozen=True, slots=True)
class CallNode:
    """Method invocation; ``binding`` is ``None`` when unresolved.

    ``name_start`` is the offset of the method name when the frontend knows
    it, so a chained call can be located apart from its receiver.
    """

    binding: MethodBinding | None
    arguments: tuple["SyntaxNode", ...]
    start: int
    length: int
    receiver: "SyntaxNode | None" = None
    name_start: int | None = None


@dataclass(frozen=True, slots=True)
class ExpressionNode:
    """Any other construct, identified by its frontend ``kind``."""

    kind: str
    start: int
    length: int
    children: tuple["SyntaxNode", ...] = ()


SyntaxNode = Union[CallNode, NameNode, ExpressionNode]

Visit = Callable[[SyntaxNode], bool]


def child_nodes(node: SyntaxNode) -> tuple[SyntaxNode, ...]:
    """Return the children of ``node`` in source order."""

    if isinstance(node, CallNode):
        if node.receiver is None:
            return node.arguments
        return (node.receiver, *node.arguments)
    if isinstance(node, ExpressionNode):
        return node.children
    return ()


def walk(root: SyntaxNode, visit: Visit) -> None:
    """Traverse ``root`` depth-first, skipping children when ``visit`` says so.

    Raises:
        ValueError: If ``root`` is ``None``.
    """

    if root is None:
        raise ValueError("A syntax tree root is required for traversal.")

    stack: list[SyntaxNode] = [root]
    while stack:
        node = stack.pop()
        if not visit(node):
            continue
        stack.extend(reversed(child_nodes(node)))


def iter_nodes(root: SyntaxNode) -> Iterator[SyntaxNode]:
    """Yield every node under ``root`` in pre-order."""

    stack: list[SyntaxNode] = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(child_nodes(node)))
