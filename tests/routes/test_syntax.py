"""Tests for :mod:`fluxhover.routes.syntax`."""

from __future__ import annotations

import pytest

from fluxhover.routes.syntax import (
    CallNode,
    ExpressionNode,
    MethodBinding,
    NameNode,
    child_nodes,
    iter_nodes,
    walk,
)


def _tree() -> CallNode:
    # outer(inner(a), b) with receiver r
    inner = CallNode(
        binding=None,
        arguments=(NameNode("a", 12, 1),),
        start=6,
        length=8,
    )
    return CallNode(
        binding=MethodBinding("x.Y", "outer"),
        arguments=(inner, ExpressionNode("literal", 16, 1)),
        start=0,
        length=18,
        receiver=NameNode("r", 0, 1),
    )


def _label(node) -> str:
    if isinstance(node, CallNode):
        return "call"
    if isinstance(node, NameNode):
        return node.identifier
    return node.kind


def test_walk_visits_in_pre_order_receiver_first() -> None:
    seen: list[str] = []

    def visit(node) -> bool:
        seen.append(_label(node))
        return True

    walk(_tree(), visit)

    assert seen == ["call", "r", "call", "a", "literal"]


def test_walk_skips_children_when_visit_declines() -> None:
    seen: list[str] = []

    def visit(node) -> bool:
        seen.append(_label(node))
        return not (isinstance(node, CallNode) and node.binding is None)

    walk(_tree(), visit)

    assert seen == ["call", "r", "call", "literal"]


def test_walk_requires_root() -> None:
    with pytest.raises(ValueError):
        walk(None, lambda node: True)  # type: ignore[arg-type]


def test_child_nodes_and_iter_nodes() -> None:
    tree = _tree()

    assert child_nodes(NameNode("x", 0, 1)) == ()
    assert child_nodes(tree)[0] == NameNode("r", 0, 1)
    assert [_label(node) for node in iter_nodes(tree)] == [
        "call",
        "r",
        "call",
        "a",
        "literal",
    ]


def test_method_binding_qualified_name() -> None:
    assert MethodBinding("a.B", "m").qualified_name == "a.B#m"
