"""
Node path executor.

Evaluates a parsed path against any NodeStore. Only the store's read
primitives (tag, children, get_attribute, get_text) are used, so the same
path semantics apply to every tree implementation.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .ast import ANY, PARENT, SELF, Axis, PathStep, Predicate, PredicateKind, PredicateOp
from .parser import parse_path

if TYPE_CHECKING:
    from ..core.node_store import NodeStore

logger = logging.getLogger(__name__)


def select(store: "NodeStore", context: Any, path: str) -> List[Any]:
    """
    Return all nodes matched by path, evaluated relative to context.

    Args:
        store: NodeStore that owns the nodes
        context: Node the path is relative to
        path: Relative path expression

    Raises:
        PathSyntaxError: If path is malformed
    """
    query = parse_path(path)
    index = _TreeIndex(store, context)

    current = _apply_step(store, [context], query.first, index)
    for axis, step in query.rest:
        if not current:
            break
        if step.node_test is None:
            current = _apply_predicates(store, current, step.predicates)
            continue
        if axis == Axis.DESCENDANT:
            bases: List[Any] = []
            for node in current:
                bases.extend(index.descendants_or_self(node))
            current = index.in_document_order(_apply_step(store, bases, step, index))
        else:
            current = _apply_step(store, current, step, index)

    logger.debug(f"Path {path!r} matched {len(current)} node(s)")
    return current


class _TreeIndex:
    """Lazily built parent pointers and document order below the context node."""

    def __init__(self, store: "NodeStore", context: Any) -> None:
        self._store = store
        self._context = context
        self._parents: Optional[Dict[int, Any]] = None
        self._order: Optional[Dict[int, int]] = None

    def _build(self) -> None:
        self._parents = {}
        self._order = {}
        stack = [self._context]
        counter = 0
        while stack:
            node = stack.pop()
            self._order[id(node)] = counter
            counter += 1
            children = self._store.children(node)
            for child in children:
                self._parents[id(child)] = node
            stack.extend(reversed(children))

    def parent(self, node: Any) -> Optional[Any]:
        if self._parents is None:
            self._build()
        return self._parents.get(id(node))

    def descendants_or_self(self, node: Any) -> List[Any]:
        out: List[Any] = []
        stack = [node]
        while stack:
            current = stack.pop()
            out.append(current)
            stack.extend(reversed(self._store.children(current)))
        return out

    def in_document_order(self, nodes: List[Any]) -> List[Any]:
        if self._order is None:
            self._build()
        return sorted(nodes, key=lambda n: self._order.get(id(n), -1))


def _apply_step(
    store: "NodeStore", context: List[Any], step: PathStep, index: _TreeIndex
) -> List[Any]:
    """Apply a step to each context node; predicates see one group per context node."""
    out: List[Any] = []
    seen: set[int] = set()
    for node in context:
        group = _candidates(store, node, step.node_test, index)
        group = _apply_predicates(store, group, step.predicates)
        for match in group:
            if id(match) not in seen:
                seen.add(id(match))
                out.append(match)
    return out


def _candidates(
    store: "NodeStore", node: Any, node_test: Optional[str], index: _TreeIndex
) -> List[Any]:
    if node_test == SELF:
        return [node]
    if node_test == PARENT:
        parent = index.parent(node)
        return [parent] if parent is not None else []
    children = store.children(node)
    if node_test == ANY:
        return list(children)
    return [child for child in children if store.tag(child) == node_test]


def _apply_predicates(
    store: "NodeStore", nodes: List[Any], predicates: tuple[Predicate, ...]
) -> List[Any]:
    for pred in predicates:
        if pred.kind == PredicateKind.POSITION:
            idx = (pred.index or 1) - 1
            nodes = [nodes[idx]] if 0 <= idx < len(nodes) else []
        else:
            nodes = [n for n in nodes if _matches_predicate(store, n, pred)]
    return nodes


def _matches_predicate(store: "NodeStore", node: Any, pred: Predicate) -> bool:
    if pred.kind == PredicateKind.ATTR_EXISTS:
        return store.get_attribute(node, pred.name) is not None
    if pred.kind == PredicateKind.ATTR_COMPARE:
        return _compare(store.get_attribute(node, pred.name), pred.op, pred.value)
    children = [c for c in store.children(node) if store.tag(c) == pred.name]
    if pred.kind == PredicateKind.CHILD_EXISTS:
        return bool(children)
    if pred.kind == PredicateKind.CHILD_TEXT:
        return any(
            _compare(store.get_text(c) or "", pred.op, pred.value) for c in children
        )
    return False


def _compare(left: Optional[str], op: Optional[PredicateOp], right: Optional[str]) -> bool:
    if left is None:
        return False
    if op == PredicateOp.NE:
        return left != right
    return left == right
