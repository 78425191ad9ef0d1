"""
The evaluation entry points: arity dispatch and host-expression building.

Trees can be assembled from the node classes directly, or from plain host
values: a tuple `(func, arg, ...)` is a call, a callable in argument position
is lifted, a Box is unwrapped and a primitive value becomes a literal.
"""
from typing import Any, Callable, List, Tuple, Type, TypeVar

from calltree.calltree_calls import CALL_NODES, MAX_ARITY
from calltree.calltree_datatypes import (
    ArityError, Box, CallNode, LiftedCallable, Literal, Node, NodeTypeError, OwnedUnwrap,
    _dbg, is_literal_value,
)

R = TypeVar("R")


def evaluate(node: Any) -> Any:
    """Evaluates a call tree. Anything that is not yet a Node is built first."""
    if not isinstance(node, Node):
        node = build(node)
    return node.evaluate()


def call_node_class(arity: int) -> Type[CallNode]:
    """Returns the call node class for an arity, or raises ArityError."""
    if arity < 0 or arity > MAX_ARITY:
        raise ArityError(
            f"Call nodes support 0 to {MAX_ARITY} arguments, got {arity}; "
            f"nest calls or pass a single sequence argument instead",
            arity,
        )
    return CALL_NODES[arity]


def call(func: Callable[..., R], *args: Any) -> CallNode:
    """Builds the call node that applies func to args, coercing each argument with as_node.

    A rejected call leaves no claims behind: boxes unwrapped and nodes
    adopted while building it are released before the error propagates.
    """
    created: List[Node] = []
    try:
        return _call(func, args, created)
    except Exception:
        _release(created)
        raise


def as_node(value: Any) -> Node:
    """Coerces a value in argument position into a Node."""
    created: List[Node] = []
    try:
        return _as_node(value, created)
    except Exception:
        _release(created)
        raise


def build(expr: Any) -> Node:
    """Builds a tree from a host expression.

    The root may be a Node, a call tuple, a Box or a literal value.
    A bare callable at the root is not lifted: wrap it in a 1-tuple to call it.
    """
    if callable(expr) and not isinstance(expr, (Node, tuple)):
        raise NodeTypeError(f"A bare callable is not a tree; use ({getattr(expr, '__name__', expr)},) to call it", expr)
    return as_node(expr)


def _release(created: List[Node]):
    for node in reversed(created):
        node._release()


def _call(func: Callable[..., R], args: Tuple[Any, ...], created: List[Node]) -> CallNode:
    cls = call_node_class(len(args))
    _dbg("call", getattr(func, "__name__", repr(func)), "arity", len(args))
    node = cls(func, *[_as_node(a, created) for a in args])
    created.append(node)
    return node


def _as_node(value: Any, created: List[Node]) -> Node:
    match value:
        case Node():
            return value
        case tuple():
            return _build_call(value, created)
        case Box():
            node = OwnedUnwrap(value)
            created.append(node)
            return node
        case _ if is_literal_value(value):
            return Literal(value)
        case _ if callable(value):
            return LiftedCallable(value)
        case _:
            raise NodeTypeError(f"Cannot use {type(value).__name__} value {value!r} as a call tree node", value)


def _build_call(expr: tuple, created: List[Node]) -> CallNode:
    if not expr:
        raise NodeTypeError("An empty tuple is not a call", expr)
    func, *args = expr
    if not callable(func):
        raise NodeTypeError(f"Head of a call tuple must be callable, got {func!r}", func)
    return _call(func, tuple(args), created)
