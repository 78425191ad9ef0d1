"""
Defines the core node types for call trees.

Every node implements a single operation, `evaluate`, which consumes the
node and produces its value. The fixed-arity call nodes are generated into
calltree_calls.py by calltree_codegen; the base class they share lives here,
together with literals, owned-unwrap nodes and lifted callables.
"""
import inspect
import os
import sys
import types
import typing
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Generic, Optional, Tuple, TypeVar

R = TypeVar("R")
T = TypeVar("T")


# =================================================================
# Errors
# =================================================================

class ArityError(TypeError):
    """A call node was built with an argument count its function cannot take."""
    def __init__(self, message: str, arity: Optional[int] = None):
        super().__init__(message)
        self.arity = arity


class NodeTypeError(TypeError):
    """A call tree was assembled from something that is not a valid node."""
    def __init__(self, message: str, offender: Any = None):
        super().__init__(message)
        self.offender = offender


class NodeConsumedError(RuntimeError):
    def __init__(self, node: 'Node'):
        super().__init__(f"{type(node).__name__} has already been evaluated")
        self.node = node


def _dbg(*parts):
    if os.environ.get("CALLTREE_DEBUG"):
        try:
            print("[DBG]", *parts, file=sys.stderr)
        except Exception:
            pass


def _plain_class(t: Any) -> Optional[type]:
    """Returns t when it is an ordinary class usable with issubclass, else None."""
    if t is Any or t is None:
        return None
    if isinstance(t, types.GenericAlias) or not isinstance(t, type):
        return None
    # TypedDicts and protocols are classes that refuse class checks
    if typing.is_typeddict(t) or getattr(t, "_is_protocol", False):
        return None
    return t


# =================================================================
# Evaluation Contract
# =================================================================

class Node(ABC, Generic[R]):
    """Abstract base class for everything that can appear in a call tree.

    A node is single-use: `evaluate` consumes it, and a second call raises
    NodeConsumedError. A node may also be claimed as the argument of at most
    one call node, which keeps every tree a tree.
    """
    def __init__(self):
        self._consumed = False
        self._owner: Optional['Node'] = None

    @property
    def consumed(self) -> bool:
        return self._consumed

    @property
    def owner(self) -> Optional['Node']:
        """The call node this node is an argument of, if any."""
        return self._owner

    @property
    def return_type(self) -> Optional[type]:
        """The class of the value this node evaluates to, when known up front."""
        return None

    def evaluate(self) -> R:
        if self._consumed:
            raise NodeConsumedError(self)
        self._consumed = True
        _dbg("evaluate", type(self).__name__)
        return self._evaluate()

    @abstractmethod
    def _evaluate(self) -> R:
        raise NotImplementedError

    def _claim(self, owner: 'Node'):
        self._owner = owner

    def _release(self):
        """Undoes the claims this node made while it was built."""
        pass

    def __repr__(self) -> str:
        from calltree.calltree_printer import Printer
        return Printer().pformat(self)


# =================================================================
# Literal Nodes
# =================================================================

class LiteralKind:
    """One member of the closed set of literal kinds.

    `accepts` decides whether a host value belongs to the kind. Integer kinds
    carry their two's-complement (or unsigned) range.
    """
    def __init__(self, name: str, py_type: type, check: Optional[Callable[[Any], bool]] = None,
                 bits: Optional[int] = None, signed: Optional[bool] = None):
        self.name = name
        self.py_type = py_type
        self.check = check
        self.bits = bits
        self.signed = signed

    def accepts(self, value: Any) -> bool:
        # bool is an int subclass but never an integer literal
        if isinstance(value, bool) and self.py_type is not bool:
            return False
        if not isinstance(value, self.py_type):
            return False
        return self.check is None or bool(self.check(value))

    def __repr__(self) -> str:
        return f"LiteralKind<{self.name}>"


def _int_kind(name: str, bits: int, signed: bool) -> LiteralKind:
    if signed:
        lo, hi = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        lo, hi = 0, (1 << bits) - 1
    return LiteralKind(name, int, lambda v: lo <= v <= hi, bits=bits, signed=signed)


F32_MAX = 3.4028234663852886e38


def _f32_in_range(v: float) -> bool:
    # inf and nan fail the comparison but are valid f32 values
    return v != v or v in (float("inf"), float("-inf")) or -F32_MAX <= v <= F32_MAX


LITERAL_KINDS: Dict[str, LiteralKind] = {}


def register_literal_kind(kind: LiteralKind) -> LiteralKind:
    """Adds a kind to the literal set. Names are unique."""
    if kind.name in LITERAL_KINDS:
        raise ValueError(f"Literal kind '{kind.name}' is already registered.")
    LITERAL_KINDS[kind.name] = kind
    return kind


register_literal_kind(LiteralKind("char", str, lambda v: len(v) == 1))
for _bits in (8, 16, 32, 64, 128):
    register_literal_kind(_int_kind(f"i{_bits}", _bits, True))
for _bits in (8, 16, 32, 64, 128):
    register_literal_kind(_int_kind(f"u{_bits}", _bits, False))
register_literal_kind(LiteralKind("f32", float, _f32_in_range))
register_literal_kind(LiteralKind("f64", float))
register_literal_kind(LiteralKind("string", str))

# Candidate kinds, in order, for a value given without an explicit kind.
DEFAULT_KINDS: Dict[type, Tuple[str, ...]] = {
    int: ("i64", "i128", "u128"),
    float: ("f64",),
    str: ("string",),
}


def literal_kind_of(value: Any, kind: Optional[str] = None) -> LiteralKind:
    """Resolves the literal kind for a value, or raises NodeTypeError."""
    if kind is not None:
        found = LITERAL_KINDS.get(kind)
        if found is None:
            raise NodeTypeError(f"Unknown literal kind '{kind}'", value)
        if not found.accepts(value):
            raise NodeTypeError(f"{value!r} is not a valid {kind} literal", value)
        return found
    for name in DEFAULT_KINDS.get(type(value), ()):
        found = LITERAL_KINDS.get(name)
        if found is not None and found.accepts(value):
            return found
    # Kinds added through register_literal_kind, in registration order
    for found in LITERAL_KINDS.values():
        if type(value) is found.py_type and found.accepts(value):
            return found
    raise NodeTypeError(f"{type(value).__name__} value {value!r} is not a literal kind", value)


def is_literal_value(value: Any) -> bool:
    try:
        literal_kind_of(value)
    except NodeTypeError:
        return False
    return True


class Literal(Node[T]):
    """A literal value. Evaluates to the stored value, unchanged."""
    def __init__(self, value: T, kind: Optional[str] = None):
        super().__init__()
        self.kind = literal_kind_of(value, kind)
        self.value = value

    @property
    def return_type(self) -> Optional[type]:
        return type(self.value)

    def _evaluate(self) -> T:
        return self.value


# =================================================================
# Ownership-Unwrap Nodes
# =================================================================

class Box(Generic[T]):
    """An exclusively owned slot holding a single value.

    `take` moves the value out and leaves the box empty.
    """
    def __init__(self, value: T):
        self._value = value
        self._full = True
        self._claimed = False

    @property
    def full(self) -> bool:
        return self._full

    @property
    def value(self) -> T:
        if not self._full:
            raise ValueError("Box is empty; its value has been taken.")
        return self._value

    @property
    def claimed(self) -> bool:
        return self._claimed

    def take(self) -> T:
        value = self.value
        self._value = None
        self._full = False
        return value

    def claim(self):
        """Marks the box as owned by an unwrap node. A box has one owner at most."""
        if self._claimed:
            raise NodeTypeError("Box is already owned by another unwrap node", self)
        self._claimed = True

    def release(self):
        self._claimed = False

    def __repr__(self) -> str:
        if not self._full:
            return "Box<empty>"
        return f"Box({self._value!r})"


class OwnedUnwrap(Node[T]):
    """Evaluates to the value held in a Box, exactly as stored.

    The contained value is dereferenced, never evaluated: a Node kept in the
    box comes back as a Node.
    """
    def __init__(self, box: Any):
        super().__init__()
        if not isinstance(box, Box):
            box = Box(box)
        if not box.full:
            raise NodeTypeError("Cannot unwrap an empty Box", box)
        box.claim()
        self.box = box

    def _release(self):
        self.box.release()

    @property
    def return_type(self) -> Optional[type]:
        return type(self.box.value) if self.box.full else None

    def _evaluate(self) -> T:
        return self.box.take()


# =================================================================
# Lifted-Callable Nodes
# =================================================================

class LiftedCallable(Node[T]):
    """Passes a callable through evaluation as an ordinary value, uninvoked."""
    def __init__(self, func: T):
        super().__init__()
        if not callable(func):
            raise NodeTypeError(f"Cannot lift non-callable {func!r}", func)
        self.func = func

    @property
    def return_type(self) -> Optional[type]:
        return type(self.func)

    def _evaluate(self) -> T:
        return self.func


# =================================================================
# Call Nodes
# =================================================================

def _type_hints(func) -> Dict[str, Any]:
    try:
        return typing.get_type_hints(func)
    except Exception:
        # Builtins, partials and unresolvable forward references carry no usable hints
        return {}


def _signature(func) -> Optional[inspect.Signature]:
    try:
        return inspect.signature(func)
    except (TypeError, ValueError):
        return None


def func_name(func) -> str:
    name = getattr(func, "__name__", None)
    if isinstance(name, str):
        return name
    return type(func).__name__


def check_call_shape(func, args: Tuple['Node', ...]):
    """
    Rejects a call whose arguments cannot bind to func's signature, or whose
    argument node types contradict func's parameter annotations.
    Functions without an introspectable signature are accepted as is.
    """
    sig = _signature(func)
    if sig is None:
        return
    try:
        bound = sig.bind(*args)
    except TypeError as e:
        raise ArityError(f"{func_name(func)}() cannot be called with {len(args)} argument(s): {e}", len(args)) from None
    hints = _type_hints(func)
    position = 0
    for param_name, bound_value in bound.arguments.items():
        param = sig.parameters[param_name]
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            arg_nodes = bound_value
        else:
            arg_nodes = (bound_value,)
        expected = _plain_class(hints.get(param_name))
        for node in arg_nodes:
            position += 1
            actual = _plain_class(node.return_type)
            if expected is None or actual is None:
                continue
            try:
                fits = issubclass(actual, expected)
            except TypeError:
                # Classes that refuse class checks (custom metaclasses, data protocols)
                continue
            if not fits:
                raise NodeTypeError(
                    f"Argument {position} of {func_name(func)}() evaluates to {actual.__name__}, "
                    f"expected {expected.__name__}",
                    node,
                )


class CallNode(Node[R]):
    """Base class for the generated call nodes Call0 ... CallN.

    Each subclass fixes `arity` and evaluates its argument nodes left to
    right before applying `func` to the results.
    """
    arity: int = -1

    def __init__(self, func: Callable[..., R], *args: Node):
        super().__init__()
        if not callable(func):
            raise NodeTypeError(f"{type(self).__name__} needs a callable, got {func!r}", func)
        if len(args) != self.arity:
            raise ArityError(f"{type(self).__name__} takes {self.arity} argument node(s), got {len(args)}", len(args))
        for i, arg in enumerate(args, 1):
            if not isinstance(arg, Node):
                raise NodeTypeError(f"Argument {i} of {type(self).__name__} is not a Node: {arg!r}", arg)
            if arg.consumed:
                raise NodeTypeError(f"Argument {i} of {type(self).__name__} has already been evaluated", arg)
            if arg.owner is not None:
                raise NodeTypeError(f"Argument {i} of {type(self).__name__} is already an argument of another call node", arg)
        if len({id(arg) for arg in args}) != len(args):
            raise NodeTypeError(f"{type(self).__name__} received the same node in more than one argument slot")
        check_call_shape(func, args)
        for arg in args:
            arg._claim(self)
        self.func = func
        self.args: Tuple[Node, ...] = tuple(args)

    def _release(self):
        for arg in self.args:
            arg._owner = None

    @property
    def return_type(self) -> Optional[type]:
        return _plain_class(_type_hints(self.func).get("return"))
