"""
Helpers that call trees apply, and a runner that reports evaluation outcomes.

The arithmetic helpers and sequence combinators work on already-evaluated
values; they are typically the function of a call node whose arguments are
literals or nested calls.
"""
import builtins
import functools
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Optional, TypeVar

from calltree.calltree_datatypes import ArityError, NodeTypeError
from calltree.calltree_interpreter import build
from calltree.calltree_printer import Printer

E = TypeVar("E")
T = TypeVar("T")
Acc = TypeVar("Acc")

__all__ = [
    "add", "sub", "mul", "div",
    "map", "reduce", "to_vec",
    "ExecutionResult", "TreeRunner",
]


# ===================================================================
# 1. Arithmetic Helpers
# ===================================================================

# Numeric behaviour (true division, ZeroDivisionError, nan) is Python's own.
def add(a, b): return a + b
def sub(a, b): return a - b
def mul(a, b): return a * b
def div(a, b): return a / b


# ===================================================================
# 2. Sequence Combinators
# ===================================================================

def map(f: Callable[[E], T], seq: Iterable[E]) -> Iterator[T]:
    """Lazily applies f to each element. Single pass; not restartable."""
    return builtins.map(f, seq)


def reduce(init: Acc, f: Callable[[Acc, E], Acc], seq: Iterable[E]) -> Acc:
    """Strict left fold of f over seq, starting from init."""
    return functools.reduce(f, seq, init)


def to_vec(seq: Iterable[T]) -> List[T]:
    return list(seq)


# ===================================================================
# 3. Tree Execution
# ===================================================================

@dataclass
class ExecutionResult:
    """The structured result of evaluating one tree."""
    status: str  # 'success' or 'error'
    value: Any = None
    error: Optional[BaseException] = None
    error_message: Optional[str] = None
    tree: Optional[str] = None

    def format_error(self) -> str:
        """Formats the error message followed by the tree that raised it."""
        if self.status != 'error':
            return ""
        msg = str(self.error_message or "Unknown error")
        if self.tree:
            msg = f"{msg}\nin {self.tree}"
        return msg


class TreeRunner:
    """Builds and evaluates call trees, turning failures into ExecutionResults.

    Evaluation itself never catches anything; the runner is the outer
    boundary where a host that prefers result objects over exceptions
    collects them.
    """

    def __init__(self, printer: Optional[Printer] = None):
        self.printer = printer or Printer()

    def _format_error(self, e: BaseException) -> str:
        msg = f"{type(e).__name__}: {e}"
        match e:
            case NodeTypeError() if e.offender is not None:
                # Pretty-print the offending piece when it is printable
                msg = f"{msg}\nOffending {self.printer.pformat(e.offender)}"
        return msg

    def run(self, expr: Any) -> ExecutionResult:
        try:
            node = build(expr)
        except (ArityError, NodeTypeError) as e:
            return ExecutionResult('error', error=e, error_message=self._format_error(e))

        # Render before evaluating; the printer reads nodes, evaluation consumes them
        rendered = self.printer.pformat(node)
        try:
            value = node.evaluate()
        except Exception as e:
            return ExecutionResult('error', error=e, error_message=self._format_error(e), tree=rendered)
        return ExecutionResult('success', value=value, tree=rendered)
