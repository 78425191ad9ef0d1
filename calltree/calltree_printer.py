"""
A pretty-printer for call trees.
"""
from calltree.calltree_datatypes import (
    Box, CallNode, LiftedCallable, Literal, Node, OwnedUnwrap, func_name,
)


class Printer:
    """Formats call trees as Lisp-style s-expressions.

    `(mul 3.14 (mul 3.0 3.0))` for calls, `#'hello` for lifted callables,
    `(box ...)` for owned-unwrap nodes. A call that would run past
    `max_width` puts each argument on its own indented line.
    """

    def __init__(self, indent_width=2, max_width=80):
        self._indent_char = " " * indent_width
        self.max_width = max_width
        self._handlers = self._create_handlers()

    def pformat(self, obj, level=0):
        """Public entry point to format an object."""
        handler = self._get_handler(obj)
        return handler(obj, level)

    def _get_handler(self, obj):
        """Dispatcher to find the correct formatting method."""
        obj_type = type(obj)
        if obj_type in self._handlers:
            return self._handlers[obj_type]
        # Generated call nodes share one formatter
        if isinstance(obj, CallNode): return self._pformat_call
        if isinstance(obj, Node): return self._pformat_unknown_node
        if callable(obj): return self._pformat_callable
        # Default to Python's repr for unknown types
        return lambda o, l: repr(o)

    def _create_handlers(self):
        return {
            str: self._pformat_str,
            int: self._pformat_primitive,
            float: self._pformat_primitive,
            bool: self._pformat_bool,
            type(None): self._pformat_none,
            Literal: self._pformat_literal,
            LiftedCallable: self._pformat_lifted,
            OwnedUnwrap: self._pformat_unwrap,
            Box: self._pformat_box,
        }

    def _pformat_primitive(self, obj, level):
        return repr(obj)

    def _pformat_str(self, obj, level):
        return repr(obj)

    def _pformat_bool(self, obj, level):
        return 'true' if obj else 'false'

    def _pformat_none(self, obj, level):
        return 'none'

    def _pformat_callable(self, obj, level):
        return func_name(obj)

    def _pformat_unknown_node(self, obj, level):
        return f"<{type(obj).__name__}>"

    def _pformat_literal(self, obj, level):
        if obj.kind.name == 'char':
            return f"#\\{obj.value}"
        return self.pformat(obj.value, level)

    def _pformat_lifted(self, obj, level):
        return f"#'{func_name(obj.func)}"

    def _pformat_box(self, obj, level):
        if not obj.full:
            return "(box)"
        return f"(box {self.pformat(obj.value, level + 1)})"

    def _pformat_unwrap(self, obj, level):
        return self._pformat_box(obj.box, level)

    def _pformat_call(self, obj, level):
        head = func_name(obj.func)
        if not obj.args:
            return f"({head})"
        inner_level = level + 1
        parts = [self.pformat(arg, inner_level) for arg in obj.args]
        inline = f"({head} {' '.join(parts)})"
        if '\n' not in inline and len(self._indent_char * level) + len(inline) <= self.max_width:
            return inline

        # Each argument on its own line; nested lines are already indented by the recursive call
        inner_indent = self._indent_char * inner_level
        lines = [f"{inner_indent}{part}" for part in parts]
        return f"({head}\n" + "\n".join(lines) + ")"
