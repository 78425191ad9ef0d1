# Generated by calltree_codegen from calltree_codegen.yaml. Do not edit by hand.
# Regenerate with: python -m calltree.calltree_codegen
"""
Call nodes for every arity from 0 to 30.
"""
from typing import Callable, Generic, TypeVar

from calltree.calltree_datatypes import CallNode, Node

MAX_ARITY = 30

R = TypeVar("R")
A1 = TypeVar("A1")
A2 = TypeVar("A2")
A3 = TypeVar("A3")
A4 = TypeVar("A4")
A5 = TypeVar("A5")
A6 = TypeVar("A6")
A7 = TypeVar("A7")
A8 = TypeVar("A8")
A9 = TypeVar("A9")
A10 = TypeVar("A10")
A11 = TypeVar("A11")
A12 = TypeVar("A12")
A13 = TypeVar("A13")
A14 = TypeVar("A14")
A15 = TypeVar("A15")
A16 = TypeVar("A16")
A17 = TypeVar("A17")
A18 = TypeVar("A18")
A19 = TypeVar("A19")
A20 = TypeVar("A20")
A21 = TypeVar("A21")
A22 = TypeVar("A22")
A23 = TypeVar("A23")
A24 = TypeVar("A24")
A25 = TypeVar("A25")
A26 = TypeVar("A26")
A27 = TypeVar("A27")
A28 = TypeVar("A28")
A29 = TypeVar("A29")
A30 = TypeVar("A30")


class Call0(CallNode[R]):
    """Call node with 0 argument slot(s)."""

    arity = 0

    def __init__(self, func: Callable[[], R]) -> None:
        super().__init__(func)

    def _evaluate(self) -> R:
        return self.func()


class Call1(CallNode[R], Generic[R, A1]):
    """Call node with 1 argument slot(s)."""

    arity = 1

    def __init__(self, func: Callable[[A1], R], arg1: Node[A1]) -> None:
        super().__init__(func, arg1)

    def _evaluate(self) -> R:
        arg1, = self.args
        return self.func(arg1.evaluate())


class Call2(CallNode[R], Generic[R, A1, A2]):
    """Call node with 2 argument slot(s)."""

    arity = 2

    def __init__(self, func: Callable[[A1, A2], R], arg1: Node[A1], arg2: Node[A2]) -> None:
        super().__init__(func, arg1, arg2)

    def _evaluate(self) -> R:
        arg1, arg2 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate())


class Call3(CallNode[R], Generic[R, A1, A2, A3]):
    """Call node with 3 argument slot(s)."""

    arity = 3

    def __init__(self, func: Callable[[A1, A2, A3], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3]) -> None:
        super().__init__(func, arg1, arg2, arg3)

    def _evaluate(self) -> R:
        arg1, arg2, arg3 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate())


class Call4(CallNode[R], Generic[R, A1, A2, A3, A4]):
    """Call node with 4 argument slot(s)."""

    arity = 4

    def __init__(self, func: Callable[[A1, A2, A3, A4], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate())


class Call5(CallNode[R], Generic[R, A1, A2, A3, A4, A5]):
    """Call node with 5 argument slot(s)."""

    arity = 5

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate())


class Call6(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6]):
    """Call node with 6 argument slot(s)."""

    arity = 6

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate())


class Call7(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6, A7]):
    """Call node with 7 argument slot(s)."""

    arity = 7

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6, A7], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6], arg7: Node[A7]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6, arg7)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6, arg7 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate(), arg7.evaluate())


class Call8(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6, A7, A8]):
    """Call node with 8 argument slot(s)."""

    arity = 8

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6, A7, A8], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6], arg7: Node[A7], arg8: Node[A8]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate(), arg7.evaluate(), arg8.evaluate())


class Call9(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6, A7, A8, A9]):
    """Call node with 9 argument slot(s)."""

    arity = 9

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6, A7, A8, A9], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6], arg7: Node[A7], arg8: Node[A8], arg9: Node[A9]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate(), arg7.evaluate(), arg8.evaluate(), arg9.evaluate())


class Call10(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6, A7, A8, A9, A10]):
    """Call node with 10 argument slot(s)."""

    arity = 10

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6, A7, A8, A9, A10], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6], arg7: Node[A7], arg8: Node[A8], arg9: Node[A9], arg10: Node[A10]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate(), arg7.evaluate(), arg8.evaluate(), arg9.evaluate(), arg10.evaluate())


class Call11(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11]):
    """Call node with 11 argument slot(s)."""

    arity = 11

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6], arg7: Node[A7], arg8: Node[A8], arg9: Node[A9], arg10: Node[A10], arg11: Node[A11]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate(), arg7.evaluate(), arg8.evaluate(), arg9.evaluate(), arg10.evaluate(), arg11.evaluate())


class Call12(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12]):
    """Call node with 12 argument slot(s)."""

    arity = 12

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6], arg7: Node[A7], arg8: Node[A8], arg9: Node[A9], arg10: Node[A10], arg11: Node[A11], arg12: Node[A12]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate(), arg7.evaluate(), arg8.evaluate(), arg9.evaluate(), arg10.evaluate(), arg11.evaluate(), arg12.evaluate())


class Call13(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13]):
    """Call node with 13 argument slot(s)."""

    arity = 13

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6], arg7: Node[A7], arg8: Node[A8], arg9: Node[A9], arg10: Node[A10], arg11: Node[A11], arg12: Node[A12], arg13: Node[A13]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate(), arg7.evaluate(), arg8.evaluate(), arg9.evaluate(), arg10.evaluate(), arg11.evaluate(), arg12.evaluate(), arg13.evaluate())


class Call14(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14]):
    """Call node with 14 argument slot(s)."""

    arity = 14

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6], arg7: Node[A7], arg8: Node[A8], arg9: Node[A9], arg10: Node[A10], arg11: Node[A11], arg12: Node[A12], arg13: Node[A13], arg14: Node[A14]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate(), arg7.evaluate(), arg8.evaluate(), arg9.evaluate(), arg10.evaluate(), arg11.evaluate(), arg12.evaluate(), arg13.evaluate(), arg14.evaluate())


class Call15(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15]):
    """Call node with 15 argument slot(s)."""

    arity = 15

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6], arg7: Node[A7], arg8: Node[A8], arg9: Node[A9], arg10: Node[A10], arg11: Node[A11], arg12: Node[A12], arg13: Node[A13], arg14: Node[A14], arg15: Node[A15]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate(), arg7.evaluate(), arg8.evaluate(), arg9.evaluate(), arg10.evaluate(), arg11.evaluate(), arg12.evaluate(), arg13.evaluate(), arg14.evaluate(), arg15.evaluate())


class Call16(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16]):
    """Call node with 16 argument slot(s)."""

    arity = 16

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6], arg7: Node[A7], arg8: Node[A8], arg9: Node[A9], arg10: Node[A10], arg11: Node[A11], arg12: Node[A12], arg13: Node[A13], arg14: Node[A14], arg15: Node[A15], arg16: Node[A16]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate(), arg7.evaluate(), arg8.evaluate(), arg9.evaluate(), arg10.evaluate(), arg11.evaluate(), arg12.evaluate(), arg13.evaluate(), arg14.evaluate(), arg15.evaluate(), arg16.evaluate())


class Call17(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17]):
    """Call node with 17 argument slot(s)."""

    arity = 17

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6], arg7: Node[A7], arg8: Node[A8], arg9: Node[A9], arg10: Node[A10], arg11: Node[A11], arg12: Node[A12], arg13: Node[A13], arg14: Node[A14], arg15: Node[A15], arg16: Node[A16], arg17: Node[A17]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate(), arg7.evaluate(), arg8.evaluate(), arg9.evaluate(), arg10.evaluate(), arg11.evaluate(), arg12.evaluate(), arg13.evaluate(), arg14.evaluate(), arg15.evaluate(), arg16.evaluate(), arg17.evaluate())


class Call18(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18]):
    """Call node with 18 argument slot(s)."""

    arity = 18

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6], arg7: Node[A7], arg8: Node[A8], arg9: Node[A9], arg10: Node[A10], arg11: Node[A11], arg12: Node[A12], arg13: Node[A13], arg14: Node[A14], arg15: Node[A15], arg16: Node[A16], arg17: Node[A17], arg18: Node[A18]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate(), arg7.evaluate(), arg8.evaluate(), arg9.evaluate(), arg10.evaluate(), arg11.evaluate(), arg12.evaluate(), arg13.evaluate(), arg14.evaluate(), arg15.evaluate(), arg16.evaluate(), arg17.evaluate(), arg18.evaluate())


class Call19(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18, A19]):
    """Call node with 19 argument slot(s)."""

    arity = 19

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18, A19], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6], arg7: Node[A7], arg8: Node[A8], arg9: Node[A9], arg10: Node[A10], arg11: Node[A11], arg12: Node[A12], arg13: Node[A13], arg14: Node[A14], arg15: Node[A15], arg16: Node[A16], arg17: Node[A17], arg18: Node[A18], arg19: Node[A19]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18, arg19)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18, arg19 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate(), arg7.evaluate(), arg8.evaluate(), arg9.evaluate(), arg10.evaluate(), arg11.evaluate(), arg12.evaluate(), arg13.evaluate(), arg14.evaluate(), arg15.evaluate(), arg16.evaluate(), arg17.evaluate(), arg18.evaluate(), arg19.evaluate())


class Call20(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18, A19, A20]):
    """Call node with 20 argument slot(s)."""

    arity = 20

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18, A19, A20], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6], arg7: Node[A7], arg8: Node[A8], arg9: Node[A9], arg10: Node[A10], arg11: Node[A11], arg12: Node[A12], arg13: Node[A13], arg14: Node[A14], arg15: Node[A15], arg16: Node[A16], arg17: Node[A17], arg18: Node[A18], arg19: Node[A19], arg20: Node[A20]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18, arg19, arg20)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18, arg19, arg20 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate(), arg7.evaluate(), arg8.evaluate(), arg9.evaluate(), arg10.evaluate(), arg11.evaluate(), arg12.evaluate(), arg13.evaluate(), arg14.evaluate(), arg15.evaluate(), arg16.evaluate(), arg17.evaluate(), arg18.evaluate(), arg19.evaluate(), arg20.evaluate())


class Call21(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18, A19, A20, A21]):
    """Call node with 21 argument slot(s)."""

    arity = 21

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18, A19, A20, A21], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6], arg7: Node[A7], arg8: Node[A8], arg9: Node[A9], arg10: Node[A10], arg11: Node[A11], arg12: Node[A12], arg13: Node[A13], arg14: Node[A14], arg15: Node[A15], arg16: Node[A16], arg17: Node[A17], arg18: Node[A18], arg19: Node[A19], arg20: Node[A20], arg21: Node[A21]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18, arg19, arg20, arg21)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18, arg19, arg20, arg21 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate(), arg7.evaluate(), arg8.evaluate(), arg9.evaluate(), arg10.evaluate(), arg11.evaluate(), arg12.evaluate(), arg13.evaluate(), arg14.evaluate(), arg15.evaluate(), arg16.evaluate(), arg17.evaluate(), arg18.evaluate(), arg19.evaluate(), arg20.evaluate(), arg21.evaluate())


class Call22(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18, A19, A20, A21, A22]):
    """Call node with 22 argument slot(s)."""

    arity = 22

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18, A19, A20, A21, A22], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6], arg7: Node[A7], arg8: Node[A8], arg9: Node[A9], arg10: Node[A10], arg11: Node[A11], arg12: Node[A12], arg13: Node[A13], arg14: Node[A14], arg15: Node[A15], arg16: Node[A16], arg17: Node[A17], arg18: Node[A18], arg19: Node[A19], arg20: Node[A20], arg21: Node[A21], arg22: Node[A22]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18, arg19, arg20, arg21, arg22)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18, arg19, arg20, arg21, arg22 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate(), arg7.evaluate(), arg8.evaluate(), arg9.evaluate(), arg10.evaluate(), arg11.evaluate(), arg12.evaluate(), arg13.evaluate(), arg14.evaluate(), arg15.evaluate(), arg16.evaluate(), arg17.evaluate(), arg18.evaluate(), arg19.evaluate(), arg20.evaluate(), arg21.evaluate(), arg22.evaluate())


class Call23(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18, A19, A20, A21, A22, A23]):
    """Call node with 23 argument slot(s)."""

    arity = 23

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18, A19, A20, A21, A22, A23], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6], arg7: Node[A7], arg8: Node[A8], arg9: Node[A9], arg10: Node[A10], arg11: Node[A11], arg12: Node[A12], arg13: Node[A13], arg14: Node[A14], arg15: Node[A15], arg16: Node[A16], arg17: Node[A17], arg18: Node[A18], arg19: Node[A19], arg20: Node[A20], arg21: Node[A21], arg22: Node[A22], arg23: Node[A23]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18, arg19, arg20, arg21, arg22, arg23)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18, arg19, arg20, arg21, arg22, arg23 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate(), arg7.evaluate(), arg8.evaluate(), arg9.evaluate(), arg10.evaluate(), arg11.evaluate(), arg12.evaluate(), arg13.evaluate(), arg14.evaluate(), arg15.evaluate(), arg16.evaluate(), arg17.evaluate(), arg18.evaluate(), arg19.evaluate(), arg20.evaluate(), arg21.evaluate(), arg22.evaluate(), arg23.evaluate())


class Call24(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18, A19, A20, A21, A22, A23, A24]):
    """Call node with 24 argument slot(s)."""

    arity = 24

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18, A19, A20, A21, A22, A23, A24], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6], arg7: Node[A7], arg8: Node[A8], arg9: Node[A9], arg10: Node[A10], arg11: Node[A11], arg12: Node[A12], arg13: Node[A13], arg14: Node[A14], arg15: Node[A15], arg16: Node[A16], arg17: Node[A17], arg18: Node[A18], arg19: Node[A19], arg20: Node[A20], arg21: Node[A21], arg22: Node[A22], arg23: Node[A23], arg24: Node[A24]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18, arg19, arg20, arg21, arg22, arg23, arg24)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18, arg19, arg20, arg21, arg22, arg23, arg24 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate(), arg7.evaluate(), arg8.evaluate(), arg9.evaluate(), arg10.evaluate(), arg11.evaluate(), arg12.evaluate(), arg13.evaluate(), arg14.evaluate(), arg15.evaluate(), arg16.evaluate(), arg17.evaluate(), arg18.evaluate(), arg19.evaluate(), arg20.evaluate(), arg21.evaluate(), arg22.evaluate(), arg23.evaluate(), arg24.evaluate())


class Call25(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18, A19, A20, A21, A22, A23, A24, A25]):
    """Call node with 25 argument slot(s)."""

    arity = 25

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18, A19, A20, A21, A22, A23, A24, A25], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6], arg7: Node[A7], arg8: Node[A8], arg9: Node[A9], arg10: Node[A10], arg11: Node[A11], arg12: Node[A12], arg13: Node[A13], arg14: Node[A14], arg15: Node[A15], arg16: Node[A16], arg17: Node[A17], arg18: Node[A18], arg19: Node[A19], arg20: Node[A20], arg21: Node[A21], arg22: Node[A22], arg23: Node[A23], arg24: Node[A24], arg25: Node[A25]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18, arg19, arg20, arg21, arg22, arg23, arg24, arg25)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18, arg19, arg20, arg21, arg22, arg23, arg24, arg25 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate(), arg7.evaluate(), arg8.evaluate(), arg9.evaluate(), arg10.evaluate(), arg11.evaluate(), arg12.evaluate(), arg13.evaluate(), arg14.evaluate(), arg15.evaluate(), arg16.evaluate(), arg17.evaluate(), arg18.evaluate(), arg19.evaluate(), arg20.evaluate(), arg21.evaluate(), arg22.evaluate(), arg23.evaluate(), arg24.evaluate(), arg25.evaluate())


class Call26(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18, A19, A20, A21, A22, A23, A24, A25, A26]):
    """Call node with 26 argument slot(s)."""

    arity = 26

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18, A19, A20, A21, A22, A23, A24, A25, A26], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6], arg7: Node[A7], arg8: Node[A8], arg9: Node[A9], arg10: Node[A10], arg11: Node[A11], arg12: Node[A12], arg13: Node[A13], arg14: Node[A14], arg15: Node[A15], arg16: Node[A16], arg17: Node[A17], arg18: Node[A18], arg19: Node[A19], arg20: Node[A20], arg21: Node[A21], arg22: Node[A22], arg23: Node[A23], arg24: Node[A24], arg25: Node[A25], arg26: Node[A26]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18, arg19, arg20, arg21, arg22, arg23, arg24, arg25, arg26)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18, arg19, arg20, arg21, arg22, arg23, arg24, arg25, arg26 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate(), arg7.evaluate(), arg8.evaluate(), arg9.evaluate(), arg10.evaluate(), arg11.evaluate(), arg12.evaluate(), arg13.evaluate(), arg14.evaluate(), arg15.evaluate(), arg16.evaluate(), arg17.evaluate(), arg18.evaluate(), arg19.evaluate(), arg20.evaluate(), arg21.evaluate(), arg22.evaluate(), arg23.evaluate(), arg24.evaluate(), arg25.evaluate(), arg26.evaluate())


class Call27(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18, A19, A20, A21, A22, A23, A24, A25, A26, A27]):
    """Call node with 27 argument slot(s)."""

    arity = 27

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18, A19, A20, A21, A22, A23, A24, A25, A26, A27], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6], arg7: Node[A7], arg8: Node[A8], arg9: Node[A9], arg10: Node[A10], arg11: Node[A11], arg12: Node[A12], arg13: Node[A13], arg14: Node[A14], arg15: Node[A15], arg16: Node[A16], arg17: Node[A17], arg18: Node[A18], arg19: Node[A19], arg20: Node[A20], arg21: Node[A21], arg22: Node[A22], arg23: Node[A23], arg24: Node[A24], arg25: Node[A25], arg26: Node[A26], arg27: Node[A27]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18, arg19, arg20, arg21, arg22, arg23, arg24, arg25, arg26, arg27)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18, arg19, arg20, arg21, arg22, arg23, arg24, arg25, arg26, arg27 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate(), arg7.evaluate(), arg8.evaluate(), arg9.evaluate(), arg10.evaluate(), arg11.evaluate(), arg12.evaluate(), arg13.evaluate(), arg14.evaluate(), arg15.evaluate(), arg16.evaluate(), arg17.evaluate(), arg18.evaluate(), arg19.evaluate(), arg20.evaluate(), arg21.evaluate(), arg22.evaluate(), arg23.evaluate(), arg24.evaluate(), arg25.evaluate(), arg26.evaluate(), arg27.evaluate())


class Call28(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18, A19, A20, A21, A22, A23, A24, A25, A26, A27, A28]):
    """Call node with 28 argument slot(s)."""

    arity = 28

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18, A19, A20, A21, A22, A23, A24, A25, A26, A27, A28], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6], arg7: Node[A7], arg8: Node[A8], arg9: Node[A9], arg10: Node[A10], arg11: Node[A11], arg12: Node[A12], arg13: Node[A13], arg14: Node[A14], arg15: Node[A15], arg16: Node[A16], arg17: Node[A17], arg18: Node[A18], arg19: Node[A19], arg20: Node[A20], arg21: Node[A21], arg22: Node[A22], arg23: Node[A23], arg24: Node[A24], arg25: Node[A25], arg26: Node[A26], arg27: Node[A27], arg28: Node[A28]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18, arg19, arg20, arg21, arg22, arg23, arg24, arg25, arg26, arg27, arg28)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18, arg19, arg20, arg21, arg22, arg23, arg24, arg25, arg26, arg27, arg28 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate(), arg7.evaluate(), arg8.evaluate(), arg9.evaluate(), arg10.evaluate(), arg11.evaluate(), arg12.evaluate(), arg13.evaluate(), arg14.evaluate(), arg15.evaluate(), arg16.evaluate(), arg17.evaluate(), arg18.evaluate(), arg19.evaluate(), arg20.evaluate(), arg21.evaluate(), arg22.evaluate(), arg23.evaluate(), arg24.evaluate(), arg25.evaluate(), arg26.evaluate(), arg27.evaluate(), arg28.evaluate())


class Call29(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18, A19, A20, A21, A22, A23, A24, A25, A26, A27, A28, A29]):
    """Call node with 29 argument slot(s)."""

    arity = 29

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18, A19, A20, A21, A22, A23, A24, A25, A26, A27, A28, A29], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6], arg7: Node[A7], arg8: Node[A8], arg9: Node[A9], arg10: Node[A10], arg11: Node[A11], arg12: Node[A12], arg13: Node[A13], arg14: Node[A14], arg15: Node[A15], arg16: Node[A16], arg17: Node[A17], arg18: Node[A18], arg19: Node[A19], arg20: Node[A20], arg21: Node[A21], arg22: Node[A22], arg23: Node[A23], arg24: Node[A24], arg25: Node[A25], arg26: Node[A26], arg27: Node[A27], arg28: Node[A28], arg29: Node[A29]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18, arg19, arg20, arg21, arg22, arg23, arg24, arg25, arg26, arg27, arg28, arg29)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18, arg19, arg20, arg21, arg22, arg23, arg24, arg25, arg26, arg27, arg28, arg29 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate(), arg7.evaluate(), arg8.evaluate(), arg9.evaluate(), arg10.evaluate(), arg11.evaluate(), arg12.evaluate(), arg13.evaluate(), arg14.evaluate(), arg15.evaluate(), arg16.evaluate(), arg17.evaluate(), arg18.evaluate(), arg19.evaluate(), arg20.evaluate(), arg21.evaluate(), arg22.evaluate(), arg23.evaluate(), arg24.evaluate(), arg25.evaluate(), arg26.evaluate(), arg27.evaluate(), arg28.evaluate(), arg29.evaluate())


class Call30(CallNode[R], Generic[R, A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18, A19, A20, A21, A22, A23, A24, A25, A26, A27, A28, A29, A30]):
    """Call node with 30 argument slot(s)."""

    arity = 30

    def __init__(self, func: Callable[[A1, A2, A3, A4, A5, A6, A7, A8, A9, A10, A11, A12, A13, A14, A15, A16, A17, A18, A19, A20, A21, A22, A23, A24, A25, A26, A27, A28, A29, A30], R], arg1: Node[A1], arg2: Node[A2], arg3: Node[A3], arg4: Node[A4], arg5: Node[A5], arg6: Node[A6], arg7: Node[A7], arg8: Node[A8], arg9: Node[A9], arg10: Node[A10], arg11: Node[A11], arg12: Node[A12], arg13: Node[A13], arg14: Node[A14], arg15: Node[A15], arg16: Node[A16], arg17: Node[A17], arg18: Node[A18], arg19: Node[A19], arg20: Node[A20], arg21: Node[A21], arg22: Node[A22], arg23: Node[A23], arg24: Node[A24], arg25: Node[A25], arg26: Node[A26], arg27: Node[A27], arg28: Node[A28], arg29: Node[A29], arg30: Node[A30]) -> None:
        super().__init__(func, arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18, arg19, arg20, arg21, arg22, arg23, arg24, arg25, arg26, arg27, arg28, arg29, arg30)

    def _evaluate(self) -> R:
        arg1, arg2, arg3, arg4, arg5, arg6, arg7, arg8, arg9, arg10, arg11, arg12, arg13, arg14, arg15, arg16, arg17, arg18, arg19, arg20, arg21, arg22, arg23, arg24, arg25, arg26, arg27, arg28, arg29, arg30 = self.args
        return self.func(arg1.evaluate(), arg2.evaluate(), arg3.evaluate(), arg4.evaluate(), arg5.evaluate(), arg6.evaluate(), arg7.evaluate(), arg8.evaluate(), arg9.evaluate(), arg10.evaluate(), arg11.evaluate(), arg12.evaluate(), arg13.evaluate(), arg14.evaluate(), arg15.evaluate(), arg16.evaluate(), arg17.evaluate(), arg18.evaluate(), arg19.evaluate(), arg20.evaluate(), arg21.evaluate(), arg22.evaluate(), arg23.evaluate(), arg24.evaluate(), arg25.evaluate(), arg26.evaluate(), arg27.evaluate(), arg28.evaluate(), arg29.evaluate(), arg30.evaluate())


CALL_NODES = (
    Call0,
    Call1,
    Call2,
    Call3,
    Call4,
    Call5,
    Call6,
    Call7,
    Call8,
    Call9,
    Call10,
    Call11,
    Call12,
    Call13,
    Call14,
    Call15,
    Call16,
    Call17,
    Call18,
    Call19,
    Call20,
    Call21,
    Call22,
    Call23,
    Call24,
    Call25,
    Call26,
    Call27,
    Call28,
    Call29,
    Call30,
)
