import math

import pytest
from calltree.calltree_calls import Call1, Call2, Call3
from calltree.calltree_datatypes import Box, LiftedCallable, Literal, NodeConsumedError, OwnedUnwrap
from calltree.calltree_interpreter import evaluate
from calltree.calltree_runtime import (
    add, sub, mul, div, map, reduce, to_vec, ExecutionResult, TreeRunner,
)

# --- Arithmetic Helpers ---

@pytest.mark.parametrize("op, a, b, expected", [
    (add, 2, 3, 5),
    (add, "ab", "cd", "abcd"),
    (sub, 10, 4, 6),
    (sub, 0.5, 1.5, -1.0),
    (mul, 6, 7, 42),
    (mul, "ab", 2, "abab"),
    (div, 7, 2, 3.5),
    (div, 1.0, 4, 0.25),
])
def test_arithmetic_helpers(op, a, b, expected):
    assert op(a, b) == expected


def test_div_by_zero_is_pythons_error():
    with pytest.raises(ZeroDivisionError):
        div(1, 0)


def test_nan_propagates():
    assert math.isnan(add(float("nan"), 1.0))


def test_arithmetic_helpers_as_call_functions():
    tree = Call2(sub, Call2(add, Literal(10), Literal(5)), Call2(div, Literal(9), Literal(3)))
    assert evaluate(tree) == 12.0

# --- Sequence Combinators ---

def test_map_is_lazy():
    seen = []

    def record(x):
        seen.append(x)
        return x * 2

    it = map(record, [1, 2, 3])
    assert seen == []
    assert next(it) == 2
    assert seen == [1]


def test_map_is_single_pass():
    it = map(str, [1, 2])
    assert to_vec(it) == ["1", "2"]
    assert to_vec(it) == []


def test_map_over_infinite_source_stays_finite_when_sliced():
    import itertools
    it = map(lambda x: x * x, itertools.count())
    assert list(itertools.islice(it, 4)) == [0, 1, 4, 9]


@pytest.mark.parametrize("xs", [[], [1], [3, 1, 2], list(range(20))])
def test_to_vec_of_map_matches_comprehension(xs):
    f = lambda x: x * 3 - 1
    assert to_vec(map(f, xs)) == [f(x) for x in xs]


def test_reduce_is_a_left_fold():
    assert reduce("", lambda acc, x: acc + x, ["a", "b", "c"]) == "abc"
    assert reduce(100, sub, [1, 2, 3]) == 94
    assert reduce(7, add, []) == 7


def test_to_vec_preserves_order_and_is_indexable():
    v = to_vec(x for x in "xyz")
    assert v == ["x", "y", "z"]
    assert v[1] == "y"


def test_combinators_inside_a_tree():
    absolute = Call2(map, LiftedCallable(abs), OwnedUnwrap(Box([-1, -2, 3])))
    total = Call3(reduce, Literal(0), LiftedCallable(add), Call1(to_vec, absolute))
    assert evaluate(Call2(mul, Literal(2), total)) == 12

# --- TreeRunner ---

@pytest.fixture
def runner():
    return TreeRunner()


def test_runner_success(runner):
    res = runner.run((mul, 3.0, (add, 1.0, 1.0)))
    assert isinstance(res, ExecutionResult)
    assert res.status == "success"
    assert res.value == 6.0
    assert res.tree == "(mul 3.0 (add 1.0 1.0))"
    assert res.format_error() == ""


def test_runner_reports_callable_failure(runner):
    res = runner.run((div, 1, (sub, 2, 2)))
    assert res.status == "error"
    assert isinstance(res.error, ZeroDivisionError)
    msg = res.format_error()
    assert msg.startswith("ZeroDivisionError: ")
    assert msg.endswith("\nin (div 1 (sub 2 2))")


def test_runner_reports_construction_failure(runner):
    res = runner.run((add, [1]))
    assert res.status == "error"
    assert res.tree is None
    assert res.error_message.startswith("NodeTypeError: Cannot use list value [1]")
    assert "Offending [1]" in res.error_message


def test_runner_reports_arity_failure(runner):
    res = runner.run((lambda *xs: xs, *range(31)))
    assert res.status == "error"
    assert res.error_message.startswith("ArityError: Call nodes support 0 to 30 arguments, got 31")


def test_runner_reports_reused_node(runner):
    node = Call1(abs, Literal(-1))
    node.evaluate()
    res = runner.run(node)
    assert res.status == "error"
    assert isinstance(res.error, NodeConsumedError)
    assert res.error_message == "NodeConsumedError: Call1 has already been evaluated"
