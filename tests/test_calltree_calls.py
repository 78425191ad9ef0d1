import pytest
import calltree.calltree_calls as calls
from calltree.calltree_calls import CALL_NODES, MAX_ARITY, Call0, Call30
from calltree.calltree_datatypes import ArityError, CallNode, Literal, Node
from calltree.calltree_interpreter import call, call_node_class


def _collect(*values):
    return list(values)


def test_max_arity_is_thirty():
    assert MAX_ARITY == 30
    assert len(CALL_NODES) == 31


def test_call_node_family_is_complete_and_ordered():
    for arity, cls in enumerate(CALL_NODES):
        assert cls.__name__ == f"Call{arity}"
        assert cls.arity == arity
        assert issubclass(cls, CallNode)
        assert getattr(calls, f"Call{arity}") is cls


@pytest.mark.parametrize("arity", range(MAX_ARITY + 1))
def test_call_applies_function_to_evaluated_arguments(arity):
    values = [i * 10 for i in range(arity)]
    node = CALL_NODES[arity](_collect, *[Literal(v) for v in values])
    assert isinstance(node, Node)
    assert node.evaluate() == values


@pytest.mark.parametrize("arity", [1, 2, 7, MAX_ARITY])
def test_arguments_are_evaluated_left_to_right(arity):
    order = []

    def tag(i):
        order.append(i)
        return i

    args = [CALL_NODES[1](tag, Literal(i)) for i in range(arity)]
    assert CALL_NODES[arity](_collect, *args).evaluate() == list(range(arity))
    assert order == list(range(arity))


def test_nested_arguments_are_evaluated_depth_first():
    order = []

    def trace(label, *rest):
        order.append(label)
        return label

    tree = call(trace, "root", (trace, "a", (trace, "a1")), (trace, "b"))
    tree.evaluate()
    assert order == ["a1", "a", "b", "root"]


def test_nullary_call_invokes_function():
    calls_made = []

    def hello_world():
        calls_made.append("Hello, world!")

    node = Call0(hello_world)
    assert node.evaluate() is None
    assert calls_made == ["Hello, world!"]


def test_arity_thirty_constructs_and_evaluates():
    node = Call30(lambda *xs: sum(xs), *[Literal(i) for i in range(30)])
    assert node.evaluate() == sum(range(30))


def test_arity_thirty_one_fails_at_construction():
    assert not hasattr(calls, "Call31")
    with pytest.raises(ArityError) as excinfo:
        call(lambda *xs: xs, *range(31))
    assert excinfo.value.arity == 31
    with pytest.raises(ArityError):
        call_node_class(31)


def test_wrong_argument_count_for_fixed_class_is_a_construction_error():
    with pytest.raises(TypeError):
        CALL_NODES[2](_collect, Literal(1))


def test_function_failure_propagates_unmodified():
    boom = ValueError("boom")

    def explode(x):
        raise boom

    node = CALL_NODES[1](explode, Literal(1))
    with pytest.raises(ValueError) as excinfo:
        node.evaluate()
    assert excinfo.value is boom


def test_failure_in_argument_stops_evaluation():
    later = []

    def fail():
        raise RuntimeError("first argument failed")

    node = call(_collect, (fail,), (later.append, "second"))
    with pytest.raises(RuntimeError, match="first argument failed"):
        node.evaluate()
    assert later == []
