import math

import pytest
from calltree.calltree_calls import Call0, Call1, Call2, Call3
from calltree.calltree_datatypes import (
    ArityError, Box, LiftedCallable, Literal, NodeTypeError, OwnedUnwrap,
)
from calltree.calltree_interpreter import as_node, build, call, evaluate
from calltree.calltree_runtime import add, mul, reduce, to_vec, map as seq_map


def hello_world():
    print("Hello, world!")


def run(f, a):
    return f(a)


def hello(name):
    print(f"Hello, {name}!")

# --- Scenarios ---

def test_nullary_call(capsys):
    assert evaluate(Call0(hello_world)) is None
    assert capsys.readouterr().out == "Hello, world!\n"


def test_nested_arithmetic_circle_area():
    r = 3.0
    tree = Call2(mul, Literal(math.pi), Call2(mul, Literal(r), Literal(r)))
    assert evaluate(tree) == pytest.approx(28.274333882308138)


def test_nested_arithmetic_with_tuple_shorthand():
    r = 3.0
    assert evaluate((mul, math.pi, (mul, r, r))) == pytest.approx(math.pi * 9.0)


def test_higher_order_call(capsys):
    evaluate(Call2(run, LiftedCallable(hello), Literal("Sam")))
    assert capsys.readouterr().out == "Hello, Sam!\n"


def test_higher_order_call_lifts_callables_in_argument_position(capsys):
    evaluate((run, hello, "Sam"))
    assert capsys.readouterr().out == "Hello, Sam!\n"


@pytest.mark.parametrize("r", [0.0, 1.0, -2.5, 3.0, 1e-3, 12345.678])
def test_arithmetic_composition(r):
    tree = Call2(mul, Literal(3.0), Call2(mul, Literal(r), Literal(r)))
    # the tree multiplies r * r first, so compare to the last bit or so
    assert evaluate(tree) == pytest.approx(3.0 * r * r, rel=1e-12)

# --- build / as_node ---

def test_build_returns_nodes_unchanged():
    node = Literal(1)
    assert build(node) is node


def test_build_literal_root():
    node = build("text")
    assert isinstance(node, Literal)
    assert node.evaluate() == "text"


def test_build_box_becomes_owned_unwrap():
    node = as_node(Box([1, 2, 3]))
    assert isinstance(node, OwnedUnwrap)
    assert node.evaluate() == [1, 2, 3]


def test_build_tuple_picks_arity_class():
    node = build((add, 1, 2))
    assert isinstance(node, Call2)
    assert node.evaluate() == 3


def test_build_sequence_pipeline():
    tree = (reduce, 0, add, (to_vec, (seq_map, abs, Box([-1, 2, -3]))))
    node = build(tree)
    assert isinstance(node, Call3)
    assert evaluate(node) == 6


def test_build_rejects_empty_tuple():
    with pytest.raises(NodeTypeError):
        build(())


def test_build_rejects_non_callable_head():
    with pytest.raises(NodeTypeError):
        build((1, 2))


def test_build_rejects_bare_callable_root():
    with pytest.raises(NodeTypeError):
        build(hello_world)


def test_as_node_rejects_unsupported_values():
    with pytest.raises(NodeTypeError):
        as_node([1, 2])
    with pytest.raises(NodeTypeError):
        as_node(True)


def test_call_coerces_arguments():
    node = call(run, len, Box("abcd"))
    assert isinstance(node.args[0], LiftedCallable)
    assert isinstance(node.args[1], OwnedUnwrap)
    assert node.evaluate() == 4


def test_rejected_call_releases_its_box():
    box = Box(-5)
    with pytest.raises(ArityError):
        call(lambda: 1, box)
    assert not box.claimed
    assert call(abs, box).evaluate() == 5


def test_rejected_nested_call_releases_everything_it_adopted():
    box = Box("abc")
    literal = Literal(2)

    def size(seq) -> int:
        return len(seq)

    def shout(text: str) -> str:
        return text.upper()

    with pytest.raises(ArityError):
        build((shout, (size, box), literal))
    with pytest.raises(NodeTypeError):
        build((shout, (size, box)))
    assert not box.claimed
    assert literal.owner is None
    assert evaluate((mul, (size, box), literal)) == 6


def test_failed_coercion_releases_earlier_arguments():
    box = Box([1])
    with pytest.raises(NodeTypeError):
        call(add, box, [2])
    assert not box.claimed


def test_evaluate_is_sugar_for_node_evaluate():
    node = Call1(abs, Literal(-7))
    assert evaluate(node) == 7
    assert node.consumed
