import pytest
from calltree.calltree_printer import Printer
from calltree.calltree_calls import Call0, Call1, Call2, Call3
from calltree.calltree_datatypes import Box, LiftedCallable, Literal, OwnedUnwrap
from calltree.calltree_runtime import add, mul


def hello(name):
    return f"Hello, {name}!"


def run(f, a):
    return f(a)


def hello_world():
    pass


@pytest.fixture
def printer():
    return Printer(indent_width=2)

# Test cases: (id, builder, expected_string); builders run per test since nodes are single-use
FORMAT_TEST_CASES = [
    ("str", lambda: "hello", "'hello'"),
    ("int", lambda: 123, "123"),
    ("float", lambda: -1.5, "-1.5"),
    ("bool_true", lambda: True, "true"),
    ("none", lambda: None, "none"),
    ("int_literal", lambda: Literal(42, kind="u8"), "42"),
    ("string_literal", lambda: Literal("Sam"), "'Sam'"),
    ("char_literal", lambda: Literal("c", kind="char"), "#\\c"),
    ("lifted", lambda: LiftedCallable(hello), "#'hello"),
    ("unwrap", lambda: OwnedUnwrap(Box([1, 2])), "(box [1, 2])"),
    ("nullary_call", lambda: Call0(hello_world), "(hello_world)"),
    ("unary_call", lambda: Call1(abs, Literal(-3)), "(abs -3)"),
    (
        "nested_call",
        lambda: Call2(mul, Literal(3.0), Call2(mul, Literal(2.0), Literal(2.0))),
        "(mul 3.0 (mul 2.0 2.0))",
    ),
    (
        "higher_order_call",
        lambda: Call2(run, LiftedCallable(hello), Literal("Sam")),
        "(run #'hello 'Sam')",
    ),
    ("plain_callable", lambda: add, "add"),
]

@pytest.mark.parametrize("test_id, builder, expected", FORMAT_TEST_CASES, ids=[c[0] for c in FORMAT_TEST_CASES])
def test_pformat(printer, test_id, builder, expected):
    assert printer.pformat(builder()) == expected


def test_empty_box(printer):
    box = Box(1)
    box.take()
    assert printer.pformat(box) == "(box)"


def test_consumed_unwrap_prints_empty_box(printer):
    node = OwnedUnwrap(Box("x"))
    node.evaluate()
    assert printer.pformat(node) == "(box)"


def test_long_call_breaks_onto_indented_lines():
    printer = Printer(indent_width=2, max_width=30)
    tree = Call3(
        lambda a, b, c: a,
        Literal("alpha-alpha"),
        Call2(add, Literal("beta-beta-beta"), Literal("gamma-gamma")),
        Literal(7),
    )
    expected = (
        "(<lambda>\n"
        "  'alpha-alpha'\n"
        "  (add\n"
        "    'beta-beta-beta'\n"
        "    'gamma-gamma')\n"
        "  7)"
    )
    assert printer.pformat(tree) == expected


def test_node_repr_uses_printer():
    node = Call2(add, Literal(1), Literal(2))
    assert repr(node) == "(add 1 2)"
