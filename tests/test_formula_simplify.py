import math

import pytest

from astrosubs.formula_parser import Node, evaluate, parse
from astrosubs.formula_simplify import prune, simplify


def test_constant_folding_gives_number():
    node = simplify(parse("2*3+4"))
    assert node.constant
    assert not node.args
    assert node.value == evaluate(parse("2*3+4"), {})


@pytest.mark.parametrize(
    "expression",
    ["x*1", "1*x", "x/1", "x+0", "0+x", "x-0", "+x", "sqr(sqrt(x))",
     "sqrt(sqr(x))", "ln(exp(x))", "exp(ln(x))", "-(-x)", "pow(x,1)",
     "(x*1+0)*UNIT", "x*UNIT"],
)
def test_reduces_to_variable(expression):
    node = simplify(parse(expression))
    assert node.name == "x"
    assert node.is_variable


@pytest.mark.parametrize("expression", ["x*0", "0*x", "0/x", "x*ZERO"])
def test_reduces_to_zero(expression):
    node = simplify(parse(expression))
    assert node.constant
    assert node.value == 0.0


def test_pow_zero_gives_unit():
    node = simplify(parse("pow(x,0)"))
    assert node.constant
    assert node.name == "UNIT"
    assert node.value == 1.0


@pytest.mark.parametrize("expression", ["x*MUNIT", "MUNIT*x", "x/MUNIT", "0-x"])
def test_negation(expression):
    node = simplify(parse(expression))
    assert node.name == "u-"
    assert [arg.name for arg in node.args] == ["x"]


def test_plus_negative_becomes_minus():
    node = simplify(parse("x+(-y)"))
    assert node.name == "-"
    assert [arg.name for arg in node.args] == ["x", "y"]


def test_minus_negative_becomes_plus():
    node = simplify(parse("x-(-y)"))
    assert node.name == "+"
    assert [arg.name for arg in node.args] == ["x", "y"]


def test_pow_two_becomes_sqr():
    node = simplify(parse("pow(x,2)"))
    assert node.name == "sqr"
    assert node.args[0].name == "x"


def test_pow_half_becomes_sqrt():
    node = simplify(parse("pow(x,0.5)"))
    assert node.name == "sqrt"
    assert node.args[0].name == "x"


def test_pow_minus_one_becomes_reciprocal():
    node = simplify(parse("pow(x,-1)"))
    assert node.name == "/"
    assert node.args[0].constant and node.args[0].value == 1.0
    assert node.args[1].name == "x"


def test_prune_reports_change():
    assert prune(parse("x*1")) is True


def test_prune_reports_no_change():
    node = parse("x+y")
    assert prune(node) is False
    assert node.name == "+"
    assert [arg.name for arg in node.args] == ["x", "y"]


def test_prune_variable_is_false():
    node = Node("x")
    assert prune(node) is False
    assert node.name == "x"


def test_simplify_returns_same_object():
    node = parse("y*1")
    assert simplify(node) is node
    assert node.name == "y"


def test_variable_named_like_function_left_alone():
    node = Node("sqr", [Node("sqrt")])
    assert prune(node) is False
    assert node.name == "sqr"
    assert node.args[0].name == "sqrt"


@pytest.mark.parametrize(
    "expression",
    [
        "x*1+0*y",
        "pow(x,2)+pow(y,0.5)",
        "x-(-y)*UNIT",
        "sqrt(sqr(x))/pow(y,-1)",
        "(x+0)*(y-0)/(1*x)",
        "exp(ln(x))+ln(exp(y))",
        "2*3*x+pow(y,1)",
        "-(-(x+y))",
    ],
)
def test_value_is_preserved(expression):
    variables = {"x": 1.7, "y": 2.3}
    before = evaluate(parse(expression), variables)
    after = evaluate(simplify(parse(expression)), variables)
    assert math.isclose(before, after, rel_tol=1e-12)


def test_simplify_is_idempotent():
    node = simplify(parse("pow(x*1,2)+0"))
    assert prune(node) is False
    assert node.name == "sqr"
    assert node.args[0].name == "x"