import math

import pytest

from astrosubs.formula_parser import FormulaError, Node, evaluate, parse, strip_brackets


@pytest.mark.parametrize(
    "text, expected",
    [
        ("((a+b))", "a+b"),
        ("  (a)  ", "a"),
        ("(a)+(b)", "(a)+(b)"),
        ("", ""),
        ("x", "x"),
    ],
)
def test_strip_brackets(text, expected):
    assert strip_brackets(text) == expected


@pytest.mark.parametrize("text", ["((a)", "(a))"])
def test_strip_brackets_unmatched(text):
    with pytest.raises(FormulaError):
        strip_brackets(text)


def test_parse_variable():
    node = parse(" speed ")
    assert node.name == "speed"
    assert node.is_variable
    assert not node.is_number


def test_parse_number():
    node = parse("2.3e-5")
    assert node.is_number
    assert node.value == float("2.3e-5")


def test_parse_number_with_signed_exponent():
    node = parse("2.0e+01")
    assert node.is_number
    assert node.value == float("2.0e+01")


def test_named_constants():
    assert parse("PI").value == math.pi
    assert parse("TWOPI").value == 2.0 * math.pi
    assert parse("ZERO").is_number
    assert parse("MUNIT").value == -1.0


def test_binary_structure():
    node = parse("a+b*c")
    assert node.name == "+"
    assert [arg.name for arg in node.args[:1]] == ["a"]
    assert node.args[1].name == "*"


def test_unary_minus_binds_to_first_factor():
    node = parse("-a*b")
    assert node.name == "*"
    assert node.args[0].name == "u-"
    assert node.args[0].args[0].name == "a"


def test_function_structure():
    node = parse("pow((x+y),z)")
    assert node.name == "pow"
    assert len(node.args) == 2
    assert node.args[0].name == "+"
    assert node.args[1].name == "z"


def test_subtraction_is_left_associative():
    values = {"a": 7.0, "b": 3.0, "c": 1.5}
    left = evaluate(parse("(a-b)-c"), values)
    assert evaluate(parse("a-b-c"), values) == left
    assert evaluate(parse("a-(b-c)"), values) != left


def test_division_is_left_associative():
    values = {"x": 8.0, "y": 4.0, "a": 2.0, "b": 5.0}
    assert evaluate(parse("x/y/(a/b)"), values) == evaluate(parse("((x/y))/(a/b)"), values)


def test_evaluate_matches_math_functions():
    values = {"a": 1.7, "b": 0.4}
    assert evaluate(parse("sqrt(a+b)/sqrt(a-b)"), values) == math.sqrt(2.1) / math.sqrt(1.7 - 0.4)
    assert evaluate(parse("pow(a,b)"), values) == math.pow(1.7, 0.4)
    assert evaluate(parse("ln(exp(b))"), values) == math.log(math.exp(0.4))
    assert evaluate(parse("cos(a)*sin(b)"), values) == math.cos(1.7) * math.sin(0.4)


def test_evaluate_variable_value_passes_through():
    assert evaluate(parse("(((q)))"), {"q": 2.5}) == 2.5


def test_sqr_equals_product():
    values = {"t": 3.25}
    assert evaluate(parse("sqr(t)"), values) == evaluate(parse("t*t"), values)


def test_unary_signs():
    values = {"v": 4.5}
    assert evaluate(parse("-v"), values) == -4.5
    assert evaluate(parse("+v"), values) == 4.5


def test_missing_variable():
    with pytest.raises(FormulaError):
        evaluate(parse("a+b"), {"a": 1.0})


def test_unknown_operation_in_tree():
    node = Node("foo", [Node("x")])
    with pytest.raises(FormulaError):
        evaluate(node, {"x": 1.0})


def test_domain_errors_follow_ieee():
    assert math.isnan(evaluate(parse("sqrt(x)"), {"x": -1.0}))
    assert evaluate(parse("ln(x)"), {"x": 0.0}) == -math.inf
    assert evaluate(parse("a/b"), {"a": 1.0, "b": 0.0}) == math.inf
    assert math.isnan(evaluate(parse("a/b"), {"a": 0.0, "b": 0.0}))


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "*a",
        "(a",
        "a)",
        "foo(x)",
        "3x",
        "1..2",
        "2*",
        "a*-b",
        "pow(a)",
        "sqrt()",
    ],
)
def test_parse_errors(text):
    with pytest.raises(FormulaError):
        parse(text)


def test_formula_error_is_value_error():
    with pytest.raises(ValueError):
        parse("(")