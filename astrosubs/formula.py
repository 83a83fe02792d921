"""Arithmetic formulae with variables: evaluation, substitution and differentiation."""

from __future__ import annotations

import copy
from collections.abc import Mapping

from astrosubs.formula_parser import FormulaError, Node, evaluate, parse
from astrosubs.formula_simplify import simplify

_BINARY = ("*", "/", "+", "-")


def _num(name: str, value: float) -> Node:
    return Node(name, value=value, constant=True)


def _op(name: str, *args: Node) -> Node:
    return Node(name, list(args))


def _copy(node: Node) -> Node:
    return copy.deepcopy(node)


def derivative(node: Node, variable: str) -> Node:
    """Tree for the partial derivative of the tree under node with respect to variable.

    The result is not simplified.
    """
    if not node.args:
        if node.name == variable:
            return _num("UNIT", 1.0)
        return _num("ZERO", 0.0)

    name = node.name
    args = node.args
    a = args[0]
    da = derivative(a, variable)

    if name == "*":
        b = args[1]
        return _op(
            "+",
            _op("*", da, _copy(b)),
            _op("*", derivative(b, variable), _copy(a)),
        )
    if name == "/":
        b = args[1]
        return _op(
            "-",
            _op("/", da, _copy(b)),
            _op(
                "*",
                derivative(b, variable),
                _op("/", _copy(a), _op("sqr", _copy(b))),
            ),
        )
    if name in ("+", "-"):
        return _op(name, da, derivative(args[1], variable))
    if name in ("u+", "u-"):
        return _op(name, da)
    if name == "sqrt":
        return _op("/", da, _op("*", _num("2", 2.0), _op("sqrt", _copy(a))))
    if name == "sqr":
        return _op("*", da, _op("*", _num("2", 2.0), _copy(a)))
    if name == "cos":
        return _op("*", da, _op("u-", _op("sin", _copy(a))))
    if name == "sin":
        return _op("*", da, _op("cos", _copy(a)))
    if name == "exp":
        return _op("*", da, _op("exp", _copy(a)))
    if name == "pow":
        b = args[1]
        first = _op(
            "*",
            da,
            _op(
                "*",
                _copy(b),
                _op("pow", _copy(a), _op("-", _copy(b), _num("UNIT", 1.0))),
            ),
        )
        second = _op(
            "*",
            derivative(b, variable),
            _op("*", _op("ln", _copy(a)), _op("pow", _copy(a), _copy(b))),
        )
        return _op("+", first, second)
    if name == "ln":
        return _op("/", da, _copy(a))
    raise FormulaError(f"derivative: unrecognised operation {name}")


def _check(node: Node, variables: Mapping[str, float]) -> None:
    if node.args:
        for arg in node.args:
            _check(arg, variables)
    elif not node.constant and node.name not in variables:
        raise FormulaError(f"variable '{node.name}' not specified.")


def _substitute(node: Node, variables: Mapping[str, float]) -> None:
    if node.args:
        for arg in node.args:
            _substitute(arg, variables)
    elif not node.constant and node.name in variables:
        node.value = float(variables[node.name])
        node.name = "NUMBER"
        node.constant = True


def _render(node: Node, level: int) -> str:
    if node.args:
        if node.name in _BINARY:
            text = _render(node.args[0], level + 1) + node.name + _render(node.args[1], level + 1)
            if level > 1:
                text = "(" + text
            if level != 1:
                text += ")"
            return text
        if node.name == "u+":
            head = "+("
        elif node.name == "u-":
            head = "-("
        else:
            head = node.name + "("
        return head + ",".join(_render(arg, level + 1) for arg in node.args) + ")"
    if node.constant:
        return f"{node.value:g}"
    return node.name


class Formula:
    """An expression such as "a*(b+c/d)/(e+f)" held as a simplified tree."""

    def __init__(self, expression: str | None = None) -> None:
        self._head: Node | None = None
        if expression is not None:
            try:
                self._head = simplify(parse(expression))
            except FormulaError as err:
                raise FormulaError(f"Formula constructor failed, error = {err}") from err

    @classmethod
    def _from_node(cls, node: Node | None) -> Formula:
        formula = cls()
        formula._head = node
        return formula

    def __copy__(self) -> Formula:
        return Formula._from_node(copy.deepcopy(self._head))

    def value(self, variables: Mapping[str, float]) -> float:
        """Value of the formula given values for all its variables; 0 if empty."""
        if self._head is None:
            return 0.0
        return evaluate(self._head, variables)

    def subst(self, variables: Mapping[str, float]) -> None:
        """Replace the variables given in variables by their values, then simplify."""
        if self._head is None:
            return
        _substitute(self._head, variables)
        simplify(self._head)

    def check(self, variables: Mapping[str, float]) -> None:
        """Raise FormulaError unless every variable of the formula is in variables."""
        if self._head is None:
            raise FormulaError("formula empty")
        _check(self._head, variables)

    def deriv(self, variable: str) -> Formula:
        """The simplified partial derivative with respect to variable."""
        if self._head is None:
            return Formula()
        return Formula._from_node(simplify(derivative(self._head, variable)))

    def list(self) -> str:
        """An expression equivalent to the tree, with generous bracketing."""
        if self._head is None:
            return "Empty Formula"
        return _render(self._head, 1)

    def __str__(self) -> str:
        return self.list()

    def __repr__(self) -> str:
        return f"Formula({self.list()!r})"