"""Simplification of expression trees by folding constants and removing redundancy."""

from __future__ import annotations

from astrosubs.formula_parser import Node, evaluate

_INVERSE_PAIRS = {
    ("sqr", "sqrt"),
    ("sqrt", "sqr"),
    ("u-", "u-"),
    ("ln", "exp"),
    ("exp", "ln"),
}


def _is_const(node: Node, name: str, value: float) -> bool:
    return node.name == name or (node.constant and node.value == value)


def _is_zero(node: Node) -> bool:
    return _is_const(node, "ZERO", 0.0)


def _is_unit(node: Node) -> bool:
    return _is_const(node, "UNIT", 1.0)


def _is_munit(node: Node) -> bool:
    return _is_const(node, "MUNIT", -1.0)


def _is_number(node: Node, value: float) -> bool:
    return node.constant and node.value == value


def _become(node: Node, other: Node) -> None:
    """Overwrite node in place with the contents of other."""
    name, args, value, constant = other.name, other.args, other.value, other.constant
    node.name = name
    node.args = args
    node.value = value
    node.constant = constant


def _set_constant(node: Node, name: str, value: float) -> None:
    _become(node, Node(name, value=value, constant=True))


def _set_operation(node: Node, name: str, args: list[Node]) -> None:
    _become(node, Node(name, list(args)))


def _prune_product(node: Node) -> bool:
    a, b = node.args
    if _is_zero(a) or _is_zero(b):
        _set_constant(node, "ZERO", 0.0)
    elif _is_unit(a):
        _become(node, b)
    elif _is_munit(a):
        _set_operation(node, "u-", [b])
    elif _is_unit(b):
        _become(node, a)
    elif _is_munit(b):
        _set_operation(node, "u-", [a])
    else:
        return False
    return True


def _prune_quotient(node: Node) -> bool:
    a, b = node.args
    if _is_zero(a):
        _set_constant(node, "ZERO", 0.0)
    elif _is_unit(b):
        _become(node, a)
    elif _is_munit(b):
        _set_operation(node, "u-", [a])
    else:
        return False
    return True


def _prune_sum(node: Node) -> bool:
    a, b = node.args
    if _is_zero(a):
        _become(node, b)
    elif _is_zero(b):
        _become(node, a)
    elif b.name == "u-" and b.args:
        _set_operation(node, "-", [a, b.args[0]])
    else:
        return False
    return True


def _prune_difference(node: Node) -> bool:
    a, b = node.args
    if _is_zero(b):
        _become(node, a)
    elif _is_zero(a):
        _set_operation(node, "u-", [b])
    elif b.name == "u-" and b.args:
        _set_operation(node, "+", [a, b.args[0]])
    else:
        return False
    return True


def _prune_power(node: Node) -> bool:
    a, b = node.args
    if _is_zero(b):
        _set_constant(node, "UNIT", 1.0)
    elif _is_unit(b):
        _become(node, a)
    elif _is_munit(b):
        _set_operation(node, "/", [Node("UNIT", value=1.0, constant=True), a])
    elif _is_number(b, 2.0):
        _set_operation(node, "sqr", [a])
    elif _is_number(b, 0.5):
        _set_operation(node, "sqrt", [a])
    else:
        return False
    return True


_RULES = {
    "*": _prune_product,
    "/": _prune_quotient,
    "+": _prune_sum,
    "-": _prune_difference,
    "pow": _prune_power,
}


def prune(node: Node) -> bool:
    """Carry out one pass of simplification on the tree under node, in place.

    Returns True if something changed such that a further pass may simplify
    the tree more.
    """
    if not node.args:
        return False

    again = False
    for arg in node.args:
        if prune(arg):
            again = True

    if all(arg.constant for arg in node.args):
        value = evaluate(node, {})
        _set_constant(node, "NUMBER", value)
        return again

    first = node.args[0]
    if (node.name, first.name) in _INVERSE_PAIRS and first.args:
        _become(node, first.args[0])
        return True

    if node.name == "u+":
        _become(node, first)
        return True

    rule = _RULES.get(node.name)
    if rule is not None and len(node.args) == 2 and rule(node):
        return True
    return again


def simplify(node: Node) -> Node:
    """Prune the tree under node until nothing more changes; returns node."""
    while prune(node):
        pass
    return node