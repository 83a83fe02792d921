"""Parsing of arithmetic expressions into trees, and their evaluation."""

from __future__ import annotations

import math
import string
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

FUNCTIONS: dict[str, int] = {
    "sqrt": 1,
    "sqr": 1,
    "cos": 1,
    "sin": 1,
    "exp": 1,
    "pow": 2,
    "ln": 1,
}

NAMED_CONSTANTS: dict[str, float] = {
    "ZERO": 0.0,
    "UNIT": 1.0,
    "MUNIT": -1.0,
    "PI": math.pi,
    "TWOPI": 2.0 * math.pi,
    "VLIGHT": 2.99792458e8 / 1000.0,
    "DAY": 86400.0,
}

_BINARY = ("+", "-", "*", "/")
_UNARY = ("u+", "u-")


class FormulaError(ValueError):
    """Raised when an expression cannot be parsed or evaluated."""


@dataclass
class Node:
    """One node of an expression tree.

    A node is an operation when it has arguments, a number when constant
    is true (its value is then held in value), and a variable otherwise.
    """

    name: str
    args: list[Node] = field(default_factory=list)
    value: float = 0.0
    constant: bool = False

    @property
    def is_number(self) -> bool:
        return self.constant

    @property
    def is_variable(self) -> bool:
        return not self.constant and not self.args

    @property
    def is_operation(self) -> bool:
        return bool(self.args)


def _is_digit(ch: str) -> bool:
    return ch in string.digits


def _is_alpha(ch: str) -> bool:
    return ch in string.ascii_letters


def strip_brackets(expression: str) -> str:
    """Remove surrounding blanks and redundant enclosing pairs of brackets."""
    while True:
        expression = expression.strip(" ")
        if not expression:
            return expression
        depth = 0
        first = 0
        length = 0
        for n, ch in enumerate(expression):
            if ch == "(":
                depth += 1
                if depth == 1:
                    first = n + 1
            elif ch == ")":
                depth -= 1
                if depth < 0:
                    raise FormulaError(f"unmatched ) found in expression = {expression}")
                if depth == 0:
                    length = n - first
            elif ch != " " and depth == 0:
                return expression
        if depth != 0:
            raise FormulaError(f"unmatched ( found in expression = {expression}")
        expression = expression[first:first + length]


@dataclass
class _Scan:
    op: str | None = None
    posn: int = 0
    arg_first: int = 0
    arg_last: int = 0


def _scan(expression: str) -> _Scan:
    """Find the last operation to apply in a bracket-stripped expression."""
    result = _Scan()
    precedence = 0
    start = False
    is_a_number = False
    is_a_func = False
    num_var_func = False
    exp_sign_next = exp_next = False
    had_dot = had_an_exp = False
    all_blank = True
    depth = 0
    buff = ""

    def take(op: str, posn: int, prec: int) -> None:
        nonlocal precedence
        result.op = op
        result.posn = posn
        precedence = prec

    for nc, ch in enumerate(expression):
        if ch != " ":
            all_blank = False
            if depth == 0:
                if ch == "-" and not start:
                    take("u-", nc, 10)
                elif ch == "+" and not start:
                    take("u+", nc, 10)
                elif ch in "*/.," and not start:
                    raise FormulaError(
                        f"one of */., in illegal position in expression = {expression}"
                    )
                elif ch not in "()":
                    if ch in "*/":
                        if num_var_func and is_a_number and (
                            exp_sign_next or (exp_next and not had_an_exp)
                        ):
                            raise FormulaError(
                                f"character number {nc + 1} = {ch} is invalid within a number"
                            )
                        is_a_func = False
                        num_var_func = False
                        if result.op is None or precedence >= 5:
                            take(ch, nc, 5)
                    elif not exp_sign_next and ch in "+-":
                        is_a_func = False
                        num_var_func = False
                        if result.op is None or precedence >= 1:
                            take(ch, nc, 1)
                    elif num_var_func:
                        if is_a_number:
                            if not _is_digit(ch) and (
                                (exp_sign_next and ch not in "+-")
                                or exp_next
                                or (not exp_sign_next and ch not in "e.")
                                or (had_dot and ch == ".")
                            ):
                                raise FormulaError(
                                    f"invalid number (character = {ch}) in expression = {expression}"
                                )
                            if exp_next:
                                had_an_exp = True
                            if exp_sign_next:
                                exp_sign_next = False
                                exp_next = True
                            exp_sign_next = ch == "e"
                            had_dot = ch == "."
                        buff += ch
                    else:
                        is_a_number = _is_digit(ch)
                        if not is_a_number and not _is_alpha(ch):
                            raise FormulaError(f"character number {nc + 1} = {ch} is invalid")
                        num_var_func = True
                        buff = ch
                        if is_a_number:
                            exp_sign_next = exp_next = False
                            had_an_exp = had_dot = False
                elif num_var_func and is_a_number:
                    raise FormulaError(f"character number {nc + 1} = {ch} is invalid")

            if ch == "(":
                depth += 1
                if num_var_func:
                    if buff not in FUNCTIONS:
                        raise FormulaError(f"function {buff} not recognised.")
                    if result.op is None or precedence >= 20:
                        take(buff, result.posn, 20)
                        is_a_func = True
                        result.arg_first = nc + 1
                        result.arg_last = 0
                    num_var_func = False
            elif ch == ")":
                depth -= 1
                if depth < 0:
                    raise FormulaError(f"unmatched ) found in expression = {expression}")
            if is_a_func and depth == 0 and not result.arg_last:
                result.arg_last = nc - 1
        start = True

    if depth != 0:
        raise FormulaError(f"unmatched ( found in expression = {expression}")
    if all_blank:
        raise FormulaError("expression blank")
    return result


def _leaf(expression: str) -> Node:
    if _is_digit(expression[0]):
        try:
            value = float(expression)
        except ValueError:
            raise FormulaError(f"failed to translate {expression} as a number.") from None
        return Node(expression, value=value, constant=True)
    if expression in NAMED_CONSTANTS:
        return Node(expression, value=NAMED_CONSTANTS[expression], constant=True)
    return Node(expression)


def _function_args(expression: str, scan: _Scan, nexpected: int) -> list[str]:
    args: list[str] = []
    depth = 0
    arg_first = scan.arg_first
    nc = arg_first
    while nc <= scan.arg_last and len(args) < nexpected:
        ch = expression[nc]
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        if depth == 0:
            if ch == ",":
                args.append(expression[arg_first:nc])
                arg_first = nc + 1
            elif nc == scan.arg_last:
                args.append(expression[arg_first:nc + 1])
        nc += 1
    if len(args) != nexpected:
        relation = "many" if len(args) > nexpected else "few"
        raise FormulaError(
            f"too {relation} arguments for operation = {scan.op} in expression = {expression}"
        )
    return args


def parse(expression: str) -> Node:
    """Parse an expression such as "sqrt(a+b)/(2.3e-5*c)" into a tree.

    Recognises + - * /, unary signs, the functions sqrt, sqr, cos, sin,
    exp, pow and ln, numbers, variables and the named constants ZERO, UNIT,
    MUNIT, PI, TWOPI, VLIGHT (km/s) and DAY (seconds).
    """
    expression = strip_brackets(expression)
    scan = _scan(expression)
    if scan.op is None:
        return _leaf(expression)

    if scan.op in _BINARY:
        args = [expression[:scan.posn], expression[scan.posn + 1:]]
    elif scan.op in _UNARY:
        args = [expression[scan.posn + 1:]]
    else:
        args = _function_args(expression, scan, FUNCTIONS[scan.op])
    return Node(scan.op, [parse(arg) for arg in args])


def _div(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _sqrt(a: float) -> float:
    return math.sqrt(a) if a >= 0.0 else math.nan


def _log(a: float) -> float:
    if a > 0.0:
        return math.log(a)
    if a == 0.0:
        return -math.inf
    return math.nan


def _exp(a: float) -> float:
    try:
        return math.exp(a)
    except OverflowError:
        return math.inf


def _odd_integer(b: float) -> bool:
    return math.isfinite(b) and b == int(b) and int(b) % 2 == 1


def _pow(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except ValueError:
        if a == 0.0:
            return math.copysign(math.inf, a) if _odd_integer(b) else math.inf
        return math.nan
    except OverflowError:
        return -math.inf if a < 0.0 and _odd_integer(b) else math.inf


def _trig(func: Callable[[float], float]) -> Callable[[float], float]:
    def wrapped(a: float) -> float:
        try:
            return func(a)
        except ValueError:
            return math.nan
    return wrapped


_OPERATIONS: dict[str, Callable[..., float]] = {
    "*": lambda a, b: a * b,
    "/": _div,
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "u+": lambda a: a,
    "u-": lambda a: -a,
    "sqrt": _sqrt,
    "sqr": lambda a: a * a,
    "cos": _trig(math.cos),
    "sin": _trig(math.sin),
    "exp": _exp,
    "pow": _pow,
    "ln": _log,
}


def evaluate(node: Node, variables: Mapping[str, float]) -> float:
    """Value of the tree under node given values for its variables."""
    if node.args:
        operation = _OPERATIONS.get(node.name)
        if operation is None:
            raise FormulaError(f"unrecognised operation = {node.name}")
        return operation(*(evaluate(arg, variables) for arg in node.args))
    if node.constant:
        return node.value
    try:
        return variables[node.name]
    except KeyError:
        raise FormulaError(f"could not recognize variable = {node.name}") from None