import re
from fractions import Fraction

import pytest

from numcraft.fivefives import bracket, expressions, main

DOCUMENTED = [
    "(5 + 5) ^ ((5 + 5) / 5)",
    "(5 - 5 / 5) * 5 * 5",
    "5 * (5 + 5 + 5 + 5)",
    "5 * 5 * (5 - 5 / 5)",
    "5 * 5 * 5 - 5 * 5",
]


class _Evaluator:
    def __init__(self, text):
        self.tokens = re.findall(r"\d+|[-+*/^()]", text)
        self.pos = 0

    def peek(self):
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def take(self):
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def expr(self):
        value = self.term()
        while self.peek() in ("+", "-"):
            op = self.take()
            rhs = self.term()
            value = value + rhs if op == "+" else value - rhs
        return value

    def term(self):
        value = self.factor()
        while self.peek() in ("*", "/"):
            op = self.take()
            rhs = self.factor()
            value = value * rhs if op == "*" else value / rhs
        return value

    def factor(self):
        base = self.atom()
        if self.peek() == "^":
            self.take()
            exponent = self.factor()
            return base ** int(exponent)
        return base

    def atom(self):
        token = self.take()
        if token == "(":
            value = self.expr()
            assert self.take() == ")"
            return value
        return Fraction(int(token))


def _evaluate(text):
    evaluator = _Evaluator(text)
    value = evaluator.expr()
    assert evaluator.peek() is None
    return value


@pytest.fixture(scope="module")
def five_fives():
    return expressions([(5, "5")] * 5, 100)


def test_five_fives_matches_documented_output(five_fives):
    assert five_fives == DOCUMENTED


def test_every_five_fives_expression_evaluates_to_target(five_fives):
    for text in five_fives:
        assert _evaluate(text) == 100
        assert text.count("5") == 5


def test_bracket_plus_never_wraps():
    assert bracket("5", "5", "+") == "5 + 5"


def test_bracket_minus_wraps_sum_on_right():
    assert bracket("5", "5 + 5", "-") == "5 - (5 + 5)"


def test_bracket_divide_wraps_both_sides():
    assert bracket("5 + 5", "5 + 5", "/") == "(5 + 5) / (5 + 5)"


def test_bracket_ignores_operators_inside_parentheses():
    inner = "(5 + 5)"
    assert bracket(inner, inner, "*") == f"{inner} * {inner}"


def test_bracket_rejects_unknown_operator():
    with pytest.raises(ValueError):
        bracket("5", "5", "%")


@pytest.mark.parametrize("op", ["+", "-", "*", "/", "^"])
def test_bracket_result_evaluates_consistently(op):
    left, right = "6 - 2", "2"
    text = bracket(left, right, op)
    lhs, rhs = _evaluate(left), _evaluate(right)
    expected = {
        "+": lhs + rhs,
        "-": lhs - rhs,
        "*": lhs * rhs,
        "/": lhs / rhs,
        "^": lhs ** int(rhs),
    }[op]
    assert _evaluate(text) == expected


def test_single_item_is_returned_when_it_matches():
    assert expressions([(100, "x")]) == ["x"]
    assert expressions([(99, "x")]) == []


def test_empty_input_gives_nothing():
    assert expressions([], 0) == []


def test_small_search_results_are_sorted_and_correct():
    found = expressions([(2, "2"), (3, "3"), (4, "4")], 10)
    assert found == sorted(set(found))
    assert found
    for text in found:
        assert _evaluate(text) == 10


def test_main_prints_each_expression(capsys):
    assert main(["--digit", "2", "--count", "3", "--target", "8"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines
    expected = expressions([(2, "2")] * 3, 8)
    assert lines == [f"{text} = 8" for text in expected]