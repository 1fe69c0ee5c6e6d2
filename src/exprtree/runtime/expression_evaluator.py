from __future__ import annotations

import operator
from typing import Callable, Never, NoReturn, TypeVar

from ..ast_expressions import Expression, Literal, Sum
from .core import RuntimeContext, UnrecognizedExpression, Value

T = TypeVar("T")


def fold(
    expr: Expression,
    on_literal: Callable[[int], T],
    on_sum: Callable[[T, T], T],
) -> T:
    """Reduce `expr` bottom-up, calling `on_sum` once both operands are done.

    The walk keeps its own stack instead of recursing, so tree depth is not
    limited by the interpreter's recursion limit.
    """
    # (node, operands_ready) pairs; a Sum is pushed twice, first to schedule
    # its operands and then to combine them
    pending: list[tuple[Expression, bool]] = [(expr, False)]
    results: list[T] = []

    while pending:
        node, operands_ready = pending.pop()

        if isinstance(node, Literal):
            results.append(on_literal(node.value))
        elif isinstance(node, Sum):
            if operands_ready:
                right = results.pop()
                left = results.pop()
                results.append(on_sum(left, right))
            else:
                pending.append((node, True))
                pending.append((node.right, False))
                pending.append((node.left, False))
        else:
            _unrecognized(node)

    [result] = results
    return result


def evaluate(expr: Expression, context: RuntimeContext | None = None) -> Value:
    context = context or RuntimeContext()

    def add(left: Value, right: Value) -> Value:
        result = operator.add(left, right)
        context.writer.debugln(f"[{left} + {right} => {result}]")
        return result

    return fold(expr, _literal_value, add)


def render(expr: Expression) -> str:
    return fold(expr, str, lambda left, right: f"({left} + {right})")


def _literal_value(value: int) -> Value:
    return value


def _unrecognized(node: Never) -> NoReturn:
    raise UnrecognizedExpression(node)
