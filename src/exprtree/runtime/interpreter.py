import sys
from typing import TextIO

from ..ast_expressions import Expression
from .core import RuntimeContext, UnrecognizedExpression, Value
from .expression_evaluator import evaluate


def run_for_cli(
    expr: Expression,
    context: RuntimeContext | None = None,
    stderr: TextIO | None = None,
) -> Value | None:
    stream = stderr if stderr is not None else sys.stderr

    try:
        return evaluate(expr, context)
    except UnrecognizedExpression as error:
        print(f"Runtime error: {error}", file=stream)
        return None
