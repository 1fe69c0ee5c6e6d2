from dataclasses import dataclass
from typing import TextIO

from exprtree.ast_expressions import Expression, Node


@dataclass(frozen=True, slots=True)
class Product(Node):
    """A variant the evaluator does not know about."""

    left: Expression
    right: Expression


def assert_keywords_in_output(keywords: tuple[str, ...], stream: TextIO) -> None:
    getvalue = getattr(stream, "getvalue", None)
    assert callable(getvalue)
    output = str(getvalue()).lower()
    for keyword in keywords:
        assert keyword.lower() in output
