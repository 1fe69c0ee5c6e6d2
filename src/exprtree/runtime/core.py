from __future__ import annotations

from dataclasses import dataclass, field

from ..writer import IndentingWriter

Value = int


class UnrecognizedExpression(TypeError):
    """The node is not one of the known expression variants."""

    def __init__(self, node: object) -> None:
        super().__init__(f"Unrecognized expression: {type(node).__name__}")
        self.node = node


@dataclass
class RuntimeContext:
    writer: IndentingWriter = field(default_factory=IndentingWriter)
