from __future__ import annotations

from dataclasses import dataclass


class Node:
    """Base class of every expression variant."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class Literal(Node):
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(
                f"Literal expects an int, got {type(self.value).__name__}"
            )


@dataclass(frozen=True, slots=True)
class Sum(Node):
    left: Expression
    right: Expression

    def __post_init__(self) -> None:
        for side, child in (("left", self.left), ("right", self.right)):
            if not isinstance(child, Node):
                raise TypeError(
                    f"Sum.{side} must be an expression, got {type(child).__name__}"
                )


Expression = Literal | Sum
