from .ast_expressions import Expression, Literal, Sum


def one_plus_two() -> Expression:
    # 1 + 2
    return Sum(Literal(1), Literal(2))


def one_plus_two_plus_four() -> Expression:
    #            Sum
    #        /left  \right
    #      Sum       Literal(4)
    #   /left \right
    # Literal(1) Literal(2)
    return Sum(Sum(Literal(1), Literal(2)), Literal(4))


def chain_of_ones(depth: int) -> Expression:
    """Left-leaning chain of `depth` Sums whose leaves are all Literal(1)."""
    if depth < 1:
        raise ValueError("depth must be at least 1")

    expr: Expression = Literal(1)
    for _ in range(depth - 1):
        expr = Sum(expr, Literal(1))
    return expr
