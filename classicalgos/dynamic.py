"""Dynamic-programming algorithms: 0/1 knapsack, coin change, LCS, matrix chains."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "ChangeImpossibleError",
    "knapsack",
    "min_coins",
    "lcs_length",
    "lcs",
    "matrix_chain_order",
]


class ChangeImpossibleError(ValueError):
    """Raised when an amount cannot be made exactly from the given coins."""

    def __init__(self, amount: int) -> None:
        super().__init__(f"change for {amount} cannot be made exactly")
        self.amount = amount


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of items fitting in ``capacity`` (each used at most once)."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")

    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        best = [0] + [
            max(value + best[room - weight], best[room]) if weight <= room else best[room]
            for room in range(1, capacity + 1)
        ]
    return best[capacity]


def min_coins(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins summing exactly to ``amount``.

    Raises ChangeImpossibleError when no combination works.
    """
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(coin < 0 for coin in coins):
        raise ValueError("coin denominations must not be negative")

    fewest: list[int | None] = [0] + [None] * amount
    for target in range(1, amount + 1):
        options = [
            fewest[target - coin]
            for coin in coins
            if coin <= target and fewest[target - coin] is not None
        ]
        if options:
            fewest[target] = min(options) + 1

    result = fewest[amount]
    if result is None:
        raise ChangeImpossibleError(amount)
    return result


def _lcs_table(x: str, y: str) -> list[list[int]]:
    table = [[0] * (len(y) + 1) for _ in range(len(x) + 1)]
    for i, x_char in enumerate(x, start=1):
        for j, y_char in enumerate(y, start=1):
            if x_char == y_char:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])
    return table


def lcs_length(x: str, y: str) -> int:
    """Return the length of the longest common subsequence of ``x`` and ``y``."""
    return _lcs_table(x, y)[len(x)][len(y)]


def lcs(x: str, y: str) -> str:
    """Return one longest common subsequence of ``x`` and ``y``."""
    table = _lcs_table(x, y)
    i, j = len(x), len(y)
    reversed_chars: list[str] = []
    while i > 0 and j > 0:
        if x[i - 1] == y[j - 1]:
            reversed_chars.append(x[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(reversed_chars))


def matrix_chain_order(dims: Sequence[int]) -> int:
    """Return the minimum scalar multiplications to multiply a chain of matrices.

    Matrix ``k`` has shape ``dims[k-1] x dims[k]``.
    """
    n = len(dims)
    if n < 2:
        raise ValueError("at least two dimensions are needed to describe a matrix")

    cost = [[0] * n for _ in range(n)]
    for length in range(2, n):
        for i in range(1, n - length + 1):
            j = i + length - 1
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dims[i - 1] * dims[k] * dims[j]
                for k in range(i, j)
            )
    return cost[1][n - 1]