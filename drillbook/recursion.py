"""Recursive classics: factorials, combinations, Fibonacci and Hanoi."""

from __future__ import annotations

from dataclasses import dataclass, field


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"{n} must not be negative")


def factorial(n: int) -> int:
    """n! computed recursively."""
    _require_non_negative(n)
    return 1 if n == 0 else n * factorial(n - 1)


def _check_combination(n: int, r: int) -> None:
    if not 0 <= r <= n:
        raise ValueError(f"r={r} must lie between 0 and n={n}")


def ncr(n: int, r: int) -> int:
    """Number of ways to choose ``r`` of ``n`` items, by n! / (r! (n-r)!)."""
    _check_combination(n, r)
    return factorial(n) // (factorial(r) * factorial(n - r))


def ncr_pascal(n: int, r: int) -> int:
    """Number of ways to choose ``r`` of ``n`` items, by Pascal's triangle."""
    _check_combination(n, r)
    if r in (0, n):
        return 1
    return ncr_pascal(n - 1, r - 1) + ncr_pascal(n - 1, r)


def fib_recursive(n: int) -> int:
    """The n-th Fibonacci number by plain recursion."""
    _require_non_negative(n)
    if n < 2:
        return n
    return fib_recursive(n - 1) + fib_recursive(n - 2)


def fib_memoized(n: int) -> int:
    """The n-th Fibonacci number by recursion with cached results."""
    _require_non_negative(n)
    cache = {0: 0, 1: 1}

    def fib(k: int) -> int:
        if k not in cache:
            cache[k] = fib(k - 1) + fib(k - 2)
        return cache[k]

    return fib(n)


def fib_iterative(n: int) -> int:
    """The n-th Fibonacci number keeping only the last two values."""
    _require_non_negative(n)
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


@dataclass
class HanoiSolution:
    """Moves that solve a tower of Hanoi and how many calls it took."""

    moves: list[tuple[str, str]] = field(default_factory=list)
    function_calls: int = 0

    @property
    def steps(self) -> int:
        """Number of disk moves."""
        return len(self.moves)

    def lines(self) -> list[str]:
        """The moves described as text."""
        return [f"Move disk from tower {a} to {b}" for a, b in self.moves]


def tower_of_hanoi(
    disks: int, source: str = "A", via: str = "B", target: str = "C"
) -> HanoiSolution:
    """Solve the tower of Hanoi for ``disks`` disks from ``source`` to ``target``."""
    _require_non_negative(disks)
    solution = HanoiSolution()

    def solve(n: int, a: str, b: str, c: str) -> None:
        solution.function_calls += 1
        if n > 0:
            solve(n - 1, a, c, b)
            solution.moves.append((a, c))
            solve(n - 1, b, a, c)

    solve(disks, source, via, target)
    return solution