"""Classic recursive functions: factorial, Fibonacci, GCD and remainder."""

from __future__ import annotations


def factorial(n: int) -> int:
    """Return n! for n >= 1."""
    if n < 1:
        raise ValueError("factorial is defined here for n >= 1")
    if n == 1:
        return 1
    return n * factorial(n - 1)


def factorial_expansion(n: int) -> str:
    """Return the written-out product, e.g. ``"3! = 3*2*1 = 6"``."""
    if n < 1:
        raise ValueError("factorial is defined here for n >= 1")
    factors = "*".join(str(k) for k in range(n, 0, -1))
    return f"{n}! = {factors} = {factorial(n)}"


def fibonacci(n: int) -> int:
    """Return F(n) with F(0) = 0, F(1) = 1, computed recursively."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n < 2:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def fibonacci_sequence(n: int) -> list[int]:
    """Return [F(0), ..., F(n)], computed iteratively."""
    if n < 0:
        raise ValueError("n must be non-negative")
    sequence = [0, 1]
    while len(sequence) <= n:
        sequence.append(sequence[-1] + sequence[-2])
    return sequence[: n + 1]


def _check_positive(x: int, y: int) -> None:
    if x <= 0 or y <= 0:
        raise ValueError("both arguments must be positive")


def gcd(x: int, y: int) -> int:
    """Greatest common divisor by repeated subtraction."""
    _check_positive(x, y)
    while x != y:
        if x < y:
            x, y = y, x
        x -= y
    return x


def remainder(x: int, y: int) -> int:
    """Remainder of x divided by y by repeated subtraction."""
    if x < 0 or y <= 0:
        raise ValueError("x must be non-negative and y positive")
    while x >= y:
        if x == y:
            return 0
        x -= y
    return x