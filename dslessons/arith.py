"""Number routines: divisors, primes, Fibonacci, bases and big-number arithmetic."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence

_HEX_DIGITS = "0123456789ABCDEF"
_DECIMAL = frozenset("0123456789")
_LIMB = 10**9


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm, never negative."""
    while b:
        a, b = b, a % b
    return abs(a)


def gcd_by_subtraction(a: int, b: int) -> int:
    """Greatest common divisor of two positive numbers by repeated subtraction."""
    if a <= 0 or b <= 0:
        raise ValueError("both numbers must be positive")
    while a != b:
        if a > b:
            a -= b
        else:
            b -= a
    return a


def is_prime(n: int) -> bool:
    """Primality by trial division over odd candidates."""
    if n == 2:
        return True
    if n < 2 or n % 2 == 0:
        return False
    candidate = 3
    while candidate * candidate <= n:
        if n % candidate == 0:
            return False
        candidate += 2
    return True


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number, with F(0) = 0 and F(1) = 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def _fib_pair(n: int) -> tuple[int, int]:
    """Return (F(n + 1), F(n))."""
    if n == 0:
        return 1, 0
    x, y = _fib_pair(n // 2)
    a = x * x + y * y
    b = 2 * x * y - y * y
    if n % 2:
        a, b = a + b, a
    return a, b


def fibonacci_doubling(n: int) -> int:
    """The ``n``-th Fibonacci number by the fast doubling identities."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _fib_pair(n)[1]


def to_base(n: int, base: int) -> str:
    """Digits of ``n`` in ``base`` (2 to 16), upper case; zero gives no digits."""
    if not 2 <= base <= 16:
        raise ValueError("base must be between 2 and 16")
    if n < 0:
        raise ValueError("n must not be negative")
    digits: list[str] = []
    while n:
        n, remainder = divmod(n, base)
        digits.append(_HEX_DIGITS[remainder])
    return "".join(reversed(digits))


def factorial_digits(n: int) -> str:
    """Decimal digits of ``n!``; any ``n`` below 2 gives ``"1"``."""
    limbs = [1]  # least significant first, base 10**9
    for factor in range(2, n + 1):
        carry = 0
        for position, limb in enumerate(limbs):
            carry += limb * factor
            limbs[position] = carry % _LIMB
            carry //= _LIMB
        while carry:
            limbs.append(carry % _LIMB)
            carry //= _LIMB
    head = str(limbs[-1])
    return head + "".join(f"{limb:09d}" for limb in reversed(limbs[:-1]))


def multiply_digits(x: str, y: str) -> str:
    """Multiply two decimal digit strings by long multiplication.

    The result has at least ``len(x) + len(y) - 1`` digits, so a zero
    factor yields a string of zeros.
    """
    for text in (x, y):
        if not text or not set(text) <= _DECIMAL:
            raise ValueError(f"not a decimal digit string: {text!r}")
    first = [int(c) for c in reversed(x)]
    second = [int(c) for c in reversed(y)]
    product = [0] * (len(first) + len(second) - 1)
    for i, a in enumerate(first):
        for j, b in enumerate(second):
            product[i + j] += a * b
    digits: list[int] = []
    carry = 0
    for value in product:
        carry += value
        digits.append(carry % 10)
        carry //= 10
    while carry:
        digits.append(carry % 10)
        carry //= 10
    return "".join(str(d) for d in reversed(digits))


def add_polynomials(*args: Sequence[float]) -> list[float]:
    """Add coefficient lists term by term and drop trailing zero coefficients."""
    if not args:
        raise ValueError("at least one polynomial is required")
    length = max(max(len(p) for p in args), 1)
    total = [0.0] * length
    for polynomial in args:
        for degree, coefficient in enumerate(polynomial):
            total[degree] += coefficient
    while len(total) > 1 and total[-1] == 0:
        total.pop()
    return total


def series_sum(n: int, term: Callable[[float], float]) -> float:
    """Sum of ``term(i)`` for ``i`` from 1 to ``n``."""
    return sum((term(float(i)) for i in range(1, n + 1)), 0.0)


def spread(values: Iterable[int]) -> int:
    """Largest difference between two of ``values``."""
    items = list(values)
    if not items:
        raise ValueError("spread of an empty sequence")
    return max(items) - min(items)


def compare_sums(first: Iterable[float], second: Iterable[float]) -> int:
    """Compare the sums, each truncated to an integer: -1, 0 or 1."""
    a = int(sum(first))
    b = int(sum(second))
    return (a > b) - (a < b)


def log_step_product(n: int) -> int:
    """Product of ``i`` over ``i = 1, 2, 5, 13, ...`` while ``i <= n``, each step ``i = int(i * e)``."""
    product = 1
    step = 1
    while step <= n:
        product *= step
        step = int(step * math.e)
    return product