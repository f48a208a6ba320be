"""Number-theoretic routines: gcd, Fibonacci numbers, modular arithmetic, primality."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable

MEMO_LIMIT = 1000
"""Positions accepted by :func:`fibonacci_memo` lie in ``range(MEMO_LIMIT)``."""

_fib_memo: list[int] = [0, 1]


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm."""
    if a == 0:
        return b
    while b:
        a, b = b, a % b
    return a


def fibonacci(n: int) -> int:
    """Fibonacci number at 1-based position ``n`` (position 1 is 0, position 2 is 1)."""
    if n <= 0:
        raise ValueError("position must be a positive integer")
    first, second = 0, 1
    for _ in range(n - 1):
        first, second = second, first + second
    return first


def fibonacci_memo(n: int) -> int:
    """Fibonacci number at 0-based position ``n``, memoised across calls."""
    if not 0 <= n < MEMO_LIMIT:
        raise ValueError(f"position must be between 0 and {MEMO_LIMIT - 1}")
    while len(_fib_memo) <= n:
        _fib_memo.append(_fib_memo[-1] + _fib_memo[-2])
    return _fib_memo[n]


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``g = gcd(a, b)`` and ``a*x + b*y == g``."""
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def mod_inverse(a: int, m: int) -> int:
    """Multiplicative inverse of ``a`` modulo ``m``, in ``range(m)``."""
    if m < 1:
        raise ValueError("modulus must be positive")
    if m == 1:
        return 0
    g, x, _ = extended_gcd(a % m, m)
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return x % m


def chinese_remainder(moduli: Iterable[int], remainders: Iterable[int]) -> int:
    """Smallest non-negative x with ``x % moduli[i] == remainders[i]`` for all i.

    The moduli must be pairwise coprime.
    """
    moduli = list(moduli)
    remainders = list(remainders)
    if len(moduli) != len(remainders):
        raise ValueError("moduli and remainders must have the same length")
    product = math.prod(moduli)
    total = 0
    for modulus, remainder in zip(moduli, remainders):
        partial = product // modulus
        total += remainder * mod_inverse(partial, modulus) * partial
    return total % product


def modular_pow(base: int, exp: int, mod: int) -> int:
    """Compute ``base ** exp % mod`` by repeated squaring."""
    if mod <= 0:
        raise ValueError("modulus must be positive")
    if exp < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    base %= mod
    while exp > 0:
        if exp & 1:
            result = result * base % mod
        exp >>= 1
        base = base * base % mod
    return result


def _miller_test(d: int, n: int, rng: random.Random) -> bool:
    a = rng.randrange(2, n - 2)
    x = modular_pow(a, d, n)
    if x in (1, n - 1):
        return True
    while d != n - 1:
        x = x * x % n
        d *= 2
        if x == 1:
            return False
        if x == n - 1:
            return True
    return False


def is_probable_prime(n: int, k: int, rng: random.Random | None = None) -> bool:
    """Miller-Rabin test with ``k`` random witnesses.

    False means ``n`` is certainly composite; True means it is probably prime.
    """
    if n <= 1 or n == 4:
        return False
    if n <= 3:
        return True
    if rng is None:
        rng = random.Random()
    d = n - 1
    while d % 2 == 0:
        d //= 2
    return all(_miller_test(d, n, rng) for _ in range(k))