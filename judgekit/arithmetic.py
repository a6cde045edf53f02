"""Number puzzles: carries, digit sums, squares, primes, factors and coin change."""

from __future__ import annotations

import math

COINS = (1, 5, 10, 25, 50)


def count_carries(a: int, b: int) -> int:
    """Count the carry operations in the column-wise sum of ``a`` and ``b``."""
    carries = 0
    carry = 0
    while a > 0 or b > 0 or carry > 0:
        column = a % 10 + b % 10 + carry
        if column >= 10:
            carries += 1
        a //= 10
        b //= 10
        carry = column // 10
    return carries


def format_carries(count: int) -> str:
    """Describe a number of carry operations in words."""
    if count == 0:
        return "No carry operation."
    if count == 1:
        return "1 carry operation."
    return f"{count} carry operations."


def repeated_digit_sum(digits: str) -> str:
    """Sum the digits of ``digits`` until a single digit remains."""
    while len(digits) > 1:
        digits = str(sum(int(ch) for ch in digits))
    return digits


def count_squares(low: int, high: int) -> int:
    """Count the perfect squares in the closed range ``[low, high]``."""
    if high < 0 or low > high:
        return 0
    low = max(low, 0)
    below = math.isqrt(low - 1) if low > 0 else -1
    return math.isqrt(high) - below


def combinations(n: int, r: int) -> int:
    """Return the number of ways to take ``r`` things out of ``n``."""
    if n < 0 or r < 0 or r > n:
        raise ValueError(f"cannot take {r} things out of {n}")
    r = min(r, n - r)
    product = 1
    for i in range(1, r + 1):
        product = product * (n - r + i) // i
    return product


def prime_sieve(limit: int) -> list[bool]:
    """Return a list whose entry ``i`` tells whether ``i`` is prime, for ``0..limit``."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    is_prime = [True] * (limit + 1)
    for i in range(min(limit, 1) + 1):
        is_prime[i] = False
    for i in range(2, math.isqrt(limit) + 1):
        if is_prime[i]:
            is_prime[i * i :: i] = [False] * len(range(i * i, limit + 1, i))
    return is_prime


def goldbach_pair(n: int) -> tuple[int, int] | None:
    """Split ``n`` into two primes with the smallest first prime, or return None."""
    if n < 4:
        return None
    is_prime = prime_sieve(n)
    return next(
        ((i, n - i) for i in range(2, n) if is_prime[i] and is_prime[n - i]),
        None,
    )


def prime_factors(n: int) -> list[int]:
    """Return the prime factors of ``n`` in ascending order, led by -1 when negative."""
    if n == 0:
        raise ValueError("zero has no prime factorization")
    factors = [-1] if n < 0 else []
    rest = abs(n)
    divisor = 2
    while divisor * divisor <= rest:
        while rest % divisor == 0:
            factors.append(divisor)
            rest //= divisor
        divisor += 1
    if rest > 1:
        factors.append(rest)
    return factors


def format_factorization(n: int) -> str:
    """Write ``n`` as a product of its prime factors."""
    return f"{n} = " + " x ".join(str(f) for f in prime_factors(n))


def coin_change_ways(amount: int) -> int:
    """Count the ways to make ``amount`` cents from 1, 5, 10, 25 and 50 cent coins."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    ways = [1] + [0] * amount
    for coin in COINS:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def format_coin_change(amount: int, ways: int) -> str:
    """Describe the number of ways to make change for ``amount`` cents."""
    if ways == 1:
        return f"There is only {ways} way to produce {amount} cents change."
    return f"There are {ways} ways to produce {amount} cents change."