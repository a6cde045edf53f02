"""Search and dynamic-programming puzzles."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Sequence

SUM_LIMIT = 5000
MAX_DISTANCE = 10**10


def _best_values(items: Sequence[tuple[int, int]], capacity: int) -> list[int]:
    best = [0] * (capacity + 1)
    for price, weight in items:
        if weight < 0:
            raise ValueError("item weights must not be negative")
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + price)
    return best


def knapsack(items: Sequence[tuple[int, int]], capacity: int) -> int:
    """Return the best total price of ``(price, weight)`` items that fit in ``capacity``."""
    if capacity <= 0:
        return 0
    return _best_values(items, capacity)[capacity]


def super_sale(items: Sequence[tuple[int, int]], capacities: Iterable[int]) -> int:
    """Sum the best knapsack value for each person's carrying capacity."""
    capacities = list(capacities)
    largest = max(capacities, default=0)
    if largest <= 0:
        return 0
    best = _best_values(items, largest)
    return sum(best[c] for c in capacities if c > 0)


def partition_products(values: Sequence[int], n: int) -> tuple[int, int]:
    """Split ``values`` into ``n`` and the rest; return the max and min product of the sums.

    Sums of partial selections outside ``[-SUM_LIMIT, SUM_LIMIT]`` are not followed.
    """
    if n < 0 or n > len(values):
        raise ValueError(f"cannot choose {n} of {len(values)} values")
    total = sum(values)
    reachable: list[set[int]] = [set() for _ in range(n + 1)]
    reachable[0].add(0)
    for value in values:
        for count in range(n, 0, -1):
            reachable[count] |= {
                s + value
                for s in reachable[count - 1]
                if -SUM_LIMIT <= s + value <= SUM_LIMIT
            }
    if not reachable[n]:
        raise ValueError("no selection stays within the sum limit")
    products = [a * (total - a) for a in reachable[n]]
    return max(products), min(products)


def _events_in_order(ranks: Sequence[int]) -> list[int]:
    if sorted(ranks) != list(range(1, len(ranks) + 1)):
        raise ValueError("ranks must be a permutation of 1..n")
    order = [0] * len(ranks)
    for event, rank in enumerate(ranks, start=1):
        order[rank - 1] = event
    return order


def history_grading(correct: Sequence[int], student: Sequence[int]) -> int:
    """Score a student's ranking: the longest common subsequence of both event orders."""
    if len(correct) != len(student):
        raise ValueError("both rankings must cover the same events")
    expected = _events_in_order(correct)
    answered = _events_in_order(student)
    previous = [0] * (len(answered) + 1)
    for event in expected:
        current = [0]
        for j, other in enumerate(answered, start=1):
            if event == other:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(current[j - 1], previous[j]))
        previous = current
    return previous[-1]


def _sequence(n: int, m: int) -> list[int]:
    seq = [1, 2, 3]
    for _ in range(3, n):
        seq.append((seq[-1] + seq[-2] + seq[-3]) % m + 1)
    return seq


def smallest_window(n: int, m: int, k: int) -> int | None:
    """Find the shortest window of the generated sequence holding all of ``1..k``.

    Returns None when no window holds them all.
    """
    if k <= 3:
        return k
    seq = _sequence(n, m)
    counts = [0] * (k + 1)
    have = 0
    left = 0
    best: int | None = None
    for right, value in enumerate(seq):
        if value <= k:
            if counts[value] == 0:
                have += 1
            counts[value] += 1
        while have == k and left < right:
            width = right - left + 1
            best = width if best is None else min(best, width)
            dropped = seq[left]
            if dropped <= k:
                counts[dropped] -= 1
                if counts[dropped] == 0:
                    have -= 1
            left += 1
    return best


def lotto_combinations(numbers: Sequence[int]) -> list[tuple[int, ...]]:
    """List every choice of six numbers, keeping the given order."""
    return list(itertools.combinations(numbers, 6))


def _fits(limit: int, distances: Sequence[int], days: int) -> bool:
    used = 1
    walked = 0
    for distance in distances:
        if distance > limit:
            return False
        if walked + distance <= limit:
            walked += distance
        else:
            used += 1
            walked = distance
    return used <= days


def min_max_daily_distance(distances: Sequence[int], nights: int) -> int:
    """Return the smallest longest day's walk when stopping at most ``nights`` times."""
    low, high = 1, MAX_DISTANCE
    while low < high:
        mid = (low + high) // 2
        if _fits(mid, distances, nights + 1):
            high = mid
        else:
            low = mid + 1
    return low


def overtime_cost(
    morning: Sequence[int], evening: Sequence[int], limit: int, rate: int
) -> int:
    """Pair routes to minimise the overtime paid beyond ``limit`` at ``rate`` per unit."""
    if len(morning) != len(evening):
        raise ValueError("there must be as many evening routes as morning routes")
    pairs = zip(sorted(morning), sorted(evening, reverse=True))
    return sum(max(0, a + b - limit) * rate for a, b in pairs)