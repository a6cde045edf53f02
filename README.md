# judgekit

Solutions to classic online-judge problems. You can use it as a Python
library, and a small command answers some of the problems from their input.

The package is pure Python and has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Library

The solutions are grouped by topic.

### `judgekit.arithmetic`

- `count_carries(a, b)`: the number of carry operations when two numbers are
  added column by column. `format_carries(count)` gives the message
  (`"No carry operation."`, `"1 carry operation."`, `"3 carry operations."`).
- `repeated_digit_sum(digits)`: sums the digits of a digit string again and
  again until one digit is left.
- `count_squares(low, high)`: the number of perfect squares in an inclusive
  range.
- `combinations(n, r)`: the binomial coefficient "n choose r". It raises
  `ValueError` when `r` is out of range.
- `prime_sieve(limit)`: a sieve of Eratosthenes, returned as a list of flags
  for `0..limit`.
- `goldbach_pair(n)`: splits `n` into two primes and picks the pair with the
  smallest first prime. It returns `None` when there is no such pair.
- `prime_factors(n)`: the prime factors in ascending order, with a leading
  `-1` for negative numbers. `format_factorization(n)` writes them as
  `"-190 = -1 x 2 x 5 x 19"`.
- `coin_change_ways(amount)`: the number of ways to make change with 1, 5,
  10, 25 and 50 cent coins. `format_coin_change(amount, ways)` gives the
  message.

```python
from judgekit.arithmetic import count_carries, format_carries, combinations

print(format_carries(count_carries(555, 555)))  # 3 carry operations.
print(combinations(100, 6))                     # 1192052400
```

### `judgekit.text`

- `convert_quotes(text)`: replaces straight double quotes with TeX-style
  quotes, alternating between ``` `` ``` and `''`.
- `check_parity(matrix)`: checks the row and column parity of a 0/1 matrix.
  It returns `"OK"`, `"Corrupt"`, or `"Change bit (i,j)"` with 1-based
  positions.

### `judgekit.dynamic`

- `knapsack(items, capacity)`: 0/1 knapsack over `(price, weight)` items.
  `super_sale(items, capacities)` adds up the best value for each capacity.
- `partition_products(values, n)`: puts `n` of the values in one group and the
  rest in the other, and returns the largest and the smallest product of the
  two group sums. Partial sums outside `[-5000, 5000]` are not considered.
- `history_grading(correct, student)`: the longest-common-subsequence score
  of two rankings. Each ranking gives the rank of every event.
- `smallest_window(n, m, k)`: the length of the shortest window of the
  generated sequence that holds every value from 1 to `k`, or `None`.
- `lotto_combinations(numbers)`: every pick of six numbers, in the order they
  were given.
- `min_max_daily_distance(distances, nights)`: the smallest possible longest
  day's walk when you stop at most `nights` times.
- `overtime_cost(morning, evening, limit, rate)`: the least overtime paid
  when morning and evening routes are paired greedily.

### `judgekit.graphs`

- `DisjointSet`: union-find with `find(x)` and `union(x, y)`. `union`
  returns `False` when the two elements are already in one set.
- `shortest_path(n, edges, source, target)`: Dijkstra over undirected edges
  `(u, v, w)` on nodes `0..n-1`. It returns `None` when the target cannot be
  reached.
- `kth_shortest_path(n, edges, source, target, k)`: the length of the k-th
  shortest walk over directed edges on nodes `1..n`, or `None`.
- `max_saving(n, edges)`: the total weight of the edges left out of a maximum
  spanning forest.
- `best_starter(links)`: the start whose chain of single forwarding links
  reaches the most nodes. Ties go to the smallest start.
- `destruction_sum(dist, order)`: the sum of all-pairs shortest distances
  before each removal in `order`. In `dist`, `NO_ROAD` marks a missing road.
- `count_oil_deposits(grid)`: the number of eight-connected regions of `@`
  cells.

## Command line

The `judgekit` command takes a problem number and reads that problem's input
from a file, or from standard input if no file is given. It prints the
answers in the judge's format:

```
judgekit 10035 input.txt
judgekit 583 < input.txt
```

The supported problem numbers are `10035` (carry operations), `10986`
(shortest path), `11536` (smallest window), `12442` (forwarding chains),
`441` (lotto) and `583` (prime factors). If the input cannot be read or
parsed, the command prints an error to standard error and exits with
status 1.

From Python, `judgekit.cli.solve(problem, text)` does the same with strings
and returns the output text.

## Limits

The command answers only the problems listed above. All the other solutions
are available from the library and have no command-line form.