# contest_solvers

Solvers for a collection of short competitive-programming problems. Each
problem lives in its own module and offers two things:

* a pure function that solves a single test case and returns the answer;
* a `main(argv=None)` command that reads the usual multi-test-case input from
  standard input (first the number of test cases `t`, then each case) and
  prints one answer per case. The commands take no options besides `--help`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Problems

| Module | Function | Command | What it answers |
|---|---|---|---|
| `prefix_reach` | `max_reach(values)` | `prefix-reach` | For each value, in input order, the furthest index in sorted order it can reach by repeatedly absorbing every value not larger than the running prefix sum. |
| `shared_attacks` | `count_shared_attacks(a, b, king, queen)` | `shared-attacks` | Number of cells from which a generalised `(a, b)` knight attacks both the king and the queen (given as `(x, y)` tuples). |
| `odd_sum_queries` | `answer_queries(values, queries)` | `odd-sum-queries` | For each 1-based query `(l, r, k)`, whether replacing `values[l..r]` by `k` makes the total odd. A range outside the array raises `ValueError`. |
| `wheel_count` | `bus_count_range(n)` | `wheel-count` | `(fewest, most)` buses with 4 or 6 wheels giving `n` wheels in total, or `None` when impossible (the command prints `-1`). |
| `halving` | `min_halvings(values)` | `halving` | Fewest floor-halvings making the sequence strictly increasing, or `None` when impossible (the command prints `-1`). |
| `palindrome_removal` | `can_form_palindrome(s, k)` | `palindrome-removal` | Whether removing exactly `k` characters lets the rest be rearranged into a palindrome. A negative `k` raises `ValueError`. |
| `subset_sum` | `sum_achievable(n, k, x)` | `subset-sum` | Whether `k` distinct numbers from `1..n` can sum to `x`. |
| `timer` | `max_time(a, b, increments)` | `timer` | Longest a countdown starting at `b` and capped at `a` can last when every increment is used, each adding at most `a - 1`. |
| `divisor_prefix` | `longest_divisor_prefix(n)` | `divisor-prefix` | Largest `m` such that every number `1..m` divides `n`. |
| `balance` | `min_removals(values, k)` | `balance` | Fewest removals leaving values whose sorted neighbours differ by at most `k`. |
| `run_length` | `required_length(s)` | `run-length` | Longest run of equal adjacent characters in `s`, plus one. |

## Using the functions

```python
from contest_solvers.subset_sum import sum_achievable
from contest_solvers.divisor_prefix import longest_divisor_prefix
from contest_solvers.run_length import required_length

sum_achievable(5, 3, 10)      # True: 1 + 4 + 5
longest_divisor_prefix(12)    # 4
required_length("<<>")        # 3
```

## Using the commands

Every command reads standard input and writes to standard output:

```
printf '2\n5 3 10\n5 3 3\n' | subset-sum
YES
NO
```

```
printf '1\n12\n' | divisor-prefix
4
```

For `palindrome-removal` and `run-length`, each test case begins with the
string's length; it is read but the string's own length is what counts.