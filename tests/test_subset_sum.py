import io
from itertools import combinations

import pytest

from contest_solvers.subset_sum import main, sum_achievable


@pytest.mark.parametrize("n", range(1, 8))
def test_matches_exhaustive_enumeration(n):
    for k in range(1, n + 1):
        reachable = {sum(c) for c in combinations(range(1, n + 1), k)}
        for x in range(0, n * (n + 1) // 2 + 3):
            assert sum_achievable(n, k, x) == (x in reachable), (n, k, x)


def test_whole_range_must_sum_to_total():
    n = 10
    total = sum(range(1, n + 1))
    assert sum_achievable(n, n, total) is True
    assert sum_achievable(n, n, total - 1) is False


def test_large_values_do_not_overflow():
    n = 200_000
    assert sum_achievable(n, 1, n) is True
    assert sum_achievable(n, 1, n + 1) is False


def test_main_prints_one_answer_per_case(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n5 3 10\n5 3 13\n"))
    assert main([]) == 0
    expected = [
        "YES" if sum_achievable(5, 3, 10) else "NO",
        "YES" if sum_achievable(5, 3, 13) else "NO",
    ]
    assert capsys.readouterr().out.split() == expected