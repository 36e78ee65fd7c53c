import io

import pytest

from contest_solvers.odd_sum_queries import answer_queries, main

VALUES = [2, 2, 1, 3, 2]


@pytest.mark.parametrize("position", range(1, len(VALUES) + 1))
def test_replacing_with_same_value_keeps_parity(position):
    query = (position, position, VALUES[position - 1])
    assert answer_queries(VALUES, [query]) == [sum(VALUES) % 2 == 1]


@pytest.mark.parametrize("k", [0, 1, 4, 7])
def test_full_range_depends_only_on_replacement(k):
    n = len(VALUES)
    assert answer_queries(VALUES, [(1, n, k)]) == [(k * n) % 2 == 1]


def test_odd_length_range_flips_with_k():
    first, second = answer_queries(VALUES, [(2, 4, 3), (2, 4, 4)])
    assert first != second


def test_even_length_range_ignores_k():
    first, second = answer_queries(VALUES, [(1, 2, 3), (1, 2, 8)])
    assert first == second


def test_queries_do_not_accumulate():
    single = answer_queries(VALUES, [(1, 3, 9)])
    repeated = answer_queries(VALUES, [(1, 5, 1), (1, 3, 9)])
    assert repeated[1] == single[0]


@pytest.mark.parametrize("query", [(0, 2, 1), (2, 6, 1), (4, 2, 1)])
def test_out_of_range_queries_raise(query):
    with pytest.raises(ValueError):
        answer_queries(VALUES, [query])


def test_main_prints_yes_no(monkeypatch, capsys):
    text = "1\n5 3\n2 2 1 3 2\n2 3 3\n1 5 5\n1 2 4\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    lines = capsys.readouterr().out.split()
    expected = answer_queries(VALUES, [(2, 3, 3), (1, 5, 5), (1, 2, 4)])
    assert lines == ["YES" if odd else "NO" for odd in expected]