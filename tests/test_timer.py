import io

import pytest

from contest_solvers.timer import main, max_time


def test_worked_example():
    assert max_time(5, 3, [1, 1, 7]) == 9


@pytest.mark.parametrize("b", [1, 4, 10])
def test_without_tools_time_is_start(b):
    assert max_time(10, b, []) == b


@pytest.mark.parametrize("step", [1, 2, 3, 4])
def test_small_increments_add_fully(step):
    assert max_time(5, 2, [step]) == 2 + step


def test_large_increments_are_capped():
    capped = max_time(5, 2, [4])
    assert max_time(5, 2, [100]) == capped
    assert max_time(5, 2, [10**12]) == capped


def test_result_is_monotone_in_increments():
    base = [3, 1, 8, 2]
    bigger = [step + 1 for step in base]
    assert max_time(6, 3, bigger) >= max_time(6, 3, base)


def test_order_of_tools_is_irrelevant():
    tools = [9, 1, 4, 2, 7]
    assert max_time(5, 2, tools) == max_time(5, 2, sorted(tools))


def test_main_prints_one_line_per_case(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n5 3 3\n1 1 7\n7 1 0\n"))
    assert main([]) == 0
    expected = [str(max_time(5, 3, [1, 1, 7])), str(max_time(7, 1, []))]
    assert capsys.readouterr().out.split() == expected