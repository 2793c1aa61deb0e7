import os

import pytest

from ossim.processes import display_reverse, format_values, main, sort_and_exec, zombie_orphan_demo


def test_format_values():
    assert format_values([5, 2, 9, 1, 5]) == "5 2 9 1 5 "


def test_format_values_empty():
    assert format_values([]) == ""


def test_display_reverse_returns_reversed(capsys):
    assert display_reverse(["1", "2", "3"]) == [3, 2, 1]
    assert "[Display Program] Array in reverse order: 3 2 1 " in capsys.readouterr().out


def test_display_reverse_rejects_non_integer():
    with pytest.raises(ValueError):
        display_reverse(["1", "x"])


def test_main_reverse(capsys):
    assert main(["reverse", "4", "5"]) == 0
    assert "Array in reverse order: 5 4 " in capsys.readouterr().out


def test_sort_and_exec_runs_display_program(capfd):
    assert sort_and_exec([5, 2, 9, 1, 5]) == [1, 2, 5, 5, 9]
    out = capfd.readouterr().out
    assert "[Main Program] Sorted array: 1 2 5 5 9 " in out
    assert "[Display Program] Array in reverse order: 9 5 5 2 1 " in out
    assert out.index("Display Program") < out.index("Child process finished")


def test_zombie_orphan_demo(capfd):
    orphan = zombie_orphan_demo([5, 2, 9, 1, 5], delay=0)
    _, status = os.waitpid(orphan, 0)
    assert os.waitstatus_to_exitcode(status) == 0
    out = capfd.readouterr().out
    assert "Unsorted array: 5 2 9 1 5 " in out
    assert "Sorted array by child: 1 2 5 5 9 " in out
    assert "Parent collected zombie (wait done)" in out
    assert "I am now an ORPHAN process." in out