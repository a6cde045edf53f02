import io

import pytest

from judgekit.arithmetic import (
    combinations,
    count_carries,
    format_carries,
    format_factorization,
)
from judgekit.cli import main, solve
from judgekit.dynamic import smallest_window
from judgekit.graphs import shortest_path


def test_carries_sample():
    text = "123 456\n555 555\n123 594\n0 0\n"
    assert solve("10035", text) == (
        "No carry operation.\n3 carry operations.\n1 carry operation.\n"
    )


def test_carries_stop_at_end_of_input():
    assert solve("10035", "1 9") == format_carries(count_carries(1, 9)) + "\n"


def test_carries_stop_at_terminator():
    assert solve("10035", "0 0\n5 5\n") == ""


def test_traffic_cases():
    text = "2\n2 1 0 1\n0 1 100\n3 0 0 2\n"
    assert solve("10986", text) == "Case #1: 100\nCase #2: unreachable\n"


def test_traffic_matches_shortest_path():
    text = "1\n3 3 0 2\n0 1 4\n1 2 4\n0 2 20\n"
    edges = [(0, 1, 4), (1, 2, 4), (0, 2, 20)]
    expected = f"Case #1: {shortest_path(3, edges, 0, 2)}\n"
    assert solve("10986", text) == expected


def test_windows_small_k():
    assert solve("11536", "1\n5 5 2\n") == "Case 1: 2\n"


def test_windows_without_answer():
    assert solve("11536", "1\n3 10 4\n") == "Case 1: sequence nai\n"


def test_windows_match_smallest_window():
    assert solve("11536", "1\n20 12 4\n") == f"Case 1: {smallest_window(20, 12, 4)}\n"


def test_lotto_blocks_are_separated_by_blank_line():
    text = "6 1 2 3 4 5 6\n6 7 8 9 10 11 12\n0\n"
    assert solve("441", text) == "1 2 3 4 5 6\n\n7 8 9 10 11 12\n"


def test_lotto_lists_every_combination():
    lines = solve("441", "7 1 2 3 4 5 6 7\n0\n").splitlines()
    assert len(lines) == combinations(7, 6)
    assert lines[0] == "1 2 3 4 5 6"
    assert len(set(lines)) == len(lines)


def test_factors_negative_number():
    assert solve("583", "-190\n0\n") == format_factorization(-190) + "\n"


def test_factors_stop_at_zero():
    assert solve("583", "12\n0\n13\n") == format_factorization(12) + "\n"


def test_mails_cycle():
    assert solve("12442", "1\n3\n1 2\n2 3\n3 1\n") == "Case 1: 1\n"


def test_unknown_problem():
    with pytest.raises(ValueError):
        solve("99999", "")


def test_truncated_input():
    with pytest.raises(ValueError):
        solve("10986", "1\n2 1 0 1\n")


def test_non_integer_input():
    with pytest.raises(ValueError):
        solve("583", "twelve\n")


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("12\n0\n", encoding="utf-8")
    assert main(["583", str(path)]) == 0
    assert capsys.readouterr().out == solve("583", "12\n0\n")


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("123 456\n0 0\n"))
    assert main(["10035"]) == 0
    assert capsys.readouterr().out == "No carry operation.\n"


def test_main_reports_missing_file(tmp_path, capsys):
    assert main(["583", str(tmp_path / "absent.txt")]) == 1
    assert "judgekit:" in capsys.readouterr().err


def test_main_rejects_unknown_problem():
    with pytest.raises(SystemExit) as info:
        main(["99999"])
    assert info.value.code == 2