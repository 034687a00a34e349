import io

import pytest

from ossim.bankers import (
    ResourceState,
    SafetyScan,
    format_need,
    format_table,
    format_verdict,
    main,
    parse_state,
)

ALLOCATION = [[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]]
MAXIMUM = [[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]]
AVAILABLE = (3, 3, 2)


def _state():
    return ResourceState(ALLOCATION, MAXIMUM, AVAILABLE)


def _unsafe_state():
    return ResourceState([[1, 0], [0, 1]], [[2, 1], [1, 2]], (0, 0))


def _as_text(state):
    numbers = [state.processes, state.resources]
    for matrix in (state.allocation, state.maximum):
        for row in matrix:
            numbers.extend(row)
    numbers.extend(state.available)
    return " ".join(str(n) for n in numbers)


def test_need_matrix():
    assert _state().need() == ((7, 4, 3), (1, 2, 2), (6, 0, 0), (0, 1, 1), (4, 3, 1))


def test_need_plus_allocation_is_maximum():
    state = _state()
    for need_row, alloc_row, max_row in zip(state.need(), state.allocation, state.maximum):
        assert [a + b for a, b in zip(need_row, alloc_row)] == list(max_row)


def test_restart_scan_sequence():
    assert _state().safe_sequence(SafetyScan.RESTART) == (1, 3, 0, 2, 4)


def test_sweep_scan_sequence():
    assert _state().safe_sequence(SafetyScan.SWEEP) == (1, 3, 4, 0, 2)


@pytest.mark.parametrize("scan", list(SafetyScan))
def test_sequence_is_permutation(scan):
    sequence = _state().safe_sequence(scan)
    assert sorted(sequence) == list(range(5))


@pytest.mark.parametrize("scan", list(SafetyScan))
def test_unsafe_state_has_no_sequence(scan):
    assert _unsafe_state().safe_sequence(scan) is None


def test_is_safe():
    assert _state().is_safe() is True
    assert _unsafe_state().is_safe() is False


def test_safe_sequence_does_not_change_available():
    state = _state()
    state.safe_sequence()
    assert state.available == AVAILABLE


def test_mismatched_dimensions_rejected():
    with pytest.raises(ValueError):
        ResourceState([[1, 2]], [[1, 2], [3, 4]], (0, 0))
    with pytest.raises(ValueError):
        ResourceState([[1, 2, 3]], [[1, 2, 3]], (0, 0))


def test_parse_round_trip():
    state = _state()
    assert parse_state(_as_text(state)) == state


def test_parse_multiline_input():
    text = "1 2\n1 1\n2 2\n0 0\n"
    state = parse_state(text)
    assert state.allocation == ((1, 1),)
    assert state.maximum == ((2, 2),)
    assert state.available == (0, 0)


def test_parse_too_short():
    with pytest.raises(ValueError):
        parse_state("2 2 1 1 1")


def test_parse_non_integer():
    with pytest.raises(ValueError):
        parse_state("1 1 x 1 1")


def test_parse_non_positive_counts():
    with pytest.raises(ValueError):
        parse_state("0 3")


def test_format_table_rows():
    text = format_table(_state())
    lines = text.splitlines()
    assert lines[0] == "Process\t\tAllocation\t\t\tMax\t\t\t\tNeed"
    assert lines[1].startswith("P0\t\t0\t1\t0\t\t\t7\t5\t3\t")
    assert "Available :" in lines
    assert lines[-1] == "3\t3\t2\t"


def test_format_need_lines():
    state = _state()
    lines = format_need(state).splitlines()
    assert lines[0] == "Need Matrix:"
    assert len(lines) == state.processes + 1
    assert lines[1].split() == [str(v) for v in state.need()[0]]


def test_format_verdict_safe_restart():
    state = _state()
    text = format_verdict(state, SafetyScan.RESTART)
    assert "System is in SAFE State" in text
    assert text.endswith("->".join(f"P{p}" for p in state.safe_sequence(SafetyScan.RESTART)))


def test_format_verdict_safe_sweep():
    state = _state()
    text = format_verdict(state, SafetyScan.SWEEP)
    assert "System is SAFE." in text
    assert text.endswith(" ".join(f"P{p}" for p in state.safe_sequence(SafetyScan.SWEEP)))


def test_format_verdict_unsafe():
    assert "UNSAFE" in format_verdict(_unsafe_state(), SafetyScan.RESTART)
    assert "NOT SAFE" in format_verdict(_unsafe_state(), SafetyScan.SWEEP)


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(_as_text(_state())))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Process\t\tAllocation" in out
    assert "System is in SAFE State" in out


def test_main_reads_file_with_sweep(tmp_path, capsys):
    path = tmp_path / "state.txt"
    path.write_text(_as_text(_state()), encoding="utf-8")
    assert main([str(path), "--scan", "sweep"]) == 0
    out = capsys.readouterr().out
    assert "Need Matrix:" in out
    assert "Safe Sequence: " in out


def test_main_no_check(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(_as_text(_state())))
    assert main(["--no-check"]) == 0
    out = capsys.readouterr().out
    assert "Available :" in out
    assert "SAFE" not in out


def test_main_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 2 1"))
    assert main([]) == 1
    assert "error:" in capsys.readouterr().err