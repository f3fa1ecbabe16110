import pytest

from recursive_list.__main__ import SCENARIOS, main


def test_all_scenarios(capsys: pytest.CaptureFixture[str]):
    assert 0 == main([])
    out = capsys.readouterr().out.splitlines()
    assert [
        "10",
        "20",
        "30",
        "---",
        "2",
        "4",
        "6",
        "8",
        "iter2: 0, 1",
        "iter2: 1, 2",
        "iter2: 2, 3",
        "iter2: 3, 4",
    ] == out


def test_single_scenario(capsys: pytest.CaptureFixture[str]):
    assert 0 == main(["double"])
    assert "2\n4\n6\n8\n" == capsys.readouterr().out


def test_trace_goes_to_stderr(capsys: pytest.CaptureFixture[str]):
    main(["pop", "--trace"])
    captured = capsys.readouterr()
    assert "10\n20\n30\n---\n" == captured.out
    assert "push 10: RecursiveList.from_items([10])" in captured.err
    assert "pop: RecursiveList.from_items([])" in captured.err


def test_list(capsys: pytest.CaptureFixture[str]):
    assert 0 == main(["--list"])
    assert list(SCENARIOS) == capsys.readouterr().out.split()


def test_unknown_scenario():
    with pytest.raises(SystemExit) as exit_info:
        main(["nope"])
    assert 2 == exit_info.value.code


def test_scenarios_are_immutable():
    with pytest.raises(TypeError):
        SCENARIOS["more"] = lambda _: None  # type: ignore
