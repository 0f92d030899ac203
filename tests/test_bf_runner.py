import pytest

from bf_shaper.brainfuck import BrainfuckInterpreter, MalformedProgram
from bf_shaper.core.bf_runner import read_step_limit, run, split_program_input


@pytest.mark.parametrize("text, expected", [
    ("abc/def", ("abc", "def")),
    ("abc", ("abc", "")),
    ("a/b/c", ("a", "b/c")),
    ("/xyz", ("", "xyz")),
    ("abc/", ("abc", "")),
    ("", ("", "")),
])
def test_split_program_input(text, expected):
    assert split_program_input(text) == expected


def test_split_with_custom_separator():
    assert split_program_input("+.|in|put", separator="|") == ("+.", "in|put")


def test_run_multiplication():
    assert run("++++++++[>++++++++<-]>.") == "@"


def test_run_echo_input():
    assert run(",./X") == "X"
    assert run(",.") == "\0"


def test_separator_inside_input_is_literal():
    assert run(",.,./a/") == "a/"


def test_run_raises_for_malformed_program():
    with pytest.raises(MalformedProgram):
        run("+[./[]")


def test_run_uses_given_interpreter():
    itp = BrainfuckInterpreter()
    assert run("+[]", max_steps=10, itp=itp) == ""
    assert itp.hit_step_limit
    assert itp.memory[0] == 1


@pytest.mark.parametrize("value, expected", [
    ("5000", 5000),
    ("0", None),
    ("-1", None),
])
def test_read_step_limit(monkeypatch, value, expected):
    monkeypatch.setenv("BF_STEP_LIMIT", value)
    assert read_step_limit() == expected


def test_read_step_limit_unset(monkeypatch):
    monkeypatch.delenv("BF_STEP_LIMIT", raising=False)
    assert read_step_limit() is None


def test_read_step_limit_rejects_garbage(monkeypatch):
    monkeypatch.setenv("BF_STEP_LIMIT", "lots")
    with pytest.raises(ValueError):
        read_step_limit()
