from bf_shaper.brainfuck import BrainfuckInterpreter
from bf_shaper.brainfuck_debugger import BrainfuckDebugger


def test_debug_run_matches_interpreter(capsys):
    debugger = BrainfuckDebugger(memory_size=15, show_memory_range=6)
    code = ",[>++<-]>."
    expected = BrainfuckInterpreter(memory_size=15).run(code, chr(3))
    assert debugger.debug_run(code, chr(3)) == expected == chr(6)
    out = capsys.readouterr().out
    assert "🐛 BRAINFUCK DEBUGGER" in out
    assert "🎯 FINAL RESULT:" in out
    assert "Output: '\\x06' → [6]" in out


def test_debug_run_shows_initial_state_and_eof(capsys):
    debugger = BrainfuckDebugger(memory_size=8, show_memory_range=4)
    debugger.debug_run(",+.", "a")
    out = capsys.readouterr().out
    assert "INITIAL:" in out
    assert "Program:  [,]+." in out
    assert "Input:    [a]" in out
    assert "Input:    a[EOF]" in out
    assert "Step 1: Execute ',' at position 0" in out
    assert "Output:   'b' → [98]" in out


def test_debug_run_marks_pointer(capsys):
    debugger = BrainfuckDebugger(memory_size=8, show_memory_range=4)
    debugger.debug_run(">+")
    out = capsys.readouterr().out
    assert "Memory:   [  0|  1|  0|  0]" in out
    assert "Address:     0   1   2   3" in out
    assert "Pointer:         ^    " in out


def test_debug_run_step_limit(capsys):
    debugger = BrainfuckDebugger(memory_size=8)
    assert debugger.debug_run("+[]", max_steps=10) == ""
    assert debugger.hit_step_limit
    out = capsys.readouterr().out
    assert "Execution stopped after 10 steps" in out


def test_debug_run_shows_open_loops(capsys):
    debugger = BrainfuckDebugger(memory_size=8, show_memory_range=4)
    debugger.debug_run("+[-]")
    out = capsys.readouterr().out
    assert "Loops:    depth 1, open at [1]" in out
    assert out.count("Loops:    (none)") >= 2
