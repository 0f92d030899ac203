"""Brainfuck interpreter run as a glyph-shaping callback."""

from bf_shaper.brainfuck import BrainfuckInterpreter, MalformedProgram, TAPE_SIZE
from bf_shaper.core.bf_runner import SEPARATOR, run, split_program_input

__all__ = [
    "BrainfuckInterpreter",
    "MalformedProgram",
    "SEPARATOR",
    "TAPE_SIZE",
    "run",
    "split_program_input",
]
