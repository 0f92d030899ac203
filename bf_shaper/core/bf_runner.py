from typing import Optional, Tuple
import os

from dotenv import load_dotenv

from bf_shaper.brainfuck import BrainfuckInterpreter

load_dotenv()

SEPARATOR = "/"


def read_step_limit(default: str = "0") -> Optional[int]:
    """Step budget from BF_STEP_LIMIT; 0 or a negative value means unbounded."""
    limit = int(os.environ.get("BF_STEP_LIMIT", default))
    return limit if limit > 0 else None


DEFAULT_STEP_LIMIT = read_step_limit()


def split_program_input(text: str, separator: str = SEPARATOR) -> Tuple[str, str]:
    """Split raw text at the first separator into (program, input).
    Without a separator the whole text is the program and input is empty.
    """
    program, _, input_data = text.partition(separator)
    return program, input_data


def run(program_and_input: str, max_steps: Optional[int] = DEFAULT_STEP_LIMIT,
        itp: Optional[BrainfuckInterpreter] = None) -> str:
    """Run 'program/input' text and return its output.
    Pass itp to inspect the interpreter state afterwards; by default a fresh
    interpreter is used. Raises MalformedProgram for unbalanced brackets.
    """
    program, input_data = split_program_input(program_and_input)
    itp = itp or BrainfuckInterpreter()
    return itp.run(program, input_data, max_steps=max_steps)
