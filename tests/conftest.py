import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bf_shaper.brainfuck import BrainfuckInterpreter


@pytest.fixture
def itp():
    return BrainfuckInterpreter()
