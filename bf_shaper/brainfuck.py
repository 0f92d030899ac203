#!/usr/bin/env python3
"""
Brainfuck Interpreter

Brainfuck is an esoteric programming language with only 8 commands:
    >   Move the pointer to the right
    <   Move the pointer to the left
    +   Increment the memory cell at the pointer
    -   Decrement the memory cell at the pointer
    .   Output the character signified by the cell at the pointer
    ,   Input a character and store it in the cell at the pointer
    [   Jump past the matching ] if the cell at the pointer is 0
    ]   Jump back to the matching [ if the cell at the pointer is nonzero

All other characters are treated as comments and ignored.

The tape is circular: both the pointer and the cells wrap around.
Reading past the end of the input stores 0 in the cell.
"""

import numpy as np

TAPE_SIZE = 30000
TRACE_STEPS = 50  # debug trace covers only the first steps


class MalformedProgram(SyntaxError):
    """Raised when a program has an unmatched bracket."""

    def __init__(self, bracket, position):
        super().__init__(f"Unmatched '{bracket}' at position {position}")
        self.bracket = bracket
        self.position = position

    def __reduce__(self):
        return (type(self), (self.bracket, self.position))


class BrainfuckInterpreter:
    def __init__(self, memory_size=TAPE_SIZE):
        self.memory_size = memory_size
        self._reset()

    def run(self, code, input_data="", max_steps=None, debug=False):
        """Execute Brainfuck code with optional input data.

        max_steps bounds the number of executed instructions; None means
        no limit. When the budget runs out the output produced so far is
        returned and hit_step_limit is set.
        """
        jump_table = self._build_jump_table(code)
        self._reset()
        input_chars = iter(input_data)

        while self.instruction_pointer < len(code):
            if max_steps is not None and self.steps >= max_steps:
                self.hit_step_limit = True
                break

            if debug and self.steps < TRACE_STEPS:
                self._trace(code)

            self._execute(code, jump_table, input_chars)
            self.instruction_pointer += 1
            self.steps += 1

        return ''.join(self.output)

    def _reset(self):
        self.memory = np.zeros(self.memory_size, dtype=np.uint8)
        self.pointer = 0
        self.instruction_pointer = 0
        self.loop_stack = []
        self.output = []
        self.steps = 0
        self.input_reads = 0
        self.output_writes = 0
        self.hit_step_limit = False

    def _execute(self, code, jump_table, input_chars):
        """Dispatch the command at the instruction pointer."""
        cmd = code[self.instruction_pointer]

        if cmd == '>':
            self.pointer = (self.pointer + 1) % self.memory_size

        elif cmd == '<':
            self.pointer = (self.pointer + self.memory_size - 1) % self.memory_size

        elif cmd == '+':
            self.memory[self.pointer] = (int(self.memory[self.pointer]) + 1) & 0xFF

        elif cmd == '-':
            self.memory[self.pointer] = (int(self.memory[self.pointer]) - 1) & 0xFF

        elif cmd == '.':
            self.output.append(chr(int(self.memory[self.pointer])))
            self.output_writes += 1

        elif cmd == ',':
            # Exhausted input reads as NUL
            char = next(input_chars, '\0')
            self.memory[self.pointer] = ord(char) & 0xFF
            self.input_reads += 1

        elif cmd == '[':
            if self.memory[self.pointer] == 0:
                self.instruction_pointer = jump_table[self.instruction_pointer]
            else:
                self.loop_stack.append(self.instruction_pointer)

        elif cmd == ']':
            if self.memory[self.pointer] != 0:
                # Land on the '[' so the uniform advance enters the body
                self.instruction_pointer = self.loop_stack[-1]
            else:
                self.loop_stack.pop()

    def _trace(self, code):
        print(f"Step {self.steps:2d}: IP={self.instruction_pointer:2d} "
              f"CMD={code[self.instruction_pointer]!r} PTR={self.pointer} "
              f"CELL={self.memory[self.pointer]} MEM={self.memory[:5].tolist()}")

    def _build_jump_table(self, code):
        """Map each '[' position to its matching ']' position.

        Raises MalformedProgram for the first unmatched ']' or, once the
        whole program is scanned, the innermost unmatched '['.
        """
        jump_table = {}
        stack = []

        for i, cmd in enumerate(code):
            if cmd == '[':
                stack.append(i)
            elif cmd == ']':
                if not stack:
                    raise MalformedProgram(']', i)
                jump_table[stack.pop()] = i

        if stack:
            raise MalformedProgram('[', stack[-1])

        return jump_table
