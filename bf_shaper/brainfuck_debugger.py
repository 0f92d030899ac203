#!/usr/bin/env python3
"""
Brainfuck Step-by-Step Debugger

Shows the step-by-step execution of a Brainfuck program, displaying the
state of the memory tape, input stream, and output at each step.
"""

from bf_shaper.brainfuck import BrainfuckInterpreter, TAPE_SIZE


class BrainfuckDebugger(BrainfuckInterpreter):
    """Brainfuck interpreter that prints its state after every step."""

    def __init__(self, memory_size=TAPE_SIZE, show_memory_range=10):
        super().__init__(memory_size)
        self.show_memory_range = show_memory_range

    def debug_run(self, code, input_data="", max_steps=100):
        """Execute Brainfuck code, printing the machine state after each step."""
        print("🐛 BRAINFUCK DEBUGGER")
        print(f"Program: {code}")
        print(f"Input: {input_data!r} (as codes: {[ord(c) for c in input_data]})")
        print("=" * 80)

        jump_table = self._build_jump_table(code)
        self._reset()
        input_chars = iter(input_data)

        self._show_state(code, input_data, "INITIAL")

        while self.instruction_pointer < len(code):
            if max_steps is not None and self.steps >= max_steps:
                self.hit_step_limit = True
                break

            cmd = code[self.instruction_pointer]
            print(f"\nStep {self.steps + 1}: Execute {cmd!r} at position {self.instruction_pointer}")

            self._execute(code, jump_table, input_chars)
            self.instruction_pointer += 1
            self.steps += 1

            self._show_state(code, input_data, f"AFTER STEP {self.steps}")

        if self.hit_step_limit:
            print(f"\n⚠️ Execution stopped after {max_steps} steps (possible infinite loop)")

        result = ''.join(self.output)
        print("\n🎯 FINAL RESULT:")
        print(f"Output: {result!r} → {[ord(c) for c in result]}")
        return result

    def _show_state(self, code, input_data, label):
        """Show current state of memory, pointer, loops, and program."""
        print(f"\n{label}:")
        print(f"Program:  {_mark(code, self.instruction_pointer)}")

        input_display = _mark(input_data, self.input_reads)
        if self.input_reads >= len(input_data):
            input_display += "[EOF]"
        print(f"Input:    {input_display}")

        # Open loops, outermost first
        if self.loop_stack:
            print(f"Loops:    depth {len(self.loop_stack)}, open at {self.loop_stack}")
        else:
            print("Loops:    (none)")

        # Memory window around the pointer
        start = max(0, self.pointer - self.show_memory_range // 2)
        end = min(len(self.memory), start + self.show_memory_range)
        if end - start < self.show_memory_range:
            start = max(0, end - self.show_memory_range)

        window = range(start, end)
        print("Memory:   [" + "|".join(f"{int(self.memory[i]):3d}" for i in window) + "]")
        print("Pointer:   " + " ".join("  ^" if i == self.pointer else "   " for i in window))
        print("Address:   " + " ".join(f"{i:3d}" for i in window))

        if self.output:
            output_chars = ''.join(self.output)
            print(f"Output:   {output_chars!r} → {[ord(c) for c in self.output]}")
        else:
            print("Output:   (empty)")


def _mark(text, index):
    """Bracket the character at index."""
    if index >= len(text):
        return text
    return f"{text[:index]}[{text[index]}]{text[index + 1:]}"
