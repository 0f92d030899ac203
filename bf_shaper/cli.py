#!/usr/bin/env python3
"""
Run 'program/input' text through the Brainfuck shaper from the command line.

    bf-shaper '++++++++[>++++++++<-]>.'
    bf-shaper ',.,./hi'
    bf-shaper --codes 44,46,47,88 --glyphs
"""

import argparse
import sys
from typing import List, Optional

from bf_shaper.brainfuck import BrainfuckInterpreter, MalformedProgram
from bf_shaper.brainfuck_debugger import BrainfuckDebugger
from bf_shaper.core.bf_runner import DEFAULT_STEP_LIMIT, run, split_program_input
from bf_shaper.core.glyphs import GlyphBuffer, MonospaceFont, decode_glyph_codes, shape


def parse_codes(value: str) -> List[int]:
    """Parse a comma-separated list of glyph codes (decimal or 0x-prefixed)."""
    try:
        return [int(v, 0) for v in value.split(",") if v.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid glyph code list: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="bf-shaper", description="Run Brainfuck 'program/input' text as the shaper would")
    ap.add_argument("text", nargs="?", default=None, help="Raw text: program, optionally followed by '/' and input")
    ap.add_argument("--codes", type=parse_codes, default=None, help="Comma-separated glyph codes to decode instead of TEXT")
    ap.add_argument("--step-limit", type=int, default=DEFAULT_STEP_LIMIT or 0, help="Interpreter max steps per run (0 = unbounded; default from BF_STEP_LIMIT)")
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("--debug", action="store_true", help="Print machine state after every step")
    mode.add_argument("--glyphs", action="store_true", help="Shape with a monospace font and print the resulting glyphs")
    ap.add_argument("--advance", type=int, default=600, help="Horizontal advance of the monospace font used by --glyphs")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.codes is not None and args.text is not None:
        ap.error("TEXT and --codes are mutually exclusive")
    if args.codes is not None:
        text = decode_glyph_codes(args.codes)
    elif args.text is not None:
        text = args.text
    else:
        ap.error("either TEXT or --codes is required")

    max_steps = args.step_limit if args.step_limit > 0 else None

    try:
        if args.glyphs:
            if args.codes is not None:
                buffer = GlyphBuffer.from_codes(args.codes)
            else:
                buffer = GlyphBuffer.from_text(text)
            return _print_glyphs(buffer, args.advance, max_steps)

        if args.debug:
            program, input_data = split_program_input(text)
            itp = BrainfuckDebugger()
            output = itp.debug_run(program, input_data, max_steps=max_steps)
        else:
            itp = BrainfuckInterpreter()
            output = run(text, max_steps=max_steps, itp=itp)
    except MalformedProgram as e:
        print(f"❌ Malformed program: {e}", file=sys.stderr)
        return 1

    if itp.hit_step_limit and not args.debug:
        print(f"⚠️ Execution stopped after {itp.steps} steps (possible infinite loop)", file=sys.stderr)

    if not args.debug:
        print(output)
    return 0


def _print_glyphs(buffer: GlyphBuffer, advance: int, max_steps: Optional[int]) -> int:
    if not shape(MonospaceFont(advance), buffer, max_steps=max_steps):
        print("❌ Malformed program: shaping failed", file=sys.stderr)
        return 1
    for glyph in buffer.glyphs:
        print(f"{glyph.cluster:4d}  U+{glyph.codepoint:04X}  {glyph.x_advance}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
