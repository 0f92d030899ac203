"""
Glyph buffer plumbing around the interpreter.

A shaper hands us a buffer of glyphs whose codepoints spell out
'program/input'. We decode that into text, run it, and replace the buffer
with one glyph per output character, resolved through the font.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

import numpy as np

from bf_shaper.brainfuck import MalformedProgram
from bf_shaper.core.bf_runner import DEFAULT_STEP_LIMIT, run

NOTDEF_GLYPH = 0


@dataclass
class Glyph:
    codepoint: int
    flags: int = 0
    x_advance: int = 0
    y_advance: int = 0
    cluster: int = 0
    x_offset: int = 0
    y_offset: int = 0


@dataclass
class GlyphBuffer:
    glyphs: List[Glyph] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> 'GlyphBuffer':
        """Unshaped buffer: one glyph per character, cluster = index."""
        return cls([Glyph(codepoint=ord(c), cluster=i) for i, c in enumerate(text)])

    @classmethod
    def from_codes(cls, codes: Iterable[int]) -> 'GlyphBuffer':
        return cls([Glyph(codepoint=int(c), cluster=i) for i, c in enumerate(codes)])

    def codepoints(self) -> List[int]:
        return [g.codepoint for g in self.glyphs]


class Font:
    """Glyph lookup interface the shaper needs from a font."""

    def get_glyph(self, codepoint: int, variation_selector: int = 0) -> int:
        raise NotImplementedError

    def get_glyph_h_advance(self, glyph_id: int) -> int:
        raise NotImplementedError


class CmapFont(Font):
    """In-memory font: a character map plus per-glyph advances.
    Unmapped code points resolve to .notdef (glyph 0).
    """

    def __init__(self, cmap: Dict[int, int], advances: Optional[Dict[int, int]] = None,
                 default_advance: int = 0):
        self.cmap = dict(cmap)
        self.advances = dict(advances or {})
        self.default_advance = default_advance

    def get_glyph(self, codepoint: int, variation_selector: int = 0) -> int:
        return self.cmap.get(codepoint, NOTDEF_GLYPH)

    def get_glyph_h_advance(self, glyph_id: int) -> int:
        return self.advances.get(glyph_id, self.default_advance)


class MonospaceFont(Font):
    """Maps every Unicode scalar to a glyph with the same id and a fixed advance."""

    def __init__(self, advance: int = 600):
        self.advance = advance

    def get_glyph(self, codepoint: int, variation_selector: int = 0) -> int:
        return codepoint if 0 <= codepoint < 0x110000 else NOTDEF_GLYPH

    def get_glyph_h_advance(self, glyph_id: int) -> int:
        return self.advance


def decode_glyph_codes(codes: Iterable[int]) -> str:
    """Truncate each code to one byte and decode the bytes as UTF-8.
    Invalid sequences become U+FFFD rather than failing.
    """
    raw = np.fromiter((int(c) for c in codes), dtype=np.int64)
    return (raw & 0xFF).astype(np.uint8).tobytes().decode('utf-8', errors='replace')


def create_glyphs_from_string(text: str) -> List[Glyph]:
    """One glyph per character, newlines removed, clusters numbered from 0."""
    chars = (c for c in text if c != '\n')
    return [Glyph(codepoint=ord(c), cluster=ix) for ix, c in enumerate(chars)]


def shape(font: Font, buffer: GlyphBuffer, max_steps: Optional[int] = DEFAULT_STEP_LIMIT) -> int:
    """Replace the buffer's glyphs with the program's output glyphs.
    Returns 1 on success and 0 for a malformed program, in which case the
    buffer is left as it was.
    """
    text = decode_glyph_codes(buffer.codepoints())
    try:
        output = run(text, max_steps=max_steps)
    except MalformedProgram:
        return 0

    glyphs = create_glyphs_from_string(output)
    for glyph in glyphs:
        glyph.codepoint = font.get_glyph(glyph.codepoint, 0)
        glyph.x_advance = font.get_glyph_h_advance(glyph.codepoint)
    buffer.glyphs = glyphs
    return 1
