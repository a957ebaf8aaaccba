"""Single braille pattern characters and their dot layouts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

_BASE = 0x2800

# Bit index of each dot, by (row, column) in a 4 x 2 cell.
_DOT_BITS = ((0, 3), (1, 4), (2, 5), (6, 7))


@dataclass(frozen=True, order=True)
class BrailleChar:
    """A braille cell stored as its 8-bit dot mask."""

    bits: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.bits <= 0xFF:
            raise ValueError(f"braille dot mask out of range: {self.bits}")

    @classmethod
    def from_dot_pairs(cls, dot_pairs: Sequence[Sequence[bool]]) -> BrailleChar:
        """Build a character from four rows of (left, right) dots."""
        if len(dot_pairs) != 4 or any(len(pair) != 2 for pair in dot_pairs):
            raise ValueError("braille cell needs 4 rows of 2 dots")
        bits = 0
        for pair, row_bits in zip(dot_pairs, _DOT_BITS):
            for dot, bit in zip(pair, row_bits):
                if dot:
                    bits |= 1 << bit
        return cls(bits)

    @classmethod
    def from_char(cls, char: str) -> BrailleChar:
        """Parse a character from the braille patterns block."""
        if len(char) != 1 or not _BASE <= ord(char) <= _BASE + 0xFF:
            raise ValueError("Char is not a valid braille character")
        return cls(ord(char) - _BASE)

    def as_char(self) -> str:
        return chr(_BASE + self.bits)

    def _dot(self, bit: int) -> bool:
        return bool(self.bits & (1 << bit))

    def dot_pairs(self) -> tuple[tuple[bool, bool], ...]:
        """The dots as four rows of (left, right)."""
        return tuple((self._dot(left), self._dot(right)) for left, right in _DOT_BITS)

    def dot_quads(self) -> tuple[tuple[bool, ...], ...]:
        """The dots as two columns of four, top to bottom."""
        return tuple(
            tuple(self._dot(row_bits[column]) for row_bits in _DOT_BITS) for column in (0, 1)
        )

    def __or__(self, other: object) -> BrailleChar:
        if not isinstance(other, BrailleChar):
            return NotImplemented
        return BrailleChar(self.bits | other.bits)

    def __and__(self, other: object) -> BrailleChar:
        if not isinstance(other, BrailleChar):
            return NotImplemented
        return BrailleChar(self.bits & other.bits)

    def __xor__(self, other: object) -> BrailleChar:
        if not isinstance(other, BrailleChar):
            return NotImplemented
        return BrailleChar(self.bits ^ other.bits)

    def __str__(self) -> str:
        return self.as_char()

    def __format__(self, spec: str) -> str:
        """Format as the character; the ``#`` spec gives the 8-bit binary mask."""
        if spec == "#":
            return f"{self.bits:08b}"
        return format(self.as_char(), spec)


def render_rows(rows: Iterable[Iterable[BrailleChar]]) -> str:
    """Render rows of characters, each row ending with a newline."""
    return "".join("".join(str(char) for char in row) + "\n" for row in rows)