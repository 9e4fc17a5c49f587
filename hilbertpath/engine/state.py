"""Entry/direction recurrence from Hamilton's compact Hilbert index.

Each transform call starts from ``RecurrenceState.initial()`` and threads a
new state through every order level; states are values, never shared.
"""

from __future__ import annotations

from dataclasses import dataclass

from hilbertpath.utils.bitfield import gray_encode, rotate_left, rotate_right, trailing_set_bits


def direction(w: int, dimension: int) -> int:
    """Intra sub-cube direction for the w-th cell of the gray-code walk."""
    if w == 0:
        return 0
    if w % 2 == 0:
        return trailing_set_bits(w - 1, dimension) % dimension
    return trailing_set_bits(w, dimension) % dimension


def entry(w: int) -> int:
    """Entry corner of the w-th sub-cube."""
    if w == 0:
        return 0
    return gray_encode(2 * ((w - 1) // 2))


@dataclass(frozen=True)
class RecurrenceState:
    entry: int = 0
    direction: int = 0

    @classmethod
    def initial(cls) -> RecurrenceState:
        return cls(0, 0)

    def advance(self, w: int, dimension: int) -> RecurrenceState:
        """State for the next level after descending into sub-cube ``w``."""
        return RecurrenceState(
            entry=self.entry ^ rotate_left(entry(w), self.direction + 1, dimension),
            direction=(self.direction + direction(w, dimension) + 1) % dimension,
        )

    def transform(self, bits: int, dimension: int) -> int:
        # T(e, d): coordinate bits -> gray-code label
        return rotate_right(bits ^ self.entry, self.direction + 1, dimension)

    def inverse_transform(self, bits: int, dimension: int) -> int:
        # T^-1(e, d): gray-code label -> coordinate bits
        return rotate_left(bits, self.direction + 1, dimension) ^ self.entry
