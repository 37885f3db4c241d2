"""Tempo, note values and time signatures."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Tempo:
    """A tempo in beats per minute."""

    bpm: int

    def bps(self) -> float:
        """Beats per second."""
        return self.bpm / 60.0


class NoteValueBase(Enum):
    """The undotted length of a note, as a fraction of a whole note."""

    WHOLE = 1
    HALF = 2
    QUARTER = 4
    EIGHTH = 8
    SIXTEENTH = 16

    def __str__(self) -> str:
        return _BASE_SYMBOLS[self]


_BASE_SYMBOLS = {
    NoteValueBase.WHOLE: "\U0001D15D",
    NoteValueBase.HALF: "\U0001D15E",
    NoteValueBase.QUARTER: "\U0001D15F",
    NoteValueBase.EIGHTH: "\U0001D160",
    NoteValueBase.SIXTEENTH: "\U0001D161",
}


class NoteValueDotted(Enum):
    DOTTED = 2
    DOUBLE_DOTTED = 4
    TRIPLE_DOTTED = 8

    @property
    def dots(self) -> int:
        return {2: 1, 4: 2, 8: 3}[self.value]

    def __str__(self) -> str:
        return "." * self.dots


@dataclass(frozen=True)
class NoteValue:
    """A note length; the default is an undotted quarter note."""

    base: NoteValueBase = NoteValueBase.QUARTER
    dotted: NoteValueDotted | None = None

    def relative_duration(self) -> float:
        """Length as a fraction of a whole note."""
        base = 1.0 / self.base.value
        dots = self.dotted.dots if self.dotted is not None else 0
        return base + sum(base / 2**n for n in range(1, dots + 1))

    def duration_for_tempo(self, tempo: Tempo) -> float:
        """Length in seconds at the given tempo, counting quarter-note beats."""
        return (self.relative_duration() * 4.0) / tempo.bps()

    def __str__(self) -> str:
        return f"{self.base}{self.dotted or ''}"


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        return 0
    value = int(text)
    return value if _INT32_MIN <= value <= _INT32_MAX else 0


@dataclass(frozen=True)
class TimeSignature:
    """A time signature stored as the length of a measure in whole notes."""

    value: float = 1.0

    @classmethod
    def parse(cls, text: str) -> TimeSignature:
        """Parse a signature such as ``3/4``; the lower figure must be a power of two."""
        parts = text.split("/")
        if len(parts) == 2:
            total = _parse_int(parts[0])
            counting = _parse_int(parts[1])
            if counting > 0 and total > 0 and counting & (counting - 1) == 0:
                return cls(total * (1.0 / counting))
        raise ValueError(f"{text} is not a valid signature")

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        numerator = int(self.value * 1000)
        denominator = 1000
        divisor = math.gcd(numerator, denominator)
        numerator //= divisor
        denominator //= divisor
        if denominator == 1:
            numerator *= 4
            denominator *= 4
        elif denominator == 2:
            numerator *= 2
            denominator *= 2
        return f"{numerator}/{denominator}"