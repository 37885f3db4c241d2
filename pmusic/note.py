"""Note letters, accidentals and notes without an octave."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from functools import reduce
from operator import add

from pmusic.interval import Interval
from pmusic.scale import Scale, ScaleKind


def char_strs(text: str) -> list[str]:
    """Split a string into its characters."""
    return list(text)


class NoteLetter(Enum):
    C = 0
    D = 1
    E = 2
    F = 3
    G = 4
    A = 5
    B = 6

    @classmethod
    def parse(cls, text: str) -> NoteLetter:
        try:
            return cls[text.upper()]
        except KeyError:
            raise ValueError(f"{text} is not a valid note") from None

    def next(self) -> NoteLetter:
        """The following letter, wrapping from B to C."""
        return NoteLetter((self.value + 1) % len(NoteLetter))

    def interval_from_c(self) -> Interval:
        """Distance of the natural note above C in the major scale."""
        steps = Scale().intervals()[: self.value]
        return reduce(add, steps, Interval.UNISON)


class Accidental(Enum):
    FLAT = "b"
    SHARP = "#"

    @classmethod
    def parse(cls, text: str) -> Accidental:
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"{text} is not a valid accidental") from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Note:
    """A pitch class spelled as a letter with an optional accidental."""

    letter: NoteLetter = NoteLetter.C
    accidental: Accidental | None = None

    @classmethod
    def parse(cls, text: str) -> Note:
        """Parse a note such as ``A``, ``Bb`` or ``F#``."""
        chars = char_strs(text)
        if not chars:
            raise ValueError(f"{text} is not a valid note")
        letter = NoteLetter.parse(chars[0])
        accidental = Accidental.parse(chars[1]) if len(chars) > 1 else None
        return cls(letter, accidental)

    @classmethod
    def from_interval(cls, interval: Interval) -> Note:
        """The note this interval lies above C."""
        steps = Scale(ScaleKind.CHROMATIC).intervals()[: interval.value]
        return cls() + reduce(add, steps, Interval.UNISON)

    def interval_from_c(self) -> Interval:
        base = self.letter.interval_from_c()
        if self.accidental is Accidental.FLAT:
            return Interval.from_semitones(base.semitones - 1)
        if self.accidental is Accidental.SHARP:
            return base + Interval.MIN2
        return base

    def get_offset(self, other: Note) -> Interval:
        """The interval from ``other`` up to this note."""
        return self.interval_from_c() - other.interval_from_c()

    def next(self) -> Note:
        """The note one semitone higher, spelled with sharps."""
        if self.accidental is Accidental.SHARP:
            return Note(self.letter.next())
        if self.accidental is Accidental.FLAT:
            return Note(self.letter)
        if self.letter in (NoteLetter.B, NoteLetter.E):
            return Note(self.letter.next())
        return replace(self, accidental=Accidental.SHARP)

    def __add__(self, interval: object) -> Note:
        if not isinstance(interval, Interval):
            return NotImplemented
        note = self
        for _ in range(interval.semitones):
            note = note.next()
        return note

    def __str__(self) -> str:
        return f"{self.letter.name}{self.accidental or ''}"