"""Musical intervals measured in semitones, and their size in cents."""

from __future__ import annotations

from enum import Enum

SEMITONE_CENTS = 100.0
OCTAVE_SEMITONES = 12


def semitones_to_cents(semitones: int) -> float:
    """Return the size in cents of a number of equal-tempered semitones."""
    return semitones * SEMITONE_CENTS


class Interval(Enum):
    """An interval within one octave, valued by its number of semitones."""

    UNISON = 0
    MIN2 = 1
    MAJ2 = 2
    MIN3 = 3
    MAJ3 = 4
    PERFECT4 = 5
    TRITONE = 6
    PERFECT5 = 7
    MIN6 = 8
    MAJ6 = 9
    MIN7 = 10
    MAJ7 = 11
    OCTAVE = 12

    @property
    def semitones(self) -> int:
        return self.value

    def __int__(self) -> int:
        return self.value

    @classmethod
    def from_semitones(cls, semitones: int) -> Interval:
        """Fold any number of semitones into an interval below the octave."""
        return cls(semitones % OCTAVE_SEMITONES)

    def __add__(self, other: object) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval.from_semitones(self.value + other.value % OCTAVE_SEMITONES)

    def __sub__(self, other: object) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        delta = self.value - other.value
        if delta < 0:
            delta += OCTAVE_SEMITONES
        return Interval.from_semitones(delta)

    def cents(self) -> float:
        """Size of the interval in cents."""
        return semitones_to_cents(self.value)