"""Frequencies of notes in equal temperament."""

from __future__ import annotations

from dataclasses import dataclass

from pmusic.interval import Interval, semitones_to_cents
from pmusic.piano_key import PianoKey

STANDARD_PITCH = 440.0
MIDDLE_C = 261.626
C_ZERO = 16.352
TOLERANCE = 0.1


@dataclass(frozen=True, eq=False)
class Pitch:
    """A frequency in hertz; equal when within a tenth of a hertz."""

    hertz: float = STANDARD_PITCH

    @classmethod
    def from_piano_key(cls, key: PianoKey) -> Pitch:
        """The pitch of a key's natural letter in its octave."""
        pitch = cls(C_ZERO)
        for _ in range(key.octave):
            pitch = pitch.add_interval(Interval.OCTAVE)
        return pitch.add_interval(key.note.letter.interval_from_c())

    def add_cents(self, cents: float) -> Pitch:
        return Pitch(self.hertz * 2.0 ** (cents / Interval.OCTAVE.cents()))

    def add_semitones(self, semitones: int) -> Pitch:
        return self.add_cents(semitones_to_cents(semitones))

    def add_interval(self, interval: Interval) -> Pitch:
        return self.add_cents(interval.cents())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return abs(self.hertz - other.hertz) < TOLERANCE

    __hash__ = None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self.hertz < other.hertz

    def __float__(self) -> float:
        return self.hertz