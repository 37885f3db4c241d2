"""Chords: a root key with intervals stacked above it."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable

from pmusic.interval import Interval
from pmusic.piano_key import PianoKey
from pmusic.pitch import Pitch


class ChordType(Enum):
    MAJOR_TRIAD = "maj"
    MAJOR_SIXTH = "maj6"
    DOMINANT_SEVENTH = "dom7"
    AUGMENTED_TRIAD = "aug"
    AUGMENTED_SEVENTH = "aug7"
    MINOR_TRIAD = "min"
    MINOR_SIXTH = "min6"
    MINOR_SEVENTH = "min7"
    MINOR_MAJOR_SEVENTH = "minmaj7"
    DIMINISHED_TRIAD = "dim"
    DIMINISHED_SEVENTH = "dim7"
    HALF_DIMINISHED_SEVENTH = "hdim7"
    POWER_DIAD = "pow2"
    POWER_TRIAD = "pow3"
    CUSTOM_CHORD = "custom"

    def intervals(self) -> list[Interval]:
        """Intervals above the root that make up the chord."""
        return list(_CHORD_INTERVALS[self])

    @classmethod
    def parse(cls, text: str) -> ChordType:
        """Parse a chord symbol such as ``maj``, ``min7`` or ``dim``."""
        wanted = text.upper()
        for member in cls:
            if member is not cls.CUSTOM_CHORD and member.value.upper() == wanted:
                return member
        raise ValueError("Unknown chord")

    def __str__(self) -> str:
        return self.value


_I = Interval
_CHORD_INTERVALS = {
    ChordType.MAJOR_TRIAD: (_I.MAJ3, _I.PERFECT5),
    ChordType.MAJOR_SIXTH: (_I.MAJ3, _I.PERFECT5, _I.MAJ6),
    ChordType.DOMINANT_SEVENTH: (_I.MAJ3, _I.PERFECT5, _I.MIN7),
    ChordType.AUGMENTED_TRIAD: (_I.MAJ3, _I.MIN6),
    ChordType.AUGMENTED_SEVENTH: (_I.MAJ3, _I.MIN6, _I.MIN7),
    ChordType.MINOR_TRIAD: (_I.MIN3, _I.PERFECT5),
    ChordType.MINOR_SIXTH: (_I.MIN3, _I.PERFECT5, _I.MAJ6),
    ChordType.MINOR_SEVENTH: (_I.MIN3, _I.PERFECT5, _I.MIN7),
    ChordType.MINOR_MAJOR_SEVENTH: (_I.MIN3, _I.PERFECT5, _I.MAJ7),
    ChordType.DIMINISHED_TRIAD: (_I.MIN3, _I.TRITONE),
    ChordType.DIMINISHED_SEVENTH: (_I.MIN3, _I.TRITONE, _I.MAJ6),
    ChordType.HALF_DIMINISHED_SEVENTH: (_I.MIN3, _I.TRITONE, _I.MIN7),
    ChordType.POWER_DIAD: (_I.PERFECT5,),
    ChordType.POWER_TRIAD: (_I.PERFECT5, _I.OCTAVE),
    ChordType.CUSTOM_CHORD: (),
}


class ChordInversion(Enum):
    ROOT = 0
    FIRST = 1
    SECOND = 2
    THIRD = 3


@dataclass(frozen=True)
class Chord:
    """A chord of a given type on a base key, optionally inverted.

    A custom chord takes its intervals from ``intervals``.
    """

    chord_type: ChordType = ChordType.MAJOR_TRIAD
    base_note: PianoKey = PianoKey()
    inversion: ChordInversion = ChordInversion.ROOT
    intervals: tuple[Interval, ...] | None = None

    def with_intervals(self, intervals: Iterable[Interval]) -> Chord:
        return replace(self, intervals=tuple(intervals))

    def keys(self) -> list[PianoKey]:
        """The keys of the chord from lowest to highest."""
        if self.chord_type is ChordType.CUSTOM_CHORD and self.intervals is not None:
            intervals = list(self.intervals)
        else:
            intervals = self.chord_type.intervals()
        keys = [self.base_note] + [self.base_note + interval for interval in intervals]

        shift = self.inversion.value
        if shift > len(keys):
            raise ValueError(f"a chord of {len(keys)} notes has no {self.inversion.name.lower()} inversion")
        keys = keys[shift:] + keys[:shift]

        if keys[0].octave > self.base_note.octave:
            diff = keys[0].octave - self.base_note.octave
            keys = [replace(key, octave=key.octave - diff) for key in keys]

        ordered = [keys[0]]
        for key in keys[1:]:
            previous = ordered[-1]
            if key.octave < previous.octave:
                key = replace(key, octave=previous.octave)
            elif Pitch.from_piano_key(key) < Pitch.from_piano_key(previous):
                key = replace(key, octave=previous.octave + 1)
            ordered.append(key)
        return ordered

    def keys_string(self) -> str:
        return "| " + "".join(f"{key} " for key in self.keys()) + "|"

    def __str__(self) -> str:
        return f"{self.base_note}{self.chord_type}"