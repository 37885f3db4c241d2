"""A key: a scale laid out from a base note over some octaves."""

from __future__ import annotations

from dataclasses import dataclass

from pmusic.interval import Interval
from pmusic.note import Note
from pmusic.piano_key import MAX_OCTAVE, PianoKey
from pmusic.scale import Scale


@dataclass(frozen=True)
class Key:
    """A scale starting on a base key, spanning a number of octaves.

    The octave count is reduced so that the key never runs past the top octave.
    """

    scale: Scale = Scale()
    base_note: PianoKey = PianoKey()
    octaves: int = 0

    def __post_init__(self) -> None:
        if self.octaves < 0:
            raise ValueError("octaves cannot be negative")
        if self.base_note.octave + self.octaves > MAX_OCTAVE:
            object.__setattr__(self, "octaves", MAX_OCTAVE - self.base_note.octave)

    def notes(self) -> list[Note]:
        """The notes of one octave of the scale, ending on the base note again."""
        root = self.base_note.note
        notes = [root]
        offset = Interval.UNISON
        for step in self.scale.intervals():
            offset += step
            notes.append(root + offset)
        return notes

    def all_keys(self) -> list[PianoKey]:
        """The keys of the scale, repeated for each octave the key spans."""
        notes = self.notes()
        return [
            PianoKey(note, min(self.base_note.octave + octave, MAX_OCTAVE))
            for octave in range(self.octaves)
            for note in notes
        ]

    def __str__(self) -> str:
        return "[ " + "".join(f"{note} " for note in self.notes()) + "]"