"""Keys of a piano keyboard: a note together with its octave."""

from __future__ import annotations

import string
from dataclasses import dataclass, replace

from pmusic.interval import Interval
from pmusic.note import Accidental, Note, NoteLetter, char_strs

MAX_OCTAVE = 8


@dataclass(frozen=True)
class PianoKey:
    """A note in a given octave; the default is C0."""

    note: Note = Note()
    octave: int = 0

    @classmethod
    def parse(cls, text: str) -> PianoKey:
        """Parse a key such as ``A4``, ``Gb2`` or ``F#8``."""
        chars = char_strs(text)
        if not chars:
            raise ValueError(f"{text} is not a valid note")
        last = chars[-1]
        if last not in string.digits:
            raise ValueError(f"{last} is not a valid octave")
        octave = int(last)
        note = Note.parse(text[:-1])
        if octave > MAX_OCTAVE:
            raise ValueError(f"{octave} is too high!")
        return cls(note, octave)

    def next(self) -> PianoKey:
        """The key one semitone higher, spelled with sharps."""
        note = self.note
        if note.accidental is Accidental.SHARP:
            return replace(self, note=Note(note.letter.next()))
        if note.accidental is Accidental.FLAT:
            return replace(self, note=Note(note.letter))
        if note.letter is NoteLetter.B:
            return PianoKey(Note(note.letter.next()), self.octave + 1)
        if note.letter is NoteLetter.E:
            return replace(self, note=Note(note.letter.next()))
        return replace(self, note=Note(note.letter, Accidental.SHARP))

    def get_distance(self, other: PianoKey) -> int:
        """Number of semitones between two keys, whichever is higher."""
        if self.octave != other.octave:
            low, high = (other, self) if self.octave > other.octave else (self, other)
        else:
            delta = self.note.interval_from_c().semitones - other.note.interval_from_c().semitones
            low, high = (other, self) if delta > 0 else (self, other)

        distance = 0
        current = low
        while current != high:
            current = current.next()
            distance += 1
            if current.octave > high.octave:
                raise ValueError(f"{high} cannot be reached by stepping up from {low}")
        return distance

    def __add__(self, interval: object) -> PianoKey:
        if not isinstance(interval, Interval):
            return NotImplemented
        key = self
        for _ in range(interval.semitones):
            key = key.next()
        return key

    def __str__(self) -> str:
        return f"{self.note}{self.octave}"