"""Sheets of music: notes grouped into measures, patterns and sheets."""

from __future__ import annotations

from dataclasses import dataclass, field

from pmusic.piano_key import PianoKey
from pmusic.rhythm import NoteValue, TimeSignature


class MeasureOverflowError(ValueError):
    """A note is longer than what remains of its measure."""


@dataclass(frozen=True)
class SheetNote:
    note: PianoKey
    value: NoteValue

    def __str__(self) -> str:
        return f"{self.note}{self.value}"


@dataclass
class Measure:
    """Notes filling one measure of a given time signature."""

    time_signature: TimeSignature = field(default_factory=TimeSignature)
    notes: list[SheetNote] = field(default_factory=list)

    def remaining_value(self) -> float:
        """What is left of the measure, in whole notes."""
        used = sum(note.value.relative_duration() for note in self.notes)
        return float(self.time_signature) - used

    def is_complete(self) -> bool:
        return self.remaining_value() == 0.0

    def add_note(self, note: PianoKey, value: NoteValue) -> None:
        if value.relative_duration() > self.remaining_value():
            raise MeasureOverflowError("Measure overflow")
        self.notes.append(SheetNote(note, value))

    def __str__(self) -> str:
        return "".join(f"{note} " for note in self.notes)


@dataclass
class Pattern:
    name: str = ""
    measures: list[Measure] = field(default_factory=list)

    def add_measure(self, measure: Measure) -> None:
        self.measures.append(measure)

    def __str__(self) -> str:
        return "".join(f"{measure} \n" for measure in self.measures)


@dataclass
class Sheet:
    patterns: list[Pattern] = field(default_factory=list)

    def add_pattern(self, pattern: Pattern) -> None:
        self.patterns.append(pattern)

    def __str__(self) -> str:
        return "".join(f"{pattern} \n" for pattern in self.patterns)