"""Chord progressions written in roman-numeral notation."""

from __future__ import annotations

import string
from dataclasses import dataclass, field

from pmusic.chord import Chord, ChordInversion, ChordType
from pmusic.key import Key
from pmusic.piano_key import PianoKey
from pmusic.scale import Scale

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_ROMAN_TABLE = [
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"), (100, "C"), (90, "XC"),
    (50, "L"), (40, "XL"), (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
]
_MARKS = {"°": "dim", "ø": "hdim7", "↑": "aug", "p": "pow"}


def _int_to_roman(number: int) -> str:
    parts = []
    for value, symbol in _ROMAN_TABLE:
        count, number = divmod(number, value)
        parts.append(symbol * count)
    return "".join(parts)


def roman_to_int(text: str) -> int:
    """Value of an upper-case roman numeral written in its canonical form."""
    if not text or any(char not in _ROMAN_VALUES for char in text):
        raise ValueError(f"{text!r} is not a roman numeral")
    values = [_ROMAN_VALUES[char] for char in text]
    total = sum(
        -value if value < following else value
        for value, following in zip(values, values[1:] + [0])
    )
    if _int_to_roman(total) != text:
        raise ValueError(f"{text!r} is not a roman numeral")
    return total


def _parse_chord(symbol: str, notes: list[PianoKey]) -> Chord:
    if not symbol:
        raise ValueError("empty chord in progression")
    last = symbol[-1]
    second_last = symbol[-2] if len(symbol) > 1 else None
    chord_type = "maj" if symbol.upper() == symbol else "min"
    degree = symbol

    if last in _MARKS:
        chord_type = _MARKS[last]
        degree = degree.replace(last, "")
    elif last in string.digits:
        if second_last in _MARKS:
            chord_type = _MARKS[second_last]
            degree = degree.replace(second_last, "")
        chord_type += last
        degree = degree.replace(last, "")

    number = roman_to_int(degree.upper())
    if number > len(notes):
        raise ValueError(f"degree {number} is beyond the scale")
    return Chord(ChordType.parse(chord_type), notes[number - 1], ChordInversion.ROOT)


@dataclass
class ChordProgression:
    """A progression such as ``I-V-vi-IV`` and the chords it names."""

    progression: str
    chords: list[Chord] = field(default_factory=list)

    @classmethod
    def from_scale_and_str(cls, scale: Scale, base_note: PianoKey, text: str) -> ChordProgression:
        """Build the chords of a progression on the degrees of a scale."""
        notes = Key(scale, base_note, 1).all_keys()
        return cls(text, [_parse_chord(symbol, notes) for symbol in text.split("-")])

    @classmethod
    def default(cls) -> ChordProgression:
        """I-V-vi-IV in C major from C4."""
        return cls.from_scale_and_str(Scale(), PianoKey.parse("C4"), "I-V-vi-IV")

    def __str__(self) -> str:
        chords = "[ " + "".join(f"{chord} " for chord in self.chords) + "]"
        return f"{self.progression} ({chords})"