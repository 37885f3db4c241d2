"""Melody generation: random sheets, and sheets read from binary files."""

from __future__ import annotations

import copy
import os
import random

from pmusic.key import Key
from pmusic.piano_key import PianoKey
from pmusic.rhythm import NoteValue, TimeSignature
from pmusic.rhythm_patterns import common_rhythm_pattern, random_rhythm_pattern
from pmusic.scale import Scale
from pmusic.sheet import Measure, Pattern, Sheet

MAX_DISTANCE = 5
MAX_DISTANCE_BETWEEN_MEASURES = 14

_SCALE_NAMES = (
    "IONIAN", "DORIAN", "PHRYGIAN", "LYDIAN", "MIXOLYDIAN", "AEOLIAN", "LOCRIAN",
    "PENTATONIC", "PENTASUSPENDED", "PENTABLUESMAJOR", "PENTABLUESMINOR", "PENTAMINOR",
    "CHROMATIC", "TETRATONIC",
)
_BASE_NOTES = ("A4", "A#4", "B4", "C4", "C#4", "D4", "D#4", "E4", "F4", "F#4", "G4", "G#4")


def random_scale(rng: random.Random) -> Scale:
    return Scale.parse(rng.choice(_SCALE_NAMES))


def random_base_note(rng: random.Random) -> PianoKey:
    """A random key of the fourth octave."""
    return PianoKey.parse(rng.choice(_BASE_NOTES))


def generate_pattern(name: str, base_note: PianoKey, scale: Scale, octaves: int, nb_measures: int,
                     use_common_pattern: bool, rng: random.Random) -> Pattern:
    """Random measures of notes from the key, moving by small steps."""
    keys = Key(scale, base_note, octaves).all_keys()
    if not keys:
        raise ValueError("the key has no notes to choose from")
    rhythm = common_rhythm_pattern if use_common_pattern else random_rhythm_pattern

    pattern = Pattern(name)
    last_of_measure: PianoKey | None = None
    for _ in range(nb_measures):
        measure = Measure(TimeSignature())
        previous: PianoKey | None = None
        for value in rhythm(TimeSignature(), rng):
            note = rng.choice(keys)
            while (
                last_of_measure is not None
                and note.get_distance(last_of_measure) > MAX_DISTANCE_BETWEEN_MEASURES
            ) or (
                previous is not None
                and (note == previous or previous.get_distance(note) > MAX_DISTANCE)
            ):
                note = rng.choice(keys)
            last_of_measure = None
            previous = note
            measure.add_note(note, value)
        pattern.add_measure(measure)
        last_of_measure = previous
    return pattern


def generate_sheet(base_note: PianoKey, scale: Scale, octaves: int, nb_measures: int,
                   use_common_pattern: bool, rng: random.Random) -> Sheet:
    """One to three patterns, arranged at random four times as many times."""
    count = rng.choice(range(1, 4))
    patterns = [
        generate_pattern(f"Pattern {i}", base_note, scale, octaves, nb_measures,
                         use_common_pattern, rng)
        for i in range(count)
    ]
    sheet = Sheet()
    for _ in range(count * 4):
        sheet.add_pattern(copy.deepcopy(rng.choice(patterns)))
    return sheet


def read_values(path: str | os.PathLike[str], half_byte_parsing: bool) -> list[int]:
    """The bytes of a file, or its nibbles high one first."""
    with open(path, "rb") as handle:
        data = handle.read()
    if not half_byte_parsing:
        return list(data)
    return [nibble for byte in data for nibble in (byte >> 4 & 0x0F, byte & 0x0F)]


def sheet_from_binary_file(base_note: PianoKey, path: str | os.PathLike[str],
                           half_byte_parsing: bool) -> Sheet:
    """Quarter notes whose distance above the base note is each value of the file.

    A trailing measure that is not complete is dropped.
    """
    pattern = Pattern("")
    measure = Measure(TimeSignature())
    for value in read_values(path, half_byte_parsing):
        note = base_note
        for _ in range(value):
            note = note.next()
        measure.add_note(note, NoteValue())
        if measure.is_complete():
            pattern.add_measure(measure)
            measure = Measure(TimeSignature())
    sheet = Sheet()
    sheet.add_pattern(pattern)
    return sheet