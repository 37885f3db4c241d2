"""Choosing chord progressions suited to a scale."""

from __future__ import annotations

import random

from pmusic.rhythm import TimeSignature
from pmusic.scale import Mode, PentatonicMode, Scale, ScaleKind

CHORD_SYMBOLS = [
    symbol
    for degree in ("I", "II", "III", "IV", "V", "VI", "VII")
    for symbol in (
        degree, degree, degree.lower(), degree.lower(),
        # Only the fourth degree has an upper-case diminished symbol.
        (degree if degree == "IV" else degree.lower()) + "°",
        degree + "↑", degree + "p3",
    )
]

_DORIAN_LIKE = ["i-III", "i-III-IV", "i-III-I", "i-III-I-i", "i-III-I-I-III-i"]
_PENTA_MAJOR = ["I-III-IV", "ii-IV-I"]

_DIATONIC = {
    Mode.IONIAN: [
        "I-IV-V-I", "I-V-vi-IV", "I-vi-IV-V", "vi-VI-I-V", "i-v-iv-i",
        "I-vi-ii-V", "I-V-vi-iii-IV-I-IV-V", "I-ii-iii-IV-V", "V-IV-I", "ii-V-I",
    ],
    Mode.DORIAN: ["i-IV", "i-IV-V", "i-IV-I", "i-IV-I-i", "i-IV-I-I-IV-i"],
    Mode.PHRYGIAN: [
        "i-II", "II-i", "i-II-i", "i-vii", "i-v°",
        "i-v°-II-i", "i-iv-II-i", "i-VI-II", "i-vii-II-i", "ii-II-III-II",
    ],
    Mode.LYDIAN: ["iii-IV°-V", "I-II", "I-II-vii-vi", "I-IV°-ii-V", "I-V-II", "vi-V-I-II"],
    Mode.MIXOLYDIAN: [
        "I-IV-v-I", "I-ii-IV-I-IV-v-I", "I-VII-IV-iv-v-IV-I",
        "I-v-I-VII-IV-v-I", "I-I-IV-I-VII-IV-I",
    ],
    Mode.AEOLIAN: ["VI-VII-i-VII", "VI-VII-i-III", "VI-III-VII", "III-VII-i"],
    Mode.LOCRIAN: ["i-iii-i-V", "i-vii-iv-iii"],
}

_PENTATONIC = {
    PentatonicMode.MAJOR: _PENTA_MAJOR,
    PentatonicMode.SUSPENDED: _DORIAN_LIKE,
    PentatonicMode.BLUES_MINOR: _DORIAN_LIKE,
    PentatonicMode.BLUES_MAJOR: _PENTA_MAJOR,
    PentatonicMode.MINOR: _PENTA_MAJOR + _DORIAN_LIKE,
}


def progressions_for_scale(scale: Scale) -> list[str]:
    """The progressions that sound idiomatic in a scale."""
    if scale.kind is ScaleKind.DIATONIC:
        return list(_DIATONIC[scale.mode])
    if scale.kind is ScaleKind.PENTATONIC:
        return list(_PENTATONIC[scale.mode])
    return ["I"]


def generate_chord_progression(scale: Scale, time_signature: TimeSignature, full_random: bool,
                               rng: random.Random) -> str:
    """Pick a progression for the scale, or string together 2 to 7 random chords."""
    if not full_random:
        return rng.choice(progressions_for_scale(scale))
    count = rng.choice(range(2, 8))
    return "-".join(rng.choice(CHORD_SYMBOLS) for _ in range(count))