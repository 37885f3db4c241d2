"""Rhythm patterns filling one measure."""

from __future__ import annotations

import random

from pmusic.rhythm import NoteValue, NoteValueBase, NoteValueDotted, TimeSignature

_WHOLE = NoteValue(NoteValueBase.WHOLE)
_HALF = NoteValue(NoteValueBase.HALF)
_DOTTED_HALF = NoteValue(NoteValueBase.HALF, NoteValueDotted.DOTTED)
_QUARTER = NoteValue(NoteValueBase.QUARTER)
_DOTTED_QUARTER = NoteValue(NoteValueBase.QUARTER, NoteValueDotted.DOTTED)
_EIGHTH = NoteValue(NoteValueBase.EIGHTH)
_SIXTEENTH = NoteValue(NoteValueBase.SIXTEENTH)

_CHORD_PATTERNS = {
    1.0: [
        [_WHOLE],
        [_HALF, _HALF],
        [_WHOLE, _HALF, _HALF],
    ],
    0.75: [
        [_DOTTED_HALF],
        [_HALF, _QUARTER],
    ],
}

_COMMON_PATTERNS = {
    1.0: [
        [_QUARTER, _QUARTER, _QUARTER, _EIGHTH, _EIGHTH],
        [_EIGHTH, _EIGHTH, _EIGHTH, _QUARTER, _EIGHTH, _QUARTER],
        [_EIGHTH, _QUARTER, _QUARTER, _EIGHTH, _EIGHTH, _EIGHTH],
        [_QUARTER, _EIGHTH, _QUARTER, _EIGHTH, _EIGHTH, _EIGHTH],
        [_DOTTED_QUARTER, _QUARTER, _EIGHTH, _EIGHTH, _EIGHTH],
    ],
    0.75: [
        [_QUARTER, _EIGHTH, _EIGHTH, _EIGHTH, _EIGHTH],
        [_EIGHTH, _EIGHTH, _QUARTER, _EIGHTH, _EIGHTH],
    ],
}

# Repeated entries weight the draw towards shorter notes.
_WEIGHTED_VALUES = (
    [_WHOLE] + [_HALF] * 2 + [_QUARTER] * 3 + [_EIGHTH] * 4 + [_SIXTEENTH] * 6
)


def _pick_pattern(table: dict[float, list[list[NoteValue]]], time_signature: TimeSignature,
                  rng: random.Random) -> list[NoteValue]:
    patterns = table.get(float(time_signature))
    if patterns is None:
        return []
    return list(rng.choice(patterns))


def chord_rhythm_pattern(time_signature: TimeSignature, rng: random.Random) -> list[NoteValue]:
    """A rhythm for chord accompaniment; empty for signatures other than 4/4 and 3/4."""
    return _pick_pattern(_CHORD_PATTERNS, time_signature, rng)


def common_rhythm_pattern(time_signature: TimeSignature, rng: random.Random) -> list[NoteValue]:
    """One of a few common melody rhythms; empty for signatures other than 4/4 and 3/4."""
    return _pick_pattern(_COMMON_PATTERNS, time_signature, rng)


def random_rhythm_pattern(time_signature: TimeSignature, rng: random.Random) -> list[NoteValue]:
    """Random note values that exactly fill one measure."""
    total = float(time_signature)
    shortest = min(value.relative_duration() for value in _WEIGHTED_VALUES)
    pattern: list[NoteValue] = []
    filled = 0.0
    while filled < total:
        if total - filled < shortest:
            raise ValueError(f"a measure of {time_signature} cannot be filled exactly")
        picked = rng.choice(_WEIGHTED_VALUES)
        while filled + picked.relative_duration() > total:
            picked = rng.choice(_WEIGHTED_VALUES)
        pattern.append(picked)
        filled = sum(value.relative_duration() for value in pattern)
    return pattern