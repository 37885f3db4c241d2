"""Scales, their modes and the interval patterns they are built from."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import cycle, islice

from pmusic.interval import Interval


class _Ordinal:
    @property
    def index(self) -> int:
        """Position of the member in declaration order."""
        return list(type(self)).index(self)


class Mode(_Ordinal, Enum):
    IONIAN = "Ionian"
    DORIAN = "Dorian"
    PHRYGIAN = "Phrygian"
    LYDIAN = "Lydian"
    MIXOLYDIAN = "Mixolydian"
    AEOLIAN = "Aeolian"
    LOCRIAN = "Locrian"


class PentatonicMode(_Ordinal, Enum):
    MAJOR = "Major"
    SUSPENDED = "Suspended"
    BLUES_MINOR = "BluesMinor"
    BLUES_MAJOR = "BluesMajor"
    MINOR = "Minor"


class ScaleLength(Enum):
    TETRATONIC = 4
    PENTATONIC = 5
    HEPTATONIC = 7
    DODECATONIC = 12


class ScaleKind(Enum):
    CHROMATIC = "chromatic"
    DIATONIC = "diatonic"
    PENTATONIC = "pentatonic"
    TETRATONIC = "tetratonic"


def base_intervals(length: ScaleLength) -> list[Interval]:
    """The step pattern that the modes of a scale of this length rotate."""
    if length is ScaleLength.PENTATONIC:
        return [Interval.MAJ2, Interval.MAJ2, Interval.MIN3, Interval.MAJ2, Interval.MIN3]
    return [
        Interval.MAJ2,
        Interval.MAJ2,
        Interval.MIN2,
        Interval.MAJ2,
        Interval.MAJ2,
        Interval.MAJ2,
        Interval.MIN2,
    ]


_MODE_TYPES = {
    ScaleKind.CHROMATIC: None,
    ScaleKind.TETRATONIC: None,
    ScaleKind.DIATONIC: Mode,
    ScaleKind.PENTATONIC: PentatonicMode,
}

_DEFAULT_MODES = {
    ScaleKind.DIATONIC: Mode.IONIAN,
    ScaleKind.PENTATONIC: PentatonicMode.MAJOR,
}


@dataclass(frozen=True)
class Scale:
    """A scale kind with its mode; the default is the major (Ionian) scale."""

    kind: ScaleKind = ScaleKind.DIATONIC
    mode: Mode | PentatonicMode | None = None

    def __post_init__(self) -> None:
        expected = _MODE_TYPES[self.kind]
        if expected is None:
            if self.mode is not None:
                raise ValueError(f"a {self.kind.value} scale has no mode")
        elif self.mode is None:
            object.__setattr__(self, "mode", _DEFAULT_MODES[self.kind])
        elif not isinstance(self.mode, expected):
            raise ValueError(f"{self.mode!r} is not a mode of a {self.kind.value} scale")

    def intervals(self) -> list[Interval]:
        """Steps between consecutive degrees, ending on the octave."""
        if self.kind is ScaleKind.CHROMATIC:
            return [Interval.MIN2] * ScaleLength.DODECATONIC.value
        if self.kind is ScaleKind.TETRATONIC:
            return [Interval.MIN2, Interval.MAJ2, Interval.MAJ3]
        length = ScaleLength.PENTATONIC if self.kind is ScaleKind.PENTATONIC else ScaleLength.HEPTATONIC
        start = self.mode.index
        return list(islice(cycle(base_intervals(length)), start, start + length.value))

    @classmethod
    def parse(cls, text: str) -> Scale:
        """Parse a scale name such as ``ionian``, ``minor`` or ``pentaminor``."""
        try:
            return _SCALE_NAMES[text.upper()]
        except KeyError:
            raise ValueError("Unknown scale") from None

    def __str__(self) -> str:
        if self.kind in (ScaleKind.CHROMATIC, ScaleKind.TETRATONIC):
            return f"{self.kind.value} scale"
        if self.kind is ScaleKind.PENTATONIC:
            return f"pentatonic {self.mode.value} mode"
        if self.mode is Mode.AEOLIAN:
            return "minor scale"
        if self.mode is Mode.IONIAN:
            return "major scale"
        return f"{self.mode.value} mode"


_SCALE_NAMES = {
    "IONIAN": Scale(ScaleKind.DIATONIC, Mode.IONIAN),
    "MAJOR": Scale(ScaleKind.DIATONIC, Mode.IONIAN),
    "DORIAN": Scale(ScaleKind.DIATONIC, Mode.DORIAN),
    "PHRYGIAN": Scale(ScaleKind.DIATONIC, Mode.PHRYGIAN),
    "LYDIAN": Scale(ScaleKind.DIATONIC, Mode.LYDIAN),
    "MIXOLYDIAN": Scale(ScaleKind.DIATONIC, Mode.MIXOLYDIAN),
    "AEOLIAN": Scale(ScaleKind.DIATONIC, Mode.AEOLIAN),
    "MINOR": Scale(ScaleKind.DIATONIC, Mode.AEOLIAN),
    "LOCRIAN": Scale(ScaleKind.DIATONIC, Mode.LOCRIAN),
    "PENTATONIC": Scale(ScaleKind.PENTATONIC, PentatonicMode.MAJOR),
    "PENTAMAJOR": Scale(ScaleKind.PENTATONIC, PentatonicMode.MAJOR),
    "PENTASUSPENDED": Scale(ScaleKind.PENTATONIC, PentatonicMode.SUSPENDED),
    "PENTABLUESMAJOR": Scale(ScaleKind.PENTATONIC, PentatonicMode.BLUES_MAJOR),
    "PENTABLUESMINOR": Scale(ScaleKind.PENTATONIC, PentatonicMode.BLUES_MINOR),
    "PENTAMINOR": Scale(ScaleKind.PENTATONIC, PentatonicMode.MINOR),
    "CHROMATIC": Scale(ScaleKind.CHROMATIC),
    "TETRATONIC": Scale(ScaleKind.TETRATONIC),
}