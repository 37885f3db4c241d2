import pytest

from pmusic.interval import Interval as I
from pmusic.scale import (
    Mode,
    PentatonicMode,
    Scale,
    ScaleKind,
    ScaleLength,
    base_intervals,
)


def test_default_is_major():
    assert Scale() == Scale(ScaleKind.DIATONIC, Mode.IONIAN)
    assert Scale().intervals() == [I.MAJ2, I.MAJ2, I.MIN2, I.MAJ2, I.MAJ2, I.MAJ2, I.MIN2]


def test_base_intervals():
    assert base_intervals(ScaleLength.PENTATONIC) == [I.MAJ2, I.MAJ2, I.MIN3, I.MAJ2, I.MIN3]
    assert len(base_intervals(ScaleLength.HEPTATONIC)) == 7


def test_dorian_intervals():
    scale = Scale(ScaleKind.DIATONIC, Mode.DORIAN)
    assert scale.intervals() == [I.MAJ2, I.MIN2, I.MAJ2, I.MAJ2, I.MAJ2, I.MIN2, I.MAJ2]


def test_aeolian_intervals():
    scale = Scale(ScaleKind.DIATONIC, Mode.AEOLIAN)
    assert scale.intervals() == [I.MAJ2, I.MIN2, I.MAJ2, I.MAJ2, I.MIN2, I.MAJ2, I.MAJ2]


def test_pentatonic_minor_intervals():
    scale = Scale(ScaleKind.PENTATONIC, PentatonicMode.MINOR)
    assert scale.intervals() == [I.MIN3, I.MAJ2, I.MAJ2, I.MIN3, I.MAJ2]


def test_pentatonic_blues_minor_intervals():
    scale = Scale(ScaleKind.PENTATONIC, PentatonicMode.BLUES_MINOR)
    assert scale.intervals() == [I.MIN3, I.MAJ2, I.MIN3, I.MAJ2, I.MAJ2]


def test_chromatic_and_tetratonic():
    assert Scale(ScaleKind.CHROMATIC).intervals() == [I.MIN2] * 12
    assert Scale(ScaleKind.TETRATONIC).intervals() == [I.MIN2, I.MAJ2, I.MAJ3]


@pytest.mark.parametrize(
    "kind, mode",
    [
        (ScaleKind.DIATONIC, Mode.IONIAN),
        (ScaleKind.DIATONIC, Mode.LOCRIAN),
        (ScaleKind.PENTATONIC, PentatonicMode.SUSPENDED),
    ],
)
def test_intervals_span_an_octave(kind, mode):
    total = sum(i.semitones for i in Scale(kind, mode).intervals())
    assert total == 12


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Ionian", Scale(ScaleKind.DIATONIC, Mode.IONIAN)),
        ("major", Scale(ScaleKind.DIATONIC, Mode.IONIAN)),
        ("MINOR", Scale(ScaleKind.DIATONIC, Mode.AEOLIAN)),
        ("pentatonic", Scale(ScaleKind.PENTATONIC, PentatonicMode.MAJOR)),
        ("PentaBluesMinor", Scale(ScaleKind.PENTATONIC, PentatonicMode.BLUES_MINOR)),
        ("chromatic", Scale(ScaleKind.CHROMATIC)),
        ("tetratonic", Scale(ScaleKind.TETRATONIC)),
    ],
)
def test_parse(text, expected):
    assert Scale.parse(text) == expected


def test_parse_unknown():
    with pytest.raises(ValueError, match="Unknown scale"):
        Scale.parse("hexatonic")


@pytest.mark.parametrize(
    "scale, expected",
    [
        (Scale(), "major scale"),
        (Scale(ScaleKind.DIATONIC, Mode.AEOLIAN), "minor scale"),
        (Scale(ScaleKind.DIATONIC, Mode.DORIAN), "Dorian mode"),
        (Scale(ScaleKind.PENTATONIC, PentatonicMode.BLUES_MAJOR), "pentatonic BluesMajor mode"),
        (Scale(ScaleKind.CHROMATIC), "chromatic scale"),
        (Scale(ScaleKind.TETRATONIC), "tetratonic scale"),
    ],
)
def test_str(scale, expected):
    assert str(scale) == expected


def test_default_modes_and_validation():
    assert Scale(ScaleKind.PENTATONIC).mode is PentatonicMode.MAJOR
    with pytest.raises(ValueError):
        Scale(ScaleKind.CHROMATIC, Mode.IONIAN)
    with pytest.raises(ValueError):
        Scale(ScaleKind.DIATONIC, PentatonicMode.MINOR)