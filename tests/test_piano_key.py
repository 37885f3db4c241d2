import pytest

from pmusic.interval import Interval as I
from pmusic.note import Accidental, Note, NoteLetter
from pmusic.piano_key import PianoKey


def test_default_key():
    assert PianoKey() == PianoKey(Note(NoteLetter.C, None), 0)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("A4", PianoKey(Note(NoteLetter.A), 4)),
        ("Gb2", PianoKey(Note(NoteLetter.G, Accidental.FLAT), 2)),
        ("F#8", PianoKey(Note(NoteLetter.F, Accidental.SHARP), 8)),
    ],
)
def test_parse(text, expected):
    assert PianoKey.parse(text) == expected


@pytest.mark.parametrize("text", ["A9", "Q7", "", "Ax", "4"])
def test_parse_rejects(text):
    with pytest.raises(ValueError):
        PianoKey.parse(text)


def test_to_str():
    assert str(PianoKey()) == "C0"
    assert str(PianoKey.parse("A#4")) == "A#4"
    assert str(PianoKey.parse("Bb5")) == "Bb5"


@pytest.mark.parametrize(
    "interval, expected",
    [(I.MIN2, "C4"), (I.MIN3, "D4"), (I.MAJ3, "D#4"), (I.OCTAVE, "B4")],
)
def test_add_interval(interval, expected):
    assert str(PianoKey.parse("B3") + interval) == expected


def test_next():
    assert PianoKey.parse("B3").next() == PianoKey.parse("C4")
    assert PianoKey.parse("E4").next() == PianoKey.parse("F4")
    assert PianoKey.parse("C4").next() == PianoKey.parse("C#4")
    assert PianoKey.parse("Gb2").next() == PianoKey.parse("G2")


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ("C4", "B3", 1),
        ("C4", "C#4", 1),
        ("C#4", "D5", 13),
        ("D5", "C#4", 13),
        ("A#3", "C4", 2),
        ("F#4", "A5", 15),
    ],
)
def test_get_distance(first, second, expected):
    assert PianoKey.parse(first).get_distance(PianoKey.parse(second)) == expected


def test_get_distance_same_key():
    key = PianoKey.parse("G3")
    assert key.get_distance(key) == 0


def test_get_distance_unreachable_spelling():
    with pytest.raises(ValueError):
        PianoKey.parse("A#4").get_distance(PianoKey.parse("Bb4"))