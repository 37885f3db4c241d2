import pytest

from pmusic.chord import ChordType
from pmusic.chord_progression import ChordProgression, roman_to_int
from pmusic.piano_key import PianoKey
from pmusic.scale import Mode, Scale, ScaleKind


def test_chord_i_v_vi_iv_c_major_scale():
    assert str(ChordProgression.default()) == "I-V-vi-IV ([ C4maj G4maj A4min F4maj ])"


def test_chord_i_ii_iii7_viidim_viidim7_c_major_scale():
    progression = ChordProgression.from_scale_and_str(
        Scale(), PianoKey.parse("C4"), "I-ii6-iii7-vii°-vii°7"
    )
    assert str(progression) == "I-ii6-iii7-vii°-vii°7 ([ C4maj D4min6 E4min7 B4dim B4dim7 ])"


def test_augmented_and_power_chords():
    progression = ChordProgression.from_scale_and_str(Scale(), PianoKey.parse("C2"), "I↑-Vp3-IV°")
    assert [c.chord_type for c in progression.chords] == [
        ChordType.AUGMENTED_TRIAD,
        ChordType.POWER_TRIAD,
        ChordType.DIMINISHED_TRIAD,
    ]
    assert [str(c.base_note) for c in progression.chords] == ["C2", "G2", "F2"]


def test_minor_scale_progression():
    progression = ChordProgression.from_scale_and_str(
        Scale(ScaleKind.DIATONIC, Mode.AEOLIAN), PianoKey.parse("A4"), "VI-VII-i-III"
    )
    assert str(progression) == "VI-VII-i-III ([ F4maj G4maj A4min C4maj ])"


@pytest.mark.parametrize("text, value", [("I", 1), ("IV", 4), ("VII", 7), ("IX", 9), ("XIV", 14)])
def test_roman_to_int(text, value):
    assert roman_to_int(text) == value


@pytest.mark.parametrize("text", ["", "IIII", "VV", "IM", "A"])
def test_roman_to_int_rejects(text):
    with pytest.raises(ValueError):
        roman_to_int(text)


@pytest.mark.parametrize("text", ["IX", "Ip", "I--V", "Q"])
def test_invalid_progression(text):
    with pytest.raises(ValueError):
        ChordProgression.from_scale_and_str(Scale(), PianoKey.parse("C4"), text)