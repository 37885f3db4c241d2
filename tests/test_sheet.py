import pytest

from pmusic.piano_key import PianoKey
from pmusic.rhythm import NoteValue, NoteValueBase, NoteValueDotted, TimeSignature
from pmusic.sheet import Measure, MeasureOverflowError, Pattern, Sheet, SheetNote

QUARTER = "\U0001D15F"


def test_measure_remaining_value():
    measure = Measure(TimeSignature())
    measure.add_note(PianoKey(), NoteValue())
    assert measure.remaining_value() == 0.75
    measure.add_note(PianoKey(), NoteValue(NoteValueBase.HALF))
    assert measure.remaining_value() == 0.25


def test_measure_is_complete():
    measure = Measure(TimeSignature())
    assert measure.is_complete() is False
    measure.add_note(PianoKey(), NoteValue(NoteValueBase.WHOLE))
    assert measure.is_complete() is True


def test_measure_add_note_over_total_duration():
    measure = Measure(TimeSignature())
    with pytest.raises(MeasureOverflowError):
        measure.add_note(PianoKey(), NoteValue(NoteValueBase.WHOLE, NoteValueDotted.DOTTED))
    assert measure.notes == []


def test_three_four_measure_fills_with_three_quarters():
    measure = Measure(TimeSignature.parse("3/4"))
    for _ in range(3):
        measure.add_note(PianoKey(), NoteValue())
    assert measure.is_complete()
    with pytest.raises(ValueError):
        measure.add_note(PianoKey(), NoteValue(NoteValueBase.SIXTEENTH))


def test_sheet_note_to_str():
    assert str(SheetNote(PianoKey.parse("A#4"), NoteValue())) == "A#4" + QUARTER


def test_measure_pattern_sheet_to_str():
    measure = Measure()
    measure.add_note(PianoKey(), NoteValue())
    measure.add_note(PianoKey.parse("D4"), NoteValue())
    assert str(measure) == f"C0{QUARTER} D4{QUARTER} "

    pattern = Pattern("Pattern 0")
    pattern.add_measure(measure)
    assert str(pattern) == f"C0{QUARTER} D4{QUARTER}  \n"

    sheet = Sheet()
    sheet.add_pattern(pattern)
    sheet.add_pattern(pattern)
    assert len(sheet.patterns) == 2
    assert str(sheet) == (f"C0{QUARTER} D4{QUARTER}  \n \n") * 2