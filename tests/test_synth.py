import itertools
import math

import pytest

from pmusic.chord import Chord, ChordType
from pmusic.chord_progression import ChordProgression
from pmusic.piano_key import PianoKey
from pmusic.rhythm import NoteValue, Tempo
from pmusic.sheet import Measure, Pattern, Sheet
from pmusic.synth import (
    SAMPLE_RATE,
    ChordMusicMaker,
    SheetMusicMaker,
    mix,
    take_duration,
)

TEMPO = 240


def _samples_per_note():
    return round(SAMPLE_RATE * NoteValue().duration_for_tempo(Tempo(TEMPO)))


def _sheet(*names):
    measure = Measure()
    for name in names:
        measure.add_note(PianoKey.parse(name), NoteValue())
    return Sheet([Pattern("p", [measure])])


def _take(source, count):
    return list(itertools.islice(source, count))


def _progression(*roots):
    chords = [Chord(ChordType.MAJOR_TRIAD, PianoKey.parse(root)) for root in roots]
    return ChordProgression("-".join("I" for _ in roots), chords)


def test_sheet_maker_loops_over_its_notes():
    n = _samples_per_note()
    samples = _take(SheetMusicMaker(_sheet("A4"), TEMPO), 2 * n)
    assert samples[:n] == samples[n:]


def test_sheet_maker_plays_notes_in_order():
    n = _samples_per_note()
    both = _take(SheetMusicMaker(_sheet("A4", "A5"), TEMPO), 2 * n)
    first = _take(SheetMusicMaker(_sheet("A4"), TEMPO), n)
    second = _take(SheetMusicMaker(_sheet("A5"), TEMPO), n)
    assert both == first + second


def test_sheet_maker_sine_stays_within_unit_amplitude():
    samples = _take(SheetMusicMaker(_sheet("C4", "E4"), TEMPO), 5000)
    assert max(abs(s) for s in samples) <= 1.0
    assert max(samples) > 0.9


def test_sheet_maker_debug_saw_is_bounded():
    samples = _take(SheetMusicMaker(_sheet("A4"), TEMPO, instrument_debug=True), 5000)
    assert all(abs(s) <= math.pi / 2 for s in samples)


def test_sheet_maker_rejects_empty_sheet():
    with pytest.raises(ValueError):
        SheetMusicMaker(Sheet([Pattern("empty")]))


def test_sheet_maker_str_shows_tempo_and_sheet():
    sheet = _sheet("A4")
    text = str(SheetMusicMaker(sheet, 90))
    assert text == f"Generating from sheet Tempo(90)\n{sheet}"


def test_sheet_maker_is_its_own_iterator():
    maker = SheetMusicMaker(_sheet("A4"))
    assert iter(maker) is maker


def test_chord_maker_loops_over_single_chord():
    n = _samples_per_note()
    maker = ChordMusicMaker(_progression("C4"), [NoteValue()], TEMPO)
    samples = _take(maker, 2 * n)
    assert samples[:n] == samples[n:]


def test_chord_maker_plays_chords_in_order():
    n = _samples_per_note()
    both = _take(ChordMusicMaker(_progression("C4", "G4"), [NoteValue()], TEMPO), 2 * n)
    first = _take(ChordMusicMaker(_progression("C4"), [NoteValue()], TEMPO), n)
    second = _take(ChordMusicMaker(_progression("G4"), [NoteValue()], TEMPO), n)
    assert both == first + second


def test_chord_maker_debug_sums_square_waves():
    maker = ChordMusicMaker(_progression("C4"), [NoteValue()], TEMPO, instrument_debug=True)
    samples = _take(maker, 3000)
    assert set(samples) <= {-3.0, -1.0, 1.0, 3.0}


def test_chord_maker_sine_bounded_by_note_count():
    samples = _take(ChordMusicMaker(_progression("C4"), [NoteValue()], TEMPO), 3000)
    assert max(abs(s) for s in samples) <= 3.0


def test_chord_maker_rejects_empty_rhythm():
    with pytest.raises(ValueError):
        ChordMusicMaker(_progression("C4"), [])


def test_chord_maker_rejects_empty_progression():
    with pytest.raises(ValueError):
        ChordMusicMaker(ChordProgression(""), [NoteValue()])


def test_take_duration_limits_sample_count():
    assert len(list(take_duration(itertools.repeat(0.5), 2, 10))) == 20


def test_take_duration_keeps_sample_values():
    samples = [0.1, 0.2, 0.3, 0.4]
    assert list(take_duration(samples, 0.5, 4)) == [0.1, 0.2]


def test_mix_sums_and_duplicates_channels():
    assert list(mix([1.0, 2.0], [10.0])) == [11.0, 11.0, 2.0, 2.0]


def test_mix_without_sources_is_empty():
    assert list(mix()) == []