"""Sample generators that play chord progressions and sheets of music."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from itertools import islice, zip_longest

from pmusic.chord_progression import ChordProgression
from pmusic.envelope import AdsrEnvelope
from pmusic.piano_key import PianoKey
from pmusic.pitch import Pitch
from pmusic.rhythm import NoteValue, Tempo
from pmusic.sheet import Sheet

SAMPLE_RATE = 44_100.0
CHANNELS = 1
VOLUME = 2.0


def _frequency(key: PianoKey) -> float:
    return float(Pitch.from_piano_key(key))


class ChordMusicMaker:
    """An endless mono signal holding each chord for one value of a rhythm pattern."""

    def __init__(
        self,
        chord_progression: ChordProgression,
        rhythm_pattern: Sequence[NoteValue],
        tempo: int = 60,
        instrument_debug: bool = False,
        adsr_envelope: AdsrEnvelope | None = None,
    ) -> None:
        if not chord_progression.chords:
            raise ValueError("the chord progression has no chords")
        self.rhythm_pattern = list(rhythm_pattern)
        if not self.rhythm_pattern:
            raise ValueError("the rhythm pattern has no note values")
        self.chord_progression = chord_progression
        self.tempo = Tempo(tempo)
        self.instrument_debug = instrument_debug
        self.adsr_envelope = adsr_envelope if adsr_envelope is not None else AdsrEnvelope()
        self.sample_rate = SAMPLE_RATE
        self.channels = CHANNELS
        self.volume = VOLUME
        self._frequencies = [
            [_frequency(key) for key in chord.keys()] for chord in chord_progression.chords
        ]
        self._chord = 0
        self._note_value = 0
        self._sample = 0

    def __iter__(self) -> ChordMusicMaker:
        return self

    def __next__(self) -> float:
        self._sample += 1
        amplitude = self.adsr_envelope.amplitude(self._sample, self.sample_rate)
        value = 0.0
        total = 0.0
        for frequency in self._frequencies[self._chord]:
            value += self.volume * math.pi * frequency * self._sample / self.sample_rate
            if self.instrument_debug:
                total += math.copysign(1.0, math.sin(value))
            else:
                total += amplitude * math.sin(value)

        duration = self.rhythm_pattern[self._note_value].duration_for_tempo(self.tempo)
        if self._sample >= self.sample_rate * duration:
            self._sample = 0
            self._chord = (self._chord + 1) % len(self._frequencies)
            self._note_value = (self._note_value + 1) % len(self.rhythm_pattern)
        return total


class SheetMusicMaker:
    """An endless mono signal playing the notes of a sheet in a loop."""

    def __init__(
        self,
        sheet: Sheet,
        tempo: int = 60,
        instrument_debug: bool = False,
        adsr_envelope: AdsrEnvelope | None = None,
    ) -> None:
        self.sheet = sheet
        self._notes = [
            note
            for pattern in sheet.patterns
            for measure in pattern.measures
            for note in measure.notes
        ]
        if not self._notes:
            raise ValueError("the sheet has no notes to play")
        self._frequencies = [_frequency(note.note) for note in self._notes]
        self.tempo = Tempo(tempo)
        self.instrument_debug = instrument_debug
        self.adsr_envelope = adsr_envelope if adsr_envelope is not None else AdsrEnvelope()
        self.sample_rate = SAMPLE_RATE
        self.channels = CHANNELS
        self.volume = VOLUME
        self._index = 0
        self._sample = 0

    def __iter__(self) -> SheetMusicMaker:
        return self

    def __next__(self) -> float:
        self._sample += 1
        note = self._notes[self._index]
        value = (
            self.volume * math.pi * self._frequencies[self._index] * self._sample
            / self.sample_rate
        )

        if self._sample >= self.sample_rate * note.value.duration_for_tempo(self.tempo):
            self._sample = 0
            self._index = (self._index + 1) % len(self._notes)

        if self.instrument_debug:
            tangent = math.tan(value)
            if tangent == 0.0:
                return math.copysign(math.pi / 2, tangent)
            return math.atan(1.0 / tangent)
        amplitude = self.adsr_envelope.amplitude(self._sample, self.sample_rate)
        return amplitude * math.sin(value)

    def __str__(self) -> str:
        return f"Generating from sheet Tempo({self.tempo.bpm})\n{self.sheet}"


def take_duration(source: Iterable[float], seconds: float,
                  sample_rate: float = SAMPLE_RATE) -> Iterator[float]:
    """The samples of a mono source that fit in the given number of seconds."""
    return islice(iter(source), int(seconds * sample_rate))


def mix(*args: Iterable[float]) -> Iterator[float]:
    """Sum mono sources into interleaved stereo, until the longest one ends."""
    for frame in zip_longest(*args, fillvalue=0.0):
        total = sum(frame)
        yield total
        yield total