# pmusic

Procedural music generation from a seed. `pmusic` builds melodic patterns of
random or common rhythms from the notes of a scale, can lay a chord
progression underneath, and renders the result with a small sine-wave
synthesizer shaped by an ADSR envelope into a 32-bit float stereo WAV at
44.1 kHz. It can also turn the bytes of any file into a melody.

The package uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
pmusic --seed 42 --file-out
```

generates a melody in C major (the default base note is `C4`, the default
scale `Ionian`) at 60 beats per minute and writes ten seconds of audio to
`./output/output.wav`, creating the `output` directory if needed. With
`--file-out` the progress messages (seed, scale, chord progression, the
generated sheet, the export path and the time taken) go to standard output.

Without `--file-out`, the WAV data is written to standard output and the
messages go to standard error, so the sound can be piped into any player or
redirected to a file:

```
pmusic --seed 42 > melody.wav
```

The seed is printed on every run, so a piece can be generated again by
passing the same `--seed`; a seed of `0` (the default) picks one at random.

Options:

- `-c`, `--chord-mode` adds a chord progression under the melody. The chords
  are built on the base note moved to octave 2, and the melody then has as
  many measures per pattern as the progression has chords (4 otherwise).
- `-w`, `--random-chord-progression` strings together 2 to 7 random chord
  symbols instead of picking a known progression for the scale.
- `-b`, `--base-note`, `-s`, `--scale`, `-o`, `--octaves` choose the key the
  melody is drawn from, for example `--base-note A4 --scale minor --octaves 2`.
  The number of octaves is reduced so the key never goes above octave 8.
- `-r`, `--full-random` draws a random scale and a base note in the fourth
  octave and reports them on the `Scale:` line; the melody and the chords
  are still built from `--scale` and `--base-note`.
- `-u`, `--use-common-pattern` draws rhythms from a short list of common
  patterns instead of generating them note by note.
- `-t`, `--tempo` (beats per minute, positive) and `-d`, `--duration`
  (seconds) set the speed and the length of the audio.
- `--seed` sets the random seed.
- `-i`, `--file-in PATH` builds the melody from the bytes of a file instead:
  each byte becomes a quarter note that many semitones above the base note,
  and an unfinished last measure is dropped. `-h`, `--half-byte-parsing`
  reads the file half a byte at a time. The chord options still apply.
- `--instrument-debug` swaps the sine for a harsher wave (it can be very
  high-pitched).

`-h` is the half-byte option; help is shown with `pmusic --help`.

Scale names accepted by `--scale` (case does not matter): `IONIAN`/`MAJOR`,
`DORIAN`, `PHRYGIAN`, `LYDIAN`, `MIXOLYDIAN`, `AEOLIAN`/`MINOR`, `LOCRIAN`,
`PENTATONIC`/`PENTAMAJOR`, `PENTASUSPENDED`, `PENTABLUESMAJOR`,
`PENTABLUESMINOR`, `PENTAMINOR`, `CHROMATIC`, `TETRATONIC`.

Errors while reading the input file or building the music are reported as
`pmusic: <message>` on standard error with exit status 1.

## What it does not do

`pmusic` does not play sound through the computer's audio device. It only
produces WAV data, either in `./output/output.wav` or on standard output;
listening to it takes a separate audio player.

## Library

The music-theory building blocks are usable on their own:

```python
import random

from pmusic.chord_progression import ChordProgression
from pmusic.interval import Interval
from pmusic.melody import generate_sheet
from pmusic.piano_key import PianoKey
from pmusic.pitch import Pitch
from pmusic.scale import Scale
from pmusic.synth import SheetMusicMaker, take_duration

key = PianoKey.parse("A4")
print(key + Interval.MAJ3)                  # C#5
print(float(Pitch.from_piano_key(key)))     # about 440.0

print(ChordProgression.default())
# I-V-vi-IV ([ C4maj G4maj A4min F4maj ])

rng = random.Random(42)
sheet = generate_sheet(PianoKey.parse("C4"), Scale.parse("minor"), 1, 4, False, rng)
samples = list(take_duration(SheetMusicMaker(sheet, tempo=90), 1.0))
print(len(samples))                         # 44100
```

The main modules:

- `pmusic.interval` — `Interval`, with addition and subtraction wrapping
  within an octave, and sizes in cents.
- `pmusic.scale` — `Scale`, `ScaleKind`, `Mode`, `PentatonicMode`;
  `Scale.parse` accepts the names listed above.
- `pmusic.note`, `pmusic.piano_key`, `pmusic.pitch` — notes with accidentals,
  keys on a keyboard from octave 0 to 8, and their frequencies.
- `pmusic.key` — `Key` lists the notes and keyboard keys of a scale.
- `pmusic.chord`, `pmusic.chord_progression` — chords with inversions, and
  progressions written in roman numerals such as `I-ii6-iii7-vii°-vii°7`.
- `pmusic.rhythm` — `Tempo`, `NoteValue`, `TimeSignature` (parsed from
  strings like `"3/4"`).
- `pmusic.sheet` — `Measure`, `Pattern`, `Sheet`; adding a note that does not
  fit in a measure raises `MeasureOverflowError`.
- `pmusic.rhythm_patterns`, `pmusic.progression_generator`, `pmusic.melody`
  — the seeded generators, each taking a `random.Random` instance;
  `pmusic.melody` also reads sheets from binary files.
- `pmusic.envelope` — `AdsrEnvelope`.
- `pmusic.synth` — `SheetMusicMaker` and `ChordMusicMaker`, endless iterators
  of mono samples, with `take_duration` to cut them and `mix` to sum them
  into interleaved stereo.
- `pmusic.cli` — the `pmusic` command, and `write_wav` to store interleaved
  stereo samples as a float WAV file.