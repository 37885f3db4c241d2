"""Command line entry point: generate a melody and play or export it."""

from __future__ import annotations

import argparse
import os
import random
import secrets
import struct
import sys
import time
from array import array
from collections.abc import Iterable, Iterator
from dataclasses import replace
from pathlib import Path
from typing import BinaryIO

from pmusic.chord_progression import ChordProgression
from pmusic.envelope import AdsrEnvelope
from pmusic.key import Key
from pmusic.melody import generate_sheet, random_base_note, random_scale, sheet_from_binary_file
from pmusic.piano_key import PianoKey
from pmusic.progression_generator import generate_chord_progression
from pmusic.rhythm import TimeSignature
from pmusic.rhythm_patterns import chord_rhythm_pattern
from pmusic.scale import Scale
from pmusic.synth import SAMPLE_RATE, ChordMusicMaker, SheetMusicMaker, mix, take_duration

OUTPUT_PATH = Path("output") / "output.wav"
WAV_CHANNELS = 2
WAVE_FORMAT_IEEE_FLOAT = 3
_BYTES_PER_SAMPLE = 4


def _piano_key(text: str) -> PianoKey:
    try:
        return PianoKey.parse(text)
    except ValueError as error:
        raise argparse.ArgumentTypeError(str(error)) from None


def _scale(text: str) -> Scale:
    try:
        return Scale.parse(text)
    except ValueError as error:
        raise argparse.ArgumentTypeError(str(error)) from None


def _non_negative(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{text} is not an integer") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"{text} must not be negative")
    return value


def _positive(text: str) -> int:
    value = _non_negative(text)
    if value == 0:
        raise argparse.ArgumentTypeError(f"{text} must be positive")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pmusic",
        description="Generate a random melody, optionally over a chord progression.",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="show this help message and exit")
    parser.add_argument("-c", "--chord-mode", action="store_true",
                        help="add a chord progression in addition to the melody")
    parser.add_argument("-b", "--base-note", type=_piano_key, default="C4")
    parser.add_argument("-s", "--scale", type=_scale, default="Ionian")
    parser.add_argument("-o", "--octaves", type=_non_negative, default=1)
    parser.add_argument("-t", "--tempo", type=_positive, default=60)
    parser.add_argument("-d", "--duration", type=_non_negative, default=10)
    parser.add_argument("-f", "--file-out", action="store_true",
                        help=f"write the result to ./{OUTPUT_PATH.as_posix()} instead of "
                             "streaming a WAV to standard output")
    parser.add_argument("--instrument-debug", action="store_true",
                        help="WARNING: this flag can produce some very high pitch sound")
    parser.add_argument("-u", "--use-common-pattern", action="store_true",
                        help="pick a rhythm from a short list of common rhythm patterns")
    parser.add_argument("-w", "--random-chord-progression", action="store_true",
                        help="completely randomize the chord progression")
    parser.add_argument("-r", "--full-random", action="store_true",
                        help="randomize scale and base note (on the fourth octave)")
    parser.add_argument("--seed", type=_non_negative, default=0,
                        help="seed for random generation; 0 picks one")
    parser.add_argument("-i", "--file-in", default="",
                        help="binary file to build the sheet from; other melody options are "
                             "ignored, chords are unaffected")
    parser.add_argument("-h", "--half-byte-parsing", action="store_true",
                        help="read the source file half a byte at a time")
    return parser


def write_wav(path: str | os.PathLike[str] | BinaryIO, samples: Iterable[float],
              sample_rate: float) -> None:
    """Write interleaved stereo samples as a 32-bit float WAV file."""
    data = array("f", samples)
    if sys.byteorder == "big":
        data.byteswap()
    payload = data.tobytes()
    rate = int(sample_rate)
    header = struct.pack(
        "<4sI4s4sIHHIIHH4sI",
        b"RIFF", 36 + len(payload), b"WAVE",
        b"fmt ", 16, WAVE_FORMAT_IEEE_FLOAT, WAV_CHANNELS, rate,
        rate * WAV_CHANNELS * _BYTES_PER_SAMPLE, WAV_CHANNELS * _BYTES_PER_SAMPLE,
        _BYTES_PER_SAMPLE * 8,
        b"data", len(payload),
    )
    if hasattr(path, "write"):
        path.write(header)
        path.write(payload)
        return
    with open(path, "wb") as handle:
        handle.write(header)
        handle.write(payload)


def _amplify(source: Iterable[float], factor: float) -> Iterator[float]:
    return (sample * factor for sample in source)


def _run(opts: argparse.Namespace, started: float) -> None:
    out = sys.stdout if opts.file_out else sys.stderr
    seed = opts.seed or secrets.randbits(64)
    rng = random.Random(seed)
    amplification = 0.1 if opts.instrument_debug else 0.2
    nb_measures = 4
    sources = []

    if opts.full_random:
        scale = random_scale(rng)
        base_note = random_base_note(rng)
    else:
        scale = opts.scale
        base_note = opts.base_note

    print(f"Seed: {seed}", file=out)
    if not opts.file_in:
        key = Key(opts.scale, opts.base_note, opts.octaves)
        print(f"Scale: {base_note} {scale} {key}", file=out)

    if opts.chord_mode:
        time_signature = TimeSignature()
        chord_base_note = replace(opts.base_note, octave=2)
        progression = ChordProgression.from_scale_and_str(
            opts.scale,
            chord_base_note,
            generate_chord_progression(opts.scale, time_signature,
                                       opts.random_chord_progression, rng),
        )
        rhythm = chord_rhythm_pattern(time_signature, rng)
        chords = ChordMusicMaker(progression, rhythm, opts.tempo, opts.instrument_debug,
                                 AdsrEnvelope())
        nb_measures = len(progression.chords)
        print(f"Chord progression: {progression}", file=out)
        sources.append(_amplify(take_duration(chords, opts.duration), amplification - 0.05))

    if opts.file_in:
        sheet = sheet_from_binary_file(opts.base_note, opts.file_in, opts.half_byte_parsing)
    else:
        sheet = generate_sheet(opts.base_note, opts.scale, opts.octaves, nb_measures,
                               opts.use_common_pattern, rng)
    music = SheetMusicMaker(sheet, opts.tempo, opts.instrument_debug, AdsrEnvelope())
    print(music, file=out)
    sources.append(_amplify(take_duration(music, opts.duration), amplification))

    if opts.file_out:
        print(f"Export to ./{OUTPUT_PATH.as_posix()}", file=out)
        OUTPUT_PATH.parent.mkdir(parents=True, exist_ok=True)
        write_wav(OUTPUT_PATH, mix(*sources), SAMPLE_RATE)
        elapsed = time.monotonic() - started
        print(f"Execution took {int(elapsed)} seconds.", file=out)
    else:
        stream = sys.stdout.buffer
        write_wav(stream, mix(*sources), SAMPLE_RATE)
        stream.flush()


def main(argv: list[str] | None = None) -> int:
    started = time.monotonic()
    opts = build_parser().parse_args(argv)
    try:
        _run(opts, started)
    except (OSError, ValueError) as error:
        print(f"pmusic: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())