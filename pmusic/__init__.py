"""Seeded procedural music: music theory, melody and chord generators, and a WAV-writing synthesizer."""

__version__ = "0.1.0"