"""An attack-decay-sustain-release amplitude envelope."""

from __future__ import annotations

from dataclasses import dataclass

BASE_AMPLITUDE = 1.0
ATTACK_MAX_LEVEL = 0.5


def _format_seconds(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


@dataclass(frozen=True)
class AdsrEnvelope:
    """Phase lengths in seconds; the default sustains at full level for 100 s."""

    attack: float = 0.0
    decay: float = 0.0
    sustain: float = 100.0
    release: float = 0.0

    def decay_start(self) -> float:
        return self.attack

    def sustain_start(self) -> float:
        return self.attack + self.decay

    def release_start(self) -> float:
        return self.attack + self.decay + self.sustain

    def note_duration(self) -> float:
        return self.attack + self.decay + self.sustain + self.release

    def amplitude(self, sample: float, sample_rate: float) -> float:
        """Amplitude of the envelope at a sample index counted from the note start."""
        elapsed = sample / sample_rate
        peak = BASE_AMPLITUDE + ATTACK_MAX_LEVEL
        if sample < sample_rate * self.decay_start():
            return elapsed * (peak / self.decay_start())
        if sample < sample_rate * self.sustain_start():
            slope = -ATTACK_MAX_LEVEL / (self.sustain_start() - self.decay_start())
            return (elapsed - self.decay_start()) * slope + peak
        if sample < sample_rate * self.release_start():
            return BASE_AMPLITUDE
        if sample < sample_rate * self.note_duration():
            slope = -BASE_AMPLITUDE / (self.note_duration() - self.release_start())
            return (elapsed - self.release_start()) * slope + BASE_AMPLITUDE
        return 0.0

    def __str__(self) -> str:
        return (
            f"Attack: {_format_seconds(self.attack)} s / "
            f"Decay: {_format_seconds(self.decay)} s / "
            f"Sustain: {_format_seconds(self.sustain)} s / "
            f"Release {_format_seconds(self.release)} s"
        )