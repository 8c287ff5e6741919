# audio.py
from __future__ import annotations

import numpy as np  # type: ignore
import pygame       # type: ignore

SAMPLE_RATE = 44100


def tone(freq: float, duration_ms: int, volume: float, shape: str = "sine",
         sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """
    Synthesize one mono tone as float samples in [-volume, volume].
    The amplitude decays exponentially to ~0 over the duration.
    """
    n = int(sample_rate * duration_ms / 1000)
    t = np.arange(n) / sample_rate
    phase = (freq * t) % 1.0

    if shape == "sine":
        wave = np.sin(2 * np.pi * phase)
    elif shape == "triangle":
        wave = 4.0 * np.abs(phase - 0.5) - 1.0
    elif shape == "sawtooth":
        wave = 2.0 * phase - 1.0
    else:
        raise ValueError(f"Unknown wave shape: {shape}")

    # volume -> 0.0001 over the tone, like an exponential gain ramp
    env = volume * np.power(0.0001 / volume, t / max(duration_ms / 1000, 1e-9))
    return wave * env


def mix(parts, sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """Overlay (offset_ms, samples) pairs into one buffer."""
    end = max(int(sample_rate * off / 1000) + len(s) for off, s in parts)
    out = np.zeros(end)
    for off, s in parts:
        start = int(sample_rate * off / 1000)
        out[start:start + len(s)] += s
    return np.clip(out, -1.0, 1.0)


def eat_samples(sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    # short, high-pitched
    return tone(800, 50, 0.1, "triangle", sample_rate)


def game_over_samples(sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    # two falling buzzes, the second starting 80 ms in
    return mix([
        (0, tone(200, 150, 0.2, "sawtooth", sample_rate)),
        (80, tone(100, 200, 0.2, "sawtooth", sample_rate)),
    ], sample_rate)


def to_pcm16(samples: np.ndarray, channels: int) -> np.ndarray:
    wave = (samples * (2**15 - 1)).astype(np.int16)
    if channels == 1:
        return wave
    return np.ascontiguousarray(np.column_stack([wave] * channels))


class AudioPlayer:
    """
    Owns the mixer and the two game cues.
    The mixer is opened on first use; if that fails, the player goes quiet
    for the rest of the session instead of raising.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._sounds: dict[str, pygame.mixer.Sound] | None = None

    def _ensure(self) -> bool:
        if not self.enabled:
            return False
        if self._sounds is not None:
            return True
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2)
            freq, _size, channels = pygame.mixer.get_init()
            self._sounds = {
                "eat": pygame.sndarray.make_sound(to_pcm16(eat_samples(freq), channels)),
                "game_over": pygame.sndarray.make_sound(to_pcm16(game_over_samples(freq), channels)),
            }
        except pygame.error as e:
            print(f"[AUDIO] Sound disabled: {e}")
            self.enabled = False
            return False
        return True

    def play_eat(self) -> None:
        if self._ensure():
            self._sounds["eat"].play()

    def play_game_over(self) -> None:
        if self._ensure():
            self._sounds["game_over"].play()

    def close(self) -> None:
        if self._sounds is not None:
            pygame.mixer.quit()
            self._sounds = None
