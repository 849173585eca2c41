"""
RD Rescue Audio - Fire-and-Forget Sound Cues

The controller only knows about a cue sink with a single play(cue)
operation. The pygame sink synthesises its sounds with numpy at start-up
so the game ships without sound files.
"""

import numpy as np

DUCK_CUE = "duck"
REFUEL_CUE = "refuel"

SAMPLE_RATE = 22050

# Format: start Hz, end Hz, duration (s), waveform
CUE_TONES = {
    DUCK_CUE:   {"start_hz": 620.0, "end_hz": 340.0, "duration": 0.18, "waveform": "square"},
    REFUEL_CUE: {"start_hz": 280.0, "end_hz": 920.0, "duration": 0.32, "waveform": "sine"},
}


def synthesize_tone(start_hz, end_hz, duration, sample_rate=SAMPLE_RATE, volume=0.35, waveform="sine"):
    """
    Build a mono frequency sweep with a short attack and linear decay.

    Args:
        start_hz: Frequency at the start of the sweep
        end_hz: Frequency at the end of the sweep
        duration: Length in seconds
        sample_rate: Samples per second
        volume: Peak amplitude (0-1)
        waveform: "sine" or "square"

    Returns:
        1D int16 numpy array
    """
    n = max(1, int(sample_rate * duration))
    freq = np.linspace(start_hz, end_hz, n)
    phase = 2.0 * np.pi * np.cumsum(freq) / sample_rate

    wave = np.sin(phase)
    if waveform == "square":
        wave = np.sign(wave)

    attack = np.minimum(1.0, np.linspace(0.0, 20.0, n))
    decay = np.linspace(1.0, 0.0, n)
    samples = wave * attack * decay * volume * 32767
    return samples.astype(np.int16)


class CueSink:
    """Something that can play named sound cues without blocking."""

    def play(self, cue):
        raise NotImplementedError


class NullCueSink(CueSink):
    """Silent sink (muted game or no audio device)."""

    def play(self, cue):
        pass


class PygameCueSink(CueSink):
    """Plays synthesised cues through pygame.mixer."""

    def __init__(self):
        import pygame

        if pygame.mixer.get_init() is None:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2)

        sample_rate, _, channels = pygame.mixer.get_init()

        self.sounds = {}
        for cue, tone in CUE_TONES.items():
            samples = synthesize_tone(sample_rate=sample_rate, **tone)
            if channels > 1:
                samples = np.ascontiguousarray(np.repeat(samples[:, None], channels, axis=1))
            self.sounds[cue] = pygame.sndarray.make_sound(samples)

    def play(self, cue):
        self.sounds[cue].play()
