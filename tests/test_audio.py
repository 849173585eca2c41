"""Tests for cue sinks and tone synthesis."""

import numpy as np
import pygame
import pytest

from rescue_audio import (
    CUE_TONES,
    DUCK_CUE,
    REFUEL_CUE,
    CueSink,
    NullCueSink,
    PygameCueSink,
    synthesize_tone,
)


def test_tone_length_and_format():
    samples = synthesize_tone(440.0, 880.0, 0.2, sample_rate=22050)

    assert samples.dtype == np.int16
    assert samples.shape == (4410,)


def test_tone_respects_volume_and_fades():
    samples = synthesize_tone(440.0, 440.0, 0.5, volume=0.5, waveform="square")

    assert np.abs(samples).max() <= 0.5 * 32767
    assert samples[0] == 0
    assert abs(int(samples[-1])) < 100


def test_every_cue_has_a_tone():
    assert set(CUE_TONES) == {DUCK_CUE, REFUEL_CUE}
    for tone in CUE_TONES.values():
        assert synthesize_tone(**tone).size > 0


def test_base_sink_must_be_overridden():
    with pytest.raises(NotImplementedError):
        CueSink().play(DUCK_CUE)


def test_null_sink_accepts_any_cue():
    sink = NullCueSink()
    sink.play(DUCK_CUE)
    sink.play(REFUEL_CUE)


def test_pygame_sink_builds_sounds():
    try:
        sink = PygameCueSink()
    except pygame.error as exc:
        pytest.skip(f"no audio device: {exc}")

    try:
        assert set(sink.sounds) == {DUCK_CUE, REFUEL_CUE}
        sink.play(REFUEL_CUE)
    finally:
        pygame.mixer.quit()
