import logging

import numpy as np
import pygame

from bubble_bars.config import VisualizerConfig

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100


# ============================================================================
# Tone Synthesis
# ============================================================================
def compare_frequency(value, max_value, min_freq=220, max_freq=880):
    """Map a bar value onto a pitch, taller bars sound higher"""
    progress = min(1.0, max(0.0, value / max_value)) if max_value > 0 else 0.0
    # Quadratic scaling for satisfying rising pitch
    return min_freq + (max_freq - min_freq) * (progress ** 2)


def synth_tone(freq, duration=0.05, volume=0.3, sample_rate=SAMPLE_RATE):
    """Short sine blip with linear attack and decay"""
    n_samples = int(sample_rate * duration)
    t = np.linspace(0, duration, n_samples, False)
    wave = np.sin(2 * np.pi * freq * t) * volume

    attack = int(n_samples * 0.1)
    decay = int(n_samples * 0.1)
    sustain = n_samples - attack - decay
    envelope = np.concatenate([
        np.linspace(0, 1, attack),
        np.ones(sustain),
        np.linspace(1, 0, decay)
    ])
    return wave * envelope


def synth_fanfare(sample_rate=SAMPLE_RATE):
    """C major arpeggio followed by the sustained chord"""
    freqs = [523, 659, 783, 1046]
    t_len = 0.1

    notes = []
    for f in freqs:
        t = np.linspace(0, t_len, int(sample_rate * t_len), False)
        notes.append(np.sin(2 * np.pi * f * t) * 0.5)

    t = np.linspace(0, 1.5, int(sample_rate * 1.5), False)
    chord = np.zeros(len(t))
    for f in freqs:
        chord += np.sin(2 * np.pi * f * t) * 0.15
    chord *= np.exp(-2 * t)
    notes.append(chord)
    return np.concatenate(notes)


def to_pcm(wave, channels=1):
    """Float wave in [-1, 1] to int16 samples laid out for the mixer"""
    pcm = (np.clip(wave, -1.0, 1.0) * 32767).astype(np.int16)
    if channels > 1:
        # same signal on every channel
        pcm = np.repeat(pcm[:, np.newaxis], channels, axis=1)
    return pcm


# ============================================================================
# Sound Engine
# ============================================================================
class SoundEngine:
    def __init__(self, config: VisualizerConfig):
        self.config = config
        self.enabled = False
        self.sample_rate = SAMPLE_RATE
        self.channels = 1
        if not config.sound:
            return
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
            # the device may not honour the requested format
            self.sample_rate, _, self.channels = pygame.mixer.get_init()
            self.enabled = True
        except pygame.error as e:
            logger.warning("audio init failed, continuing without sound: %s", e)

    def play_compare(self, value):
        if not self.enabled:
            return
        freq = compare_frequency(value, self.config.max_value)
        self._play(synth_tone(freq, sample_rate=self.sample_rate))

    def play_fanfare(self):
        if not self.enabled:
            return
        self._play(synth_fanfare(self.sample_rate))

    def _play(self, wave):
        sound = pygame.sndarray.make_sound(to_pcm(wave, self.channels))
        sound.play()
