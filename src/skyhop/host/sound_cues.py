"""
sound_cues.py
-------------
Plays short sound effects for engine events.

Any audio failure (no mixer, missing file, playback error) is logged once
and then ignored; the simulation never depends on sound.
"""

import os

import pygame

from skyhop.core.debug.debug_logger import DebugLogger
from skyhop.core.services.event_manager import GameOverEvent, LifeLostEvent, ScoredEvent


class SoundCues:
    ASSET_PATHS = {
        "score": "assets/audio/score.wav",
        "hit": "assets/audio/hit.wav",
        "game_over": "assets/audio/game_over.wav",
    }

    def __init__(self, asset_paths=None, volume=1.0):
        self.sounds = {}
        self.enabled = False
        self.volume = min(max(volume, 0.0), 1.0)

        try:
            pygame.mixer.init()
            self.enabled = True
        except pygame.error as e:
            DebugLogger.warn(f"Audio unavailable, running silent: {e}", category="audio")
            return

        for name, path in (asset_paths or self.ASSET_PATHS).items():
            self.load(name, path)

    def load(self, name, path):
        if not os.path.exists(path):
            DebugLogger.warn(f"Missing sound '{name}' at {path}", category="audio")
            return
        try:
            sound = pygame.mixer.Sound(path)
        except pygame.error as e:
            DebugLogger.warn(f"Could not load sound '{name}': {e}", category="audio")
            return
        sound.set_volume(self.volume)
        self.sounds[name] = sound

    def play(self, name):
        sound = self.sounds.get(name)
        if not self.enabled or sound is None:
            return
        try:
            sound.play()
        except pygame.error as e:
            DebugLogger.warn(f"Playback failed for '{name}', muting: {e}", category="audio")
            self.enabled = False

    # ===========================================================
    # Event Wiring
    # ===========================================================

    def bind(self, events):
        """Subscribe cue handlers on an EventManager."""
        events.subscribe(ScoredEvent, self.on_scored)
        events.subscribe(LifeLostEvent, self.on_life_lost)
        events.subscribe(GameOverEvent, self.on_game_over)

    def on_scored(self, event):
        self.play("score")

    def on_life_lost(self, event):
        if event.lives_remaining > 0:
            self.play("hit")

    def on_game_over(self, event):
        self.play("game_over")
