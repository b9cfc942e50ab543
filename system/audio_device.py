import pygame

from core.errors import AudioDeviceError


class PygameAudioDevice:
    """Single-source playback on the pygame mixer music channel."""

    def __init__(self, debug=False):
        self.debug = debug
        self.muted = False
        self.source = None

    def debug_log(self, message):
        if self.debug:
            print(f"[DEBUG][AudioDevice] {message}")

    def ensure_mixer(self):
        if pygame.mixer.get_init():
            return
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            raise AudioDeviceError(f"Audio mixer unavailable: {exc}") from exc
        self._apply_volume()

    def _apply_volume(self):
        if pygame.mixer.get_init():
            pygame.mixer.music.set_volume(0.0 if self.muted else 1.0)

    def load(self, url):
        self.ensure_mixer()
        try:
            pygame.mixer.music.load(str(url))
        except pygame.error as exc:
            raise AudioDeviceError(f"Cannot load {url}: {exc}") from exc
        self.source = str(url)
        self._apply_volume()
        self.debug_log(f"Loaded {url}")

    def play_from_start(self):
        if self.source is None:
            raise AudioDeviceError("No audio source loaded")
        self.ensure_mixer()
        try:
            pygame.mixer.music.stop()
            pygame.mixer.music.play()
        except pygame.error as exc:
            raise AudioDeviceError(str(exc)) from exc

    def stop(self):
        if not pygame.mixer.get_init():
            return
        try:
            pygame.mixer.music.stop()
        except pygame.error as exc:
            self.debug_log(f"Stop failed: {exc}")

    def set_muted(self, muted):
        self.muted = bool(muted)
        self._apply_volume()

    def unload(self):
        self.source = None
        if not pygame.mixer.get_init():
            return
        try:
            pygame.mixer.music.unload()
        except pygame.error as exc:
            self.debug_log(f"Unload failed: {exc}")

    def close(self):
        self.stop()
        self.unload()
        if pygame.mixer.get_init():
            pygame.mixer.quit()
