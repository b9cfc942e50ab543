"""Tab session orchestration.

``NewTabSession`` owns the ``SessionState`` for one open window and wires the
reflow, ``PreferenceSync`` and ``VoiceCache`` together. The rendering surface
passed in is duck-typed and must provide::

    show_poem(poem, display_title)
    apply_theme(theme_name)
    apply_theme_preference(preference)
    apply_font(font_name)
    apply_mute(muted)
    show_notice(message)

The OS signal source provides ``prefers_dark()`` and ``subscribe(callback)``,
the latter returning a callable that detaches the listener.
"""

from core.constants import FONTNAME_LIST
from core.reflow import reflow_title
from system.preference_sync import PreferenceSync
from system.session_state import SessionState
from system.voice_cache import VoiceCache


class OsSignalSubscription:
    def __init__(self, unsubscribe):
        self._unsubscribe = unsubscribe

    @property
    def active(self):
        return self._unsubscribe is not None

    def close(self):
        unsubscribe, self._unsubscribe = self._unsubscribe, None
        if unsubscribe is not None:
            unsubscribe()


class NewTabSession:
    def __init__(
        self,
        store,
        os_signal,
        poem_source,
        backend,
        device,
        surface,
        font_names=FONTNAME_LIST,
        debug=False,
    ):
        self.os_signal = os_signal
        self.poem_source = poem_source
        self.surface = surface
        self.debug = debug
        self.state = SessionState()
        self.voice = VoiceCache(self.state, backend, device, on_error=self._on_voice_error, debug=debug)
        self.preferences = PreferenceSync(
            self.state, store, surface, self.voice, font_names=font_names, debug=debug
        )
        self._subscription = None
        self._closed = False

    def debug_log(self, message):
        if self.debug:
            print(f"[DEBUG][Session] {message}")

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def open(self):
        if self._subscription is not None:
            return self
        self.preferences.load(self.os_signal.prefers_dark())
        self._subscription = OsSignalSubscription(
            self.os_signal.subscribe(self.preferences.on_os_signal_changed)
        )
        self._closed = False
        self.show_poem(self.poem_source())
        return self

    def close(self):
        if self._closed:
            return
        self._closed = True
        if self._subscription is not None:
            self._subscription.close()
            self._subscription = None
        self.voice.reset()
        self.debug_log("Session closed")

    def show_poem(self, poem):
        state = self.state
        state.poem = poem
        state.display_title = reflow_title(poem.title)
        self.voice.reset()
        self.surface.show_poem(poem, state.display_title)
        self.debug_log(f"Showing {poem.title!r}")

    def reload(self):
        self.show_poem(self.poem_source())

    async def activate_title(self):
        await self.voice.request_playback(self.state.current_title)

    def cycle_theme(self):
        return self.preferences.cycle_theme()

    def cycle_font(self):
        return self.preferences.cycle_font()

    def toggle_mute(self):
        return self.preferences.toggle_mute()

    def display_attributes(self):
        return {
            "data-theme": self.preferences.effective_theme.value,
            "--custom-font-name": self.preferences.font_name,
        }

    def _on_voice_error(self, failure):
        self.surface.show_notice(str(failure))
