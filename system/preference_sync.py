from core.constants import FONTNAME_LIST
from core.errors import PreferenceParseFailure
from core.preferences import (
    DEFAULT_FONT_INDEX,
    DEFAULT_MUTED,
    DEFAULT_THEME,
    FONT_INDEX_KEY,
    MUTED_KEY,
    THEME_KEY,
    next_theme,
    parse_font_index,
    parse_muted,
    parse_theme,
    resolve_effective_theme,
    serialize_font_index,
    serialize_muted,
    serialize_theme,
)


class PreferenceSync:
    """Reconciles theme, font and mute preferences with the store and OS signal.

    Every change is applied synchronously: the store is written and the surface
    updated before the triggering call returns.
    """

    def __init__(self, state, store, surface, voice_cache, font_names=FONTNAME_LIST, debug=False):
        if not font_names:
            raise ValueError("font_names must not be empty")
        self.state = state
        self.store = store
        self.surface = surface
        self.voice_cache = voice_cache
        self.font_names = tuple(font_names)
        self.debug = debug

    def debug_log(self, message):
        if self.debug:
            print(f"[DEBUG][PreferenceSync] {message}")

    @property
    def effective_theme(self):
        return resolve_effective_theme(self.state.theme_preference, self.state.os_prefers_dark)

    @property
    def font_name(self):
        return self.font_names[self.state.font_index]

    def _read(self, key, parse, default):
        raw = self.store.get_item(key)
        if raw is None or raw == "":
            return default
        try:
            return parse(raw)
        except PreferenceParseFailure as exc:
            self.debug_log(f"{exc}; using default {default!r}")
            return default

    def load(self, os_prefers_dark):
        state = self.state
        state.theme_preference = self._read(THEME_KEY, parse_theme, DEFAULT_THEME)
        state.font_index = self._read(
            FONT_INDEX_KEY,
            lambda raw: parse_font_index(raw, len(self.font_names)),
            DEFAULT_FONT_INDEX,
        )
        state.is_muted = self._read(MUTED_KEY, parse_muted, DEFAULT_MUTED)
        self.debug_log(
            f"Loaded theme={state.theme_preference.value} font={state.font_index} muted={state.is_muted}"
        )

        self.voice_cache.set_muted(state.is_muted)
        self.surface.apply_theme_preference(state.theme_preference)
        self.surface.apply_font(self.font_name)
        self.surface.apply_mute(state.is_muted)
        self.on_os_signal_changed(os_prefers_dark)

    def on_os_signal_changed(self, prefers_dark):
        # Re-applied even for pinned preferences; this is also the post-cycle path.
        self.state.os_prefers_dark = bool(prefers_dark)
        theme = self.effective_theme
        self.surface.apply_theme(theme.value)
        return theme

    def cycle_theme(self):
        state = self.state
        state.theme_preference = next_theme(state.theme_preference)
        self.store.set_item(THEME_KEY, serialize_theme(state.theme_preference))
        self.surface.apply_theme_preference(state.theme_preference)
        self.on_os_signal_changed(state.os_prefers_dark)
        return state.theme_preference

    def cycle_font(self):
        state = self.state
        state.font_index = (state.font_index + 1) % len(self.font_names)
        self.store.set_item(FONT_INDEX_KEY, serialize_font_index(state.font_index))
        self.surface.apply_font(self.font_name)
        return state.font_index

    def toggle_mute(self):
        state = self.state
        state.is_muted = not state.is_muted
        self.store.set_item(MUTED_KEY, serialize_muted(state.is_muted))
        self.voice_cache.set_muted(state.is_muted)
        self.surface.apply_mute(state.is_muted)
        return state.is_muted
