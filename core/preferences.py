import json
from enum import Enum

from core.constants import DARK_THEME, LIGHT_THEME
from core.errors import PreferenceParseFailure

THEME_KEY = "theme"
FONT_INDEX_KEY = "fontIndex"
MUTED_KEY = "isMuted"


class ThemePreference(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    SYNC = "sync"


class EffectiveTheme(str, Enum):
    LIGHT = LIGHT_THEME
    DARK = DARK_THEME


THEME_CYCLE = (ThemePreference.LIGHT, ThemePreference.DARK, ThemePreference.SYNC)

THEME_LABELS = {
    ThemePreference.SYNC: "系统主题",
    ThemePreference.DARK: "深色主题",
    ThemePreference.LIGHT: "浅色主题",
}

DEFAULT_THEME = ThemePreference.SYNC
DEFAULT_FONT_INDEX = 0
DEFAULT_MUTED = False


def next_theme(preference):
    idx = THEME_CYCLE.index(preference)
    return THEME_CYCLE[(idx + 1) % len(THEME_CYCLE)]


def resolve_effective_theme(preference, os_prefers_dark):
    if preference == ThemePreference.SYNC:
        return EffectiveTheme.DARK if os_prefers_dark else EffectiveTheme.LIGHT
    return EffectiveTheme.DARK if preference == ThemePreference.DARK else EffectiveTheme.LIGHT


def parse_theme(raw):
    try:
        return ThemePreference(str(raw).strip().lower())
    except ValueError:
        raise PreferenceParseFailure(THEME_KEY, raw) from None


def parse_font_index(raw, font_count):
    try:
        value = int(str(raw).strip(), 10)
    except ValueError:
        raise PreferenceParseFailure(FONT_INDEX_KEY, raw) from None
    if font_count <= 0:
        return 0
    return value % font_count


def parse_muted(raw):
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        raise PreferenceParseFailure(MUTED_KEY, raw) from None
    if not isinstance(value, bool):
        raise PreferenceParseFailure(MUTED_KEY, raw)
    return value


def serialize_theme(preference):
    return ThemePreference(preference).value


def serialize_font_index(index):
    return str(int(index))


def serialize_muted(flag):
    return json.dumps(bool(flag))
