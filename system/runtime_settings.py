import json
import os
from pathlib import Path

SETTINGS_PATH = Path("versetab_settings.json")

DEFAULTS = {
    "VERSETAB_QT_API": "auto",
    "VERSETAB_TTS_VOICE": "zh-CN-XiaoxiaoNeural",
    "VERSETAB_AUDIO_CACHE_DIR": "",
    "VERSETAB_PREFERENCES_PATH": "versetab_preferences.json",
    "VERSETAB_POEMS_PATH": "",
    "VERSETAB_DEBUG": "0",
}


def load_settings(path=SETTINGS_PATH):
    settings = dict(DEFAULTS)
    if not path.exists():
        return settings

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        return settings

    if not isinstance(raw, dict):
        return settings

    for key in DEFAULTS:
        if key in raw and raw[key] is not None:
            settings[key] = str(raw[key]).strip()
    return settings


def apply_settings_to_environ(settings, override=True):
    for key, value in settings.items():
        if override or key not in os.environ:
            os.environ[key] = str(value)


def env_setting(key):
    value = os.getenv(key)
    if value is None:
        return DEFAULTS.get(key, "")
    return value.strip()


def env_flag(key):
    return env_setting(key) in {"1", "true", "yes", "on"}
