import json
import os
from pathlib import Path


class PreferenceStore:
    """String key/value persistence backed by a single JSON file.

    Values are always strings; callers parse and serialize them. A missing or
    unreadable file behaves like an empty store.
    """

    def __init__(self, path, debug=False):
        self.path = Path(path)
        self.debug = debug
        self._items = self._read()

    def debug_log(self, message):
        if self.debug:
            print(f"[DEBUG][PreferenceStore] {message}")

    def _read(self):
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except Exception as exc:
            self.debug_log(f"Ignoring unreadable store {self.path}: {exc}")
            return {}
        if not isinstance(raw, dict):
            return {}
        return {str(k): str(v) for k, v in raw.items() if v is not None}

    def get_item(self, key):
        return self._items.get(key)

    def set_item(self, key, value):
        self._items[key] = str(value)
        self._write()

    def _write(self):
        tmp_path = self.path.with_name(f"{self.path.name}.part")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(self._items, indent=2, ensure_ascii=False), encoding="utf-8")
            os.replace(str(tmp_path), str(self.path))
        except OSError as exc:
            self.debug_log(f"Failed to save preferences: {exc}")
