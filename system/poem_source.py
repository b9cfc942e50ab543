import json
import random
from pathlib import Path

from core.poem import Poem

SAMPLE_POEMS = (
    Poem(title="春晓", source="孟浩然", who=None),
    Poem(title="静夜思", source="李白", who=None),
    Poem(title="水调歌头·明月几时有", source="苏轼", who=None),
    Poem(title="黄鹤楼送孟浩然之广陵", source="唐诗三百首", who="李白"),
    Poem(title="闻王昌龄左迁龙标遥有此寄", source="唐诗三百首", who="李白"),
    Poem(title="The Road Not Taken", source="Mountain Interval", who="Robert Frost"),
)


def load_poems(path, log_callback=None):
    """Read a JSON list of ``{title, from, who}`` records, skipping bad rows."""
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise ValueError(f"Poem corpus must be a JSON list: {path}")
    poems = []
    for row in raw:
        if not isinstance(row, dict):
            continue
        try:
            poems.append(Poem.from_dict(row))
        except ValueError as exc:
            if log_callback:
                log_callback(f"Skipping poem record: {exc}")
    return poems


class PoemSource:
    def __init__(self, poems=None, rng=None):
        self.poems = tuple(poems) if poems else SAMPLE_POEMS
        self.rng = rng or random.Random()

    @classmethod
    def from_path(cls, path, log_callback=None, rng=None):
        if not path:
            return cls(rng=rng)
        try:
            poems = load_poems(path, log_callback=log_callback)
        except (OSError, ValueError) as exc:
            if log_callback:
                log_callback(f"Falling back to sample poems: {exc}")
            poems = None
        return cls(poems, rng=rng)

    def get_random_poem(self):
        return self.rng.choice(self.poems)

    __call__ = get_random_poem
