from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

from core.constants import SEARCH_URL


@dataclass(frozen=True)
class Poem:
    title: str
    source: str
    who: Optional[str] = None

    @classmethod
    def from_dict(cls, raw):
        title = str(raw.get("title") or "").strip()
        source = str(raw.get("from") or "").strip()
        if not title or not source:
            raise ValueError(f"Poem record needs 'title' and 'from': {raw!r}")
        who = raw.get("who")
        who = str(who).strip() if who else None
        return cls(title=title, source=source, who=who or None)


def search_url(*terms):
    query = " ".join(t for t in terms if t)
    return SEARCH_URL.format(query=quote(query))


def source_search_url(poem):
    # Source link searches for the work and its author together.
    return search_url(poem.source, poem.who or "")


def author_search_url(poem):
    if not poem.who:
        return None
    return search_url(poem.who)
