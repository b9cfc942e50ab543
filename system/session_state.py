from dataclasses import dataclass
from typing import Any, Optional

from core.poem import Poem
from core.preferences import DEFAULT_FONT_INDEX, DEFAULT_MUTED, DEFAULT_THEME, ThemePreference


@dataclass
class SessionState:
    """Mutable state for one open tab, shared by reference between components."""

    poem: Optional[Poem] = None
    display_title: str = ""
    theme_preference: ThemePreference = DEFAULT_THEME
    os_prefers_dark: bool = False
    font_index: int = DEFAULT_FONT_INDEX
    is_muted: bool = DEFAULT_MUTED
    # Voice slot: a resolved resource, or a pending future while synthesis runs.
    voice_resource: Optional[str] = None
    voice_pending: Optional[Any] = None
    title_token: int = 0

    @property
    def current_title(self):
        return self.poem.title if self.poem is not None else None
