import html

QSS = """
QWidget {
  background: __BG__;
  color: __TEXT__;
  font-family: "__FONT__";
}

QWidget#RootWindow {
  background: __BG__;
}

QLabel {
  background: transparent;
}

QLabel#PoemTitle {
  font-size: 48px;
  color: __TEXT__;
  padding-bottom: 24px;
}

QLabel#PoemTitle:hover {
  color: __TEXT_HOVER__;
}

QLabel#PoemSource {
  font-size: 30px;
  color: __TEXT__;
}

QLabel#PoemAuthor {
  font-size: 24px;
  color: __BADGE_TEXT__;
  background: __BADGE_BG__;
  border-radius: 6px;
  padding: 0px 8px;
}

QLabel#PoemSource a, QLabel#PoemAuthor a {
  color: inherit;
  text-decoration: none;
}

QPushButton#SettingsButton {
  background: __BUTTON_BG__;
  color: __TEXT__;
  border: 1px solid __BORDER__;
  border-radius: 8px;
  min-width: 40px;
  max-width: 40px;
  min-height: 40px;
  max-height: 40px;
  font-family: "Segoe UI";
  font-size: 18px;
}

QPushButton#SettingsButton:hover {
  background: __BUTTON_HOVER__;
}

QLabel#NoticeLabel {
  color: __NOTICE__;
  font-family: "Segoe UI";
  font-size: 13px;
}

QToolTip {
  background: __BUTTON_BG__;
  color: __TEXT__;
  border: 1px solid __BORDER__;
}
"""

THEME_PALETTES = {
    "light": {
        "bg": "#f7f4ec",
        "text": "#2b2b2b",
        "text_hover": "#5a5a5a",
        "badge_bg": "#2b2b2b",
        "badge_text": "#f7f4ec",
        "button_bg": "#ece7da",
        "button_hover": "#e0d9c8",
        "border": "#d6cfbd",
        "notice": "#b5523b",
    },
    "dark": {
        "bg": "#16181d",
        "text": "#e4e1d8",
        "text_hover": "#b8b5ad",
        "badge_bg": "#e4e1d8",
        "badge_text": "#16181d",
        "button_bg": "#22252c",
        "button_hover": "#2e323b",
        "border": "#363a44",
        "notice": "#f0a37f",
    },
}


def build_qss(theme: str = "light", font_name: str = "serif") -> str:
    selected = THEME_PALETTES.get(theme, THEME_PALETTES["light"])
    replacements = {
        "__BG__": selected["bg"],
        "__TEXT__": selected["text"],
        "__TEXT_HOVER__": selected["text_hover"],
        "__BADGE_BG__": selected["badge_bg"],
        "__BADGE_TEXT__": selected["badge_text"],
        "__BUTTON_BG__": selected["button_bg"],
        "__BUTTON_HOVER__": selected["button_hover"],
        "__BORDER__": selected["border"],
        "__NOTICE__": selected["notice"],
        "__FONT__": (font_name or "serif").replace('"', ""),
    }
    qss = QSS
    for source, target in replacements.items():
        qss = qss.replace(source, target)
    return qss


def link_html(url: str, text: str) -> str:
    return (
        f'<a href="{html.escape(url, quote=True)}" style="color: inherit; text-decoration: none;">'
        f"{html.escape(text)}</a>"
    )
