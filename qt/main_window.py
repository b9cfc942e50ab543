from __future__ import annotations

from core.poem import author_search_url, source_search_url
from core.preferences import THEME_LABELS, ThemePreference
from qt.qt_compat import QtCore, QtGui, QtWidgets, Signal
from qt.styles import build_qss, link_html

THEME_ICONS = {
    ThemePreference.LIGHT: "☀",
    ThemePreference.DARK: "☾",
    ThemePreference.SYNC: "◐",
}

NOTICE_TIMEOUT_MS = 4000
FADE_IN_MS = 500


class NewTabWindow(QtWidgets.QMainWindow):
    """Full-window poem surface.

    Renders what the session publishes and turns user input into signals; it
    holds no preference or playback state of its own.
    """

    title_activated = Signal()
    theme_cycle_requested = Signal()
    font_cycle_requested = Signal()
    mute_toggle_requested = Signal()
    reload_requested = Signal()

    def __init__(self, debug: bool = False):
        super().__init__()
        self.debug = debug
        self.setWindowTitle("Versetab")
        self.resize(1180, 760)
        self.theme_name = "light"
        self.font_name = ""
        self._fade_anim = None
        self._notice_timer = QtCore.QTimer(self)
        self._notice_timer.setSingleShot(True)
        self._notice_timer.timeout.connect(self._clear_notice)
        self._build_ui()
        self._restyle()

    def debug_log(self, message):
        if self.debug:
            print(f"[DEBUG][NewTabWindow] {message}")

    def _build_ui(self):
        root = QtWidgets.QWidget()
        root.setObjectName("RootWindow")
        self.setCentralWidget(root)
        root_layout = QtWidgets.QVBoxLayout(root)
        root_layout.setContentsMargins(24, 24, 24, 24)
        root_layout.setSpacing(0)

        self.poem_panel = QtWidgets.QWidget()
        panel_layout = QtWidgets.QVBoxLayout(self.poem_panel)
        panel_layout.setContentsMargins(0, 0, 0, 0)
        panel_layout.setSpacing(0)

        self.title_label = QtWidgets.QLabel("")
        self.title_label.setObjectName("PoemTitle")
        self.title_label.setTextFormat(QtCore.Qt.TextFormat.PlainText)
        self.title_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        self.title_label.setWordWrap(True)
        self.title_label.setCursor(QtGui.QCursor(QtCore.Qt.CursorShape.PointingHandCursor))
        self.title_label.installEventFilter(self)
        panel_layout.addWidget(self.title_label, 0, QtCore.Qt.AlignmentFlag.AlignHCenter)

        byline = QtWidgets.QHBoxLayout()
        byline.setSpacing(16)
        byline.addStretch(1)
        self.source_label = QtWidgets.QLabel("")
        self.source_label.setObjectName("PoemSource")
        self.source_label.setTextFormat(QtCore.Qt.TextFormat.RichText)
        self.source_label.setOpenExternalLinks(True)
        byline.addWidget(self.source_label)
        self.author_label = QtWidgets.QLabel("")
        self.author_label.setObjectName("PoemAuthor")
        self.author_label.setTextFormat(QtCore.Qt.TextFormat.RichText)
        self.author_label.setOpenExternalLinks(True)
        self.author_label.hide()
        byline.addWidget(self.author_label, 0, QtCore.Qt.AlignmentFlag.AlignVCenter)
        byline.addStretch(1)
        panel_layout.addLayout(byline)

        root_layout.addStretch(1)
        root_layout.addWidget(self.poem_panel)
        root_layout.addStretch(1)

        footer = QtWidgets.QHBoxLayout()
        footer.setSpacing(16)
        self.theme_button = self._settings_button(self.theme_cycle_requested)
        self.font_button = self._settings_button(self.font_cycle_requested)
        self.font_button.setText("Aa")
        self.font_button.setToolTip("切换字体")
        self.mute_button = self._settings_button(self.mute_toggle_requested)
        footer.addWidget(self.theme_button)
        footer.addWidget(self.font_button)
        footer.addWidget(self.mute_button)
        self.notice_label = QtWidgets.QLabel("")
        self.notice_label.setObjectName("NoticeLabel")
        footer.addWidget(self.notice_label, 1)
        root_layout.addLayout(footer)

        self.apply_theme_preference(ThemePreference.SYNC)
        self.apply_mute(False)

    def _settings_button(self, signal):
        button = QtWidgets.QPushButton()
        button.setObjectName("SettingsButton")
        button.setFocusPolicy(QtCore.Qt.FocusPolicy.NoFocus)
        button.setCursor(QtGui.QCursor(QtCore.Qt.CursorShape.PointingHandCursor))
        button.clicked.connect(lambda _checked=False: signal.emit())
        return button

    def eventFilter(self, obj, event):
        if obj is self.title_label and event.type() == QtCore.QEvent.Type.MouseButtonRelease:
            if event.button() == QtCore.Qt.MouseButton.LeftButton:
                self.title_activated.emit()
                return True
        return super().eventFilter(obj, event)

    def keyPressEvent(self, event):
        key = event.key()
        ctrl = bool(event.modifiers() & QtCore.Qt.KeyboardModifier.ControlModifier)
        if key in (QtCore.Qt.Key.Key_F5, QtCore.Qt.Key.Key_R):
            self.reload_requested.emit()
            return
        if key == QtCore.Qt.Key.Key_Escape or (ctrl and key == QtCore.Qt.Key.Key_W):
            self.close()
            return
        super().keyPressEvent(event)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.title_label.setMaximumWidth(int(self.width() * 0.9))

    # Surface API consumed by NewTabSession.

    def show_poem(self, poem, display_title):
        self.title_label.setText(display_title)
        self.source_label.setText(link_html(source_search_url(poem), f"「{poem.source}」"))
        author_url = author_search_url(poem)
        if author_url:
            self.author_label.setText(link_html(author_url, poem.who))
            self.author_label.show()
        else:
            self.author_label.clear()
            self.author_label.hide()
        self._fade_in()

    def apply_theme(self, theme_name):
        if theme_name == self.theme_name and self.styleSheet():
            return
        self.theme_name = theme_name
        self.debug_log(f"Theme -> {theme_name}")
        self._restyle()

    def apply_theme_preference(self, preference):
        preference = ThemePreference(preference)
        self.theme_button.setText(THEME_ICONS[preference])
        self.theme_button.setToolTip(THEME_LABELS[preference])

    def apply_font(self, font_name):
        self.font_name = font_name
        self.debug_log(f"Font -> {font_name}")
        self._restyle()

    def apply_mute(self, muted):
        self.mute_button.setText("🔇" if muted else "🔊")
        self.mute_button.setToolTip("取消静音" if muted else "静音")

    def show_notice(self, message):
        self.notice_label.setText(str(message))
        self._notice_timer.start(NOTICE_TIMEOUT_MS)

    def _clear_notice(self):
        self.notice_label.clear()

    def _restyle(self):
        self.setStyleSheet(build_qss(self.theme_name, self.font_name))

    def _fade_in(self):
        if self._fade_anim is not None:
            self._fade_anim.stop()
            self._fade_anim = None
        effect = self.poem_panel.graphicsEffect()
        if not isinstance(effect, QtWidgets.QGraphicsOpacityEffect):
            effect = QtWidgets.QGraphicsOpacityEffect(self.poem_panel)
            self.poem_panel.setGraphicsEffect(effect)
        effect.setOpacity(0.0)
        anim = QtCore.QPropertyAnimation(effect, b"opacity", self)
        anim.setDuration(FADE_IN_MS)
        anim.setStartValue(0.0)
        anim.setEndValue(1.0)
        anim.setEasingCurve(QtCore.QEasingCurve.Type.OutCubic)
        anim.finished.connect(self._fade_finished)
        self._fade_anim = anim
        anim.start()

    def _fade_finished(self):
        self._fade_anim = None
        effect = self.poem_panel.graphicsEffect()
        if isinstance(effect, QtWidgets.QGraphicsOpacityEffect):
            effect.setOpacity(1.0)
