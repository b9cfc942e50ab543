from qt.qt_compat import QtGui, color_scheme_dark


class QtColorSchemeSignal:
    """OS "prefers dark" signal taken from the platform colour scheme."""

    def __init__(self, style_hints=None):
        self._style_hints = style_hints

    @property
    def style_hints(self):
        if self._style_hints is None:
            self._style_hints = QtGui.QGuiApplication.styleHints()
        return self._style_hints

    def prefers_dark(self):
        return self.style_hints.colorScheme() == color_scheme_dark()

    def subscribe(self, callback):
        def handler(scheme):
            callback(scheme == color_scheme_dark())

        signal = self.style_hints.colorSchemeChanged
        signal.connect(handler)

        def unsubscribe():
            signal.disconnect(handler)

        return unsubscribe
