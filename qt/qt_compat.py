"""
Qt compatibility layer:
- VERSETAB_QT_API selects the binding (pyqt6 / pyside6 / auto)
- auto prefers PyQt6 and falls back to PySide6
"""

import os

QT_API = None
_requested = os.getenv("VERSETAB_QT_API", "auto").strip().lower()

if _requested in {"pyqt6", "pyqt"}:
    from PyQt6 import QtCore, QtGui, QtWidgets  # type: ignore

    Signal = QtCore.pyqtSignal
    QT_API = "PyQt6"
elif _requested in {"pyside6", "pyside"}:
    from PySide6 import QtCore, QtGui, QtWidgets  # type: ignore

    Signal = QtCore.Signal
    QT_API = "PySide6"
else:
    try:
        from PyQt6 import QtCore, QtGui, QtWidgets  # type: ignore

        Signal = QtCore.pyqtSignal
        QT_API = "PyQt6"
    except ImportError:  # pragma: no cover
        from PySide6 import QtCore, QtGui, QtWidgets  # type: ignore

        Signal = QtCore.Signal
        QT_API = "PySide6"


def color_scheme_dark():
    # Qt.ColorScheme arrived in Qt 6.5.
    return QtCore.Qt.ColorScheme.Dark
