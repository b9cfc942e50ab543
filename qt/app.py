import argparse
import sys

from system.runtime_settings import apply_settings_to_environ, env_flag, env_setting, load_settings


def build_parser():
    parser = argparse.ArgumentParser(description="Versetab")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging in the window, session and audio components.",
    )
    return parser


def build_session(window, debug=False):
    from adapters.edge_tts_backend import EdgeTTSBackend
    from qt.os_theme import QtColorSchemeSignal
    from system.audio_device import PygameAudioDevice
    from system.poem_source import PoemSource
    from system.preference_store import PreferenceStore
    from system.session import NewTabSession

    def log(message):
        if debug:
            print(f"[qt] {message}", file=sys.stderr)

    return NewTabSession(
        store=PreferenceStore(env_setting("VERSETAB_PREFERENCES_PATH"), debug=debug),
        os_signal=QtColorSchemeSignal(),
        poem_source=PoemSource.from_path(env_setting("VERSETAB_POEMS_PATH"), log_callback=log),
        backend=EdgeTTSBackend(
            voice=env_setting("VERSETAB_TTS_VOICE"),
            cache_dir=env_setting("VERSETAB_AUDIO_CACHE_DIR") or None,
            debug=debug,
        ),
        device=PygameAudioDevice(debug=debug),
        surface=window,
        debug=debug,
    )


def connect_window(window, session, pump):
    window.title_activated.connect(lambda: pump.spawn(session.activate_title()))
    window.theme_cycle_requested.connect(session.cycle_theme)
    window.font_cycle_requested.connect(session.cycle_font)
    window.mute_toggle_requested.connect(session.toggle_mute)
    window.reload_requested.connect(session.reload)


def main(argv=None):
    apply_settings_to_environ(load_settings(), override=False)
    from qt.async_pump import AsyncioPump
    from qt.main_window import NewTabWindow
    from qt.qt_compat import QT_API, QtWidgets

    args = build_parser().parse_args(argv)
    debug = args.debug or env_flag("VERSETAB_DEBUG")

    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName("Versetab")
    app.setOrganizationName("Versetab")
    if debug:
        print(f"[qt] backend={QT_API}", file=sys.stderr)

    window = NewTabWindow(debug=debug)
    pump = AsyncioPump(debug=debug)
    session = build_session(window, debug=debug)
    connect_window(window, session, pump)

    with session:
        window.show()
        code = app.exec()
    pump.shutdown()
    session.voice.device.close()
    return code
