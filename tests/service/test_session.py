import asyncio

import pytest

from core.constants import FONTNAME_LIST
from core.poem import Poem
from fakes import FakeBackend, MemoryStore, run
from system.session import NewTabSession, OsSignalSubscription


def _poem_feed(*poems):
    queue = list(poems)

    def next_poem():
        return queue.pop(0)

    return next_poem


@pytest.fixture
def poems():
    return [
        Poem(title="春眠 不觉 晓处 闻啼鸟", source="孟浩然"),
        Poem(title="静夜思", source="唐诗三百首", who="李白"),
    ]


@pytest.fixture
def session(store, os_signal, backend, device, surface, poems):
    return NewTabSession(
        store=store,
        os_signal=os_signal,
        poem_source=_poem_feed(*poems),
        backend=backend,
        device=device,
        surface=surface,
    )


def test_open_loads_preferences_subscribes_and_shows_reflowed_title(session, os_signal, surface, poems):
    os_signal.dark = True

    session.open()

    assert len(os_signal.listeners) == 1
    assert surface.themes == ["dark"]
    assert surface.poem == poems[0]
    assert surface.title == "春眠\n不觉\n晓处\n闻啼鸟"
    assert session.state.display_title == surface.title


def test_open_twice_keeps_single_listener(session, os_signal):
    session.open()
    session.open()

    assert len(os_signal.listeners) == 1


def test_os_signal_changes_theme_while_open(session, os_signal, surface, store):
    session.open()

    os_signal.emit(True)

    assert surface.themes == ["light", "dark"]
    assert session.display_attributes()["data-theme"] == "dark"
    assert store.writes == []


def test_close_detaches_listener_exactly_once(session, os_signal, surface):
    session.open()

    session.close()
    session.close()
    os_signal.emit(True)

    assert os_signal.unsubscribe_calls == 1
    assert os_signal.listeners == []
    assert surface.themes == ["light"]


def test_context_manager_closes_on_error(session, os_signal):
    with pytest.raises(RuntimeError):
        with session:
            raise RuntimeError("boom")

    assert os_signal.listeners == []
    assert os_signal.unsubscribe_calls == 1


def test_subscription_close_is_idempotent():
    calls = []
    subscription = OsSignalSubscription(lambda: calls.append(1))

    subscription.close()
    subscription.close()

    assert calls == [1]
    assert subscription.active is False


def test_activate_title_plays_current_poem(session, backend, device, poems):
    session.open()

    run(session.activate_title())

    assert backend.calls == [poems[0].title]
    assert device.plays == 1


def test_reload_replaces_poem_and_invalidates_voice(session, backend, device, surface, poems):
    session.open()
    run(session.activate_title())

    session.reload()

    assert surface.poem == poems[1]
    assert surface.title == "静夜思"
    assert session.state.voice_resource is None
    assert device.stops >= 2


def test_poem_change_during_synthesis_discards_response(session, backend, device, surface):
    session.open()

    async def scenario():
        backend.gate = asyncio.Event()
        task = asyncio.ensure_future(session.activate_title())
        await asyncio.sleep(0)
        session.reload()
        backend.gate.set()
        await task

    run(scenario())

    assert session.state.voice_resource is None
    assert device.plays == 0
    assert surface.notices == []


def test_synthesis_failure_surfaces_notice(store, os_signal, device, surface, poems):
    session = NewTabSession(
        store=store,
        os_signal=os_signal,
        poem_source=_poem_feed(*poems),
        backend=FakeBackend(response={"error": "voice unavailable"}),
        device=device,
        surface=surface,
    )
    session.open()

    run(session.activate_title())

    assert surface.notices == ["voice unavailable"]


def test_preference_actions_publish_display_attributes(session, store, surface):
    session.open()

    session.cycle_theme()
    session.cycle_font()
    muted = session.toggle_mute()

    assert session.display_attributes() == {
        "data-theme": "light",
        "--custom-font-name": FONTNAME_LIST[1],
    }
    assert muted is True
    assert dict(store.writes) == {"theme": "light", "fontIndex": "1", "isMuted": "true"}


def test_persisted_preferences_restore_on_next_session(os_signal, backend, device, surface, poems):
    store = MemoryStore({"theme": "dark", "fontIndex": "2", "isMuted": "true"})
    session = NewTabSession(
        store=store,
        os_signal=os_signal,
        poem_source=_poem_feed(*poems),
        backend=backend,
        device=device,
        surface=surface,
    )

    session.open()
    run(session.activate_title())

    assert session.display_attributes() == {"data-theme": "dark", "--custom-font-name": FONTNAME_LIST[2]}
    assert backend.calls == []
