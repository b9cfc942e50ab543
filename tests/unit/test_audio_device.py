import types

import pytest

from core.errors import AudioDeviceError
from system import audio_device as ad


class _PygameError(Exception):
    pass


def _fake_pygame(init=True, fail_load=False):
    state = {"init": init, "volume": None, "loaded": None, "plays": 0, "stops": 0, "unloads": 0}

    def load(path):
        if fail_load:
            raise _PygameError("unsupported format")
        state["loaded"] = path

    def play():
        state["plays"] += 1

    def stop():
        state["stops"] += 1

    def set_volume(value):
        state["volume"] = value

    def mixer_init():
        state["init"] = True

    music = types.SimpleNamespace(
        load=load,
        play=play,
        stop=stop,
        set_volume=set_volume,
        unload=lambda: state.update(unloads=state["unloads"] + 1),
    )
    mixer = types.SimpleNamespace(
        get_init=lambda: state["init"],
        init=mixer_init,
        quit=lambda: state.update(init=False),
        music=music,
    )
    return types.SimpleNamespace(mixer=mixer, error=_PygameError), state


def test_load_and_play_from_start(monkeypatch):
    fake, state = _fake_pygame(init=False)
    monkeypatch.setattr(ad, "pygame", fake)
    device = ad.PygameAudioDevice()

    device.load("/tmp/title.mp3")
    device.play_from_start()

    assert state["init"] is True
    assert state["loaded"] == "/tmp/title.mp3"
    assert state["plays"] == 1
    assert state["volume"] == 1.0


def test_mute_sets_volume_to_zero(monkeypatch):
    fake, state = _fake_pygame()
    monkeypatch.setattr(ad, "pygame", fake)
    device = ad.PygameAudioDevice()

    device.set_muted(True)
    assert state["volume"] == 0.0
    device.set_muted(False)
    assert state["volume"] == 1.0


def test_load_failure_raises_device_error(monkeypatch):
    fake, _ = _fake_pygame(fail_load=True)
    monkeypatch.setattr(ad, "pygame", fake)
    device = ad.PygameAudioDevice()

    with pytest.raises(AudioDeviceError):
        device.load("/tmp/broken.mp3")
    assert device.source is None


def test_play_without_source_raises(monkeypatch):
    fake, _ = _fake_pygame()
    monkeypatch.setattr(ad, "pygame", fake)

    with pytest.raises(AudioDeviceError):
        ad.PygameAudioDevice().play_from_start()


def test_stop_is_noop_without_mixer(monkeypatch):
    fake, state = _fake_pygame(init=False)
    monkeypatch.setattr(ad, "pygame", fake)

    ad.PygameAudioDevice().stop()

    assert state["stops"] == 0


def test_unload_drops_source(monkeypatch):
    fake, state = _fake_pygame()
    monkeypatch.setattr(ad, "pygame", fake)
    device = ad.PygameAudioDevice()
    device.load("/tmp/spring.mp3")

    device.unload()

    assert device.source is None
    assert state["unloads"] == 1
    with pytest.raises(AudioDeviceError):
        device.play_from_start()
