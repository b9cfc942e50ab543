import os

import pytest

from core.poem import Poem
from fakes import FakeBackend, FakeDevice, FakeOsSignal, MemoryStore, RecordingSurface

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def device():
    return FakeDevice()


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def os_signal():
    return FakeOsSignal()


@pytest.fixture
def spring_poem():
    return Poem(title="春晓", source="孟浩然")
