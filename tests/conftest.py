import io

import pytest

from ftr_testkit.logging import IndentedLog
from ftr_testkit.runners.events import EventEmitter, RunEvent


@pytest.fixture
def emitter():
    return EventEmitter()


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def log(stream):
    return IndentedLog(stream, color=False)


@pytest.fixture
def recorded(emitter):
    """Every event the emitter sees, as (event, payload) pairs."""
    seen = []
    for event in RunEvent:
        emitter.on(event, lambda *payload, _event=event: seen.append((_event, payload)))
    return seen
