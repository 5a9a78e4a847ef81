import threading

import pytest

from mathapp.dispatcher import Dispatcher
from mathapp.engine import AlgebraEngine


@pytest.fixture(scope='session')
def engine():
    """A loaded engine shared by the whole run (loading SymPy is slow)."""
    eng = AlgebraEngine()
    assert eng.load(), eng.load_error
    return eng


@pytest.fixture
def dispatcher(engine):
    return Dispatcher(engine)


@pytest.fixture
def stalled_engine(monkeypatch):
    """An engine whose loader never finishes and whose load deadline has passed."""
    import time

    release = threading.Event()
    eng = AlgebraEngine(load_timeout=0.01)
    monkeypatch.setattr(eng, 'load', lambda: release.wait(5))
    eng.start()
    time.sleep(0.05)
    yield eng
    release.set()
