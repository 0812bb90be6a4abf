from __future__ import annotations

import pytest

from .helpers import FakeEventSource


@pytest.fixture
def fake_source() -> FakeEventSource:
    return FakeEventSource()
