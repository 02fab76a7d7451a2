"""Pytest configuration and fixtures for all tests."""

import pytest

from vatradio.core.event_bus import EventBus
from vatradio.core.session import SessionStore
from vatradio.radio.events import RadiosChangedEvent
from vatradio.radio.registry import RadioRegistry

OWN_CALLSIGN = "EGLL_GND"


@pytest.fixture
def session() -> SessionStore:
    """Session connected as EGLL_GND."""
    return SessionStore(OWN_CALLSIGN)


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def registry(session: SessionStore, event_bus: EventBus) -> RadioRegistry:
    """Empty registry bound to the test session and bus."""
    return RadioRegistry(session=session, event_bus=event_bus)


@pytest.fixture
def changes(registry: RadioRegistry) -> list[RadiosChangedEvent]:
    """Collects every change notification published by ``registry``."""
    received: list[RadiosChangedEvent] = []
    registry.subscribe(received.append)
    return received
