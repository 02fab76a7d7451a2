"""Session identity of the local operator.

The radio registry only needs to know which callsign the local operator is
connected as, so that its own transmissions are never recorded as "last
received".
"""

import threading

from vatradio.core.config import ConfigLoader
from vatradio.core.logging_system import get_logger

logger = get_logger(__name__)


class SessionStore:
    """Holds the station callsign of the connected operator.

    Examples:
        >>> session = SessionStore("EGLL_GND")
        >>> session.station_callsign
        'EGLL_GND'
    """

    def __init__(self, station_callsign: str = "") -> None:
        self._station_callsign = station_callsign

    @classmethod
    def from_config(cls, config: ConfigLoader) -> "SessionStore":
        """Create a session store from the ``session`` config section."""
        return cls(config.get("session.station_callsign", "") or "")

    @property
    def station_callsign(self) -> str:
        """Callsign the operator is connected as, empty when disconnected."""
        return self._station_callsign

    @station_callsign.setter
    def station_callsign(self, value: str) -> None:
        if value != self._station_callsign:
            logger.info("Station callsign changed: %r -> %r", self._station_callsign, value)
        self._station_callsign = value

    def clear(self) -> None:
        """Forget the station callsign, e.g. on disconnect."""
        self.station_callsign = ""


_default_session: SessionStore | None = None
_default_session_lock = threading.Lock()


def get_session_store() -> SessionStore:
    """Get the process-wide session store, creating it on first use."""
    global _default_session

    with _default_session_lock:
        if _default_session is None:
            _default_session = SessionStore()
        return _default_session
