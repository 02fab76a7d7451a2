"""Radio registry: the authoritative list of tuned frequencies.

The registry owns an ordered tuple of immutable ``Radio`` snapshots and the
global push-to-talk flag. Every mutation builds a new tuple, installs it and
publishes a ``RadiosChangedEvent`` with the complete new state, all while
holding the registry lock. Observers therefore never see a partial update,
whether the host drives the registry from one event loop or from several
threads.

Ordering is decided only when a radio is added: the whole list is re-sorted
relative to the viewer's callsign. Every other operation keeps the order.

Typical usage example:
    from vatradio.radio import FrequencyState, RadioRegistry

    registry = RadioRegistry(session=session)
    registry.subscribe(lambda event: ui.render(event.radios))
    registry.add_radio(118_000_000, "EGLL_TWR", session.station_callsign)
    registry.set_radio_state(118_000_000, FrequencyState(rx=True, tx=True))
    registry.set_currently_tx(True)
"""

import dataclasses
import threading
from collections.abc import Callable, Iterator
from typing import Any

from vatradio.aviation.callsign import get_callsign_parts
from vatradio.core.config import ConfigLoader
from vatradio.core.event_bus import EventBus, EventPriority
from vatradio.core.logging_system import get_logger
from vatradio.core.session import SessionStore, get_session_store
from vatradio.radio.events import DuplicateFrequencyEvent, RadiosChangedEvent
from vatradio.radio.models import FrequencyState, Radio
from vatradio.radio.ordering import (
    RadioComparator,
    make_radio_comparator,
    radio_compare,
    radio_sort_key,
)

logger = get_logger(__name__)

DEFAULT_HISTORY_LIMIT = 5
DEFAULT_DUPLICATE_MESSAGE = (
    "Frequency already exists in local client, but maybe not in AFV, delete it and try again"
)


class RadioRegistryError(Exception):
    """Raised when a registry cannot be constructed."""


class RadioRegistry:
    """Ordered collection of radios with consistency rules.

    Rules kept across every operation:
    - frequencies are unique;
    - at most one radio is selected;
    - ``currently_rx``/``currently_tx`` are never true while ``rx``/``tx`` is off;
    - the last-received history never holds more than ``history_limit`` entries;
    - the local operator's own callsign is never recorded as last received.

    Unknown frequencies are not an error: updates become no-ops and queries
    report absence.

    Args:
        session: Source of the local operator's station callsign. Defaults
            to the process-wide session store.
        event_bus: Bus used for change notifications. A private bus is
            created when omitted.
        compare: ``compare(a, b, station_callsign)`` ordering radios on add.
        parse_callsign: Splits a callsign into station, position and
            sub-position.
        history_limit: Maximum length of the last-received history.
        duplicate_message: Text of the duplicate-frequency notification.

    Raises:
        RadioRegistryError: If ``history_limit`` is smaller than 1.
    """

    def __init__(
        self,
        session: SessionStore | None = None,
        event_bus: EventBus | None = None,
        compare: RadioComparator = radio_compare,
        parse_callsign: Callable[[str], tuple[str, str, str]] = get_callsign_parts,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
        duplicate_message: str = DEFAULT_DUPLICATE_MESSAGE,
    ) -> None:
        if history_limit < 1:
            raise RadioRegistryError(f"history_limit must be >= 1, got: {history_limit}")

        self._session = session if session is not None else get_session_store()
        self.event_bus = event_bus if event_bus is not None else EventBus()
        self._compare = compare
        self._parse_callsign = parse_callsign
        self.history_limit = history_limit
        self.duplicate_message = duplicate_message

        self._lock = threading.RLock()
        self._radios: tuple[Radio, ...] = ()
        self._index: dict[int, int] = {}
        self._ptt_is_on = False

    @classmethod
    def from_config(
        cls,
        config: ConfigLoader,
        session: SessionStore | None = None,
        event_bus: EventBus | None = None,
    ) -> "RadioRegistry":
        """Create a registry from the ``registry`` and ``ordering`` sections.

        Examples:
            >>> config = ConfigLoader.load("config/radio.yaml")
            >>> registry = RadioRegistry.from_config(config, SessionStore.from_config(config))
        """
        position_order = config.get("ordering.position_order")
        compare = make_radio_comparator(position_order) if position_order else radio_compare

        return cls(
            session=session,
            event_bus=event_bus,
            compare=compare,
            history_limit=config.get("registry.history_limit", DEFAULT_HISTORY_LIMIT),
            duplicate_message=config.get("registry.duplicate_message", DEFAULT_DUPLICATE_MESSAGE),
        )

    # Read access

    @property
    def radios(self) -> tuple[Radio, ...]:
        """Current radios in display order."""
        return self._radios

    @property
    def ptt_is_on(self) -> bool:
        """Whether push-to-talk is pressed."""
        return self._ptt_is_on

    def get_radio(self, frequency: int) -> Radio | None:
        """Get the radio tuned to ``frequency``, if any."""
        with self._lock:
            index = self._index.get(frequency)
            return self._radios[index] if index is not None else None

    def __len__(self) -> int:
        return len(self._radios)

    def __iter__(self) -> Iterator[Radio]:
        return iter(self._radios)

    def __contains__(self, frequency: object) -> bool:
        return frequency in self._index

    # Subscriptions

    def subscribe(
        self,
        handler: Callable[[RadiosChangedEvent], Any],
        priority: EventPriority = EventPriority.NORMAL,
    ) -> None:
        """Call ``handler`` with the full new state after every change."""
        self.event_bus.subscribe(RadiosChangedEvent, handler, priority)

    def unsubscribe(self, handler: Callable[[RadiosChangedEvent], Any]) -> None:
        self.event_bus.unsubscribe(RadiosChangedEvent, handler)

    def subscribe_duplicates(self, handler: Callable[[DuplicateFrequencyEvent], Any]) -> None:
        """Call ``handler`` whenever a duplicate frequency is rejected."""
        self.event_bus.subscribe(DuplicateFrequencyEvent, handler)

    # Queries

    def get_selected_radio(self) -> Radio | None:
        """Get the selected radio, or None when nothing is selected."""
        with self._lock:
            return next((radio for radio in self._radios if radio.selected), None)

    def is_radio_unique(self, frequency: int) -> bool:
        """Check that no radio is tuned to ``frequency`` yet."""
        with self._lock:
            return frequency not in self._index

    def is_inactive(self, frequency: int) -> bool:
        """Check whether ``frequency`` neither receives nor transmits.

        Frequencies that are not in the registry count as inactive.
        """
        radio = self.get_radio(frequency)
        return radio is None or not radio.is_active

    # Mutations

    def add_radio(self, frequency: int, callsign: str, station_callsign: str) -> bool:
        """Add a radio and re-sort the list for the viewing station.

        Args:
            frequency: Frequency in Hz.
            callsign: Callsign of the station controlling the frequency.
            station_callsign: Callsign of the local operator; the order is
                relative to it.

        Returns:
            True if the radio was added, False if the frequency was already
            listed. In that case a ``DuplicateFrequencyEvent`` is published
            and nothing else changes.
        """
        with self._lock:
            if not self.is_radio_unique(frequency):
                logger.warning("Radio %d already exists, not adding %s", frequency, callsign)
                self.event_bus.publish(
                    DuplicateFrequencyEvent(
                        frequency=frequency, callsign=callsign, message=self.duplicate_message
                    )
                )
                return False

            radio = Radio.create(frequency, callsign, self._parse_callsign(callsign))
            radios = sorted(
                self._radios + (radio,), key=radio_sort_key(station_callsign, self._compare)
            )
            logger.info("Adding radio %s (%s)", radio.human_frequency, callsign)
            self._commit(tuple(radios))
            return True

    def remove_radio(self, frequency: int) -> None:
        """Remove the radio tuned to ``frequency``, keeping the others in order."""
        with self._lock:
            if frequency not in self._index:
                logger.debug("Cannot remove radio %d: not found", frequency)
                return

            logger.info("Removing radio %d", frequency)
            self._commit(tuple(r for r in self._radios if r.frequency != frequency))

    def select_radio(self, frequency: int) -> None:
        """Select the radio tuned to ``frequency`` and deselect all others.

        Selecting an unknown frequency clears the selection.
        """
        def select(radio: Radio) -> Radio:
            selected = radio.frequency == frequency
            if radio.selected == selected:
                return radio
            return dataclasses.replace(radio, selected=selected)

        with self._lock:
            self._commit(tuple(select(r) for r in self._radios))

    def set_last_received_callsign(self, frequency: int, callsign: str) -> None:
        """Record ``callsign`` as the last one heard on ``frequency``.

        The previous last-received callsign moves to the front of the
        history, which keeps at most ``history_limit`` entries. When there was
        no previous callsign (None or an empty string) the history stays as
        it is, so a radio that has
        only ever heard one callsign still has no history (None).

        Transmissions by the local operator are ignored.
        """
        if callsign == self._session.station_callsign:
            return

        def update(radio: Radio) -> Radio:
            if not radio.last_received_callsign:
                history = radio.last_received_callsign_history
            else:
                previous = radio.last_received_callsign_history or ()
                history = ((radio.last_received_callsign,) + previous)[: self.history_limit]
            return dataclasses.replace(
                radio,
                last_received_callsign=callsign,
                last_received_callsign_history=history,
            )

        self._update(frequency, update)

    def set_transceiver_count_for_station_callsign(self, callsign: str, count: int) -> None:
        """Set the transceiver count on every radio controlled by ``callsign``."""
        with self._lock:
            self._commit(
                tuple(
                    dataclasses.replace(r, transceiver_count=count) if r.callsign == callsign else r
                    for r in self._radios
                )
            )

    def set_currently_tx(self, value: bool) -> None:
        """Press or release push-to-talk.

        Every transmit-enabled radio follows the push-to-talk state; radios
        with ``tx`` off are left alone.
        """
        with self._lock:
            radios = tuple(
                dataclasses.replace(r, currently_tx=value) if r.tx else r for r in self._radios
            )
            self._commit(radios, ptt_is_on=value)

    def set_currently_rx(self, frequency: int, value: bool) -> None:
        """Mark reception on ``frequency`` as in progress or finished."""
        self._update(frequency, lambda r: dataclasses.replace(r, currently_rx=value))

    def set_pending_deletion(self, frequency: int, value: bool) -> None:
        """Flag the radio for deletion without removing it."""
        self._update(frequency, lambda r: dataclasses.replace(r, is_pending_deleting=value))

    def set_radio_state(self, frequency: int, state: FrequencyState) -> None:
        """Apply capability flags to the radio tuned to ``frequency``.

        Disabling ``rx`` or ``tx`` also clears the matching activity flag;
        enabling keeps whatever activity was already recorded.
        """
        self._update(
            frequency,
            lambda r: dataclasses.replace(
                r,
                rx=state.rx,
                tx=state.tx,
                xc=state.xc,
                cross_couple_across=state.cross_couple_across,
                on_speaker=state.on_speaker,
                currently_rx=r.currently_rx if state.rx else False,
                currently_tx=r.currently_tx if state.tx else False,
            ),
        )

    def reset(self) -> None:
        """Remove every radio. The push-to-talk state is kept."""
        with self._lock:
            logger.info("Resetting radio registry (%d radios)", len(self._radios))
            self._commit(())

    # Internals

    def _update(self, frequency: int, update: Callable[[Radio], Radio]) -> None:
        with self._lock:
            index = self._index.get(frequency)
            if index is None:
                logger.debug("Ignoring update for unknown radio %d", frequency)
                return

            radios = list(self._radios)
            radios[index] = update(radios[index])
            self._commit(tuple(radios))

    def _commit(self, radios: tuple[Radio, ...], ptt_is_on: bool | None = None) -> None:
        self._radios = radios
        self._index = {radio.frequency: i for i, radio in enumerate(radios)}
        if ptt_is_on is not None:
            self._ptt_is_on = ptt_is_on

        self.event_bus.publish(RadiosChangedEvent(radios=radios, ptt_is_on=self._ptt_is_on))


_default_registry: RadioRegistry | None = None
_default_registry_lock = threading.Lock()


def get_radio_registry() -> RadioRegistry:
    """Get the process-wide registry, creating an empty one on first use."""
    global _default_registry

    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = RadioRegistry(session=get_session_store())
        return _default_registry


def set_radio_registry(registry: RadioRegistry | None) -> None:
    """Replace the process-wide registry; None drops it."""
    global _default_registry

    with _default_registry_lock:
        _default_registry = registry
