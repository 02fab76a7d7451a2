"""Radio entry value types.

A ``Radio`` is an immutable snapshot. The registry replaces entries with
``dataclasses.replace`` and never modifies them in place, so a snapshot handed
to a subscriber stays valid forever.
"""

from dataclasses import asdict, dataclass
from typing import Any

from vatradio.radio.frequency import hz_to_display_string


@dataclass(frozen=True)
class FrequencyState:
    """Capability flags applied to a radio as a group.

    Attributes:
        rx: Receive audio on this frequency
        tx: Transmit on this frequency when push-to-talk is pressed
        xc: Cross-couple with other cross-coupled frequencies
        cross_couple_across: Cross-couple across all transceivers
        on_speaker: Route received audio to the speaker device
    """

    rx: bool = False
    tx: bool = False
    xc: bool = False
    cross_couple_across: bool = False
    on_speaker: bool = False


@dataclass(frozen=True)
class Radio:
    """One tuned frequency and everything the client knows about it.

    Attributes:
        frequency: Frequency in Hz; unique within a registry
        human_frequency: Frequency in MHz for display (e.g., "118.000")
        callsign: Controlling station callsign (e.g., "EGLL_TWR")
        station: Station part of the callsign
        position: Position part of the callsign
        sub_position: Sub-position part of the callsign
        rx, tx, xc, cross_couple_across, on_speaker: Capability flags
        currently_tx: Transmission in progress on this frequency
        currently_rx: Reception in progress on this frequency
        selected: The radio currently selected in the UI
        transceiver_count: Transceivers reported for the controlling station
        last_received_callsign: Most recent callsign heard on this frequency
        last_received_callsign_history: Earlier last-received callsigns, most
            recent first; None until one has been recorded
        is_pending_deleting: Marked for removal but still listed
    """

    frequency: int
    human_frequency: str
    callsign: str
    station: str
    position: str
    sub_position: str
    rx: bool = False
    tx: bool = False
    xc: bool = False
    cross_couple_across: bool = False
    on_speaker: bool = False
    currently_tx: bool = False
    currently_rx: bool = False
    selected: bool = False
    transceiver_count: int = 0
    last_received_callsign: str | None = None
    last_received_callsign_history: tuple[str, ...] | None = None
    is_pending_deleting: bool = False

    @classmethod
    def create(
        cls, frequency: int, callsign: str, callsign_parts: tuple[str, str, str]
    ) -> "Radio":
        """Create a fresh radio with every flag cleared.

        Args:
            frequency: Frequency in Hz
            callsign: Controlling station callsign
            callsign_parts: ``(station, position, sub_position)`` of ``callsign``
        """
        station, position, sub_position = callsign_parts
        return cls(
            frequency=frequency,
            human_frequency=hz_to_display_string(frequency),
            callsign=callsign,
            station=station,
            position=position,
            sub_position=sub_position,
        )

    @property
    def state(self) -> FrequencyState:
        """Current capability flags."""
        return FrequencyState(
            rx=self.rx,
            tx=self.tx,
            xc=self.xc,
            cross_couple_across=self.cross_couple_across,
            on_speaker=self.on_speaker,
        )

    @property
    def is_active(self) -> bool:
        return self.rx or self.tx

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary for UI layers."""
        data = asdict(self)
        history = self.last_received_callsign_history
        data["last_received_callsign_history"] = list(history) if history is not None else None
        return data
