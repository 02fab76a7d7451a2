"""Events published by the radio registry."""

from dataclasses import dataclass

from vatradio.core.event_bus import Event
from vatradio.radio.models import Radio


@dataclass(frozen=True)
class RadiosChangedEvent(Event):
    """Published after every registry mutation.

    Attributes:
        radios: Complete radio list after the change, in display order.
        ptt_is_on: Push-to-talk state after the change.
    """

    radios: tuple[Radio, ...] = ()
    ptt_is_on: bool = False


@dataclass(frozen=True)
class DuplicateFrequencyEvent(Event):
    """Published when adding a radio whose frequency is already listed.

    Meant to be shown to the user; the registry is left unchanged.

    Attributes:
        frequency: Rejected frequency in Hz.
        callsign: Callsign the radio would have been added for.
        message: User-facing explanation.
    """

    frequency: int = 0
    callsign: str = ""
    message: str = ""
