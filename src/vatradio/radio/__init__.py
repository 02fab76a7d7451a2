"""Radio registry for the voice communication client.

This package provides:
- The radio registry (tuned frequencies, selection, push-to-talk)
- Frequency conversion helpers
- Viewer-relative radio ordering
- Change notification events
"""

from vatradio.radio.events import DuplicateFrequencyEvent, RadiosChangedEvent
from vatradio.radio.frequency import (
    exists_by_frequency,
    hz_to_display_string,
    hz_to_mhz,
    index_of_frequency,
    mhz_to_hz,
)
from vatradio.radio.models import FrequencyState, Radio
from vatradio.radio.ordering import make_radio_comparator, radio_compare, radio_sort_key
from vatradio.radio.registry import (
    RadioRegistry,
    RadioRegistryError,
    get_radio_registry,
    set_radio_registry,
)

__all__ = [
    "DuplicateFrequencyEvent",
    "FrequencyState",
    "Radio",
    "RadioRegistry",
    "RadioRegistryError",
    "RadiosChangedEvent",
    "exists_by_frequency",
    "get_radio_registry",
    "hz_to_display_string",
    "hz_to_mhz",
    "index_of_frequency",
    "make_radio_comparator",
    "mhz_to_hz",
    "radio_compare",
    "radio_sort_key",
    "set_radio_registry",
]
