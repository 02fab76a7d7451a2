"""Aviation-related utilities.

This module provides controller callsign handling used by the radio registry.

Typical usage:
    from vatradio.aviation import get_callsign_parts

    station, position, sub_position = get_callsign_parts("EGLL_TWR")
"""

from vatradio.aviation.callsign import (
    FacilityType,
    StationCallsign,
    get_callsign_parts,
    is_same_station,
    parse_station_callsign,
)

__all__ = [
    "FacilityType",
    "StationCallsign",
    "get_callsign_parts",
    "is_same_station",
    "parse_station_callsign",
]
