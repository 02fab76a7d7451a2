"""ATC station callsign parsing.

Controller callsigns on the network are underscore-separated: the station
(usually an ICAO location indicator) first, the facility type last, and an
optional sub-position in between.

    EGLL_TWR      -> station EGLL, position TWR
    EGLL_N_TWR    -> station EGLL, position TWR, sub-position N
    LON_S_1_CTR   -> station LON, position CTR, sub-position S_1

Typical usage:
    from vatradio.aviation import get_callsign_parts

    station, position, sub_position = get_callsign_parts("EGLL_N_TWR")
"""

from dataclasses import dataclass
from enum import Enum

CALLSIGN_SEPARATOR = "_"


class FacilityType(Enum):
    """Facility suffixes used in controller callsigns, in service order.

    Attributes:
        DEL: Clearance delivery
        GND: Ground
        TWR: Tower
        DEP: Departure
        APP: Approach
        CTR: Area control centre
        FSS: Flight service station
    """

    DEL = "DEL"
    GND = "GND"
    TWR = "TWR"
    DEP = "DEP"
    APP = "APP"
    CTR = "CTR"
    FSS = "FSS"

    @classmethod
    def from_position(cls, position: str) -> "FacilityType | None":
        """Look up a facility by callsign suffix, case-insensitively.

        Returns:
            The matching facility, or None for unknown suffixes (ATIS, OBS...)
        """
        try:
            return cls(position.upper())
        except ValueError:
            return None


@dataclass(frozen=True)
class StationCallsign:
    """A controller callsign split into its parts.

    Attributes:
        full: Callsign as received (e.g., "EGLL_N_TWR")
        station: Station part (e.g., "EGLL")
        position: Facility part (e.g., "TWR"), empty for single-part callsigns
        sub_position: Middle parts (e.g., "N"), empty when absent
    """

    full: str
    station: str
    position: str = ""
    sub_position: str = ""

    def __str__(self) -> str:
        return self.full

    @property
    def facility(self) -> FacilityType | None:
        """Facility type of this position, if it is a known one."""
        return FacilityType.from_position(self.position)

    def as_tuple(self) -> tuple[str, str, str]:
        """Return ``(station, position, sub_position)``."""
        return self.station, self.position, self.sub_position


def parse_station_callsign(callsign: str) -> StationCallsign:
    """Split a controller callsign into station, position and sub-position.

    Args:
        callsign: Callsign string such as "EGLL_N_TWR".

    Returns:
        Parsed callsign. Never fails; a callsign without separators is all
        station.

    Examples:
        >>> parse_station_callsign("EGLL_TWR").position
        'TWR'
        >>> parse_station_callsign("LON_S_1_CTR").sub_position
        'S_1'
    """
    parts = callsign.split(CALLSIGN_SEPARATOR)

    if len(parts) == 1:
        return StationCallsign(full=callsign, station=parts[0])

    return StationCallsign(
        full=callsign,
        station=parts[0],
        position=parts[-1],
        sub_position=CALLSIGN_SEPARATOR.join(parts[1:-1]),
    )


def get_callsign_parts(callsign: str) -> tuple[str, str, str]:
    """Return ``(station, position, sub_position)`` for a callsign."""
    return parse_station_callsign(callsign).as_tuple()


def is_same_station(callsign_a: str, callsign_b: str) -> bool:
    """Check whether two callsigns belong to the same station.

    Examples:
        >>> is_same_station("EGLL_TWR", "egll_n_gnd")
        True
    """
    station_a = parse_station_callsign(callsign_a).station
    station_b = parse_station_callsign(callsign_b).station
    return bool(station_a) and station_a.upper() == station_b.upper()
