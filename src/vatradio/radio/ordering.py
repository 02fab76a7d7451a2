"""Display ordering of radios relative to the viewing controller.

Radios of the viewer's own station come first, followed by other stations in
alphabetical order. Within a station, positions follow the order in which
traffic is handed through them (delivery, ground, tower, ...), then the
sub-position, then the frequency.
"""

import functools
from collections.abc import Callable, Sequence
from typing import Any

from vatradio.aviation.callsign import FacilityType, parse_station_callsign
from vatradio.radio.models import Radio

DEFAULT_POSITION_ORDER: tuple[str, ...] = tuple(facility.value for facility in FacilityType)

RadioComparator = Callable[[Radio, Radio, str], int]


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _position_rank(position: str, position_order: Sequence[str]) -> tuple[int, str]:
    position = position.upper()
    if position in position_order:
        return position_order.index(position), ""
    # Unknown positions go last, alphabetically
    return len(position_order), position


def make_radio_comparator(position_order: Sequence[str] = DEFAULT_POSITION_ORDER) -> RadioComparator:
    """Build a comparator that ranks positions by ``position_order``.

    Args:
        position_order: Position suffixes, first to last.

    Returns:
        ``compare(a, b, station_callsign) -> int`` with the usual negative,
        zero, positive convention.
    """
    order = tuple(p.upper() for p in position_order)

    def compare(a: Radio, b: Radio, station_callsign: str) -> int:
        own_station = parse_station_callsign(station_callsign).station.upper()

        a_is_own = bool(own_station) and a.station.upper() == own_station
        b_is_own = bool(own_station) and b.station.upper() == own_station
        if a_is_own != b_is_own:
            return -1 if a_is_own else 1

        return (
            _cmp(a.station.upper(), b.station.upper())
            or _cmp(_position_rank(a.position, order), _position_rank(b.position, order))
            or _cmp(a.sub_position.upper(), b.sub_position.upper())
            or _cmp(a.frequency, b.frequency)
        )

    return compare


radio_compare: RadioComparator = make_radio_comparator()


def radio_sort_key(
    station_callsign: str, compare: RadioComparator = radio_compare
) -> Callable[[Radio], Any]:
    """Sort key for ``sorted``/``list.sort`` bound to a viewer callsign.

    Examples:
        >>> radios.sort(key=radio_sort_key("EGLL_GND"))
    """
    return functools.cmp_to_key(lambda a, b: compare(a, b, station_callsign))
