"""Frequency unit conversion and lookup helpers.

Radios are keyed by their frequency in Hz; people read them in MHz with three
decimals (e.g., 121500000 Hz is shown as "121.500").

``index_of_frequency`` and ``exists_by_frequency`` scan a plain sequence of
radios, such as the ``radios`` of a change event held by a subscriber. The
registry itself looks frequencies up through its own index.
"""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vatradio.radio.models import Radio

HZ_PER_MHZ = 1_000_000
NOT_FOUND = -1

_DISPLAY_QUANTUM = Decimal("0.001")


def hz_to_mhz(hz: int) -> float:
    """Convert a frequency from Hz to MHz.

    Examples:
        >>> hz_to_mhz(118_000_000)
        118.0
    """
    return hz / HZ_PER_MHZ


def mhz_to_hz(mhz: float) -> int:
    """Convert a frequency from MHz to Hz, rounded to the nearest Hz.

    Examples:
        >>> mhz_to_hz(121.5)
        121500000
    """
    return int(round(mhz * HZ_PER_MHZ))


def hz_to_display_string(hz: int) -> str:
    """Format a frequency in Hz as MHz with exactly three decimals.

    Uses exact decimal arithmetic with half-up rounding so the same input
    always renders the same way.

    Examples:
        >>> hz_to_display_string(121_500_000)
        '121.500'
        >>> hz_to_display_string(118_012_500)
        '118.013'
    """
    mhz = Decimal(int(hz)) / HZ_PER_MHZ
    return str(mhz.quantize(_DISPLAY_QUANTUM, rounding=ROUND_HALF_UP))


def index_of_frequency(radios: Sequence["Radio"], frequency: int) -> int:
    """Get the position of the radio tuned to ``frequency``.

    Returns:
        Index into ``radios``, or ``NOT_FOUND`` (-1).
    """
    for index, radio in enumerate(radios):
        if radio.frequency == frequency:
            return index
    return NOT_FOUND


def exists_by_frequency(radios: Sequence["Radio"], frequency: int) -> bool:
    """Check whether any radio in ``radios`` is tuned to ``frequency``."""
    return index_of_frequency(radios, frequency) != NOT_FOUND
