"""Tests for controller callsign parsing."""

import pytest

from vatradio.aviation.callsign import (
    FacilityType,
    StationCallsign,
    get_callsign_parts,
    is_same_station,
    parse_station_callsign,
)


class TestFacilityType:
    """Test FacilityType enum."""

    def test_from_position_known(self):
        assert FacilityType.from_position("TWR") is FacilityType.TWR
        assert FacilityType.from_position("ctr") is FacilityType.CTR

    def test_from_position_unknown(self):
        assert FacilityType.from_position("ATIS") is None
        assert FacilityType.from_position("") is None

    def test_service_order(self):
        assert [f.value for f in FacilityType] == ["DEL", "GND", "TWR", "DEP", "APP", "CTR", "FSS"]


class TestParseStationCallsign:
    """Test parse_station_callsign."""

    @pytest.mark.parametrize(
        ("callsign", "expected"),
        [
            ("EGLL_TWR", ("EGLL", "TWR", "")),
            ("EGLL_N_TWR", ("EGLL", "TWR", "N")),
            ("LON_S_1_CTR", ("LON", "CTR", "S_1")),
            ("EGLL", ("EGLL", "", "")),
            ("", ("", "", "")),
        ],
    )
    def test_parts(self, callsign, expected):
        assert get_callsign_parts(callsign) == expected

    def test_keeps_full_callsign(self):
        parsed = parse_station_callsign("EGLL_N_TWR")

        assert parsed == StationCallsign(
            full="EGLL_N_TWR", station="EGLL", position="TWR", sub_position="N"
        )
        assert str(parsed) == "EGLL_N_TWR"

    def test_facility(self):
        assert parse_station_callsign("EGLL_GND").facility is FacilityType.GND
        assert parse_station_callsign("EGLL_ATIS").facility is None

    def test_empty_segments_kept(self):
        assert get_callsign_parts("EGLL__TWR") == ("EGLL", "TWR", "")
        assert get_callsign_parts("EGLL_TWR_") == ("EGLL", "", "TWR")


class TestIsSameStation:
    """Test is_same_station."""

    def test_same_station_different_position(self):
        assert is_same_station("EGLL_TWR", "EGLL_N_GND")

    def test_case_insensitive(self):
        assert is_same_station("EGLL_TWR", "egll_app")

    def test_different_station(self):
        assert not is_same_station("EGLL_TWR", "EGKK_TWR")

    def test_empty_callsigns(self):
        assert not is_same_station("", "")
