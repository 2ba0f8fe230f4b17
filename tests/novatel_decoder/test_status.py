"""
Unit tests for the status-word decoders in novatel_decoder.status.

These tests cover:
- Every receiver status bit, including the two inverted-polarity flags.
- The iono correction sub-field of the extended solution status, including
  the "Unknown" default for undocumented values.
- The signals-used mask.
- Unassigned bits being ignored, and repeated decodes being identical.
"""

import pytest
from pydantic import ValidationError

from common.models import ExtendedSolutionStatus, ReceiverStatus, SignalMask
from novatel_decoder.status import (
    get_extended_solution_status,
    get_receiver_status,
    get_signals_used,
)

INVERTED_FIELDS = {"antenna_powered", "clock_steering_status_enabled"}

RECEIVER_BITS = {
    "error_flag": 0,
    "temperature_flag": 1,
    "voltage_supply_flag": 2,
    "antenna_powered": 3,
    "antenna_is_open": 5,
    "antenna_is_shorted": 6,
    "cpu_overload_flag": 7,
    "com1_buffer_overrun": 8,
    "com2_buffer_overrun": 9,
    "com3_buffer_overrun": 10,
    "usb_buffer_overrun": 11,
    "rf1_agc_flag": 15,
    "rf2_agc_flag": 17,
    "almanac_flag": 18,
    "position_solution_flag": 19,
    "position_fixed_flag": 20,
    "clock_steering_status_enabled": 21,
    "clock_model_flag": 22,
    "oemv_external_oscillator_flag": 23,
    "software_resource_flag": 24,
    "aux3_status_event_flag": 29,
    "aux2_status_event_flag": 30,
    "aux1_status_event_flag": 31,
}


def _flags(record) -> dict[str, bool]:
    return {k: v for k, v in record.model_dump().items() if isinstance(v, bool)}


# --- Receiver status ---


def test_receiver_status_error_flag_only():
    status = get_receiver_status(0x00000001)
    assert isinstance(status, ReceiverStatus)
    assert status.original_status_code == 1
    flags = _flags(status)
    assert flags.pop("error_flag") is True
    assert flags.pop("antenna_powered") is True
    assert flags.pop("clock_steering_status_enabled") is True
    assert not any(flags.values())


def test_receiver_status_covers_all_fields():
    assert set(_flags(get_receiver_status(0))) == set(RECEIVER_BITS)


@pytest.mark.parametrize("field, bit", sorted(RECEIVER_BITS.items()))
def test_receiver_status_single_bit(field, bit):
    status = get_receiver_status(1 << bit)
    flags = _flags(status)
    for name, value in flags.items():
        expected = (name == field) != (name in INVERTED_FIELDS)
        assert value is expected, name


def test_receiver_status_all_bits_set():
    flags = _flags(get_receiver_status(0xFFFFFFFF))
    for name, value in flags.items():
        assert value is (name not in INVERTED_FIELDS), name


def test_receiver_status_ignores_unassigned_bits():
    unassigned = 0
    for bit in (4, 12, 13, 14, 16, 25, 26, 27, 28):
        unassigned |= 1 << bit
    assert _flags(get_receiver_status(unassigned)) == _flags(get_receiver_status(0))


def test_receiver_status_rejects_values_outside_32_bits():
    with pytest.raises(ValidationError):
        get_receiver_status(1 << 32)


def test_receiver_status_record_is_frozen():
    status = get_receiver_status(0)
    with pytest.raises(ValidationError):
        status.error_flag = True


# --- Extended solution status ---


def test_extended_solution_status_zero():
    status = get_extended_solution_status(0x00000000)
    assert isinstance(status, ExtendedSolutionStatus)
    assert status.advance_rtk_verified is False
    assert status.psuedorange_iono_correction == "Unknown"


def test_extended_solution_status_klobuchar_and_rtk():
    status = get_extended_solution_status(0x00000003)
    assert status.original_mask == 3
    assert status.advance_rtk_verified is True
    assert status.psuedorange_iono_correction == "Klobuchar Broadcast"


@pytest.mark.parametrize(
    "value, category",
    [
        (0, "Unknown"),
        (1, "Klobuchar Broadcast"),
        (2, "SBAS Broadcast"),
        (3, "Multi-frequency Computed"),
        (4, "PSRDiff Correction"),
        (5, "Novatel Blended Iono Value"),
        (6, "Unknown"),
        (7, "Unknown"),
    ],
)
def test_extended_solution_iono_categories(value, category):
    status = get_extended_solution_status(value << 1)
    assert status.psuedorange_iono_correction == category
    assert status.advance_rtk_verified is False


def test_extended_solution_ignores_higher_bits():
    status = get_extended_solution_status(0xFFFFFFF0 | (4 << 1))
    assert status.psuedorange_iono_correction == "PSRDiff Correction"
    assert status.advance_rtk_verified is False


# --- Signals used ---


def test_signals_used_example():
    mask = get_signals_used(0x00000023)
    assert isinstance(mask, SignalMask)
    assert mask.gps_L1_used_in_solution is True
    assert mask.gps_L2_used_in_solution is True
    assert mask.glonass_L2_used_in_solution is True
    assert mask.gps_L3_used_in_solution is False
    assert mask.glonass_L1_used_in_solution is False


@pytest.mark.parametrize(
    "bit_mask, field",
    [
        (0x01, "gps_L1_used_in_solution"),
        (0x02, "gps_L2_used_in_solution"),
        (0x04, "gps_L3_used_in_solution"),
        (0x10, "glonass_L1_used_in_solution"),
        (0x20, "glonass_L2_used_in_solution"),
    ],
)
def test_signals_used_single_bit(bit_mask, field):
    flags = _flags(get_signals_used(bit_mask))
    assert flags == {name: name == field for name in flags}


def test_signals_used_ignores_bit_3():
    assert not any(_flags(get_signals_used(0x08)).values())


# --- Idempotence ---


@pytest.mark.parametrize(
    "decoder", [get_receiver_status, get_extended_solution_status, get_signals_used]
)
def test_decoding_twice_gives_equal_records(decoder):
    assert decoder(0xA5A5A5A5) == decoder(0xA5A5A5A5)


# --- Bundled table only ---


@pytest.mark.parametrize(
    "table_text",
    [
        "receiver_status: []\n",
        None,  # bundled table with antenna_powered polarity flipped
    ],
)
def test_table_path_in_environment_does_not_change_decoding(
    monkeypatch, bundled_table_text, write_table, table_text
):
    if table_text is None:
        table_text = bundled_table_text.replace(
            "field: antenna_powered, inverted: true", "field: antenna_powered"
        )
    monkeypatch.setenv("NOVATEL_STATUS_TABLE_PATH", write_table(table_text))

    status = get_receiver_status(0x00000001)
    assert status.error_flag is True
    assert status.antenna_powered is True
    assert status.clock_steering_status_enabled is True
    assert get_extended_solution_status(0x03).psuedorange_iono_correction == "Klobuchar Broadcast"
    assert get_signals_used(0x23).glonass_L2_used_in_solution is True
