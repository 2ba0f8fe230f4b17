import pytest

from novatel_decoder.conversions import convert_dms_to_degrees, utc_float_to_seconds


def test_utc_float_to_seconds():
    assert utc_float_to_seconds(123456.5) == pytest.approx(45296.5)
    assert utc_float_to_seconds(0.0) == 0.0
    assert utc_float_to_seconds(235959.99) == pytest.approx(86399.99)


def test_utc_float_to_seconds_minutes_only():
    assert utc_float_to_seconds(1500.25) == pytest.approx(900.25)


def test_convert_dms_to_degrees():
    assert convert_dms_to_degrees(4807.038) == pytest.approx(48.1173)
    assert convert_dms_to_degrees(1131.0) == pytest.approx(11.516666666)
    assert convert_dms_to_degrees(30.0) == pytest.approx(0.5)


@pytest.mark.parametrize("func", [utc_float_to_seconds, convert_dms_to_degrees])
def test_negative_input_rejected(func):
    with pytest.raises(ValueError):
        func(-1.0)
