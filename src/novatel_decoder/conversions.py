"""
novatel_decoder.conversions

Helpers for the packed time and angle formats that NMEA-style ASCII logs use.
"""


def utc_float_to_seconds(utc_float: float) -> float:
    """
    Convert an ``hhmmss.ss`` time of day to seconds since midnight.

    >>> utc_float_to_seconds(123456.5)
    45296.5
    """
    if utc_float < 0:
        raise ValueError(f"UTC time must be non-negative, got {utc_float}")
    whole = int(utc_float)
    hours = whole // 10000
    minutes = (whole - hours * 10000) // 100
    seconds = utc_float - (hours * 10000 + minutes * 100)
    return seconds + hours * 3600 + minutes * 60


def convert_dms_to_degrees(dms: float) -> float:
    """
    Convert a ``dddmm.mmmm`` angle (degrees and decimal minutes) to decimal degrees.
    """
    if dms < 0:
        raise ValueError(f"DMS angle must be non-negative, got {dms}")
    whole_degrees = int(dms) // 100
    minutes = dms - whole_degrees * 100
    return whole_degrees + minutes / 60.0
