"""
common.models

Shared Pydantic models for the structured records produced by novatel_decoder.

ReceiverStatus:
    The receiver status word broken out into one boolean per documented bit.

ExtendedSolutionStatus:
    The extended solution status word: RTK verification plus the pseudorange
    ionospheric correction category.

SignalMask:
    Which GPS/GLONASS signals were used in the position solution.

Field names follow the receiver's published message definitions so that
downstream consumers can rely on them unchanged.
"""

from pydantic import BaseModel, ConfigDict, Field

UINT32_MAX = 0xFFFFFFFF


class ReceiverStatus(BaseModel):
    """
    ReceiverStatus

    Decoded 32-bit receiver status word.

    Attributes:
        original_status_code (int): The raw status word.
        antenna_powered (bool): True when bit 3 is CLEAR.
        clock_steering_status_enabled (bool): True when bit 21 is CLEAR.
        (all other flags): True when their bit is set.
    """

    model_config = ConfigDict(frozen=True)

    original_status_code: int = Field(ge=0, le=UINT32_MAX)
    error_flag: bool = False
    temperature_flag: bool = False
    voltage_supply_flag: bool = False
    antenna_powered: bool = False
    antenna_is_open: bool = False
    antenna_is_shorted: bool = False
    cpu_overload_flag: bool = False
    com1_buffer_overrun: bool = False
    com2_buffer_overrun: bool = False
    com3_buffer_overrun: bool = False
    usb_buffer_overrun: bool = False
    rf1_agc_flag: bool = False
    rf2_agc_flag: bool = False
    almanac_flag: bool = False
    position_solution_flag: bool = False
    position_fixed_flag: bool = False
    clock_steering_status_enabled: bool = False
    clock_model_flag: bool = False
    oemv_external_oscillator_flag: bool = False
    software_resource_flag: bool = False
    aux3_status_event_flag: bool = False
    aux2_status_event_flag: bool = False
    aux1_status_event_flag: bool = False


class ExtendedSolutionStatus(BaseModel):
    """
    ExtendedSolutionStatus

    Attributes:
        original_mask (int): The raw status word.
        advance_rtk_verified (bool): Bit 0.
        psuedorange_iono_correction (str): Category named by bits 1-3.
            The spelling matches the published message field.
    """

    model_config = ConfigDict(frozen=True)

    original_mask: int = Field(ge=0, le=UINT32_MAX)
    advance_rtk_verified: bool = False
    psuedorange_iono_correction: str = "Unknown"


class SignalMask(BaseModel):
    """Signals used in the solution, one flag per signal bit."""

    model_config = ConfigDict(frozen=True)

    original_mask: int = Field(ge=0, le=UINT32_MAX)
    gps_L1_used_in_solution: bool = False
    gps_L2_used_in_solution: bool = False
    gps_L3_used_in_solution: bool = False
    glonass_L1_used_in_solution: bool = False
    glonass_L2_used_in_solution: bool = False
