"""
novatel_decoder.status

Decoders for the packed 32-bit status words of NovAtel logs.

Functions:
    - get_receiver_status: Receiver status word -> ReceiverStatus
    - get_extended_solution_status: Extended solution status -> ExtendedSolutionStatus
    - get_signals_used: Signals-used mask -> SignalMask

Notes:
    - Every 32-bit pattern decodes; bits without an assigned meaning are ignored.
    - The bit layout comes from the tables in ``data/status_bits.yml``
      (see novatel_decoder.tables).
"""

from common.models import ExtendedSolutionStatus, ReceiverStatus, SignalMask

from .tables import BitFlag, get_status_tables


def _flag_values(flags: tuple[BitFlag, ...], word: int) -> dict[str, bool]:
    return {flag.field: flag.test(word) for flag in flags}


def get_receiver_status(status: int) -> ReceiverStatus:
    """
    Decode the receiver status word.

    ``antenna_powered`` and ``clock_steering_status_enabled`` are true when
    their bits are clear; every other flag is true when its bit is set.
    """
    tables = get_status_tables()
    return ReceiverStatus(
        original_status_code=status,
        **_flag_values(tables.receiver_status, status),
    )


def get_extended_solution_status(status: int) -> ExtendedSolutionStatus:
    """
    Decode the extended solution status word: bit 0 is the advance RTK
    verification flag and bits 1-3 name the pseudorange iono correction.
    Sub-field values without a documented category decode as "Unknown".
    """
    table = get_status_tables().extended_solution_status
    iono = table.iono_correction
    return ExtendedSolutionStatus(
        original_mask=status,
        **_flag_values(table.flags, status),
        **{iono.field: iono.lookup(status)},
    )


def get_signals_used(mask: int) -> SignalMask:
    tables = get_status_tables()
    return SignalMask(original_mask=mask, **_flag_values(tables.signal_mask, mask))


# Status word name -> decoder, used by the CLI.
STATUS_DECODERS = {
    "receiver": get_receiver_status,
    "extended": get_extended_solution_status,
    "signals": get_signals_used,
}
