"""
novatel_decoder.tables

Loading and validation of the declarative status-word bit tables.

The tables live in ``data/status_bits.yml`` bundled with this package. Each
status decoder walks its table uniformly instead of assigning flags one by one,
so the table can be audited directly against the receiver documentation.

Functions:
    - load_status_tables: Load and validate a bit-table YAML file
    - get_status_tables: The bundled tables used by the decoders

Models:
    - BitFlag: One single-bit boolean flag (mask, field, polarity)
    - SubField: A multi-bit categorical slice of a status word
    - ExtendedSolutionTable: Flags plus the iono-correction sub-field
    - StatusTables: All three tables
"""

import logging
import os
from importlib import resources

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from common.models import ExtendedSolutionStatus, ReceiverStatus, SignalMask

from .exceptions import StatusTableError

logger = logging.getLogger(__name__)


def _default_table_path() -> str:
    """
    Path of the bit-table file bundled as package data.
    """
    return str(resources.files(__package__) / "data" / "status_bits.yml")


class BitFlag(BaseModel):
    """A boolean taken from one bit; ``inverted`` flags are true when the bit is clear."""

    model_config = ConfigDict(frozen=True)

    mask: int
    field: str
    inverted: bool = False

    @field_validator("mask")
    @classmethod
    def check_single_bit(cls, mask: int) -> int:
        if mask <= 0 or mask > 0xFFFFFFFF or mask & (mask - 1):
            raise ValueError(f"mask 0x{mask:X} must select exactly one bit of a 32-bit word")
        return mask

    def test(self, word: int) -> bool:
        is_set = (word & self.mask) != 0
        return not is_set if self.inverted else is_set


class SubField(BaseModel):
    """A ``(word & mask) >> shift`` slice mapped to a category name."""

    model_config = ConfigDict(frozen=True)

    field: str
    mask: int
    shift: int = 0
    default: str = "Unknown"
    categories: dict[int, str]

    def lookup(self, word: int) -> str:
        return self.categories.get((word & self.mask) >> self.shift, self.default)


class ExtendedSolutionTable(BaseModel):
    model_config = ConfigDict(frozen=True)

    flags: tuple[BitFlag, ...]
    iono_correction: SubField


def _check_flags(flags, record_model, name: str) -> None:
    """
    Every flag must name a boolean field of ``record_model``, masks must be
    unique, and every boolean field of the record must be covered.
    """
    masks = [flag.mask for flag in flags]
    if len(set(masks)) != len(masks):
        raise ValueError(f"{name}: duplicate bit masks")

    bool_fields = {
        fname for fname, info in record_model.model_fields.items() if info.annotation is bool
    }
    named = [flag.field for flag in flags]
    unknown = set(named) - bool_fields
    if unknown:
        raise ValueError(f"{name}: no such fields on {record_model.__name__}: {sorted(unknown)}")
    missing = bool_fields - set(named)
    if missing:
        raise ValueError(f"{name}: fields not covered by the table: {sorted(missing)}")


class StatusTables(BaseModel):
    model_config = ConfigDict(frozen=True)

    receiver_status: tuple[BitFlag, ...]
    extended_solution_status: ExtendedSolutionTable
    signal_mask: tuple[BitFlag, ...]

    @model_validator(mode="after")
    def check_against_records(self):
        _check_flags(self.receiver_status, ReceiverStatus, "receiver_status")
        _check_flags(self.signal_mask, SignalMask, "signal_mask")
        _check_flags(
            self.extended_solution_status.flags,
            ExtendedSolutionStatus,
            "extended_solution_status",
        )
        iono_field = self.extended_solution_status.iono_correction.field
        if iono_field not in ExtendedSolutionStatus.model_fields:
            raise ValueError(f"extended_solution_status: no such field '{iono_field}'")
        return self


def load_status_tables(path_override: str | None = None) -> StatusTables:
    """
    Load and validate the status bit tables.

    Path selection logic:
      - If path_override is provided and readable, use it.
      - Otherwise log a warning (when an override was given) and use the
        bundled default.

    Args:
        path_override (str | None): Optional path to a bit-table YAML file.

    Returns:
        StatusTables: The validated tables.

    Raises:
        StatusTableError: The file is missing, is not valid YAML, or does not
            match the status record models.
    """
    default_path = _default_table_path()
    table_path = default_path
    if path_override:
        if os.path.exists(path_override) and os.access(path_override, os.R_OK):
            logger.info(f"Using status table override: {path_override}")
            table_path = path_override
        else:
            logger.warning(
                f"Status table override path provided but not found/readable: "
                f"{path_override}. Using default: {default_path}"
            )

    if not os.path.exists(table_path) or not os.access(table_path, os.R_OK):
        logger.error(f"Cannot read status table: {table_path}")
        raise StatusTableError(f"Cannot read status table: {table_path}")

    try:
        with open(table_path) as f:
            raw_tables = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise StatusTableError(f"Invalid YAML in {table_path}: {e}") from e

    try:
        tables = StatusTables.model_validate(raw_tables)
    except ValidationError as e:
        raise StatusTableError(f"Invalid status table {table_path}: {e}") from e

    logger.debug(
        f"Loaded status tables from {table_path}: "
        f"{len(tables.receiver_status)} receiver flags, "
        f"{len(tables.signal_mask)} signal flags"
    )
    return tables


# Always the bundled tables; loaded once at import and never modified afterwards.
STATUS_TABLES = load_status_tables()


def get_status_tables() -> StatusTables:
    """
    The tables used by the status decoders. Other table files are only read
    through an explicit ``load_status_tables(path)`` call.
    """
    return STATUS_TABLES
