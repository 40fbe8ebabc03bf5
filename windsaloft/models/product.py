"""Decoded winds and temperatures aloft product models."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

LIGHT_AND_VARIABLE = -1


class Sentinel(StrEnum):
    MISSING = "missing"
    NOT_REPORTED = "not_reported"


@dataclass(frozen=True)
class ValidityInfo:
    valid: str  # DDHHMM
    for_use_from: str  # HHMM
    for_use_to: str  # HHMM
    neg_above: int


@dataclass(frozen=True)
class AltitudeColumn:
    """One altitude's slice of every data row, half-open ``[start_offset, end_offset)``."""

    altitude: int
    start_offset: int
    end_offset: int

    def slice(self, row: str) -> str:
        return row[self.start_offset:self.end_offset]


@dataclass(frozen=True)
class WindTempCell:
    direction_deg: int | Sentinel
    speed_kts: int | Sentinel
    temp_c: int | Sentinel
    altitude: int

    @property
    def is_missing(self) -> bool:
        return (
            self.direction_deg == Sentinel.MISSING
            and self.speed_kts == Sentinel.MISSING
        )

    @property
    def light_and_variable(self) -> bool:
        return self.direction_deg == LIGHT_AND_VARIABLE

    @property
    def has_temperature(self) -> bool:
        return not isinstance(self.temp_c, Sentinel)


@dataclass(frozen=True)
class LocationRecord:
    location: str
    cells: Mapping[int, WindTempCell]

    def __post_init__(self):
        object.__setattr__(self, "cells", MappingProxyType(dict(self.cells)))

    def cell_at(self, altitude: int) -> WindTempCell | None:
        return self.cells.get(altitude)


@dataclass(frozen=True)
class ParsedProduct:
    """A decoded product. Columns and location maps are read-only views."""

    validity: ValidityInfo
    altitudes: tuple[AltitudeColumn, ...]
    issuance_time: str
    locations: Mapping[str, LocationRecord]

    def __post_init__(self):
        object.__setattr__(self, "altitudes", tuple(self.altitudes))
        object.__setattr__(self, "locations", MappingProxyType(dict(self.locations)))

    @property
    def altitude_values(self) -> list[int]:
        return [col.altitude for col in self.altitudes]

    def get_location(self, code: str) -> LocationRecord | None:
        return self.locations.get(code)

    def get_cell(self, code: str, altitude: int) -> WindTempCell | None:
        """Look up one decoded cell by location code, then altitude."""
        record = self.locations.get(code)
        if record is None:
            return None
        return record.cell_at(altitude)
