"""Decode a single DDSS[TT] wind/temperature cell.

Encoding, per altitude:
  DD = wind direction / 10
  SS = wind speed in knots
  TT = temperature magnitude in C, negative unless marked with '+'

Winds of 100 kt or more don't fit in SS, so 50 is added to DD and 100 is
subtracted from the speed (7320 = 230 deg at 120 kt). DD = 99 is light and
variable. Above the product's negative-above altitude temperatures carry no
sign and are always negative.
"""

import logging

from windsaloft.decoder.errors import MalformedCellError
from windsaloft.models.product import LIGHT_AND_VARIABLE, Sentinel, WindTempCell

logger = logging.getLogger(__name__)

LIGHT_AND_VARIABLE_CODE = 99
SPEED_OVERFLOW_BIAS = 50
SPEED_OVERFLOW_KTS = 100


def missing_cell(altitude: int) -> WindTempCell:
    return WindTempCell(
        direction_deg=Sentinel.MISSING,
        speed_kts=Sentinel.MISSING,
        temp_c=0,
        altitude=altitude,
    )


def _is_ascii_digits(field: str) -> bool:
    # str.isdigit() also accepts characters like "²" that int() rejects
    return field.isascii() and field.isdigit()


def _parse_digits(field: str, cell: str) -> int:
    if len(field) != 2 or not _is_ascii_digits(field):
        raise MalformedCellError(f"non-numeric field {field!r} in cell {cell!r}", cell)
    return int(field)


def decode_wind(direction_code: int, speed_code: int) -> tuple[int, int]:
    """Apply the overflow and light-and-variable rules to raw DD and SS codes."""
    if direction_code > 40 and direction_code != LIGHT_AND_VARIABLE_CODE:
        return (
            (direction_code - SPEED_OVERFLOW_BIAS) * 10,
            speed_code + SPEED_OVERFLOW_KTS,
        )
    if direction_code == LIGHT_AND_VARIABLE_CODE:
        return LIGHT_AND_VARIABLE, speed_code
    return direction_code * 10, speed_code


def decode_temperature(cell: str, altitude: int, neg_above: int) -> int | Sentinel:
    if len(cell) <= 4:
        return Sentinel.NOT_REPORTED
    magnitude = cell[-2:]
    if not _is_ascii_digits(magnitude):
        logger.debug("Unreadable temperature in cell %r at %d", cell, altitude)
        return Sentinel.NOT_REPORTED
    sign = 1 if altitude <= neg_above and "+" in cell else -1
    return sign * int(magnitude)


def decode_cell(entry: str, altitude: int, neg_above: int) -> WindTempCell:
    """Decode one column slice of a data row.

    Blank slices (the forecast floor isn't reached at this altitude, or the
    row is too short) and slices with non-numeric wind fields decode to the
    missing cell rather than failing the whole product.
    """
    cell = entry.strip()
    if not cell:
        return missing_cell(altitude)

    try:
        direction_code = _parse_digits(cell[:2], cell)
        speed_code = _parse_digits(cell[2:4], cell)
    except MalformedCellError as e:
        logger.debug("Treating cell as missing at %d: %s", altitude, e)
        return missing_cell(altitude)

    direction, speed = decode_wind(direction_code, speed_code)
    return WindTempCell(
        direction_deg=direction,
        speed_kts=speed,
        temp_c=decode_temperature(cell, altitude, neg_above),
        altitude=altitude,
    )
