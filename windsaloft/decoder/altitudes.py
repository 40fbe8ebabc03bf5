"""Derive altitude column boundaries from the FT header line."""

from windsaloft.decoder.components import HEADER_PREFIX
from windsaloft.decoder.errors import FormatError
from windsaloft.models.product import AltitudeColumn

# Width of the location code that precedes every data column
LOCATION_WIDTH = 3


def parse_altitude_header(header: str) -> list[AltitudeColumn]:
    """Build one AltitudeColumn per altitude label, in header order.

    Column widths vary between altitudes (upper levels drop the temperature
    sign), so each column ends where its label ends in the header and starts
    one past the end of the previous column.
    """
    columns: list[AltitudeColumn] = []
    last_end = LOCATION_WIDTH
    for token in header.split(" "):
        # Empty and single-character tokens are layout artifacts
        if len(token) <= 1 or token == HEADER_PREFIX:
            continue
        try:
            altitude = int(token)
        except ValueError:
            raise FormatError(f"invalid altitude label {token!r} in header", header) from None

        offset = header.find(token, last_end)
        end = offset + len(token)
        columns.append(
            AltitudeColumn(altitude=altitude, start_offset=last_end + 1, end_offset=end)
        )
        last_end = end
    return columns
