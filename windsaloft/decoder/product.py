"""Decode a complete FD winds and temperatures aloft product."""

import logging

from windsaloft.decoder.altitudes import LOCATION_WIDTH, parse_altitude_header
from windsaloft.decoder.cells import decode_cell
from windsaloft.decoder.components import extract_components
from windsaloft.decoder.validity import parse_validity_line
from windsaloft.models.product import LocationRecord, ParsedProduct

logger = logging.getLogger(__name__)


def decode_product(product_text: str, issuance_time: str = "") -> ParsedProduct:
    """Decode raw product text into a ParsedProduct.

    Raises FormatError when the header or validity line is missing or the
    validity line can't be parsed. Per-cell problems never fail the decode.
    """
    components = extract_components(product_text)
    validity = parse_validity_line(components.validity_line)
    columns = parse_altitude_header(components.header_line)

    locations: dict[str, LocationRecord] = {}
    for row in components.rows:
        if not row.strip():
            continue
        location = row[:LOCATION_WIDTH]
        cells = {
            col.altitude: decode_cell(col.slice(row), col.altitude, validity.neg_above)
            for col in columns
        }
        if location in locations:
            logger.warning("Duplicate location %s in product, keeping last row", location)
        locations[location] = LocationRecord(location=location, cells=cells)

    logger.info(
        "Decoded product valid %sZ: %d locations, %d altitudes",
        validity.valid, len(locations), len(columns),
    )
    return ParsedProduct(
        validity=validity,
        altitudes=columns,
        issuance_time=issuance_time,
        locations=locations,
    )
