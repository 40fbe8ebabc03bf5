"""Split raw FD product text into its validity line, altitude header and data rows."""

from dataclasses import dataclass

from windsaloft.decoder.errors import FormatError

HEADER_PREFIX = "FT"
VALIDITY_PREFIX = "VALID"


@dataclass(frozen=True)
class ProductComponents:
    validity_line: str
    header_line: str
    rows: list[str]


def is_header_line(line: str) -> bool:
    return line.startswith(HEADER_PREFIX)


def is_validity_line(line: str) -> bool:
    return line.startswith(VALIDITY_PREFIX) and "TEMP" in line and "NEG" in line


def extract_components(product_text: str) -> ProductComponents:
    """Locate the header and validity lines and collect the rows after the header.

    The last matching line wins for both, so remarks near the top of the
    product that happen to look similar are ignored. Rows are returned as-is;
    blank rows are left for the caller to skip.
    """
    # Split on newlines only; other control characters stay inside their row
    lines = [line.rstrip("\r") for line in product_text.split("\n")]
    header_index = -1
    validity_index = -1
    for i, line in enumerate(lines):
        if is_header_line(line):
            header_index = i
        if is_validity_line(line):
            validity_index = i

    if header_index == -1 or validity_index == -1:
        raise FormatError(
            f"product text formatting issue, header index: {header_index} "
            f"valid line index: {validity_index}",
            product_text,
        )

    return ProductComponents(
        validity_line=lines[validity_index],
        header_line=lines[header_index],
        rows=lines[header_index + 1:],
    )
