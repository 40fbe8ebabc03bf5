"""Parse the VALID line of an FD product."""

import re

from windsaloft.decoder.errors import FormatError
from windsaloft.models.product import ValidityInfo

# e.g. "VALID 191800Z   FOR USE 1400-2100Z. TEMPS NEG ABV 24000"
VALIDITY_RE = re.compile(
    r"^VALID\s+(\d{6})Z\s+FOR USE\s+(\d{4})-(\d{4})Z.*?(?<!\d)(\d{4,6})\s*$"
)


def parse_validity_line(line: str) -> ValidityInfo:
    """Parse the valid time, usage window and negative-above threshold.

    Raises FormatError if the line doesn't match the expected layout.
    """
    m = VALIDITY_RE.match(line)
    if m is None:
        raise FormatError(f"unrecognised validity line: {line!r}", line)
    return ValidityInfo(
        valid=m.group(1),
        for_use_from=m.group(2),
        for_use_to=m.group(3),
        neg_above=int(m.group(4)),
    )
