"""NWS text product models for the FD (winds and temperatures aloft) products."""

from dataclasses import dataclass
from enum import IntEnum


class ForecastHorizon(IntEnum):
    # Values are the FD product type numbers (FD1, FD3, FD5)
    SIX_HOUR = 1
    TWELVE_HOUR = 3
    TWENTY_FOUR_HOUR = 5

    @property
    def product_type(self) -> str:
        return f"FD{self.value}"

    @property
    def location(self) -> str:
        return f"US{self.value}"


@dataclass(frozen=True)
class ProductText:
    product_id: str
    product_code: str
    issuing_office: str
    issuance_time: str
    text: str
    fetched_at: str
