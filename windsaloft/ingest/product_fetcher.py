"""Product fetcher: retrieves the latest FD product and decodes it."""

import logging

from windsaloft.config.schema import WindsAloftConfig
from windsaloft.decoder.product import decode_product
from windsaloft.ingest.nws_client import NwsClient
from windsaloft.models.nws import ForecastHorizon
from windsaloft.models.product import ParsedProduct

logger = logging.getLogger(__name__)


class ProductFetcher:
    def __init__(
        self,
        nws_client: NwsClient,
        horizon: ForecastHorizon = ForecastHorizon.SIX_HOUR,
    ):
        self.nws = nws_client
        self.horizon = horizon

    @classmethod
    def from_config(cls, config: WindsAloftConfig) -> "ProductFetcher":
        return cls(NwsClient.from_config(config.nws), horizon=config.product.horizon)

    def fetch_or_raise(self, horizon: ForecastHorizon | None = None) -> ParsedProduct:
        """Fetch and decode the latest product, propagating any failure.

        Uses the fetcher's configured horizon unless one is given.
        """
        horizon = horizon or self.horizon
        product = self.nws.get_latest_product(horizon)
        logger.info(
            "Fetched %s issued %s", product.product_id, product.issuance_time
        )
        return decode_product(product.text, product.issuance_time)

    def fetch(self, horizon: ForecastHorizon | None = None) -> ParsedProduct | None:
        """Fetch and decode the latest product. Returns None on any failure."""
        horizon = horizon or self.horizon
        try:
            return self.fetch_or_raise(horizon)
        except Exception:
            logger.exception(
                "Failed to fetch winds aloft for %s", horizon.product_type
            )
            return None
