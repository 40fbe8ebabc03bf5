"""NWS products API client for FD winds aloft text, with retry and rate limit handling."""

import logging
import time

import httpx

from windsaloft.config.schema import NwsConfig
from windsaloft.models.common import utc_now_iso
from windsaloft.models.nws import ForecastHorizon, ProductText

logger = logging.getLogger(__name__)

NWS_BASE_URL = "https://api.weather.gov"
DEFAULT_USER_AGENT = "windsaloft/0.1.0"
RETRY_STATUS_CODES = (503, 429)


class NwsClientError(Exception):
    """Raised when the products API returns something we can't use."""


class NwsClient:
    def __init__(
        self,
        base_url: str = NWS_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_base_delay: float = 5.0,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    @classmethod
    def from_config(cls, config: NwsConfig) -> "NwsClient":
        return cls(
            base_url=config.base_url,
            user_agent=config.user_agent,
            timeout=config.timeout,
            max_retries=config.max_retries,
            retry_base_delay=config.retry_base_delay,
        )

    def _backoff(self, attempt: int, reason: str) -> None:
        delay = self.retry_base_delay * (2**attempt)
        logger.warning(
            "%s, retrying in %.1fs (attempt %d/%d)",
            reason, delay, attempt + 1, self.max_retries,
        )
        time.sleep(delay)

    def _get_json(self, url: str) -> dict:
        """GET a JSON document, retrying on 503/429 and transport errors.

        The last attempt is made outside the retry loop so its error
        propagates to the caller unchanged.
        """
        headers = {"User-Agent": self.user_agent, "Accept": "application/ld+json"}

        for attempt in range(self.max_retries):
            try:
                resp = httpx.get(url, headers=headers, timeout=self.timeout)
            except httpx.RequestError as e:
                self._backoff(attempt, f"NWS request error for {url}: {e}")
                continue
            if resp.status_code in RETRY_STATUS_CODES:
                self._backoff(attempt, f"NWS {url} returned {resp.status_code}")
                continue
            resp.raise_for_status()
            return resp.json()

        resp = httpx.get(url, headers=headers, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    def list_products(self, horizon: ForecastHorizon) -> list[dict]:
        """List issued FD products for a forecast horizon, most recent first."""
        url = (
            f"{self.base_url}/products/types/{horizon.product_type}"
            f"/locations/{horizon.location}"
        )
        data = self._get_json(url)
        return data.get("@graph", [])

    def get_product(self, product_id: str) -> ProductText:
        """Fetch a single product, including its text."""
        data = self._get_json(f"{self.base_url}/products/{product_id}")
        text = data.get("productText")
        if not text:
            raise NwsClientError(f"product {product_id} has no productText")
        return ProductText(
            product_id=data.get("id", product_id),
            product_code=data.get("productCode", ""),
            issuing_office=data.get("issuingOffice", ""),
            issuance_time=data.get("issuanceTime", ""),
            text=text,
            fetched_at=utc_now_iso(),
        )

    def get_latest_product(self, horizon: ForecastHorizon) -> ProductText:
        products = self.list_products(horizon)
        if not products:
            raise NwsClientError(
                f"no {horizon.product_type} products listed for {horizon.location}"
            )
        return self.get_product(products[0]["id"])
