import json
from decimal import Decimal
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from shopping_cart.core.exceptions.price_parse_error import PriceParseError
from shopping_cart.core.exceptions.price_unavailable_error import PriceUnavailableError
from shopping_cart.core.exceptions.pricing_transport_error import PricingTransportError
from shopping_cart.core.ports.pricing_gateway import PricingGateway
from shopping_cart.infrastructure.drivers.pricing.dtos.price_dto import PriceDTO
from shopping_cart.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger("pricing_http_client")


class PricingHttpClient(PricingGateway):
    """Resolves unit prices from ``{base_url}/{product}.json``.

    One GET per call: no retries, no caching. Timeout is None (wait indefinitely)
    unless the caller configures one.
    """

    def __init__(self, base_url: str, timeout: float | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def url_for(self, product_name: str) -> str:
        return f"{self.base_url}/{quote(product_name, safe='')}.json"

    def fetch_price(self, product_name: str) -> Decimal:
        url = self.url_for(product_name)
        logger.debug("GET pricing", url=url, product=product_name)

        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning(
                "Pricing service unreachable",
                product=product_name,
                error_type=type(e).__name__,
                error_details=str(e),
            )
            raise PricingTransportError(product_name, f"{type(e).__name__}: {e}") from e

        if response.status_code != 200:
            logger.warning("Price unavailable", product=product_name, status_code=response.status_code)
            raise PriceUnavailableError(product_name, response.status_code)

        price = self._parse_price(product_name, response)
        logger.debug("Price resolved", product=product_name, price=price)
        return price

    def _parse_price(self, product_name: str, response: httpx.Response) -> Decimal:
        # Decimal parsing keeps 2.52 as 2.52 instead of its nearest binary float
        try:
            payload = response.json(parse_float=Decimal, parse_int=Decimal)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise PriceParseError(product_name, f"body is not valid JSON ({e})") from e

        if not isinstance(payload, dict):
            raise PriceParseError(product_name, "body is not a JSON object")

        try:
            return PriceDTO.model_validate(payload).price
        except ValidationError as e:
            raise PriceParseError(product_name, f"missing or non-numeric 'price' ({e.error_count()} errors)") from e
