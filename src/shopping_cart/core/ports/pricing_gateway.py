from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal


class PricingGateway(ABC):
    @abstractmethod
    def fetch_price(self, product_name: str) -> Decimal:
        """Return the current unit price of ``product_name``.

        Raises:
            PriceUnavailableError: the service answered with a non-success status.
            PricingTransportError: the service could not be reached.
            PriceParseError: the answer carried no usable numeric price.
        """
