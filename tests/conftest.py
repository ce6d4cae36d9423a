import threading
from decimal import Decimal

import pytest

from shopping_cart.core.domain.cart.cart import Cart
from shopping_cart.core.ports.pricing_gateway import PricingGateway

SETTINGS_ENV_VARS = (
    "PRODUCT_API_URL",
    "PRODUCT_TAX_RATE",
    "PRODUCT_API_TIMEOUT",
    "PRODUCT_LOCK_STRIPES",
    "CART_PROPERTIES_FILE",
)


class StubPricingGateway(PricingGateway):
    """In-memory gateway: fixed prices, optional per-product errors, call log."""

    def __init__(self, prices=None, errors=None):
        self.prices = dict(prices or {})
        self.errors = dict(errors or {})
        self.calls = []
        self._calls_lock = threading.Lock()

    def fetch_price(self, product_name):
        with self._calls_lock:
            self.calls.append(product_name)
        if product_name in self.errors:
            raise self.errors[product_name]
        return self.prices[product_name]


@pytest.fixture
def make_pricing():
    """Factory for stub gateways: make_pricing(prices={...}, errors={...})."""
    return StubPricingGateway


@pytest.fixture
def pricing():
    return StubPricingGateway(
        prices={
            "cornflakes": Decimal("2.52"),
            "weetabix": Decimal("9.98"),
            "shreddies": Decimal("4.68"),
            "frosties": Decimal("4.99"),
            "cheerios": Decimal("8.43"),
        }
    )


@pytest.fixture
def cart(pricing):
    return Cart(pricing, Decimal("0.125"))


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No PRODUCT_* env vars and a working directory without config.properties."""
    for key in SETTINGS_ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path
