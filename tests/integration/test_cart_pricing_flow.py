"""End-to-end: settings -> factory -> Cart -> PricingHttpClient, with the network mocked by respx."""
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import httpx
import pytest
import respx

from shopping_cart import (
    CartSettings,
    PriceParseError,
    PriceUnavailableError,
    PricingTransportError,
    build_cart,
)

API_URL = "https://equalexperts.github.io/backend-take-home-test-data"


@pytest.fixture
def cart(clean_env):
    return build_cart(CartSettings(api_url=API_URL))


@pytest.fixture
def price_api():
    with respx.mock(base_url=API_URL, assert_all_called=False) as respx_mock:
        respx_mock.get("/cornflakes.json").respond(200, json={"title": "Corn Flakes", "price": 2.52})
        respx_mock.get("/weetabix.json").respond(200, json={"title": "Weetabix", "price": 9.98})
        respx_mock.get("/frosties.json").respond(200, json={"title": "Frosties", "price": 4.99})
        respx_mock.get("/missing.json").respond(404)
        respx_mock.get("/garbled.json").respond(200, text="<html>oops</html>")
        respx_mock.get("/offline.json").mock(side_effect=httpx.ConnectError)
        yield respx_mock


def test_golden_scenario(cart, price_api):
    cart.add_product("cornflakes", 1)
    cart.add_product("cornflakes", 1)
    cart.add_product("weetabix", 1)

    assert cart.get_product_count("cornflakes") == 2
    assert cart.get_product_count("weetabix") == 1
    assert cart.get_product_totals() == [
        ("cornflakes", Decimal("5.04")),
        ("weetabix", Decimal("9.98")),
    ]
    assert cart.get_subtotal() == Decimal("15.02")
    assert cart.get_tax_payable() == Decimal("1.88")
    assert cart.get_total_payable() == Decimal("16.90")

    assert price_api.calls.call_count == 3
    assert str(price_api.calls[0].request.url) == f"{API_URL}/cornflakes.json"


@pytest.mark.parametrize(
    "product, error_cls",
    [
        ("missing", PriceUnavailableError),
        ("garbled", PriceParseError),
        ("offline", PricingTransportError),
    ],
)
def test_failed_lookup_leaves_cart_untouched(cart, price_api, product, error_cls):
    cart.add_product("frosties", 2)

    with pytest.raises(error_cls):
        cart.add_product(product, 1)

    assert cart.get_product_count(product) == 0
    assert cart.get_product_counts() == [("frosties", 2)]
    assert cart.get_subtotal() == Decimal("9.98")


def test_concurrent_adds_over_http(cart, price_api):
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda _: cart.add_product("frosties", 1), range(50)))

    assert cart.get_product_count("frosties") == 50
    assert cart.get_product_total("frosties") == Decimal("249.50")
    assert price_api.calls.call_count == 50
