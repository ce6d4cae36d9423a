from shopping_cart.core.domain.cart.cart import Cart
from shopping_cart.core.ports.pricing_gateway import PricingGateway
from shopping_cart.infrastructure.configuration.cart_settings import CartSettings, load_cart_settings
from shopping_cart.infrastructure.drivers.pricing.pricing_http_client import PricingHttpClient
from shopping_cart.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger("cart_factory")


def build_cart(settings: CartSettings | None = None, pricing: PricingGateway | None = None) -> Cart:
    """
    Assemble a Cart from its settings.
    Settings are loaded from env/properties when not given (raises ConfigurationError on bad values).
    """
    if settings is None:
        settings = load_cart_settings()
    if pricing is None:
        pricing = PricingHttpClient(settings.api_url, timeout=settings.api_timeout)

    logger.info(
        "Cart created",
        pricing=type(pricing).__name__,
        api_url=settings.api_url,
        tax_rate=str(settings.tax_rate),
    )
    return Cart(pricing, settings.tax_rate, lock_stripes=settings.lock_stripes)
