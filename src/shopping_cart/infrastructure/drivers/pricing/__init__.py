from shopping_cart.infrastructure.drivers.pricing.pricing_http_client import PricingHttpClient

__all__ = ["PricingHttpClient"]
