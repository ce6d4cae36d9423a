from shopping_cart.core.ports.pricing_gateway import PricingGateway

__all__ = ["PricingGateway"]
