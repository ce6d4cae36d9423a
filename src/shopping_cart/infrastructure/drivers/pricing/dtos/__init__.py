from shopping_cart.infrastructure.drivers.pricing.dtos.price_dto import PriceDTO

__all__ = ["PriceDTO"]
