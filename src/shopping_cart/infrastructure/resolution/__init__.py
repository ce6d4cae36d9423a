from shopping_cart.infrastructure.resolution.cart_factory import build_cart

__all__ = ["build_cart"]
