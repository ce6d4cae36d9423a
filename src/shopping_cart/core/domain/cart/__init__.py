from shopping_cart.core.domain.cart.cart import Cart
from shopping_cart.core.domain.cart.value_objects.product_line import ProductLine

__all__ = ["Cart", "ProductLine"]
