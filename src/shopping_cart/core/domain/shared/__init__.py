from shopping_cart.core.domain.shared.lock_stripes import LockStripes

__all__ = ["LockStripes"]
