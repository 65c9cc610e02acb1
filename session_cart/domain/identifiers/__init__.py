"""識別子モジュール."""
from .cart_id import DEFAULT_CART_ID, CartId

__all__ = [
    "CartId",
    "DEFAULT_CART_ID",
]
