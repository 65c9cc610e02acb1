"""エンティティモジュール."""
from .cart_info import CartInfo
from .cart_item import CartItem, ProductCartItem
from .cart import Cart, InvalidQuantityError

__all__ = [
    "Cart",
    "CartInfo",
    "CartItem",
    "InvalidQuantityError",
    "ProductCartItem",
]
