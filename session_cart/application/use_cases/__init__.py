"""ユースケースモジュール."""
from .add_to_cart import AddToCartResult, AddToCartUseCase
from .cart_loader import CartNotFoundError, open_cart
from .clear_cart import ClearCartResult, ClearCartUseCase
from .get_cart import CartItemDTO, GetCartResult, GetCartUseCase
from .pay_cart import EmptyCartError, PayCartResult, PayCartUseCase, PaymentFailedError
from .remove_from_cart import ItemNotFoundError, RemoveFromCartResult, RemoveFromCartUseCase
from .update_cart_item import UpdateCartItemResult, UpdateCartItemUseCase

__all__ = [
    "AddToCartResult",
    "AddToCartUseCase",
    "CartItemDTO",
    "CartNotFoundError",
    "ClearCartResult",
    "ClearCartUseCase",
    "EmptyCartError",
    "GetCartResult",
    "GetCartUseCase",
    "ItemNotFoundError",
    "PayCartResult",
    "PayCartUseCase",
    "PaymentFailedError",
    "RemoveFromCartResult",
    "RemoveFromCartUseCase",
    "UpdateCartItemResult",
    "UpdateCartItemUseCase",
    "open_cart",
]
