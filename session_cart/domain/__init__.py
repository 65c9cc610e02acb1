"""ドメイン層モジュール."""
from .identifiers import DEFAULT_CART_ID, CartId
from .enums import CartEventType
from .value_objects import Money
from .entities import Cart, CartInfo, CartItem, InvalidQuantityError, ProductCartItem
from .events import CartEvent, CartEventDispatcher, CartEventHandler, CartEventHandlerError
from .ports import CartStorage, CartStorageError, PaymentGateway, PaymentGatewayError
from .services import (
    CartDiscountBehavior,
    CartSerializationError,
    CartSerializer,
    FixedAmountDiscount,
    RateDiscount,
)

__all__ = [
    # Identifiers
    "CartId",
    "DEFAULT_CART_ID",
    # Enums
    "CartEventType",
    # Value Objects
    "Money",
    # Entities
    "Cart",
    "CartInfo",
    "CartItem",
    "InvalidQuantityError",
    "ProductCartItem",
    # Events
    "CartEvent",
    "CartEventDispatcher",
    "CartEventHandler",
    "CartEventHandlerError",
    # Ports
    "CartStorage",
    "CartStorageError",
    "PaymentGateway",
    "PaymentGatewayError",
    # Services
    "CartDiscountBehavior",
    "CartSerializationError",
    "CartSerializer",
    "FixedAmountDiscount",
    "RateDiscount",
]
