"""ドメインサービスモジュール."""
from .cart_discount import CartDiscountBehavior, FixedAmountDiscount, RateDiscount
from .cart_serializer import CartSerializationError, CartSerializer

__all__ = [
    "CartDiscountBehavior",
    "CartSerializationError",
    "CartSerializer",
    "FixedAmountDiscount",
    "RateDiscount",
]
