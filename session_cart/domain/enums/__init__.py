"""列挙型モジュール."""
from .cart_event_type import CartEventType

__all__ = [
    "CartEventType",
]
