"""カートイベントモジュール."""
from .cart_event import CartEvent
from .cart_event_dispatcher import CartEventDispatcher, CartEventHandler, CartEventHandlerError

__all__ = [
    "CartEvent",
    "CartEventDispatcher",
    "CartEventHandler",
    "CartEventHandlerError",
]
