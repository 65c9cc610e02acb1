"""ポートモジュール."""
from .cart_storage import CartStorage, CartStorageError
from .payment_gateway import PaymentGateway, PaymentGatewayError

__all__ = [
    "CartStorage",
    "CartStorageError",
    "PaymentGateway",
    "PaymentGatewayError",
]
