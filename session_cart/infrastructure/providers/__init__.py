"""外部サービスプロバイダー実装モジュール."""
from .mock_payment_gateway import MockPaymentGateway
from .payment_gateway_factory import create_payment_gateway

__all__ = [
    "MockPaymentGateway",
    "create_payment_gateway",
]
