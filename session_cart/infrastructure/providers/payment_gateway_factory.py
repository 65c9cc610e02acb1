"""PaymentGateway ファクトリ."""
import logging
import os

from session_cart.domain.ports import PaymentGateway

logger = logging.getLogger(__name__)


def create_payment_gateway() -> PaymentGateway | None:
    """環境変数に基づいてPaymentGatewayを生成する.

    PAYMENT_GATEWAY:
        "mock" → MockPaymentGateway（ローカル開発・テスト用）
        未設定  → None（Cart.payは常に成功する）
    """
    gateway_type = os.environ.get("PAYMENT_GATEWAY")
    if gateway_type == "mock":
        from session_cart.infrastructure.providers.mock_payment_gateway import MockPaymentGateway

        return MockPaymentGateway()

    if gateway_type:
        logger.warning("Unknown PAYMENT_GATEWAY=%s, payments will always succeed", gateway_type)

    return None
