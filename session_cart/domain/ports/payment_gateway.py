"""決済ゲートウェイインターフェース."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..entities import Cart


class PaymentGatewayError(Exception):
    """決済ゲートウェイエラー."""

    pass


class PaymentGateway(ABC):
    """カートの支払いを確定する決済ゲートウェイのインターフェース."""

    @abstractmethod
    def confirm_payment(self, cart: Cart) -> bool:
        """支払いを確定する（成功時True）."""
        pass
