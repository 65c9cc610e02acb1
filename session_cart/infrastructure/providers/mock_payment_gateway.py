"""決済ゲートウェイのモック実装."""
from session_cart.domain.entities import Cart
from session_cart.domain.ports import PaymentGateway


class MockPaymentGateway(PaymentGateway):
    """決済ゲートウェイのモック実装（テスト用、拒否・エラー設定可能）."""

    def __init__(self) -> None:
        """初期化."""
        self._error: Exception | None = None
        self._declined = False
        self.confirmed_carts: list[str] = []

    def set_error(self, error: Exception) -> None:
        """支払い確定時にエラーを発生させる設定."""
        self._error = error

    def set_declined(self, declined: bool = True) -> None:
        """支払いを拒否する設定."""
        self._declined = declined

    def confirm_payment(self, cart: Cart) -> bool:
        """支払いを確定する（エラー設定時は例外送出）."""
        if self._error:
            raise self._error
        if self._declined:
            return False
        self.confirmed_carts.append(cart.cart_id.value)
        return True
