"""カートクリアユースケース."""
from dataclasses import dataclass

from session_cart.domain.identifiers import CartId
from session_cart.domain.ports import CartStorage
from session_cart.domain.services import CartSerializer
from session_cart.domain.value_objects import Money

from .cart_loader import open_cart


@dataclass(frozen=True)
class ClearCartResult:
    """カートクリア結果."""

    success: bool
    item_count: int
    total_cost: Money


class ClearCartUseCase:
    """カートを全クリアするユースケース."""

    def __init__(self, cart_storage: CartStorage, serializer: CartSerializer | None = None) -> None:
        """初期化.

        Args:
            cart_storage: カートストレージ
            serializer: カートのシリアライザ
        """
        self._cart_storage = cart_storage
        self._serializer = serializer

    def execute(self, cart_id: CartId) -> ClearCartResult:
        """カートを全クリアする.

        Raises:
            CartNotFoundError: カートが見つからない場合
        """
        cart = open_cart(self._cart_storage, cart_id, serializer=self._serializer)
        cart.remove_all()

        return ClearCartResult(
            success=True,
            item_count=cart.get_count(),
            total_cost=cart.get_cost(),
        )
