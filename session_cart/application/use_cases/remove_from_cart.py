"""カートアイテム削除ユースケース."""
from dataclasses import dataclass

from session_cart.domain.identifiers import CartId
from session_cart.domain.ports import CartStorage
from session_cart.domain.services import CartSerializer
from session_cart.domain.value_objects import Money

from .cart_loader import open_cart


class ItemNotFoundError(Exception):
    """アイテムが見つからないエラー."""

    def __init__(self, item_id: str | int) -> None:
        self.item_id = item_id
        super().__init__(f"Item not found: {item_id}")


@dataclass(frozen=True)
class RemoveFromCartResult:
    """カートアイテム削除結果."""

    success: bool
    item_count: int
    total_cost: Money


class RemoveFromCartUseCase:
    """カートからアイテムを削除するユースケース."""

    def __init__(self, cart_storage: CartStorage, serializer: CartSerializer | None = None) -> None:
        """初期化.

        Args:
            cart_storage: カートストレージ
            serializer: カートのシリアライザ
        """
        self._cart_storage = cart_storage
        self._serializer = serializer

    def execute(self, cart_id: CartId, item_id: str | int) -> RemoveFromCartResult:
        """アイテムをカートから削除する.

        Args:
            cart_id: カートID
            item_id: アイテムID

        Returns:
            削除結果

        Raises:
            CartNotFoundError: カートが見つからない場合
            ItemNotFoundError: アイテムが見つからない場合
        """
        cart = open_cart(self._cart_storage, cart_id, serializer=self._serializer)
        if not cart.has_item(item_id):
            raise ItemNotFoundError(item_id)

        cart.remove_by_id(item_id)

        return RemoveFromCartResult(
            success=True,
            item_count=cart.get_count(),
            total_cost=cart.get_cost(),
        )
