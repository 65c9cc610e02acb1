"""カートアイテム数量変更ユースケース."""
from dataclasses import dataclass

from session_cart.domain.entities import CartItem
from session_cart.domain.identifiers import CartId
from session_cart.domain.ports import CartStorage
from session_cart.domain.services import CartSerializer
from session_cart.domain.value_objects import Money

from .cart_loader import open_cart


@dataclass(frozen=True)
class UpdateCartItemResult:
    """数量変更結果."""

    item_id: str | int
    quantity: int
    removed: bool
    item_count: int
    total_cost: Money


class UpdateCartItemUseCase:
    """カートアイテムの数量を変更するユースケース（0以下は削除）."""

    def __init__(self, cart_storage: CartStorage, serializer: CartSerializer | None = None) -> None:
        """初期化.

        Args:
            cart_storage: カートストレージ
            serializer: カートのシリアライザ
        """
        self._cart_storage = cart_storage
        self._serializer = serializer

    def execute(self, cart_id: CartId, item: CartItem, quantity: int) -> UpdateCartItemResult:
        """数量を変更する.

        Raises:
            CartNotFoundError: カートが見つからない場合
        """
        cart = open_cart(self._cart_storage, cart_id, serializer=self._serializer)
        cart.update(item, quantity)

        stored = cart.get_item_by_id(item.get_id())
        return UpdateCartItemResult(
            item_id=item.get_id(),
            quantity=stored.get_quantity() if stored is not None else 0,
            removed=stored is None,
            item_count=cart.get_count(),
            total_cost=cart.get_cost(),
        )
