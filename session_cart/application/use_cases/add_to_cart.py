"""カート追加ユースケース."""
from dataclasses import dataclass

from session_cart.domain.entities import Cart, CartItem
from session_cart.domain.identifiers import CartId
from session_cart.domain.ports import CartStorage
from session_cart.domain.services import CartSerializer
from session_cart.domain.value_objects import Money

from .cart_loader import open_cart


@dataclass(frozen=True)
class AddToCartResult:
    """カート追加結果."""

    cart_id: CartId
    item_id: str | int
    quantity: int
    item_count: int
    total_cost: Money
    cart_hash: str


class AddToCartUseCase:
    """カートにアイテムを追加するユースケース."""

    def __init__(self, cart_storage: CartStorage, serializer: CartSerializer | None = None) -> None:
        """初期化.

        Args:
            cart_storage: カートストレージ
            serializer: カートのシリアライザ
        """
        self._cart_storage = cart_storage
        self._serializer = serializer

    def execute(self, cart_id: CartId | None, item: CartItem, quantity: int = 1) -> AddToCartResult:
        """アイテムをカートに追加する.

        Args:
            cart_id: カートID（新規の場合はNone）
            item: 追加するアイテム
            quantity: 追加する数量

        Returns:
            カート追加結果

        Raises:
            CartNotFoundError: 指定されたカートが存在しない場合
            InvalidQuantityError: 数量が0以下の場合
        """
        if cart_id is None:
            cart = Cart(
                cart_id=CartId.generate(),
                storage=self._cart_storage,
                serializer=self._serializer,
            )
        else:
            cart = open_cart(self._cart_storage, cart_id, serializer=self._serializer)

        cart.add(item, quantity)
        stored = cart.get_item_by_id(item.get_id())

        return AddToCartResult(
            cart_id=cart.cart_id,
            item_id=item.get_id(),
            quantity=stored.get_quantity(),
            item_count=cart.get_count(),
            total_cost=cart.get_cost(),
            cart_hash=cart.get_hash(),
        )
