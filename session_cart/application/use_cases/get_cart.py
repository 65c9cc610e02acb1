"""カート取得ユースケース."""
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from session_cart.domain.entities import Cart
from session_cart.domain.identifiers import CartId
from session_cart.domain.ports import CartStorage
from session_cart.domain.services import CartDiscountBehavior, CartSerializer
from session_cart.domain.value_objects import Money


@dataclass(frozen=True)
class CartItemDTO:
    """カートアイテムDTO."""

    item_id: str | int
    quantity: int
    unit_price: Money
    cost: Money


@dataclass(frozen=True)
class GetCartResult:
    """カート取得結果."""

    cart_id: CartId
    items: list[CartItemDTO]
    item_count: int
    total_cost: Money
    discounted_cost: Money
    cart_hash: str
    is_empty: bool
    info: dict[str, Any] = field(default_factory=dict)


class GetCartUseCase:
    """カート取得ユースケース."""

    def __init__(
        self,
        cart_storage: CartStorage,
        serializer: CartSerializer | None = None,
        discounts: Sequence[CartDiscountBehavior] = (),
    ) -> None:
        """初期化.

        Args:
            cart_storage: カートストレージ
            serializer: カートのシリアライザ
            discounts: 合計金額に適用する値引き
        """
        self._cart_storage = cart_storage
        self._serializer = serializer
        self._discounts = discounts

    def execute(self, cart_id: CartId) -> GetCartResult | None:
        """カートを取得する.

        Args:
            cart_id: カートID

        Returns:
            カート取得結果（存在しない場合はNone）
        """
        # 参照のみなので書き込みスルーは使わない
        cart = Cart(
            cart_id=cart_id,
            storage=self._cart_storage,
            write_through=False,
            serializer=self._serializer,
        )
        if not cart.load():
            return None
        for discount in self._discounts:
            discount.attach(cart)

        items = [
            CartItemDTO(
                item_id=item.get_id(),
                quantity=item.get_quantity(),
                unit_price=Money(item.get_unit_price()),
                cost=Money(item.get_cost()),
            )
            for item in cart.get_items().values()
        ]

        return GetCartResult(
            cart_id=cart.cart_id,
            items=items,
            item_count=cart.get_count(),
            total_cost=cart.get_cost(),
            discounted_cost=cart.get_cost(with_discount=True),
            cart_hash=cart.get_hash(),
            is_empty=cart.is_empty(),
            info=dict(cart.get_info().attributes),
        )
