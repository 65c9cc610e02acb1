"""カート集約ルート."""
from __future__ import annotations

import hashlib
import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ..enums import CartEventType
from ..events import CartEvent, CartEventDispatcher, CartEventHandler
from ..identifiers import CartId
from ..ports import CartStorage, CartStorageError, PaymentGateway
from ..services.cart_serializer import CartSerializer
from ..value_objects import Money

from .cart_info import CartInfo
from .cart_item import CartItem

logger = logging.getLogger(__name__)


class InvalidQuantityError(ValueError):
    """数量が正の整数でないエラー."""

    def __init__(self, quantity: int) -> None:
        self.quantity = quantity
        super().__init__(f"Quantity must be positive: {quantity}")


class Cart:
    """アイテムIDをキーにカートアイテムを保持する集約ルート.

    変更操作は「変更前フック → 変更 → 変更後フック → 書き込み」の順で進む。
    フックが例外を送出した場合、それ以降の手順は実行されずロールバックもしない。
    write_through が有効なら、生成時にストレージから状態を復元し、
    変更操作のたびに全状態をストレージへ書き込む。
    """

    def __init__(
        self,
        cart_id: CartId | None = None,
        storage: CartStorage | None = None,
        write_through: bool = True,
        payment_gateway: PaymentGateway | None = None,
        serializer: CartSerializer | None = None,
        info: CartInfo | None = None,
    ) -> None:
        """初期化.

        Args:
            cart_id: ストレージ上のキー（省略時は既定のカートID）
            storage: 永続化先ストレージ
            write_through: 自動で復元・保存するか（storageがない場合は無効）
            payment_gateway: 決済ゲートウェイ（省略時はpayが常に成功する）
            serializer: 状態の直列化に使うシリアライザ
            info: 付帯情報の初期値
        """
        self.cart_id = cart_id or CartId()
        self._storage = storage
        self._write_through = write_through and storage is not None
        self._payment_gateway = payment_gateway
        self._serializer = serializer or CartSerializer()
        self._events = CartEventDispatcher()
        self._items: dict[Any, CartItem] = {}
        self._info = info or CartInfo()
        self._restored = False

        if self._write_through:
            self._restored = self.load()

    # --- フック ---

    @property
    def events(self) -> CartEventDispatcher:
        """フックレジストリ."""
        return self._events

    def on(self, event_type: CartEventType, handler: CartEventHandler) -> None:
        """フックにハンドラを登録する."""
        self._events.on(event_type, handler)

    def off(self, event_type: CartEventType, handler: CartEventHandler | None = None) -> bool:
        """フックからハンドラを解除する."""
        return self._events.off(event_type, handler)

    def _trigger(
        self, event_type: CartEventType, item: CartItem | None = None, cost: int | None = None
    ) -> CartEvent:
        return self._events.trigger(event_type, CartEvent(item=item, cost=cost))

    # --- 変更操作 ---

    def add(self, item: CartItem, quantity: int = 1) -> None:
        """アイテムを追加する（既存アイテムなら数量を加算）.

        Raises:
            InvalidQuantityError: 数量が0以下の場合
        """
        if quantity <= 0:
            raise InvalidQuantityError(quantity)

        self._trigger(CartEventType.BEFORE_CART_CHANGE, item)
        self._trigger(CartEventType.BEFORE_ITEM_ADD, item)

        item_id = item.get_id()
        stored = self._items.get(item_id)
        if stored is not None:
            stored.set_quantity(stored.get_quantity() + quantity)
        else:
            stored = item.copy()
            stored.set_quantity(quantity)
            self._items[item_id] = stored
        logger.debug(f"Added {quantity} of {item_id} to cart {self.cart_id}")

        self._trigger(CartEventType.AFTER_ITEM_ADD, stored)
        self._trigger(CartEventType.AFTER_CART_CHANGE, stored)
        self._persist()

    def update(self, item: CartItem, quantity: int) -> None:
        """アイテムの数量を指定値にする（0以下なら削除）."""
        if quantity <= 0:
            self.remove(item)
            return

        self._trigger(CartEventType.BEFORE_CART_CHANGE, item)

        item_id = item.get_id()
        stored = self._items.get(item_id)
        if stored is None:
            stored = item.copy()
            self._items[item_id] = stored
        stored.set_quantity(quantity)
        logger.debug(f"Updated {item_id} to {quantity} in cart {self.cart_id}")

        self._trigger(CartEventType.ITEM_UPDATE, stored)
        self._trigger(CartEventType.AFTER_CART_CHANGE, stored)
        self._persist()

    def remove(self, item: CartItem) -> None:
        """アイテムを削除する."""
        self.remove_by_id(item.get_id())

    def remove_by_id(self, item_id: str | int) -> None:
        """アイテムIDで削除する（存在しない場合は何もしない）."""
        stored = self._items.get(item_id)
        if stored is None:
            return

        self._trigger(CartEventType.BEFORE_CART_CHANGE, stored)
        self._trigger(CartEventType.BEFORE_ITEM_REMOVE, stored)

        del self._items[item_id]
        logger.debug(f"Removed {item_id} from cart {self.cart_id}")

        self._trigger(CartEventType.AFTER_ITEM_REMOVE, stored)
        self._trigger(CartEventType.AFTER_CART_CHANGE, stored)
        self._persist()

    def remove_all(self) -> None:
        """全アイテムを削除する."""
        self._trigger(CartEventType.BEFORE_REMOVE_ALL)
        self._items = {}
        logger.debug(f"Removed all items from cart {self.cart_id}")
        self._trigger(CartEventType.AFTER_REMOVE_ALL)
        self._persist()

    def set_items(self, items: Iterable[CartItem]) -> None:
        """アイテムを丸ごと置き換える（数量0以下のアイテムは除外）."""
        self._trigger(CartEventType.BEFORE_CART_CHANGE)
        self._items = {item.get_id(): item.copy() for item in items if item.get_quantity() > 0}
        self._trigger(CartEventType.AFTER_CART_CHANGE)
        self._persist()

    def set_info(self, data: Mapping[str, Any]) -> None:
        """付帯情報の属性をマージする."""
        self._info.set_attributes(data)
        self._persist()

    # --- 参照 ---

    def get_info(self) -> CartInfo:
        """付帯情報を取得する."""
        return self._info

    def get_items(self) -> dict[Any, CartItem]:
        """アイテムの辞書を取得（防御的コピー）."""
        return dict(self._items)

    def get_item_by_id(self, item_id: str | int) -> CartItem | None:
        """指定IDのアイテムを取得する（存在しない場合はNone）."""
        return self._items.get(item_id)

    def has_item(self, item_id: str | int) -> bool:
        """指定IDのアイテムがあるか."""
        return item_id in self._items

    def is_empty(self) -> bool:
        """カートが空か判定する."""
        return len(self._items) == 0

    def is_restored(self) -> bool:
        """生成時にストレージから状態を復元したか."""
        return self._restored

    # --- 集計 ---

    def get_count(self) -> int:
        """全アイテムの数量の合計を取得する."""
        return sum(item.get_quantity() for item in self._items.values())

    def get_cost(self, with_discount: bool = False) -> Money:
        """合計金額を計算する.

        COST_CALCULATIONフックは値引きの有無にかかわらず常に発火し、
        ハンドラが設定した値引き額はwith_discountがTrueの場合のみ差し引く。
        """
        cost = Money.zero()
        for item in self._items.values():
            cost = cost.add(Money.of(item.get_cost(with_discount)))
        event = self._trigger(CartEventType.COST_CALCULATION, cost=cost.value)
        if with_discount:
            return cost.subtract_or_zero(Money.of(event.discount))
        return cost

    def get_hash(self) -> str:
        """アイテムID・数量・単価の並びから算出したMD5ハッシュを取得する."""
        data = [
            [item.get_id(), item.get_quantity(), item.get_unit_price()]
            for item in self._items.values()
        ]
        serialized = json.dumps(data, separators=(",", ":"), ensure_ascii=False)
        return hashlib.md5(serialized.encode("utf-8"), usedforsecurity=False).hexdigest()

    # --- 決済 ---

    def pay(self) -> bool:
        """支払いを確定する（成功時True）."""
        if self._payment_gateway is None:
            return True
        success = self._payment_gateway.confirm_payment(self)
        logger.info(f"Payment for cart {self.cart_id}: {'confirmed' if success else 'declined'}")
        return success

    # --- 永続化 ---

    def get_serialized(self) -> bytes:
        """保存用のバイト列を取得する."""
        return self._serializer.serialize(self._items, self._info)

    def set_serialized(self, data: bytes | str) -> None:
        """保存用のバイト列から状態を復元する."""
        self._items, self._info = self._serializer.deserialize(data)

    def save(self) -> None:
        """ストレージへ保存する.

        Raises:
            CartStorageError: ストレージが未設定、または書き込みに失敗した場合
        """
        if self._storage is None:
            raise CartStorageError(f"No storage configured for cart {self.cart_id}")
        self._storage.store(self.cart_id, self.get_serialized())

    def load(self) -> bool:
        """ストレージから復元する（データがあればTrue）.

        Raises:
            CartStorageError: ストレージが未設定、または読み込みに失敗した場合
        """
        if self._storage is None:
            raise CartStorageError(f"No storage configured for cart {self.cart_id}")
        data = self._storage.load(self.cart_id)
        if data is None:
            return False
        self.set_serialized(data)
        logger.debug(f"Loaded cart {self.cart_id} with {len(self._items)} items")
        return True

    def _persist(self) -> None:
        if self._write_through:
            self.save()
