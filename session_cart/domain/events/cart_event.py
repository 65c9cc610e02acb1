"""カートイベントのペイロード."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..enums import CartEventType

if TYPE_CHECKING:
    from ..entities.cart_item import CartItem


@dataclass
class CartEvent:
    """フックハンドラに渡されるイベント.

    Attributes:
        event_type: 発火したフック（発火時に設定される）
        item: 操作対象のアイテム（カート全体の操作ではNone）
        cost: 値引き前の合計金額（COST_CALCULATIONのみ）
        discount: ハンドラが設定する値引き額
        handled: Trueにすると残りのハンドラは呼ばれない
    """

    event_type: CartEventType | None = None
    item: CartItem | None = None
    cost: int | None = None
    discount: int = 0
    handled: bool = False
