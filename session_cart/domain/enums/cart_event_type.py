"""カートイベント種別の列挙型."""
from enum import Enum


class CartEventType(Enum):
    """カート操作の前後で発火するフックの名前."""

    BEFORE_CART_CHANGE = "beforeCartChange"  # 追加・更新・削除の前
    BEFORE_ITEM_ADD = "beforeItemAdd"
    BEFORE_ITEM_REMOVE = "beforeItemRemove"
    BEFORE_REMOVE_ALL = "beforeRemoveAll"
    AFTER_ITEM_ADD = "afterItemAdd"
    AFTER_ITEM_REMOVE = "afterItemRemove"
    AFTER_REMOVE_ALL = "afterRemoveAll"
    AFTER_CART_CHANGE = "afterCartChange"  # 追加・更新・削除の後
    ITEM_UPDATE = "itemUpdate"
    COST_CALCULATION = "costCalculation"  # 合計金額の算出後
