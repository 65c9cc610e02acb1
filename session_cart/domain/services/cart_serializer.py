"""カート状態の直列化サービス."""
from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any

from ..entities.cart_info import CartInfo
from ..entities.cart_item import CartItem, ProductCartItem

FORMAT_VERSION = 1


class CartSerializationError(ValueError):
    """カート状態の直列化・復元に失敗したエラー."""

    pass


def _check_round_trippable(value: Any, path: str) -> None:
    """JSONを経由すると型が変わる値（タプル・集合・文字列以外のキー）を拒否する."""
    if isinstance(value, dict):
        for key, child in value.items():
            if not isinstance(key, str):
                raise CartSerializationError(f"Non-string key in {path}: {key!r}")
            _check_round_trippable(child, f"{path}.{key}")
    elif isinstance(value, list):
        for index, child in enumerate(value):
            _check_round_trippable(child, f"{path}[{index}]")
    elif isinstance(value, (tuple, set, frozenset)):
        raise CartSerializationError(
            f"Unsupported {type(value).__name__} in {path}: use a list instead"
        )


class CartSerializer:
    """アイテムと付帯情報をUTF-8のJSONバイト列と相互変換する.

    アイテムはクラス名で型を記録し、登録済みの型でのみ復元する。
    """

    def __init__(self, item_types: Iterable[type[CartItem]] | None = None) -> None:
        """初期化.

        Args:
            item_types: 復元を許可するアイテム型（省略時はProductCartItemのみ）
        """
        self._item_types: dict[str, type[CartItem]] = {}
        for item_type in item_types or (ProductCartItem,):
            self.register(item_type)

    def register(self, item_type: type[CartItem]) -> None:
        """復元可能なアイテム型を登録する."""
        self._item_types[item_type.__name__] = item_type

    def serialize(self, items: Mapping[Any, CartItem], info: CartInfo) -> bytes:
        """アイテムと付帯情報をバイト列に変換する.

        Raises:
            CartSerializationError: 未登録の型や JSON に変換できない値を含む場合
        """
        entries = []
        for item in items.values():
            type_name = type(item).__name__
            if type_name not in self._item_types:
                raise CartSerializationError(f"Unregistered cart item type: {type_name}")
            entries.append({"type": type_name, "data": item.to_dict()})

        _check_round_trippable(info.attributes, "info")

        payload = {
            "version": FORMAT_VERSION,
            "items": entries,
            "info": info.to_dict(),
        }
        try:
            return json.dumps(payload, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise CartSerializationError(f"Cart state is not serializable: {e}") from e

    def deserialize(self, data: bytes | str) -> tuple[dict[Any, CartItem], CartInfo]:
        """バイト列からアイテムと付帯情報を復元する.

        Returns:
            (アイテムID→アイテムの辞書, 付帯情報)

        Raises:
            CartSerializationError: データが壊れている場合
        """
        try:
            text = data.decode("utf-8") if isinstance(data, (bytes, bytearray)) else data
            payload = json.loads(text)
        except (UnicodeDecodeError, TypeError, ValueError) as e:
            raise CartSerializationError(f"Malformed cart data: {e}") from e

        if not isinstance(payload, dict) or not isinstance(payload.get("items"), list):
            raise CartSerializationError("Malformed cart data: items are missing")

        items: dict[Any, CartItem] = {}
        for entry in payload["items"]:
            if not isinstance(entry, dict):
                raise CartSerializationError("Malformed cart data: item entry is not an object")
            item_type = self._item_types.get(entry.get("type"))
            if item_type is None:
                raise CartSerializationError(f"Unregistered cart item type: {entry.get('type')}")
            try:
                item = item_type.from_dict(entry["data"])
            except (KeyError, TypeError, ValueError) as e:
                raise CartSerializationError(f"Malformed cart item: {e}") from e
            if item.get_quantity() <= 0:
                continue
            items[item.get_id()] = item

        info_data = payload.get("info")
        if info_data is None:
            info_data = {}
        if not isinstance(info_data, dict):
            raise CartSerializationError("Malformed cart data: info is not an object")
        try:
            info = CartInfo.from_dict(info_data)
        except (TypeError, ValueError) as e:
            raise CartSerializationError(f"Malformed cart info: {e}") from e
        return items, info
