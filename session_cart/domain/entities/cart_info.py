"""カート付帯情報エンティティ."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass
class CartInfo:
    """カートに紐付く注文情報などの付帯レコード.

    カートは中身を解釈せず、属性のマージと永続化のみを行う。
    """

    info_id: str | None = None
    attributes: dict[str, Any] = field(default_factory=dict)

    def set_attributes(self, data: Mapping[str, Any]) -> None:
        """属性をキー単位で上書きマージする."""
        self.attributes.update(data)

    def get(self, key: str, default: Any = None) -> Any:
        """属性を取得する."""
        return self.attributes.get(key, default)

    def to_dict(self) -> dict[str, Any]:
        """永続化用の辞書に変換する."""
        return {
            "info_id": self.info_id,
            "attributes": dict(self.attributes),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CartInfo:
        """永続化用の辞書から復元する."""
        return cls(
            info_id=data.get("info_id"),
            attributes=dict(data.get("attributes") or {}),
        )
