"""カート内アイテムエンティティ."""
from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


class CartItem(ABC):
    """カートに格納できるアイテムのインターフェース.

    識別子・数量・価格を提供できれば、具体的な商品型は問わない。
    カートに追加された後の数量はカートのみが変更する。
    """

    @abstractmethod
    def get_id(self) -> str | int:
        """カート内で一意な識別子を返す."""
        pass

    @abstractmethod
    def get_quantity(self) -> int:
        """数量を返す."""
        pass

    @abstractmethod
    def set_quantity(self, quantity: int) -> None:
        """数量を設定する."""
        pass

    @abstractmethod
    def get_unit_price(self) -> int:
        """単価を返す."""
        pass

    @abstractmethod
    def get_cost(self, with_discount: bool = True) -> int:
        """数量を掛けた金額を返す."""
        pass

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """永続化用の辞書に変換する."""
        pass

    @classmethod
    @abstractmethod
    def from_dict(cls, data: dict[str, Any]) -> CartItem:
        """永続化用の辞書から復元する."""
        pass

    def copy(self) -> CartItem:
        """カートに格納するための複製を返す."""
        return copy.copy(self)


@dataclass
class ProductCartItem(CartItem):
    """商品をそのままカートに入れる標準のアイテム."""

    product_id: str | int
    unit_price: int
    name: str = ""
    quantity: int = 1
    discount: int = 0  # 1個あたりの値引き額

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.product_id is None or self.product_id == "":
            raise ValueError("Product id cannot be empty")
        for field_name in ("unit_price", "quantity", "discount"):
            value = getattr(self, field_name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{field_name} must be an integer: {value!r}")
        if self.unit_price < 0:
            raise ValueError("Unit price cannot be negative")
        if self.discount < 0:
            raise ValueError("Discount cannot be negative")

    def get_id(self) -> str | int:
        """商品IDを返す."""
        return self.product_id

    def get_quantity(self) -> int:
        """数量を返す."""
        return self.quantity

    def set_quantity(self, quantity: int) -> None:
        """数量を設定する."""
        self.quantity = quantity

    def get_unit_price(self) -> int:
        """単価を返す."""
        return self.unit_price

    def get_cost(self, with_discount: bool = True) -> int:
        """数量を掛けた金額を返す（値引き後の単価は0未満にならない）."""
        price = self.unit_price
        if with_discount:
            price = max(0, price - self.discount)
        return price * self.quantity

    def to_dict(self) -> dict[str, Any]:
        """永続化用の辞書に変換する."""
        return {
            "product_id": self.product_id,
            "unit_price": self.unit_price,
            "name": self.name,
            "quantity": self.quantity,
            "discount": self.discount,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProductCartItem:
        """永続化用の辞書から復元する."""
        return cls(
            product_id=data["product_id"],
            unit_price=data["unit_price"],
            name=data.get("name", ""),
            quantity=data["quantity"],
            discount=data.get("discount", 0),
        )
