"""カート全体の値引きビヘイビア."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..enums import CartEventType
from ..events import CartEvent

if TYPE_CHECKING:
    from ..entities import Cart


class CartDiscountBehavior(ABC):
    """COST_CALCULATIONフックで値引き額を加算するビヘイビア."""

    def attach(self, cart: Cart) -> None:
        """カートに取り付ける."""
        cart.on(CartEventType.COST_CALCULATION, self.on_cost_calculation)

    def detach(self, cart: Cart) -> None:
        """カートから取り外す."""
        cart.off(CartEventType.COST_CALCULATION, self.on_cost_calculation)

    def on_cost_calculation(self, event: CartEvent) -> None:
        """値引き額をイベントに加算する."""
        event.discount += self.calculate_discount(event.cost or 0)

    @abstractmethod
    def calculate_discount(self, cost: int) -> int:
        """値引き前の合計金額から値引き額を算出する."""
        pass


class FixedAmountDiscount(CartDiscountBehavior):
    """定額値引き."""

    def __init__(self, amount: int) -> None:
        """初期化."""
        if amount < 0:
            raise ValueError("Discount amount cannot be negative")
        self._amount = amount

    def calculate_discount(self, cost: int) -> int:
        """定額を返す（合計金額を超える分はカート側で切り捨てる）."""
        return self._amount


class RateDiscount(CartDiscountBehavior):
    """定率値引き（パーセント、端数切り捨て）."""

    def __init__(self, percent: int) -> None:
        """初期化."""
        if not 0 <= percent <= 100:
            raise ValueError(f"Invalid discount percent: {percent}")
        self._percent = percent

    def calculate_discount(self, cost: int) -> int:
        """合計金額に割合を掛けた値引き額を返す."""
        return cost * self._percent // 100
