"""金額を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Money:
    """金額（最小通貨単位の整数）を表現する値オブジェクト."""

    value: int

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.value < 0:
            raise ValueError("Money value cannot be negative")

    @classmethod
    def of(cls, value: int) -> Money:
        """指定金額でMoneyを生成する."""
        return cls(value)

    @classmethod
    def zero(cls) -> Money:
        """ゼロを生成する."""
        return cls(0)

    def add(self, other: Money) -> Money:
        """金額を加算して新しいMoneyを返す."""
        return Money(self.value + other.value)

    def subtract_or_zero(self, other: Money) -> Money:
        """金額を減算する（負になる場合はゼロ）."""
        return Money(max(0, self.value - other.value))

    def __str__(self) -> str:
        """文字列表現."""
        return f"{self.value:,}"
