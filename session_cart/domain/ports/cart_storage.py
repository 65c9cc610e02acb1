"""カートストレージインターフェース."""
from abc import ABC, abstractmethod

from ..identifiers import CartId


class CartStorageError(Exception):
    """カートストレージの読み書きエラー."""

    pass


class CartStorage(ABC):
    """カートの直列化データをキー単位で保持するストレージのインターフェース."""

    @abstractmethod
    def load(self, cart_id: CartId) -> bytes | None:
        """カートIDに対応するデータを取得する（存在しない場合はNone）."""
        pass

    @abstractmethod
    def store(self, cart_id: CartId, data: bytes) -> None:
        """カートIDに対応するデータを保存する."""
        pass

    @abstractmethod
    def delete(self, cart_id: CartId) -> None:
        """カートIDに対応するデータを削除する."""
        pass
