"""カートストレージのインメモリ実装."""
import threading

from session_cart.domain.identifiers import CartId
from session_cart.domain.ports import CartStorage


class InMemoryCartStorage(CartStorage):
    """カートストレージのインメモリ実装."""

    def __init__(self) -> None:
        """初期化."""
        self._data: dict[str, bytes] = {}
        self._lock = threading.Lock()

    def load(self, cart_id: CartId) -> bytes | None:
        """カートIDで取得する."""
        with self._lock:
            return self._data.get(cart_id.value)

    def store(self, cart_id: CartId, data: bytes) -> None:
        """カートIDで保存する."""
        with self._lock:
            self._data[cart_id.value] = bytes(data)

    def delete(self, cart_id: CartId) -> None:
        """カートIDで削除する."""
        with self._lock:
            self._data.pop(cart_id.value, None)
