"""HTTPセッションをカートストレージとして使う実装."""
import logging
from collections.abc import MutableMapping
from typing import Any

from session_cart.domain.identifiers import CartId
from session_cart.domain.ports import CartStorage, CartStorageError

logger = logging.getLogger(__name__)


class SessionCartStorage(CartStorage):
    """Flask・Djangoなどのセッション（辞書互換）に保存する実装.

    セッションのシリアライザはバイト列を扱えないことがあるため、文字列で格納する。
    """

    def __init__(self, session: MutableMapping[str, Any], encoding: str = "utf-8") -> None:
        """初期化.

        Args:
            session: リクエストに紐付くセッション
            encoding: バイト列と文字列の変換に使うエンコーディング
        """
        self._session = session
        self._encoding = encoding

    def load(self, cart_id: CartId) -> bytes | None:
        """セッションからカートデータを取得する."""
        try:
            value = self._session.get(cart_id.value)
        except RuntimeError as e:
            logger.error(f"Failed to read cart {cart_id} from session: {e}")
            raise CartStorageError(f"Session is not available: {e}") from e
        if value is None:
            return None
        if isinstance(value, str):
            return value.encode(self._encoding)
        return bytes(value)

    def store(self, cart_id: CartId, data: bytes) -> None:
        """セッションにカートデータを保存する."""
        try:
            self._session[cart_id.value] = data.decode(self._encoding)
        except (RuntimeError, UnicodeDecodeError) as e:
            logger.error(f"Failed to write cart {cart_id} to session: {e}")
            raise CartStorageError(f"Failed to write cart to session: {e}") from e
        # ネストした値の変更を検知しないセッション実装向け
        if hasattr(self._session, "modified"):
            self._session.modified = True

    def delete(self, cart_id: CartId) -> None:
        """セッションからカートデータを削除する."""
        try:
            self._session.pop(cart_id.value, None)
        except RuntimeError as e:
            logger.error(f"Failed to delete cart {cart_id} from session: {e}")
            raise CartStorageError(f"Session is not available: {e}") from e
