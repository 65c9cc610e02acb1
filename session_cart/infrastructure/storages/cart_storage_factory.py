"""CartStorage ファクトリ."""
import logging
import os
from collections.abc import MutableMapping
from typing import Any

from session_cart.domain.ports import CartStorage

logger = logging.getLogger(__name__)


def create_cart_storage(session: MutableMapping[str, Any] | None = None) -> CartStorage:
    """環境変数に基づいてCartStorageを生成する.

    session を渡した場合は常に SessionCartStorage を返す。

    CART_STORAGE:
        "memory"   → InMemoryCartStorage（ローカル開発・テスト用）
        "dynamodb" → DynamoDBCartStorage
        未設定      → InMemoryCartStorage（デフォルト）
    """
    if session is not None:
        from session_cart.infrastructure.storages.session_cart_storage import SessionCartStorage

        return SessionCartStorage(session)

    storage_type = os.environ.get("CART_STORAGE")
    if storage_type == "dynamodb":
        from session_cart.infrastructure.storages.dynamodb_cart_storage import DynamoDBCartStorage

        return DynamoDBCartStorage()

    if storage_type and storage_type != "memory":
        logger.warning("Unknown CART_STORAGE=%s, falling back to memory", storage_type)

    from session_cart.infrastructure.storages.in_memory_cart_storage import InMemoryCartStorage

    return InMemoryCartStorage()
