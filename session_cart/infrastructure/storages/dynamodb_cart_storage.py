"""カートストレージのDynamoDB実装."""
import logging
import os
from datetime import datetime, timedelta, timezone

import boto3
from boto3.dynamodb.types import Binary
from botocore.exceptions import ClientError

from session_cart.domain.identifiers import CartId
from session_cart.domain.ports import CartStorage, CartStorageError

logger = logging.getLogger(__name__)

# TTL: 24時間
DEFAULT_TTL_HOURS = 24


class DynamoDBCartStorage(CartStorage):
    """カートストレージのDynamoDB実装.

    テーブルはパーティションキー cart_id（文字列）を持ち、
    属性 ttl を TTL として有効化しておくこと。
    """

    def __init__(self, table_name: str | None = None, ttl_hours: int | None = None) -> None:
        """初期化."""
        self._table_name = table_name or os.environ.get("CART_TABLE_NAME", "session-cart")
        self._ttl_hours = ttl_hours or int(
            os.environ.get("CART_TTL_HOURS", str(DEFAULT_TTL_HOURS))
        )
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)

    def load(self, cart_id: CartId) -> bytes | None:
        """カートIDで取得する."""
        try:
            response = self._table.get_item(Key={"cart_id": cart_id.value})
        except ClientError as e:
            logger.error(f"Failed to load cart {cart_id}: {e}")
            raise CartStorageError(f"Failed to load cart {cart_id}") from e
        item = response.get("Item")
        if item is None:
            return None
        return self._to_bytes(item["data"])

    def store(self, cart_id: CartId, data: bytes) -> None:
        """カートIDで保存する."""
        now = datetime.now(timezone.utc)
        ttl = int((now + timedelta(hours=self._ttl_hours)).timestamp())
        try:
            self._table.put_item(
                Item={
                    "cart_id": cart_id.value,
                    "data": Binary(data),
                    "updated_at": now.isoformat(),
                    "ttl": ttl,
                }
            )
        except ClientError as e:
            logger.error(f"Failed to store cart {cart_id}: {e}")
            raise CartStorageError(f"Failed to store cart {cart_id}") from e

    def delete(self, cart_id: CartId) -> None:
        """カートIDで削除する."""
        try:
            self._table.delete_item(Key={"cart_id": cart_id.value})
        except ClientError as e:
            logger.error(f"Failed to delete cart {cart_id}: {e}")
            raise CartStorageError(f"Failed to delete cart {cart_id}") from e

    @staticmethod
    def _to_bytes(value: Binary | bytes) -> bytes:
        """Binaryをbytesに変換."""
        if isinstance(value, Binary):
            return bytes(value.value)
        return bytes(value)
