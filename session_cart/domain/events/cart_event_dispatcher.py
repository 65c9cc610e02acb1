"""カートイベントのフック登録と発火."""
from __future__ import annotations

import logging
from collections.abc import Callable

from ..enums import CartEventType
from .cart_event import CartEvent

logger = logging.getLogger(__name__)

CartEventHandler = Callable[[CartEvent], None]


class CartEventHandlerError(Exception):
    """フックハンドラが失敗したエラー."""

    def __init__(self, event_type: CartEventType, cause: Exception) -> None:
        self.event_type = event_type
        self.cause = cause
        super().__init__(f"Handler for {event_type.value} failed: {cause}")


class CartEventDispatcher:
    """フック名ごとにハンドラを登録順で保持し、同期的に呼び出す."""

    def __init__(self) -> None:
        """初期化."""
        self._handlers: dict[CartEventType, list[CartEventHandler]] = {}

    def on(self, event_type: CartEventType, handler: CartEventHandler) -> None:
        """ハンドラを登録する."""
        self._handlers.setdefault(event_type, []).append(handler)

    def off(self, event_type: CartEventType, handler: CartEventHandler | None = None) -> bool:
        """ハンドラを解除する.

        Args:
            event_type: フック名
            handler: 解除するハンドラ（Noneの場合はそのフックの全ハンドラ）

        Returns:
            解除したハンドラがあればTrue
        """
        handlers = self._handlers.get(event_type)
        if not handlers:
            return False
        if handler is None:
            del self._handlers[event_type]
            return True
        if handler not in handlers:
            return False
        handlers.remove(handler)
        if not handlers:
            del self._handlers[event_type]
        return True

    def has_handlers(self, event_type: CartEventType) -> bool:
        """ハンドラが登録されているか."""
        return bool(self._handlers.get(event_type))

    def trigger(self, event_type: CartEventType, event: CartEvent | None = None) -> CartEvent:
        """フックを発火する.

        Raises:
            CartEventHandlerError: ハンドラが例外を送出した場合（残りのハンドラは呼ばれない）
        """
        if event is None:
            event = CartEvent()
        event.event_type = event_type
        # ハンドラ内での登録・解除の影響を受けないようにコピーを回す
        for handler in list(self._handlers.get(event_type, [])):
            try:
                handler(event)
            except CartEventHandlerError:
                raise
            except Exception as e:
                logger.error(f"Cart event handler failed on {event_type.value}: {e}")
                raise CartEventHandlerError(event_type, e) from e
            if event.handled:
                break
        return event
