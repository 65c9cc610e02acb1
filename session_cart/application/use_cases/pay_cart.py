"""カート支払いユースケース."""
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from session_cart.domain.identifiers import CartId
from session_cart.domain.ports import CartStorage, PaymentGateway
from session_cart.domain.services import CartDiscountBehavior, CartSerializer
from session_cart.domain.value_objects import Money

from .cart_loader import open_cart

logger = logging.getLogger(__name__)


class EmptyCartError(Exception):
    """空のカートを支払おうとしたエラー."""

    pass


class PaymentFailedError(Exception):
    """支払いが拒否されたエラー."""

    pass


@dataclass(frozen=True)
class PayCartResult:
    """支払い結果."""

    cart_id: CartId
    paid_amount: Money
    item_count: int


class PayCartUseCase:
    """カートの支払いを確定し、成功したらカートを空にするユースケース."""

    def __init__(
        self,
        cart_storage: CartStorage,
        payment_gateway: PaymentGateway | None = None,
        serializer: CartSerializer | None = None,
        discounts: Sequence[CartDiscountBehavior] = (),
    ) -> None:
        """初期化."""
        self._cart_storage = cart_storage
        self._payment_gateway = payment_gateway
        self._serializer = serializer
        self._discounts = discounts

    def execute(self, cart_id: CartId) -> PayCartResult:
        """支払いを実行する.

        Raises:
            CartNotFoundError: カートが見つからない場合
            EmptyCartError: カートが空の場合
            PaymentFailedError: 決済ゲートウェイが支払いを拒否した場合
        """
        cart = open_cart(
            self._cart_storage,
            cart_id,
            serializer=self._serializer,
            payment_gateway=self._payment_gateway,
        )
        if cart.is_empty():
            raise EmptyCartError(f"Cart is empty: {cart_id}")
        for discount in self._discounts:
            discount.attach(cart)

        amount = cart.get_cost(with_discount=True)
        item_count = cart.get_count()

        if not cart.pay():
            raise PaymentFailedError(f"Payment declined for cart {cart_id}")

        logger.info(f"Cart {cart_id} paid: {amount}")
        cart.remove_all()

        return PayCartResult(
            cart_id=cart.cart_id,
            paid_amount=amount,
            item_count=item_count,
        )
