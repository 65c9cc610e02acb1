"""ユースケース共通のカート読み込み."""
from session_cart.domain.entities import Cart
from session_cart.domain.identifiers import CartId
from session_cart.domain.ports import CartStorage, PaymentGateway
from session_cart.domain.services import CartSerializer


class CartNotFoundError(Exception):
    """カートが見つからないエラー."""

    def __init__(self, cart_id: CartId) -> None:
        self.cart_id = cart_id
        super().__init__(f"Cart not found: {cart_id}")


def open_cart(
    storage: CartStorage,
    cart_id: CartId,
    serializer: CartSerializer | None = None,
    payment_gateway: PaymentGateway | None = None,
) -> Cart:
    """保存済みのカートを書き込みスルーで開く.

    Raises:
        CartNotFoundError: ストレージにカートが存在しない場合
    """
    cart = Cart(
        cart_id=cart_id,
        storage=storage,
        serializer=serializer,
        payment_gateway=payment_gateway,
    )
    if not cart.is_restored():
        raise CartNotFoundError(cart_id)
    return cart
