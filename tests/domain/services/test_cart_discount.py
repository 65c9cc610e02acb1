"""値引きビヘイビアのテスト."""
import pytest

from session_cart.domain.entities import Cart, ProductCartItem
from session_cart.domain.enums import CartEventType
from session_cart.domain.services import FixedAmountDiscount, RateDiscount


def _cart(cost: int) -> Cart:
    cart = Cart()
    cart.add(ProductCartItem(product_id="A", unit_price=cost))
    return cart


class TestFixedAmountDiscount:
    """FixedAmountDiscountの単体テスト."""

    def test_定額を差し引く(self) -> None:
        """取り付けると合計金額から定額が差し引かれることを確認."""
        cart = _cart(1000)
        FixedAmountDiscount(300).attach(cart)
        assert cart.get_cost(with_discount=True).value == 700

    def test_値引きなしの合計には影響しない(self) -> None:
        """with_discount=Falseの合計金額には影響しないことを確認."""
        cart = _cart(1000)
        FixedAmountDiscount(300).attach(cart)
        assert cart.get_cost().value == 1000

    def test_合計を超える値引きはゼロ(self) -> None:
        """合計金額を超える値引きでも結果がゼロになることを確認."""
        cart = _cart(100)
        FixedAmountDiscount(300).attach(cart)
        assert cart.get_cost(with_discount=True).value == 0

    def test_負の金額はエラー(self) -> None:
        """負の値引き額でValueErrorが発生することを確認."""
        with pytest.raises(ValueError):
            FixedAmountDiscount(-1)

    def test_detachで取り外す(self) -> None:
        """detachで取り外すと値引きされなくなることを確認."""
        cart = _cart(1000)
        discount = FixedAmountDiscount(300)
        discount.attach(cart)
        discount.detach(cart)
        assert cart.events.has_handlers(CartEventType.COST_CALCULATION) is False
        assert cart.get_cost(with_discount=True).value == 1000


class TestRateDiscount:
    """RateDiscountの単体テスト."""

    def test_割合で値引きする(self) -> None:
        """合計金額に割合を掛けた額が差し引かれることを確認."""
        cart = _cart(1000)
        RateDiscount(15).attach(cart)
        assert cart.get_cost(with_discount=True).value == 850

    def test_端数は切り捨て(self) -> None:
        """値引き額の端数が切り捨てられることを確認."""
        assert RateDiscount(10).calculate_discount(999) == 99

    @pytest.mark.parametrize("percent", [-1, 101])
    def test_範囲外の割合はエラー(self, percent: int) -> None:
        """0〜100以外の割合でValueErrorが発生することを確認."""
        with pytest.raises(ValueError, match="Invalid discount percent"):
            RateDiscount(percent)

    def test_複数の値引きは合算される(self) -> None:
        """複数の値引きを取り付けると値引き額が合算されることを確認."""
        cart = _cart(1000)
        RateDiscount(10).attach(cart)
        FixedAmountDiscount(50).attach(cart)
        assert cart.get_cost(with_discount=True).value == 850
