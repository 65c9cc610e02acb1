"""AddToCartUseCaseのテスト."""
import pytest

from session_cart.application.use_cases import AddToCartUseCase, CartNotFoundError
from session_cart.domain.entities import Cart, InvalidQuantityError, ProductCartItem
from session_cart.domain.identifiers import CartId
from session_cart.infrastructure.storages import InMemoryCartStorage


class TestAddToCartUseCase:
    """AddToCartUseCaseの単体テスト."""

    def test_新規カートにアイテムを追加できる(self) -> None:
        """カートIDなしで新しいカートが作られ保存されることを確認."""
        storage = InMemoryCartStorage()
        use_case = AddToCartUseCase(storage)

        result = use_case.execute(
            cart_id=None,
            item=ProductCartItem(product_id="sku-1", unit_price=500, name="ノート"),
            quantity=2,
        )

        assert result.item_id == "sku-1"
        assert result.quantity == 2
        assert result.item_count == 2
        assert result.total_cost.value == 1000
        assert storage.load(result.cart_id) is not None

    def test_既存カートに追加すると数量が加算される(self) -> None:
        """既存カートに同じアイテムを追加すると数量が加算されることを確認."""
        storage = InMemoryCartStorage()
        use_case = AddToCartUseCase(storage)
        item = ProductCartItem(product_id="sku-1", unit_price=500)

        first = use_case.execute(cart_id=None, item=item, quantity=1)
        second = use_case.execute(cart_id=first.cart_id, item=item, quantity=3)

        assert second.cart_id == first.cart_id
        assert second.quantity == 4
        assert second.cart_hash != first.cart_hash
        assert Cart(cart_id=first.cart_id, storage=storage).get_count() == 4

    def test_存在しないカートIDでエラー(self) -> None:
        """存在しないカートIDでCartNotFoundErrorが発生することを確認."""
        use_case = AddToCartUseCase(InMemoryCartStorage())
        with pytest.raises(CartNotFoundError):
            use_case.execute(
                cart_id=CartId("nonexistent"),
                item=ProductCartItem(product_id="sku-1", unit_price=500),
            )

    def test_数量0はエラー(self) -> None:
        """数量0でInvalidQuantityErrorが発生することを確認."""
        use_case = AddToCartUseCase(InMemoryCartStorage())
        with pytest.raises(InvalidQuantityError):
            use_case.execute(
                cart_id=None,
                item=ProductCartItem(product_id="sku-1", unit_price=500),
                quantity=0,
            )
