"""Integration tests for the catalog use cases."""

from decimal import Decimal

import pytest

from freshcart.application.add_product import AddProductHandler
from freshcart.application.delete_product import DeleteProductHandler
from freshcart.application.seed_catalog import SAMPLE_PRODUCTS, SeedCatalogHandler
from freshcart.application.update_product import UpdateProductHandler
from freshcart.domain.exceptions import EntityNotFoundError, ValidationError
from freshcart.domain.model.product import Product
from freshcart.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


class TestAddProduct:

    def test_adds_with_defaults(self):
        repo = FakeProductRepository()
        product = AddProductHandler(repo).handle(name=" Carrot ", price="60")
        assert product.id == "1"
        assert product.name == "Carrot"
        assert product.min_quantity == Decimal("0.5")
        assert repo.get_by_id("1") is product

    def test_auto_increments_id(self):
        repo = FakeProductRepository()
        handler = AddProductHandler(repo)
        handler.handle(name="Carrot", price="60")
        assert handler.handle(name="Potato", price="45", min_quantity="1").id == "2"

    def test_duplicate_name_rejected(self):
        repo = FakeProductRepository([Product(id="1", name="Carrot", price=Money.of("60"))])
        with pytest.raises(ValidationError, match="already exists"):
            AddProductHandler(repo).handle(name="carrot", price="70")

    def test_bad_price_rejected(self):
        with pytest.raises(ValidationError):
            AddProductHandler(FakeProductRepository()).handle(name="Carrot", price="free")

    def test_zero_minimum_rejected(self):
        with pytest.raises(ValidationError, match="Minimum quantity"):
            AddProductHandler(FakeProductRepository()).handle(
                name="Carrot", price="60", min_quantity="0"
            )


class TestUpdateProduct:

    def _repo(self):
        return FakeProductRepository([
            Product(id="1", name="Carrot", price=Money.of("60")),
            Product(id="2", name="Potato", price=Money.of("45")),
        ])

    def test_partial_update(self):
        repo = self._repo()
        product = UpdateProductHandler(repo).handle("1", price="65.50", in_stock=False)
        assert product.price == Money.of("65.50")
        assert product.in_stock is False
        assert product.name == "Carrot"

    def test_update_minimum(self):
        repo = self._repo()
        UpdateProductHandler(repo).handle("1", min_quantity="1.5")
        assert repo.get_by_id("1").min_quantity == Decimal("1.5")

    def test_rename_to_existing_name_rejected(self):
        with pytest.raises(ValidationError, match="already exists"):
            UpdateProductHandler(self._repo()).handle("1", name="Potato")

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError, match="'9' not found"):
            UpdateProductHandler(self._repo()).handle("9", price="10")


class TestDeleteProduct:

    def test_deletes(self):
        repo = FakeProductRepository([Product(id="1", name="Carrot", price=Money.of("60"))])
        DeleteProductHandler(repo).handle("1")
        assert repo.get_by_id("1") is None

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError):
            DeleteProductHandler(FakeProductRepository()).handle("1")


class TestSeedCatalog:

    def test_seeds_empty_catalog(self):
        repo = FakeProductRepository()
        added = SeedCatalogHandler(repo).handle()
        assert len(added) == len(SAMPLE_PRODUCTS)
        assert repo.get_by_name("Potato").min_quantity == Decimal("1.0")

    def test_leaves_existing_catalog_alone(self):
        repo = FakeProductRepository([Product(id="1", name="Carrot", price=Money.of("60"))])
        assert SeedCatalogHandler(repo).handle() == []
        assert len(repo.list_all()) == 1
