"""
Tests for the in-memory product repository and UUID id generator.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest

from src.adapters.ids import UuidIdGenerator
from src.adapters.memory.product_repo import InMemoryProductRepo
from src.components.products import CreateProductInput, ProductService, run_create
from src.domain.entities import Product


@pytest.fixture
def repo() -> InMemoryProductRepo:
    return InMemoryProductRepo(
        seed=[
            Product(id="1", name="Laptop", price=Decimal("999.99"), category="Electronics"),
            Product(id="2", name="Mouse", price=Decimal("29.99"), category="Electronics"),
        ]
    )


class TestInMemoryProductRepo:
    def test_seed_order(self, repo: InMemoryProductRepo) -> None:
        assert [p.id for p in repo.get_all()] == ["1", "2"]
        assert repo.count() == 2

    def test_duplicate_seed_rejected(self) -> None:
        with pytest.raises(ValueError):
            InMemoryProductRepo(seed=[Product(id="1", name="A"), Product(id="1", name="B")])

    def test_add_refuses_existing_id(self, repo: InMemoryProductRepo) -> None:
        assert repo.add(Product(id="3", name="Keyboard")) is True
        assert repo.add(Product(id="3", name="Other")) is False
        assert repo.get_by_id("3").name == "Keyboard"  # type: ignore[union-attr]

    def test_update_keeps_position_and_id(self, repo: InMemoryProductRepo) -> None:
        updated = repo.update("1", lambda p: p.model_copy(update={"id": "x", "name": "Ultrabook"}))

        assert updated is not None
        assert updated.id == "1"
        assert [p.name for p in repo.get_all()] == ["Ultrabook", "Mouse"]

    def test_update_missing(self, repo: InMemoryProductRepo) -> None:
        assert repo.update("404", lambda p: p) is None

    def test_delete(self, repo: InMemoryProductRepo) -> None:
        assert repo.delete("1") is True
        assert repo.delete("1") is False
        assert repo.count() == 1

    def test_get_all_is_a_copy(self, repo: InMemoryProductRepo) -> None:
        repo.get_all().clear()

        assert repo.count() == 2

    def test_concurrent_updates_are_not_lost(self, repo: InMemoryProductRepo) -> None:
        def bump(_: int) -> None:
            repo.update("2", lambda p: p.model_copy(update={"price": p.price + 1}))

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(bump, range(200)))

        assert repo.get_by_id("2").price == Decimal("229.99")  # type: ignore[union-attr]


class TestUuidIdGenerator:
    def test_ids_are_unique_and_non_empty(self) -> None:
        gen = UuidIdGenerator()
        ids = {gen.new_id() for _ in range(100)}

        assert len(ids) == 100
        assert all(ids)


def test_concurrent_creates_yield_distinct_ids(repo: InMemoryProductRepo) -> None:
    service = ProductService(repo=repo, id_generator=UuidIdGenerator())

    def create(i: int) -> str:
        result = run_create(CreateProductInput(name=f"Item {i}"), service)
        assert result.product is not None
        return result.product.id

    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(create, range(50)))

    assert len(set(ids)) == 50
    assert repo.count() == 52
