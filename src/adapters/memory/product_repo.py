from collections.abc import Callable, Iterable
from threading import Lock

from src.domain.entities import Product


class InMemoryProductRepo:
    """
    Process-local product storage.

    Records are kept in insertion order. A single lock guards the whole
    collection so each call, including read-modify-write updates, is atomic.
    """

    def __init__(self, seed: Iterable[Product] = ()):
        self._products: dict[str, Product] = {}
        self._lock = Lock()
        for product in seed:
            if not self.add(product):
                raise ValueError(f"Duplicate seed product id: {product.id}")

    def get_all(self) -> list[Product]:
        with self._lock:
            return list(self._products.values())

    def get_by_id(self, product_id: str) -> Product | None:
        with self._lock:
            return self._products.get(product_id)

    def add(self, product: Product) -> bool:
        with self._lock:
            if product.id in self._products:
                return False
            self._products[product.id] = product
            return True

    def update(
        self, product_id: str, mutator: Callable[[Product], Product]
    ) -> Product | None:
        with self._lock:
            existing = self._products.get(product_id)
            if existing is None:
                return None
            updated = mutator(existing)
            # Assigning an existing key keeps its position.
            self._products[product_id] = updated.model_copy(update={"id": product_id})
            return self._products[product_id]

    def delete(self, product_id: str) -> bool:
        with self._lock:
            return self._products.pop(product_id, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._products)
