"""In-memory record store backed by a growable slot sequence.

Slots are filled first-free-first. Deleting a record empties its slot, the
sequence is never compacted. When every slot is taken the sequence grows by a
fixed increment.
"""

import logging
from typing import List, Optional

from src.supplies.models.product import Product

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_CAPACITY = 5
DEFAULT_GROWTH_INCREMENT = 5


class ProductStore:
    """Create, read, update and delete products by id."""

    def __init__(
        self,
        initial_capacity: int = DEFAULT_INITIAL_CAPACITY,
        growth_increment: int = DEFAULT_GROWTH_INCREMENT,
    ):
        """Initialize the store with empty slots.

        Args:
            initial_capacity: Number of slots to start with.
            growth_increment: Slots added whenever the sequence is full.

        Raises:
            ValueError: If the capacity is negative or the increment is below 1.
        """
        if initial_capacity < 0:
            raise ValueError(f"initial_capacity must not be negative, got {initial_capacity}")
        if growth_increment < 1:
            raise ValueError(f"growth_increment must be at least 1, got {growth_increment}")

        self._growth_increment = growth_increment
        self._products: List[Optional[Product]] = [None] * initial_capacity

    def create(self, product: Product) -> str:
        """Place a product in the first empty slot, growing if needed.

        Duplicate ids are not checked here.

        Returns:
            Message naming the slot the product landed in.
        """
        for index, slot in enumerate(self._products):
            if slot is None:
                self._products[index] = product
                logger.info(f"Stored product {product.id} at position {index}")
                return f"Product added at position {index}"

        index = len(self._products)
        self._products.extend([None] * self._growth_increment)
        self._products[index] = product
        logger.info(
            f"Grew store to {len(self._products)} slots; stored product {product.id} at position {index}"
        )
        return f"Product added at new position {index}"

    def read(self) -> List[Optional[Product]]:
        """Return every slot, including empty ones."""
        return list(self._products)

    def read_by_id(self, product_id: str) -> Optional[Product]:
        index = self._find(product_id)
        if index is None:
            return None
        return self._products[index]

    def update(self, product_id: str, product: Product) -> str:
        """Replace the record whose id matches ``product_id``.

        The replacement is stored as given, even if its own id differs.
        """
        index = self._find(product_id)
        if index is None:
            logger.warning(f"Update skipped, product {product_id} not found")
            return f"Product with ID {product_id} not found."

        self._products[index] = product
        logger.info(f"Updated product {product_id} at position {index}")
        return f"Product updated at position {index}"

    def delete(self, product_id: str) -> Optional[Product]:
        """Empty the slot holding ``product_id``.

        Returns:
            The removed product, or None if no slot matched.
        """
        index = self._find(product_id)
        if index is None:
            logger.warning(f"Delete skipped, product {product_id} not found")
            return None

        removed = self._products[index]
        self._products[index] = None
        logger.info(f"Deleted product {product_id} from position {index}")
        return removed

    def set_products(self, products: List[Optional[Product]]) -> None:
        """Replace the whole slot sequence, e.g. after loading from disk."""
        self._products = list(products)

    def live_products(self) -> List[Product]:
        """Non-empty slots in slot order."""
        return [product for product in self._products if product is not None]

    def count(self) -> int:
        return len(self.live_products())

    def capacity(self) -> int:
        return len(self._products)

    def exists(self, product_id: str) -> bool:
        return self._find(product_id) is not None

    def statistics(self) -> str:
        count = self.count()
        capacity = self.capacity()
        percentage = count * 100.0 / capacity if capacity else 0.0
        return f"Active products: {count}/{capacity} ({percentage:.1f}%)"

    def _find(self, product_id: str) -> Optional[int]:
        for index, product in enumerate(self._products):
            if product is not None and product.id == product_id:
                return index
        return None
