"""Inventory service: the entry point used by the presentation layer.

Combines the record store, the form-to-record factory and the file client:
- Create/read/update/delete products from form submissions
- Save the current slots to the configured data file
- Restore the slots from that file, on demand or at start-up
"""

import logging
from pathlib import Path
from typing import List, Optional

from ..clients import ProductFileClient
from ..config import get_config
from ..models import Product, ProductForm
from .errors import DuplicateProductError
from .product_factory import build_product
from .product_store import ProductStore

logger = logging.getLogger(__name__)


class InventoryService:
    """Service for managing mission supply records and their data file."""

    def __init__(
        self,
        store: Optional[ProductStore] = None,
        file_client: Optional[ProductFileClient] = None,
        data_directory: Optional[str] = None,
        data_filename: Optional[str] = None,
        load_on_start: Optional[bool] = None,
    ):
        """Initialize the inventory service.

        Arguments left as None fall back to the application configuration.

        Args:
            store: Record store to manage.
            file_client: Client used to save and load the data file.
            data_directory: Directory holding the data file.
            data_filename: Name of the data file.
            load_on_start: Whether to load the data file right away.
        """
        config = get_config()

        self._store = store or ProductStore(
            initial_capacity=config.store.initial_capacity,
            growth_increment=config.store.growth_increment,
        )
        self._file_client = file_client or ProductFileClient(
            fresh_slot_count=config.store.fresh_slot_count,
        )
        self._data_directory = data_directory if data_directory is not None else config.storage.directory
        self._data_filename = data_filename if data_filename is not None else config.storage.filename

        if load_on_start is None:
            load_on_start = config.storage.load_on_start
        if load_on_start:
            self.load_initial_data()

    @property
    def store(self) -> ProductStore:
        return self._store

    @property
    def data_path(self) -> Path:
        return Path(self._data_directory) / self._data_filename

    def create(self, form: ProductForm) -> str:
        """Build a product from the form and add it to the store.

        Returns:
            The store's message naming the slot used.

        Raises:
            ProductValidationError: If the form values are invalid.
            DuplicateProductError: If a live record already uses the id.
        """
        product = build_product(form)
        if self._store.exists(product.id):
            raise DuplicateProductError(f"A product with ID {product.id} already exists")
        return self._store.create(product)

    def read(self) -> List[Optional[Product]]:
        """All slots, empty ones included."""
        return self._store.read()

    def read_all(self) -> List[Product]:
        """Live products only, in slot order."""
        return self._store.live_products()

    def read_by_id(self, product_id: str) -> Optional[Product]:
        return self._store.read_by_id(product_id)

    def update(self, product_id: str, form: ProductForm) -> str:
        """Replace the product with ``product_id`` by one built from the form.

        The replacement always keeps ``product_id``, whatever id the form carries.

        Raises:
            ProductValidationError: If the form values are invalid.
        """
        product = build_product(form, product_id=product_id)
        return self._store.update(product_id, product)

    def delete(self, product_id: str) -> Optional[Product]:
        return self._store.delete(product_id)

    def save(self) -> str:
        """Write every slot to the data file and return the status message."""
        return self._file_client.save(self._store.read(), self._data_directory, self._data_filename)

    def load(self) -> str:
        """Replace the store's slots with the data file's contents.

        The store is left untouched when nothing could be loaded.
        """
        products = self._file_client.load(self._data_directory, self._data_filename)
        if products is None:
            return f"Nothing was loaded from '{self.data_path}'"

        self._store.set_products(products)
        logger.info(f"Loaded {self._store.count()} products from {self.data_path}")
        return "File loaded successfully"

    def load_initial_data(self) -> None:
        """Load existing data at start-up; an unreadable file is only logged."""
        message = self.load()
        logger.info(message)

    def statistics(self) -> str:
        return self._store.statistics()
