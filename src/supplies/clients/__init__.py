"""Client modules for external resources."""

from src.supplies.clients.product_file_client import ProductFileClient

__all__ = [
    "ProductFileClient",
]
