"""File client that snapshots the product slot sequence to disk."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional

from src.supplies.models.product import Product, ProductDecodeError, product_from_dict

logger = logging.getLogger(__name__)

FILE_FORMAT = "mission-supplies"
FILE_VERSION = 1
DEFAULT_FRESH_SLOT_COUNT = 10


class ProductFileClient:
    """Saves and loads the full slot sequence, empty slots included.

    Failures never propagate: ``save`` reports them in its status message and
    ``load`` returns ``None``.
    """

    def __init__(self, fresh_slot_count: int = DEFAULT_FRESH_SLOT_COUNT):
        """Initialize the file client.

        Args:
            fresh_slot_count: Number of empty slots returned when the data
                file does not exist yet.
        """
        self._fresh_slot_count = fresh_slot_count

    def save(self, products: List[Optional[Product]], directory: str, filename: str) -> str:
        """Write every slot to ``directory/filename``, replacing the file.

        The data is written to a temporary file in the same directory and then
        moved over the target, so a failed save leaves the previous file intact.

        Args:
            products: Slot sequence; ``None`` marks an empty slot.
            directory: Directory holding the data file.
            filename: Name of the data file.

        Returns:
            Human-readable status message, also on failure.
        """
        path = Path(directory) / filename
        document = {
            "format": FILE_FORMAT,
            "version": FILE_VERSION,
            "slots": [product.to_dict() if product is not None else None for product in products],
        }

        temp_path: Optional[str] = None
        try:
            data = json.dumps(document, ensure_ascii=False, indent=2).encode("utf-8")
            fd, temp_path = tempfile.mkstemp(dir=directory, prefix=f".{filename}.", suffix=".tmp")
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(temp_path, path)
            temp_path = None
        except (OSError, ValueError) as e:
            # UnicodeEncodeError is a ValueError
            logger.error(f"Error saving file {path}: {e}")
            return f"Error saving file: {e}"
        finally:
            if temp_path is not None and os.path.exists(temp_path):
                os.remove(temp_path)

        logger.info(f"Saved {len(products)} slots to {path}")
        return f">> File '{filename}' saved successfully in '{directory}'"

    def load(self, directory: str, filename: str) -> Optional[List[Optional[Product]]]:
        """Read the slot sequence stored in ``directory/filename``.

        Args:
            directory: Directory holding the data file.
            filename: Name of the data file.

        Returns:
            The stored slots; a fresh list of empty slots when the file does
            not exist; ``None`` when the file cannot be read or decoded.
        """
        path = Path(directory) / filename
        if not path.exists():
            logger.info(f"Data file {path} does not exist. Starting with an empty list.")
            return [None] * self._fresh_slot_count

        try:
            with open(path, "r", encoding="utf-8") as f:
                document = json.load(f)
            slots = self._decode_document(document)
        except (OSError, ValueError, ProductDecodeError) as e:
            logger.error(f"Error loading file {path}: {e}")
            return None

        logger.info(f"Loaded {len(slots)} slots from {path}")
        return slots

    def _decode_document(self, document) -> List[Optional[Product]]:
        if not isinstance(document, dict) or document.get("format") != FILE_FORMAT:
            raise ProductDecodeError("Not a mission supplies data file")
        if document.get("version") != FILE_VERSION:
            raise ProductDecodeError(f"Unsupported file version: {document.get('version')!r}")

        slots = document.get("slots")
        if not isinstance(slots, list):
            raise ProductDecodeError("Data file has no slot list")

        return [product_from_dict(slot) if slot is not None else None for slot in slots]
