# services/inventory.py
import logging
from typing import List

from google.api_core.exceptions import GoogleAPIError
from google.cloud.firestore_v1.async_client import AsyncClient
from pydantic import ValidationError

import config
from models.inventory_item import InventoryItem
from models.result import Result


class InventoryService:
    """
    Create/update operations against the shared inventory collection.

    Callers stamp the audit fields and compute the effective reminder before
    calling; this service persists the item as given.
    """

    def __init__(self, db: AsyncClient):
        self.db = db

    def _collection(self):
        return self.db.collection(config.INVENTORY_COLLECTION)

    async def create_item(self, item: InventoryItem) -> Result[InventoryItem]:
        doc_ref = self._collection().document()
        try:
            await doc_ref.set(item.to_document())
        except GoogleAPIError as e:
            logging.error(f"Failed to create inventory item '{item.item_name}': {e}", exc_info=True)
            return Result.fail(str(e))
        logging.info(f"Created inventory item {doc_ref.id} by {item.created_by}.")
        return Result.ok(item.model_copy(update={"id": doc_ref.id}))

    async def update_item(self, item: InventoryItem) -> Result[InventoryItem]:
        if not item.id:
            return Result.fail("Item id is required for update.")
        doc_ref = self._collection().document(item.id)
        try:
            snapshot = await doc_ref.get()
            if not snapshot.exists:
                return Result.fail(f"Inventory item {item.id} not found.")
            await doc_ref.set(item.to_document())
        except GoogleAPIError as e:
            logging.error(f"Failed to update inventory item {item.id}: {e}", exc_info=True)
            return Result.fail(str(e))
        logging.info(f"Updated inventory item {item.id} by {item.last_updated_by}.")
        return Result.ok(item)

    async def fetch_item(self, item_id: str) -> Result[InventoryItem]:
        try:
            snapshot = await self._collection().document(item_id).get()
            if not snapshot.exists:
                return Result.fail(f"Inventory item {item_id} not found.")
            return Result.ok(InventoryItem.from_document(snapshot.id, snapshot.to_dict()))
        except (GoogleAPIError, ValidationError) as e:
            logging.error(f"Failed to load inventory item {item_id}: {e}", exc_info=True)
            return Result.fail(str(e))

    async def fetch_items(self) -> Result[List[InventoryItem]]:
        """Loads every item, most recently updated first."""
        query = self._collection().order_by("lastUpdated", direction="DESCENDING")
        try:
            docs = await query.get()
            items = [InventoryItem.from_document(doc.id, doc.to_dict()) for doc in docs]
        except (GoogleAPIError, ValidationError) as e:
            logging.error(f"Failed to load inventory: {e}", exc_info=True)
            return Result.fail(str(e))
        return Result.ok(items)
