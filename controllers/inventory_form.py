import logging
from datetime import datetime, timezone
from typing import Callable, Optional

import config
from controllers.toast import ToastManager
from models.inventory_item import InventoryItem
from models.result import Result
from services.auth import AuthSession
from services.inventory import InventoryService
from services.profile import ProfileService
from utils.reminder import effective_reminder


class QuantityStepper:
    def __init__(self, value: int = config.MIN_QUANTITY):
        self.value = value

    def increment(self):
        self.value += 1

    def decrement(self):
        if self.value > config.MIN_QUANTITY:
            self.value -= 1


class _InventoryForm:
    """Shared save protocol for the add and edit screens."""

    success_message = ""

    def __init__(
        self,
        records: InventoryService,
        toast: ToastManager,
        auth: AuthSession,
        on_save: Callable[[], None],
    ):
        self.records = records
        self.toast = toast
        self.auth = auth
        self.on_save = on_save
        self.error_message: Optional[str] = None
        self.is_saving = False
        self.dismissed = False

    def _build_item(self, lead_time_hours: float) -> InventoryItem:
        raise NotImplementedError

    async def _persist(self, item: InventoryItem) -> Result[InventoryItem]:
        raise NotImplementedError

    async def save(self, lead_time_hours: float):
        """
        Saves the form using the lead time read from the user's profile at
        the moment of saving. Ignored while a save is already in flight.
        """
        if self.is_saving:
            logging.info("Save already in progress. Ignoring.")
            return
        self.is_saving = True
        try:
            result = await self._persist(self._build_item(lead_time_hours))
        finally:
            self.is_saving = False
        if result.success:
            self.error_message = None
            self.toast.show(self.success_message, is_success=True)
            self.on_save()
            self.dismissed = True
        else:
            self.error_message = result.error
            self.toast.show(result.error, is_success=False)

    def cancel(self):
        self.dismissed = True


class InventoryAddController(_InventoryForm):
    success_message = "Item added successfully!"

    def __init__(
        self,
        records: InventoryService,
        toast: ToastManager,
        auth: AuthSession,
        on_save: Callable[[], None],
    ):
        super().__init__(records, toast, auth, on_save)
        self.item_name = ""
        self.quantity = QuantityStepper()
        self.product_description = ""
        self.category = config.DEFAULT_CATEGORY
        self.reminder_date = datetime.now(timezone.utc)

    def _build_item(self, lead_time_hours: float) -> InventoryItem:
        uid = self.auth.uid
        # Manual entries carry no barcode-derived fields.
        return InventoryItem(
            id="",
            barcode="",
            item_name=self.item_name,
            quantity=self.quantity.value,
            last_updated=datetime.now(timezone.utc),
            product_description=self.product_description,
            reminder_date=effective_reminder(self.reminder_date, lead_time_hours),
            category=self.category,
            created_by=uid,
            last_updated_by=uid,
        )

    async def _persist(self, item: InventoryItem) -> Result[InventoryItem]:
        return await self.records.create_item(item)


class InventoryEditController(_InventoryForm):
    success_message = "Item updated successfully!"

    def __init__(
        self,
        item: InventoryItem,
        records: InventoryService,
        profiles: ProfileService,
        toast: ToastManager,
        auth: AuthSession,
        on_save: Callable[[], None],
    ):
        super().__init__(records, toast, auth, on_save)
        self.item = item
        self.profiles = profiles
        self.item_name = item.item_name
        self.quantity = QuantityStepper(item.quantity)
        self.product_description = item.product_description
        self.reminder_date = item.reminder_date or datetime.now(timezone.utc)
        self.created_by_name = "Loading..."
        self.updated_by_name = "Loading..."

    async def _username_for(self, uid: str) -> str:
        result = await self.profiles.fetch_profile(uid)
        if not result.success or result.data is None:
            return config.UNKNOWN_USER
        return result.data.username

    async def load_history(self):
        """Resolves the creator and last editor IDs to display names."""
        self.created_by_name = await self._username_for(self.item.created_by)
        self.updated_by_name = await self._username_for(self.item.last_updated_by)

    def _build_item(self, lead_time_hours: float) -> InventoryItem:
        editor = self.auth.uid if self.auth.is_signed_in else self.item.last_updated_by
        return self.item.model_copy(
            update={
                "item_name": self.item_name,
                "quantity": self.quantity.value,
                "last_updated": datetime.now(timezone.utc),
                "product_description": self.product_description,
                "reminder_date": effective_reminder(self.reminder_date, lead_time_hours),
                "last_updated_by": editor,
            }
        )

    async def _persist(self, item: InventoryItem) -> Result[InventoryItem]:
        result = await self.records.update_item(item)
        if result.success:
            self.item = result.data
        return result
