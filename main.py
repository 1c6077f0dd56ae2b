# main.py
import asyncio
import logging
import os
from typing import List, Optional, Set

import config
from controllers.inventory_form import InventoryAddController, InventoryEditController
from controllers.profile import ProfileController
from controllers.toast import ToastManager
from models.inventory_item import InventoryItem
from services.auth import AuthSession
from services.firestore import get_firestore_client
from services.geocoding import GeocodingService
from services.image_upload import ImageUploadService
from services.inventory import InventoryService
from services.location import LocationProvider
from services.profile import ProfileService

logging.basicConfig(
    level=config.LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s"
)


class AppContext:
    """Wires the services and screen controllers for one signed-in session."""

    def __init__(
        self,
        auth: AuthSession,
        db,
        location_provider: LocationProvider,
        images: Optional[ImageUploadService] = None,
        geocoder: Optional[GeocodingService] = None,
    ):
        self.auth = auth
        self.toast = ToastManager()
        self.inventory = InventoryService(db)
        self.profiles = ProfileService(db)
        self.profile = ProfileController(
            auth,
            self.profiles,
            images or ImageUploadService(),
            geocoder or GeocodingService(),
            location_provider,
        )
        self.items: List[InventoryItem] = []
        self._refresh_tasks: Set[asyncio.Task] = set()

    @property
    def lead_time_hours(self) -> float:
        return self.profile.notification_lead_time

    async def refresh_inventory(self):
        result = await self.inventory.fetch_items()
        if result.success:
            self.items = result.data
        else:
            self.toast.show(result.error, is_success=False)

    def _schedule_refresh(self):
        task = asyncio.get_running_loop().create_task(self.refresh_inventory())
        self._refresh_tasks.add(task)
        task.add_done_callback(self._refresh_finished)

    def _refresh_finished(self, task: asyncio.Task):
        self._refresh_tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logging.error("Inventory refresh failed.", exc_info=task.exception())

    async def wait_for_refresh(self):
        """Waits for every refresh still in flight."""
        pending = list(self._refresh_tasks)
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    def add_item_form(self) -> InventoryAddController:
        return InventoryAddController(self.inventory, self.toast, self.auth, self._schedule_refresh)

    def edit_item_form(self, item: InventoryItem) -> InventoryEditController:
        return InventoryEditController(
            item, self.inventory, self.profiles, self.toast, self.auth, self._schedule_refresh
        )

    async def save_item(self, form):
        """Saves a form with the lead time currently set on the profile."""
        await form.save(self.lead_time_hours)


class _NoLocation(LocationProvider):
    def request_permission(self):
        logging.info("Location is not available in this environment.")


async def run_inventory_summary():
    db = get_firestore_client()
    auth = AuthSession.from_id_token(os.environ.get("WASTENOT_ID_TOKEN", ""))
    if not auth.is_signed_in:
        logging.warning("No signed-in user. Set WASTENOT_ID_TOKEN to a valid ID token.")
        return
    app = AppContext(auth, db, _NoLocation())
    await app.profile.load()
    await app.refresh_inventory()
    logging.info(
        f"User {auth.uid} has {len(app.items)} inventory item(s); "
        f"reminders fire {app.lead_time_hours:g} hour(s) early."
    )
    for item in app.items:
        reminder = item.reminder_date.isoformat() if item.reminder_date else "none"
        logging.info(f"  {item.item_name} x{item.quantity} [{item.category}] reminder: {reminder}")


if __name__ == "__main__":
    asyncio.run(run_inventory_summary())
