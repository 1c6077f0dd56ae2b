"""Test configuration and fixtures."""
import copy
import uuid
from datetime import datetime, timezone
from typing import Dict, Optional

import pytest

from controllers.toast import ToastManager
from models.inventory_item import InventoryItem
from models.user import AuthUser
from services.auth import AuthSession
from services.inventory import InventoryService
from services.location import LocationProvider
from services.profile import ProfileService


class FakeSnapshot:
    def __init__(self, doc_id: str, data: Optional[dict]):
        self.id = doc_id
        self._data = data

    @property
    def exists(self) -> bool:
        return self._data is not None

    def to_dict(self) -> Optional[dict]:
        return copy.deepcopy(self._data)


class FakeDocument:
    def __init__(self, db: "FakeFirestore", collection: str, doc_id: str):
        self._db = db
        self._collection = collection
        self.id = doc_id

    async def get(self) -> FakeSnapshot:
        self._db.raise_if_failing(self._db.fail_reads)
        return FakeSnapshot(self.id, self._db.data[self._collection].get(self.id))

    async def set(self, data: dict, merge: bool = False):
        self._db.raise_if_failing(self._db.fail_writes)
        docs = self._db.data[self._collection]
        self._db.writes.append((self._collection, self.id, copy.deepcopy(data), merge))
        if merge and self.id in docs:
            docs[self.id].update(copy.deepcopy(data))
        else:
            docs[self.id] = copy.deepcopy(data)


class FakeQuery:
    def __init__(self, db: "FakeFirestore", collection: str, field: str, descending: bool):
        self._db = db
        self._collection = collection
        self._field = field
        self._descending = descending

    async def get(self):
        self._db.raise_if_failing(self._db.fail_reads)
        docs = self._db.data[self._collection]
        ordered = sorted(docs.items(), key=lambda kv: kv[1][self._field], reverse=self._descending)
        return [FakeSnapshot(doc_id, copy.deepcopy(data)) for doc_id, data in ordered]


class FakeCollection:
    def __init__(self, db: "FakeFirestore", name: str):
        self._db = db
        self._name = name

    def document(self, doc_id: Optional[str] = None) -> FakeDocument:
        return FakeDocument(self._db, self._name, doc_id or uuid.uuid4().hex[:20])

    def order_by(self, field: str, direction: str = "ASCENDING") -> FakeQuery:
        return FakeQuery(self._db, self._name, field, direction == "DESCENDING")


class FakeFirestore:
    """In-memory stand-in for the Firestore AsyncClient surface the services use."""

    def __init__(self):
        self.data: Dict[str, Dict[str, dict]] = {}
        self.writes = []
        self.fail_reads: Optional[Exception] = None
        self.fail_writes: Optional[Exception] = None

    def raise_if_failing(self, error: Optional[Exception]):
        if error is not None:
            raise error

    def collection(self, name: str) -> FakeCollection:
        self.data.setdefault(name, {})
        return FakeCollection(self, name)


class FakeLocationProvider(LocationProvider):
    def __init__(self):
        super().__init__()
        self.requests = 0

    def request_permission(self):
        self.requests += 1


@pytest.fixture
def db():
    return FakeFirestore()


@pytest.fixture
def inventory_service(db):
    return InventoryService(db)


@pytest.fixture
def profile_service(db):
    return ProfileService(db)


@pytest.fixture
def toast():
    return ToastManager()


@pytest.fixture
def auth():
    return AuthSession(AuthUser(uid="user-alice", email="alice@wastenot.app", name="Alice"))


@pytest.fixture
def other_auth():
    return AuthSession(AuthUser(uid="user-bob", email="bob@wastenot.app", name="Bob"))


@pytest.fixture
def signed_out():
    return AuthSession()


@pytest.fixture
def location_provider():
    return FakeLocationProvider()


@pytest.fixture
def scanned_item() -> InventoryItem:
    """An item that came in through the barcode lookup path."""
    return InventoryItem(
        barcode="9300633603208",
        item_name="Greek Yoghurt",
        quantity=2,
        last_updated=datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc),
        product_description="Full cream",
        image_url="https://images.example/yoghurt.png",
        ingredients="Milk, cultures",
        nutrition_facts="Energy 400kJ",
        brand="Jalna",
        title="Jalna Greek Yoghurt 1kg",
        reminder_date=datetime(2025, 1, 5, 8, 0, tzinfo=timezone.utc),
        category="Dairy",
        created_by="user-alice",
        last_updated_by="user-alice",
    )
