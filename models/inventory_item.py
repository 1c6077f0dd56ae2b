from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

import config

# Fields populated only by the barcode lookup path; never edited by hand.
BARCODE_FIELDS = ("barcode", "image_url", "ingredients", "nutrition_facts", "brand", "title")


class InventoryItem(BaseModel):
    """Represents an inventory item document as stored in Firestore."""

    id: str = Field(
        default="",
        description="The Firestore document ID. Empty until assigned on create.",
    )
    barcode: str = ""
    item_name: str
    quantity: int = config.MIN_QUANTITY
    last_updated: datetime
    product_description: str = ""
    image_url: str = Field(default="", alias="imageURL")
    ingredients: str = ""
    nutrition_facts: str = ""
    brand: str = ""
    title: str = ""
    reminder_date: Optional[datetime] = Field(
        default=None,
        description="The effective (lead-time adjusted) notification time.",
    )
    category: str = config.DEFAULT_CATEGORY
    created_by: str
    last_updated_by: str

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_document(self) -> Dict[str, Any]:
        """Serialises the item for a Firestore write. The ID is the document key."""
        return self.model_dump(by_alias=True, exclude={"id"})

    @classmethod
    def from_document(cls, doc_id: str, data: Dict[str, Any]) -> "InventoryItem":
        return cls.model_validate({**data, "id": doc_id})
