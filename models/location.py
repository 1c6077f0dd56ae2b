from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AuthorizationStatus(str, Enum):
    NOT_DETERMINED = "not_determined"
    RESTRICTED = "restricted"
    DENIED = "denied"
    AUTHORIZED_WHEN_IN_USE = "authorized_when_in_use"
    AUTHORIZED_ALWAYS = "authorized_always"

    @property
    def needs_settings_prompt(self) -> bool:
        """Denied or restricted access can only be changed in system settings."""
        return self in (AuthorizationStatus.DENIED, AuthorizationStatus.RESTRICTED)


class Coordinates(BaseModel):
    latitude: float
    longitude: float


class Placemark(BaseModel):
    """A reverse-geocoded place. Any part may be missing."""

    locality: Optional[str] = None
    administrative_area: Optional[str] = None
    country: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def display_name(self) -> str:
        parts = [self.locality, self.administrative_area, self.country]
        return ", ".join(part for part in parts if part)
