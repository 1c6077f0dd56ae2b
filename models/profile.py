import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

import config


class UserProfile(BaseModel):
    """
    Represents a user profile document as stored in the 'users' collection.
    Stored fields of the wrong type fall back to their defaults one at a time,
    so a single bad value never hides the rest of the profile.
    """

    username: str = ""
    email: str = Field(default="", description="Mirrors the auth identity; read-only.")
    location: str = ""
    avatar_url: Optional[str] = Field(default=None, alias="avatarURL")
    notification_lead_time: float = Field(
        default=config.DEFAULT_NOTIFICATION_LEAD_TIME,
        ge=config.MIN_NOTIFICATION_LEAD_TIME,
        le=config.MAX_NOTIFICATION_LEAD_TIME,
        description="Hours before a reminder date that notifications fire.",
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("username", "email", "location", mode="before")
    @classmethod
    def text_or_empty(cls, v: Any) -> str:
        return v if isinstance(v, str) else ""

    @field_validator("avatar_url", mode="before")
    @classmethod
    def url_or_none(cls, v: Any) -> Optional[str]:
        return v if isinstance(v, str) and v else None

    @field_validator("notification_lead_time", mode="before")
    @classmethod
    def lead_time_in_range(cls, v: Any) -> float:
        if isinstance(v, bool) or not isinstance(v, (int, float)) or math.isnan(v):
            return config.DEFAULT_NOTIFICATION_LEAD_TIME
        return min(
            max(float(v), config.MIN_NOTIFICATION_LEAD_TIME), config.MAX_NOTIFICATION_LEAD_TIME
        )


class ProfileUpdate(BaseModel):
    """
    Fields written by a profile save. Merged into the stored document, so
    fields not listed here (e.g. avatarURL) are left untouched.
    """

    username: str
    location: str
    email: str
    notification_lead_time: float = Field(
        ge=config.MIN_NOTIFICATION_LEAD_TIME, le=config.MAX_NOTIFICATION_LEAD_TIME
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
