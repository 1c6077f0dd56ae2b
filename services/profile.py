# services/profile.py
import logging
from typing import Optional

from google.api_core.exceptions import GoogleAPIError
from google.cloud.firestore_v1.async_client import AsyncClient
from pydantic import ValidationError

import config
from models.profile import ProfileUpdate, UserProfile
from models.result import Result


class ProfileService:
    def __init__(self, db: AsyncClient):
        self.db = db

    def _document(self, uid: str):
        return self.db.collection(config.USERS_COLLECTION).document(uid)

    async def fetch_profile(self, uid: str) -> Result[Optional[UserProfile]]:
        """Loads a user's profile. The data is None if no profile was saved yet."""
        try:
            snapshot = await self._document(uid).get()
            if not snapshot.exists:
                return Result.ok(None)
            return Result.ok(UserProfile.model_validate(snapshot.to_dict() or {}))
        except (GoogleAPIError, ValidationError) as e:
            logging.error(f"Failed to load profile for user {uid}: {e}", exc_info=True)
            return Result.fail(str(e))

    async def upsert_profile(self, uid: str, fields: ProfileUpdate) -> Result[None]:
        """
        Merges the given fields into the user's profile document, creating it
        if needed. Fields not present in `fields` are left as stored.
        """
        try:
            await self._document(uid).set(fields.model_dump(by_alias=True), merge=True)
        except GoogleAPIError as e:
            logging.error(f"Failed to save profile for user {uid}: {e}", exc_info=True)
            return Result.fail(str(e))
        logging.info(f"Saved profile for user {uid}.")
        return Result.ok()

    async def set_avatar_url(self, uid: str, url: str) -> Result[None]:
        try:
            await self._document(uid).set({"avatarURL": url}, merge=True)
        except GoogleAPIError as e:
            logging.error(f"Failed to save avatar URL for user {uid}: {e}", exc_info=True)
            return Result.fail(str(e))
        return Result.ok()
