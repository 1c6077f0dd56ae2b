import logging
from typing import Optional

from firebase_admin.exceptions import FirebaseError

import config
from models.location import AuthorizationStatus, Coordinates
from models.profile import ProfileUpdate
from services.auth import AuthSession
from services.geocoding import GeocodingService
from services.image_upload import ImageUploadService
from services.location import LocationProvider
from services.profile import ProfileService

USER_NOT_FOUND = "User not found. Please log in or sign up."


class ProfileController:
    """
    Profile screen state. Text fields and avatar are saved independently, so
    a failed avatar upload never blocks saving the rest of the profile.
    """

    def __init__(
        self,
        auth: AuthSession,
        profiles: ProfileService,
        images: ImageUploadService,
        geocoder: GeocodingService,
        location_provider: LocationProvider,
    ):
        self.auth = auth
        self.profiles = profiles
        self.images = images
        self.geocoder = geocoder
        self.location_provider = location_provider

        self.username = ""
        self.email = ""
        self.location = ""
        self.avatar_url: Optional[str] = None
        self.notification_lead_time = config.DEFAULT_NOTIFICATION_LEAD_TIME
        self.status_message: Optional[str] = None
        self.show_location_alert = False

    async def load(self):
        if not self.auth.is_signed_in:
            self.status_message = USER_NOT_FOUND
            return
        self.email = self.auth.email
        result = await self.profiles.fetch_profile(self.auth.uid)
        if not result.success:
            self.status_message = f"Error loading profile: {result.error}"
            return
        profile = result.data
        if profile is None:
            return
        self.username = profile.username
        self.location = profile.location
        self.notification_lead_time = profile.notification_lead_time
        if profile.avatar_url:
            self.avatar_url = profile.avatar_url

    def set_notification_lead_time(self, hours: float):
        self.notification_lead_time = min(
            max(hours, config.MIN_NOTIFICATION_LEAD_TIME), config.MAX_NOTIFICATION_LEAD_TIME
        )

    async def save(self):
        if not self.auth.is_signed_in:
            self.status_message = USER_NOT_FOUND
            return
        fields = ProfileUpdate(
            username=self.username,
            location=self.location,
            email=self.email,
            notification_lead_time=self.notification_lead_time,
        )
        result = await self.profiles.upsert_profile(self.auth.uid, fields)
        if result.success:
            self.status_message = "Profile updated"
        else:
            self.status_message = f"Error saving profile: {result.error}"

    async def upload_avatar(self, data: bytes):
        if not self.auth.is_signed_in:
            return
        uid = self.auth.uid
        upload = await self.images.upload(data, f"{config.AVATAR_PUBLIC_ID_PREFIX}{uid}")
        if not upload.success:
            self.status_message = f"Upload failed: {upload.error}"
            return
        self.avatar_url = upload.data
        saved = await self.profiles.set_avatar_url(uid, upload.data)
        if saved.success:
            self.status_message = "Avatar updated!"
        else:
            self.status_message = f"Error saving avatar URL: {saved.error}"

    def use_current_location(self):
        self.location_provider.request_permission()

    def on_authorization_change(self, status: AuthorizationStatus):
        if status.needs_settings_prompt:
            self.show_location_alert = True

    async def on_location_change(self, coordinates: Optional[Coordinates]):
        if coordinates is None:
            return
        result = await self.geocoder.reverse_geocode(coordinates)
        if not result.success:
            self.status_message = "Unable to retrieve location details."
            return
        if result.data:
            self.location = result.data[0].display_name()

    def sign_out(self):
        try:
            self.auth.sign_out()
        except FirebaseError as e:
            logging.error(f"Sign out error: {e}")
