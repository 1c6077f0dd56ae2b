# services/image_upload.py
import logging
from typing import Optional

import httpx

import config
from models.result import Result


class ImageUploadService:
    """Uploads images to Cloudinary with an unsigned upload preset."""

    def __init__(
        self,
        cloud_name: str = config.CLOUDINARY_CLOUD_NAME,
        upload_preset: str = config.CLOUDINARY_UPLOAD_PRESET,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.upload_url = config.CLOUDINARY_UPLOAD_URL.format(cloud_name=cloud_name)
        self.upload_preset = upload_preset
        self._client = client

    async def _post(self, client: httpx.AsyncClient, data: bytes, public_id: str) -> str:
        response = await client.post(
            self.upload_url,
            data={"upload_preset": self.upload_preset, "public_id": public_id},
            files={"file": (public_id, data)},
        )
        response.raise_for_status()
        secure_url = response.json().get("secure_url")
        if not secure_url:
            raise ValueError("Upload response did not include a secure URL.")
        return secure_url

    async def upload(self, data: bytes, public_id: str) -> Result[str]:
        """Returns the secure URL of the uploaded image."""
        try:
            if self._client is not None:
                secure_url = await self._post(self._client, data, public_id)
            else:
                async with httpx.AsyncClient() as client:
                    secure_url = await self._post(client, data, public_id)
        except (httpx.HTTPError, ValueError) as e:
            logging.error(f"Image upload for {public_id} failed: {e}", exc_info=True)
            return Result.fail(str(e))
        logging.info(f"Uploaded image {public_id}.")
        return Result.ok(secure_url)
