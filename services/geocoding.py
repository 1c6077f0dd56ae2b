# services/geocoding.py
import logging
from typing import List, Optional

import httpx

import config
from models.location import Coordinates, Placemark
from models.result import Result


def placemark_from_address(address: dict) -> Placemark:
    """Maps a Nominatim address block onto a Placemark."""
    locality = address.get("city") or address.get("town") or address.get("village")
    return Placemark(
        locality=locality,
        administrative_area=address.get("state"),
        country=address.get("country"),
    )


class GeocodingService:
    def __init__(
        self,
        url: str = config.GEOCODING_URL,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url
        self._client = client

    async def _get(self, client: httpx.AsyncClient, coordinates: Coordinates) -> List[Placemark]:
        response = await client.get(
            self.url,
            params={
                "lat": coordinates.latitude,
                "lon": coordinates.longitude,
                "format": "jsonv2",
                "addressdetails": 1,
            },
            headers={"User-Agent": config.GEOCODING_USER_AGENT},
        )
        response.raise_for_status()
        payload = response.json()
        if "error" in payload:
            raise ValueError(payload["error"])
        address = payload.get("address")
        return [placemark_from_address(address)] if address else []

    async def reverse_geocode(self, coordinates: Coordinates) -> Result[List[Placemark]]:
        try:
            if self._client is not None:
                placemarks = await self._get(self._client, coordinates)
            else:
                async with httpx.AsyncClient() as client:
                    placemarks = await self._get(client, coordinates)
        except (httpx.HTTPError, ValueError) as e:
            logging.error(f"Reverse geocode error: {e}", exc_info=True)
            return Result.fail(str(e))
        return Result.ok(placemarks)
