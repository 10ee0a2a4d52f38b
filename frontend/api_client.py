"""HTTP client used by the client pages to talk to the pets API."""
from typing import Any, Dict, List, Optional

import requests
from pydantic import BaseModel, Field

from config import Config
from utils.logger import get_logger

logger = get_logger("frontend.api_client")


class ClientSession(BaseModel):
    """The signed-in user as the client sees it."""
    user_id: str = Field(..., min_length=1)
    access_token: str = Field(..., min_length=1)


class ApiError(Exception):
    """Non-success response or transport failure talking to the API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class PetApiClient:
    """Thin wrapper over the pets endpoints."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        http: Optional[requests.Session] = None,
        timeout: Optional[float] = None
    ):
        self.base_url = (base_url or Config.API_BASE_URL).rstrip("/")
        self.http = http or requests.Session()
        self.timeout = timeout or Config.HTTP_TIMEOUT_SECONDS

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = self.http.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            raise ApiError(f"{method} {path} failed: {e}")
        if not response.ok:
            try:
                message = response.json().get("error", response.text)
            except ValueError:
                message = response.text
            raise ApiError(f"{method} {path} returned {response.status_code}: {message}", response.status_code)
        try:
            data = response.json()
        except ValueError:
            raise ApiError(f"{method} {path} returned a non-JSON body", response.status_code)
        if not isinstance(data, dict):
            raise ApiError(f"{method} {path} returned an unexpected body", response.status_code)
        return data

    def list_pets(self, session: ClientSession) -> List[Dict[str, Any]]:
        data = self._request(
            "GET", "/api/pets",
            headers={"Authorization": f"Bearer {session.access_token}"}
        )
        return data.get("pets", [])

    def generate_child(self, parent1: Dict[str, Any], parent2: Dict[str, Any]) -> str:
        """Send both full pet records and return the generated image data URI."""
        data = self._request("POST", "/api/pets/generate-child", json={"parent1": parent1, "parent2": parent2})
        image_url = data.get("imageUrl")
        if not image_url:
            raise ApiError("generate-child response has no imageUrl")
        return image_url

    def ask(self, message: str, pet_info: Dict[str, Any]) -> str:
        data = self._request("POST", "/api/pets/chat", json={"message": message, "petInfo": pet_info})
        return data.get("response", "")
