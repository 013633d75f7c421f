"""
HTTP client for the clients API that owns client records.

Every failure is reported as one of three ClientsAPIError subclasses:
the server answered with an error, no answer arrived, or the request
could not be built. Each carries the alert shown to the user.
"""

import json
import logging
from urllib.parse import quote

import httpx
from fastapi import HTTPException

from core.config import settings
from schemas.registration import ImageFile

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "No response from server. Check your internet or backend server."
SERVER_ERROR_MESSAGE = "Server error occurred"


class ClientsAPIError(Exception):
    title = "Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_detail(self) -> dict:
        return {"title": self.title, "message": self.message}


class UpstreamResponseError(ClientsAPIError):
    """The clients API responded with an error status."""

    def __init__(self, status_code: int, payload):
        message = None
        if isinstance(payload, dict):
            message = payload.get("message")
        super().__init__(message or SERVER_ERROR_MESSAGE)
        self.status_code = status_code
        self.payload = payload


class UpstreamUnavailableError(ClientsAPIError):
    """No response was received from the clients API."""
    title = "Network Error"

    def __init__(self, reason: str):
        super().__init__(NETWORK_ERROR_MESSAGE)
        self.reason = reason


class RequestBuildError(ClientsAPIError):
    """The request could not be constructed."""

    def __init__(self, reason: str):
        super().__init__(f"Request failed: {reason}")
        self.reason = reason


def _log_error_response(response: httpx.Response) -> None:
    if response.is_error:
        response.read()
        logger.error(f"Clients API error {response.status_code} for {response.request.url}: {response.text}")


def _decode(response: httpx.Response):
    try:
        return response.json()
    except ValueError:
        return {"message": response.text} if response.is_error else None


class ClientsAPI:
    def __init__(self, base_url: str | None = None, transport: httpx.BaseTransport | None = None):
        self._client = httpx.Client(
            base_url=base_url or settings.CLIENTS_API_URL,
            headers={"Accept": "application/json"},
            transport=transport,
            event_hooks={"response": [_log_error_response]},
        )

    def close(self) -> None:
        self._client.close()

    def _send(self, method: str, url: str, **kwargs):
        try:
            request = self._client.build_request(method, url, **kwargs)
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            logger.error(f"Request error: {str(e)}")
            raise RequestBuildError(str(e))

        try:
            response = self._client.send(request)
        except httpx.RequestError as e:
            logger.error(f"No response received for {request.url}: {str(e)}")
            raise UpstreamUnavailableError(str(e))

        payload = _decode(response)
        if response.is_error:
            raise UpstreamResponseError(response.status_code, payload)
        if payload is None:
            logger.warning(f"Clients API returned {response.status_code} without a JSON body for {request.url}")
        return payload

    def get_client(self, user_id: str):
        """Fetch a client record: GET /clientsAPI/{userId}."""
        return self._send("GET", f"/clientsAPI/{quote(str(user_id), safe='')}")

    def register(self, payload: dict, id_card: ImageFile, employment_letter: ImageFile):
        """Submit a registration as multipart: JSON `data` plus two images."""
        files = {
            "idCard": (id_card.filename, id_card.content, id_card.content_type),
            "employmentLetter": (
                employment_letter.filename,
                employment_letter.content,
                employment_letter.content_type,
            ),
        }
        try:
            data = json.dumps(payload)
        except (TypeError, ValueError) as e:
            logger.error(f"Request error: {str(e)}")
            raise RequestBuildError(str(e))
        return self._send("POST", "/clientsAPI/register", data={"data": data}, files=files)


def upstream_error_to_http(exc: ClientsAPIError) -> HTTPException:
    if isinstance(exc, UpstreamResponseError):
        status_code = exc.status_code if 400 <= exc.status_code < 500 else 502
    elif isinstance(exc, UpstreamUnavailableError):
        status_code = 503
    else:
        status_code = 500
    return HTTPException(status_code=status_code, detail=exc.to_detail())
