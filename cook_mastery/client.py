"""HTTP client for the Cook Mastery API.

Wraps an ``httpx.Client`` that already points at the API base URL. Edit
forms go through :func:`diff_cookbook_fields` so that only changed fields
are sent and an unchanged form never produces a request.
"""

import logging
from typing import Any
from uuid import UUID

import httpx

from cook_mastery.models.enums import ContentKind, CookbookSort

logger = logging.getLogger(__name__)

COOKBOOK_FIELDS = ("url", "title", "notes")


class ApiClientError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, code: str, message: str, details: dict | None = None):
        super().__init__(f"{status_code} {code}: {message}")
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details or {}


class EmptyUpdateError(ValueError):
    """The edited form has no changes to submit."""


def _normalize(field: str, value: Any) -> Any:
    if value is None:
        return None
    value = str(value).strip()
    if field == "notes" and not value:
        return None
    return value


def diff_cookbook_fields(original: dict[str, Any], edited: dict[str, Any]) -> dict[str, Any]:
    """Return the cookbook fields whose edited value differs from the original."""
    changes = {}
    for field in COOKBOOK_FIELDS:
        if field not in edited:
            continue
        new_value = _normalize(field, edited[field])
        if new_value != _normalize(field, original.get(field)):
            changes[field] = new_value
    return changes


class CookMasteryClient:
    """Thin typed wrapper over the JSON API."""

    def __init__(self, http: httpx.Client, access_token: str | None = None):
        self.http = http
        self.access_token = access_token

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        headers = kwargs.pop("headers", {})
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"

        response = self.http.request(method, path, headers=headers, **kwargs)
        if response.status_code >= 400:
            try:
                error = response.json().get("error", {})
            except ValueError:
                error = {}
            logger.debug(f"{method} {path} failed with {response.status_code}")
            raise ApiClientError(
                response.status_code,
                error.get("code", "UNKNOWN"),
                error.get("message", response.text),
                error.get("details"),
            )
        return response

    def login(self, identifier: str, password: str) -> dict:
        data = self._request(
            "POST", "/api/auth/login", json={"identifier": identifier, "password": password}
        ).json()
        self.access_token = data["access_token"]
        return data

    def list_cookbook(
        self, sort: CookbookSort = CookbookSort.NEWEST, page: int = 1, limit: int = 20
    ) -> dict:
        params = {"sort": CookbookSort(sort).value, "page": page, "limit": limit}
        return self._request("GET", "/api/cookbook", params=params).json()

    def get_cookbook_entry(self, entry_id: UUID | str) -> dict:
        return self._request("GET", f"/api/cookbook/{entry_id}").json()

    def create_cookbook_entry(self, url: str, title: str, notes: str | None = None) -> dict:
        payload = {"url": url, "title": title}
        if notes:
            payload["notes"] = notes
        return self._request("POST", "/api/cookbook", json=payload).json()

    def update_cookbook_entry(
        self, entry_id: UUID | str, original: dict[str, Any], edited: dict[str, Any]
    ) -> dict:
        """Send only the changed fields.

        Raises EmptyUpdateError, without contacting the server, when nothing changed.
        """
        changes = diff_cookbook_fields(original, edited)
        if not changes:
            raise EmptyUpdateError("No changes to save")
        return self._request("PATCH", f"/api/cookbook/{entry_id}", json=changes).json()

    def delete_cookbook_entry(self, entry_id: UUID | str) -> None:
        self._request("DELETE", f"/api/cookbook/{entry_id}")

    def complete(self, kind: ContentKind, content_id: UUID | str) -> dict:
        """Mark a tutorial or article as completed."""
        return self._request("POST", f"/api/{ContentKind(kind).value}s/{content_id}/complete").json()

    def progress_summary(self) -> dict:
        return self._request("GET", "/api/progress/summary").json()
