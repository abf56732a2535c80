"""
Living Apps API client.
CRUD calls against the hosted record store for the categories and courses apps.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx

from ..core import (
    CATEGORIES_APP_ID,
    COURSES_APP_ID,
    LIVING_APPS_BASE_URL,
    LIVING_APPS_COOKIE,
    LIVING_APPS_TIMEOUT,
    DecodeError,
    TransportError,
)
from ..models import RawRecord

logger = logging.getLogger(__name__)


def build_http_client(
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Create the shared HTTP client for the record store."""

    headers = {"Content-Type": "application/json"}
    if LIVING_APPS_COOKIE:
        headers["Cookie"] = LIVING_APPS_COOKIE
    return httpx.AsyncClient(
        base_url=LIVING_APPS_BASE_URL,
        headers=headers,
        timeout=LIVING_APPS_TIMEOUT,
        transport=transport,
    )


def _timestamp(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _record_from(body: Any, record_id: Optional[str] = None) -> RawRecord:
    """Build a :class:`RawRecord`; an explicit ``record_id`` wins over the body's ``id``."""

    if not isinstance(body, Mapping):
        raise DecodeError(repr(body))
    fields = body.get("fields")
    return RawRecord(
        record_id=str(record_id or body.get("id") or ""),
        createdat=_timestamp(body.get("createdat")),
        updatedat=_timestamp(body.get("updatedat")),
        fields=dict(fields) if isinstance(fields, Mapping) else {},
    )


def _defined(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop unset attributes; the store treats a sent null as 'clear this field'."""

    return {key: value for key, value in fields.items() if value is not None}


class LivingAppsClient:
    """Record store client exposing one :class:`RecordCollection` per app."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        *,
        categories_app_id: str = CATEGORIES_APP_ID,
        courses_app_id: str = COURSES_APP_ID,
    ) -> None:
        self._http = http
        self.categories = RecordCollection(self, categories_app_id)
        self.courses = RecordCollection(self, courses_app_id)

    async def call_api(
        self, method: str, endpoint: str, data: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Issue one request and decode its JSON body.

        DELETE answers are not decoded; the store often returns an empty body.
        """

        try:
            response = await self._http.request(method, endpoint, json=data)
        except httpx.HTTPError as exc:
            logger.error("%s %s failed: %s", method, endpoint, exc)
            raise TransportError(str(exc) or exc.__class__.__name__) from exc

        if not response.is_success:
            logger.error(
                "%s %s returned %s: %s",
                method,
                endpoint,
                response.status_code,
                response.text[:200],
            )
            raise TransportError(response.text, response.status_code)

        if method == "DELETE":
            return True

        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(response.text) from exc


class RecordCollection:
    """CRUD operations for a single Living Apps app (record collection)."""

    def __init__(self, client: LivingAppsClient, app_id: str) -> None:
        self._client = client
        self.app_id = app_id

    @property
    def _records_path(self) -> str:
        return f"/apps/{self.app_id}/records"

    async def list_all(self) -> List[RawRecord]:
        """Fetch the whole collection.

        The store answers with ``{record_id: record}``; ordering follows the
        mapping and is not stable across calls.
        """

        data = await self._client.call_api("GET", self._records_path)
        if not isinstance(data, Mapping):
            raise DecodeError(repr(data))
        return [_record_from(body, record_id) for record_id, body in data.items()]

    async def get_one(self, record_id: str) -> Optional[RawRecord]:
        """Fetch a single record, or ``None`` when the store does not know it."""

        try:
            data = await self._client.call_api(
                "GET", f"{self._records_path}/{record_id}"
            )
        except TransportError as exc:
            if exc.status_code == 404:
                return None
            raise
        if not data:
            return None
        if not isinstance(data, Mapping):
            raise DecodeError(repr(data))
        return _record_from(data, data.get("id") or record_id)

    async def create(self, fields: Mapping[str, Any]) -> RawRecord:
        data = await self._client.call_api(
            "POST", self._records_path, {"fields": _defined(fields)}
        )
        return _record_from(data)

    async def update(self, record_id: str, fields: Mapping[str, Any]) -> RawRecord:
        """Send a partial update; attributes not in ``fields`` stay untouched."""

        data = await self._client.call_api(
            "PATCH", f"{self._records_path}/{record_id}", {"fields": _defined(fields)}
        )
        return _record_from(data, record_id)

    async def delete(self, record_id: str) -> bool:
        return await self._client.call_api("DELETE", f"{self._records_path}/{record_id}")


__all__ = ["LivingAppsClient", "RecordCollection", "build_http_client"]
