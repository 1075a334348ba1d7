"""
Generic OData V4 Service

CRUD against one NAV OData entity set through a shared httpx client whose
base URL is the company's ODataV4 root.
"""

from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar
from urllib.parse import quote

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from ...errors import NavNotFoundError, NavResponseError, NavTransportError
from ...models import HasConcurrencyToken, NavModel, ODataResponse
from .interface import INavODataService

logger = structlog.get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


def combine_filters(filter: Optional[str] = None, filters: Optional[Sequence[str]] = None) -> Optional[str]:
    """AND together every non-empty filter expression, None when there are none"""
    parts = [f for f in [filter, *(filters or [])] if f]
    return " and ".join(parts) if parts else None


def filter_query(expression: Optional[str]) -> str:
    """``?$filter=...`` with the expression percent-encoded, or empty"""
    if not expression:
        return ""
    return f"?$filter={quote(expression, safe='')}"


class GenericODataService(INavODataService[T]):
    """OData V4 CRUD service for entities of one model type"""

    def __init__(self, http: httpx.AsyncClient, service_name: str, model_cls: Type[T]):
        self.http = http
        self.service_name = service_name
        self.model_cls = model_cls
        self.collection_cls = ODataResponse[model_cls]
        self.log = logger.bind(service=service_name)

    def _entity_url(self, key: str) -> str:
        # OData string literals escape a single quote by doubling it
        escaped = key.replace("'", "''")
        return f"{self.service_name}('{escaped}')"

    @staticmethod
    def _payload(entity: BaseModel) -> Dict[str, Any]:
        if isinstance(entity, NavModel):
            return entity.to_odata_payload()
        return entity.model_dump(mode="json", by_alias=True, exclude_none=True)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Prefer the OData ``error.message`` over the raw body"""
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            return str(body["error"].get("message") or response.text)
        return response.text

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self.http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            self.log.error("OData request error", method=method, url=url, error=str(e))
            raise NavTransportError(f"HTTP error during {method} {url}: {e}") from e

        if not response.is_success:
            message = self._error_message(response)
            self.log.error(
                "OData request failed",
                method=method,
                url=url,
                status_code=response.status_code,
                response_text=response.text,
            )
            raise NavTransportError(
                f"HTTP {response.status_code} {method} {url}: {message}",
                status_code=response.status_code,
                response_text=response.text,
            )
        return response

    def _read_collection(self, response: httpx.Response) -> List[T]:
        try:
            envelope = self.collection_cls.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise NavResponseError(f"Invalid OData collection from {self.service_name}: {e}") from e
        return envelope.items

    def _read_entity(self, response: httpx.Response, operation: str) -> T:
        if not response.content.strip():
            raise NavResponseError(f"{operation} succeeded but response body was empty.")
        try:
            data = response.json()
        except ValueError as e:
            raise NavResponseError(f"{operation} succeeded but response body was malformed: {e}") from e
        if not data:
            raise NavResponseError(f"{operation} succeeded but response body was empty.")
        try:
            return self.model_cls.model_validate(data)
        except ValidationError as e:
            raise NavResponseError(f"{operation} response could not be read: {e}") from e

    async def get_entities(
        self,
        filter: Optional[str] = None,
        filters: Optional[Sequence[str]] = None,
    ) -> List[T]:
        url = self.service_name + filter_query(combine_filters(filter, filters))
        self.log.debug("Fetching entities", url=url)

        response = await self._send("GET", url)
        entities = self._read_collection(response)

        self.log.info("Retrieved entities", count=len(entities))
        return entities

    async def get_entity_by_id(self, filter: str) -> T:
        url = self.service_name + filter_query(filter)
        self.log.debug("Fetching entity by filter", url=url)

        response = await self._send("GET", url)
        entities = self._read_collection(response)

        if not entities:
            self.log.warning("No entity found", filter=filter)
            raise NavNotFoundError(f"No entity found in '{self.service_name}' matching filter: {filter}")

        self.log.info("Entity retrieved successfully")
        return entities[0]

    async def create_entity(self, entity: T) -> T:
        self.log.debug("Creating new entity")

        response = await self._send("POST", self.service_name, json=self._payload(entity))
        created = self._read_entity(response, "Create")

        self.log.info("Entity created successfully")
        return created

    async def update_entity(self, key: str, entity: T) -> T:
        headers: Dict[str, str] = {}
        etag = entity.etag if isinstance(entity, HasConcurrencyToken) else None
        if etag:
            headers["If-Match"] = etag
            self.log.debug("Including ETag header for concurrency control", etag=etag)

        self.log.debug("Updating entity", key=key)

        response = await self._send("PATCH", self._entity_url(key), json=self._payload(entity), headers=headers)
        updated = self._read_entity(response, "Update")

        self.log.info("Entity updated successfully", key=key)
        return updated

    async def delete_entity(self, key: str) -> None:
        self.log.debug("Deleting entity", key=key)

        await self._send("DELETE", self._entity_url(key))

        self.log.info("Entity deleted successfully", key=key)
