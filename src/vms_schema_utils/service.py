"""Generic CRUD facade shared by every resource of the API.

A domain module only declares its URL and schemas:

    >>> tickets = ResourceService(
    ...     "account/tickets",
    ...     schema=TicketSchema,
    ...     query_schema=TicketQuerySchema,
    ...     file_schema=TicketFileSchema,
    ... )
    >>> page = tickets.find({"search": "brake"})
    >>> page.page_data.total_count

Every payload is validated against its schema before it is sent, so an
invalid payload raises :class:`VmsValidationError` without a request.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel

from vms_schema_utils.models.base import SchemaBase
from vms_schema_utils.models.files import FilePresignedUrlSchema, PresignedUrl
from vms_schema_utils.models.query import BaseQuerySchema
from vms_schema_utils.models.request import DEFAULT_FIND_PARAMS, with_defaults
from vms_schema_utils.models.responses import DataResponse, PagedResponse, SimpleResponse
from vms_schema_utils.protocols import ApiTransportProtocol
from vms_schema_utils.remote.client import get_api_client

logger = logging.getLogger(__name__)

Payload = Mapping[str, Any] | BaseModel


@dataclass(frozen=True)
class ResourceEndpoints:
    """URL layout of a resource, relative to the API base URL."""

    url: str

    @property
    def find(self) -> str:
        return f"{self.url}/search"

    @property
    def create(self) -> str:
        return self.url

    def update(self, record_id: str) -> str:
        return f"{self.url}/{record_id}"

    def delete(self, record_id: str) -> str:
        return f"{self.url}/{record_id}"

    def cache(self, scope_id: Optional[str] = None) -> str:
        return f"{self.url}/cache/{scope_id}" if scope_id else f"{self.url}/cache"

    def cache_count(self, scope_id: Optional[str] = None) -> str:
        return f"{self.url}/cache_count/{scope_id}" if scope_id else f"{self.url}/cache_count"

    @property
    def presigned_url(self) -> str:
        return f"{self.url}/presigned_url"

    @property
    def create_file(self) -> str:
        return f"{self.url}/create_file"

    def remove_file(self, file_id: str) -> str:
        return f"{self.url}/remove_file/{file_id}"


class ResourceService:
    """Validated CRUD operations for one API resource.

    Args:
        url: Resource path, e.g. ``"account/tickets"``.
        schema: Create/update payload schema.
        query_schema: Find payload schema (defaults to BaseQuerySchema).
        file_schema: File registration schema, for resources with uploads.
        record_model: Model used to parse records in responses; records stay
            plain dicts when omitted.
        client: Transport (an ApiClient or compatible); the globally
            installed ApiClient when omitted.
    """

    def __init__(
        self,
        url: str,
        *,
        schema: type[SchemaBase],
        query_schema: type[SchemaBase] = BaseQuerySchema,
        file_schema: Optional[type[SchemaBase]] = None,
        record_model: Optional[type[BaseModel]] = None,
        client: Optional[ApiTransportProtocol] = None,
    ) -> None:
        self.endpoints = ResourceEndpoints(url.strip("/"))
        self.schema = schema
        self.query_schema = query_schema
        self.file_schema = file_schema
        self._record_model = record_model
        self._client = client

    @property
    def client(self) -> ApiTransportProtocol:
        return self._client or get_api_client()

    def _page_model(self) -> type[PagedResponse]:
        if self._record_model is None:
            return PagedResponse[list[dict[str, Any]]]
        return PagedResponse[list[self._record_model]]  # type: ignore[name-defined]

    @staticmethod
    def _wire(schema: type[SchemaBase], payload: Optional[Payload]) -> dict[str, Any]:
        return schema.validate_payload(payload).to_payload()

    def new_payload(self) -> dict[str, Any]:
        """Blank create payload with every field at its default."""
        return self.schema.new_payload()

    def find(self, query: Optional[Payload] = None) -> PagedResponse:
        """POST a validated query to ``<url>/search``."""
        body = self._wire(self.query_schema, query)
        logger.debug("find %s page=%s", self.endpoints.url, body.get("page_index"))
        return self.client.post(self.endpoints.find, body, response_model=self._page_model())

    def create(self, payload: Payload) -> SimpleResponse:
        body = self._wire(self.schema, payload)
        return self.client.post(self.endpoints.create, body, response_model=SimpleResponse)

    def update(self, record_id: str, payload: Payload) -> SimpleResponse:
        body = self._wire(self.schema, payload)
        return self.client.patch(self.endpoints.update(record_id), body, response_model=SimpleResponse)

    def delete(self, record_id: str) -> SimpleResponse:
        return self.client.delete(self.endpoints.delete(record_id), response_model=SimpleResponse)

    def cache(
        self,
        scope_id: Optional[str] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> PagedResponse:
        """GET the cached record list, optionally scoped (e.g. by organisation)."""
        query = with_defaults(DEFAULT_FIND_PARAMS, params)
        return self.client.get(self.endpoints.cache(scope_id), query, response_model=self._page_model())

    def cache_count(self, scope_id: Optional[str] = None) -> PagedResponse:
        return self.client.get(
            self.endpoints.cache_count(scope_id), response_model=PagedResponse[dict[str, Any]]
        )

    # -------------------------------------------------------------------------
    # File upload flow
    # -------------------------------------------------------------------------

    def get_presigned_url(self, payload: Payload) -> DataResponse[PresignedUrl]:
        """Request an upload URL for ``{file_name, file_type}``."""
        body = self._wire(FilePresignedUrlSchema, payload)
        return self.client.post(
            self.endpoints.presigned_url, body, response_model=DataResponse[PresignedUrl]
        )

    def create_file(self, payload: Payload) -> SimpleResponse:
        """Register an uploaded file's metadata."""
        if self.file_schema is None:
            raise TypeError(f"{self.endpoints.url} has no file schema")
        body = self._wire(self.file_schema, payload)
        return self.client.post(self.endpoints.create_file, body, response_model=SimpleResponse)

    def remove_file(self, file_id: str) -> SimpleResponse:
        return self.client.delete(self.endpoints.remove_file(file_id), response_model=SimpleResponse)
