"""HTTP transport for the VMS backend."""

from __future__ import annotations

from vms_schema_utils.remote.client import (
    ApiClient,
    api_delete,
    api_get,
    api_patch,
    api_post,
    get_api_client,
    set_api_client,
)

__all__ = [
    "ApiClient",
    "api_delete",
    "api_get",
    "api_patch",
    "api_post",
    "get_api_client",
    "set_api_client",
]
