"""Schema models package.

Contains the composable schema base, the shared query and file schemas,
the enums they use, request defaults and response envelopes.
"""

from __future__ import annotations

from vms_schema_utils.models.base import SchemaBase, define_schema
from vms_schema_utils.models.enums import (
    FileType,
    LoadChild,
    LoadChildCount,
    LoadParents,
    LoginFrom,
    OrderBy,
    Paging,
    Status,
    YesNo,
)
from vms_schema_utils.models.files import BaseFileSchema, FilePresignedUrlSchema, PresignedUrl
from vms_schema_utils.models.query import BaseQuerySchema, MongoBaseQuerySchema, OrderBySchema
from vms_schema_utils.models.request import DEFAULT_FIND_PARAMS, with_defaults
from vms_schema_utils.models.responses import (
    BR,
    FBR,
    SBR,
    DataResponse,
    PageData,
    PagedResponse,
    SimpleResponse,
    SummaryData,
)

__all__ = [
    # Schema composition
    "SchemaBase",
    "define_schema",
    # Enums
    "FileType",
    "LoadChild",
    "LoadChildCount",
    "LoadParents",
    "LoginFrom",
    "OrderBy",
    "Paging",
    "Status",
    "YesNo",
    # Shared schemas
    "BaseQuerySchema",
    "MongoBaseQuerySchema",
    "OrderBySchema",
    "BaseFileSchema",
    "FilePresignedUrlSchema",
    "PresignedUrl",
    # Requests
    "DEFAULT_FIND_PARAMS",
    "with_defaults",
    # Responses
    "PageData",
    "SummaryData",
    "SimpleResponse",
    "DataResponse",
    "PagedResponse",
    "SBR",
    "BR",
    "FBR",
]
