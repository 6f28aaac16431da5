"""vms-schema-utils: composable payload validation for the VMS API.

This package provides:
- Field validator factories for strings, numbers, decimals, booleans,
  dates, enums, reference selections and nested objects
- A standard query schema (search, status filter, paging, relation
  loading, ordering) that every find endpoint extends
- Response envelopes and an httpx transport
- A generic CRUD facade that validates payloads before sending them
- Batch validation and pandas integration

Quick Start:
    >>> from vms_schema_utils import (
    ...     BaseQuerySchema, Status, define_schema, enum_mandatory,
    ...     multi_select_optional, string_mandatory,
    ... )
    >>> DeviceTypeSchema = define_schema("DeviceTypeSchema", {
    ...     "device_type": string_mandatory("Device Type", 3, 100),
    ...     "status": enum_mandatory("Status", Status, Status.ACTIVE),
    ... })
    >>> record = DeviceTypeSchema.validate_payload(
    ...     {"device_type": "  GPS Tracker  ", "status": "Active"}
    ... )
    >>> record.device_type
    'GPS Tracker'
    >>> record.to_payload()["status"]
    'Active'

    # Query schemas
    >>> DeviceTypeQuery = BaseQuerySchema.extend(
    ...     {"device_type_ids": multi_select_optional("Device Type")},
    ...     model_name="DeviceTypeQuery",
    ... )
    >>> DeviceTypeQuery.validate_payload({}).page_count
    100
"""

from __future__ import annotations  # noqa: I001

from vms_schema_utils.core import (
    PACKAGE_NAME,
    FieldSpec,
    SchemaDefinitionError,
    ValidationResult,
    VmsError,
    VmsValidationError,
    r_log,
)
from vms_schema_utils.validation import (
    boolean_mandatory,
    boolean_optional,
    date_mandatory,
    date_optional,
    date_time_mandatory,
    date_time_optional,
    double_mandatory,
    double_mandatory_amount,
    double_mandatory_lat_lng,
    double_optional,
    double_optional_amount,
    double_optional_lat_lng,
    dynamic_json_schema,
    enum_array_mandatory,
    enum_array_optional,
    enum_mandatory,
    enum_optional,
    get_all_enums,
    multi_select_mandatory,
    multi_select_optional,
    nested_array_of_object_mandatory,
    nested_array_of_objects_optional,
    nested_object_mandatory,
    nested_object_optional,
    number_array_mandatory,
    number_array_optional,
    number_mandatory,
    number_optional,
    single_select_mandatory,
    single_select_optional,
    string_array_mandatory,
    string_array_optional,
    string_mandatory,
    string_optional,
    string_uuid_mandatory,
)
from vms_schema_utils.models import (
    BR,
    DEFAULT_FIND_PARAMS,
    FBR,
    SBR,
    BaseFileSchema,
    BaseQuerySchema,
    DataResponse,
    FilePresignedUrlSchema,
    FileType,
    LoadChild,
    LoadChildCount,
    LoadParents,
    LoginFrom,
    MongoBaseQuerySchema,
    OrderBy,
    OrderBySchema,
    PageData,
    PagedResponse,
    Paging,
    PresignedUrl,
    SchemaBase,
    SimpleResponse,
    Status,
    SummaryData,
    YesNo,
    define_schema,
    with_defaults,
)
from vms_schema_utils.validation.payload import (
    RuleValidator,
    SchemaPayloadValidator,
    create_payload_validators,
    validate_batch,
)
from vms_schema_utils.protocols import ApiTransportProtocol, FieldValidatorProtocol
from vms_schema_utils.remote import (
    ApiClient,
    api_delete,
    api_get,
    api_patch,
    api_post,
    get_api_client,
    set_api_client,
)
from vms_schema_utils.service import ResourceEndpoints, ResourceService
from vms_schema_utils.pandas_ext import register_accessor, validate_records

__version__ = "0.1.0"

__all__ = [
    # Core
    "PACKAGE_NAME",
    "FieldSpec",
    "ValidationResult",
    "r_log",
    # Errors
    "VmsError",
    "VmsValidationError",
    "SchemaDefinitionError",
    # Primitive factories
    "string_mandatory",
    "string_optional",
    "string_uuid_mandatory",
    "string_array_mandatory",
    "string_array_optional",
    "number_mandatory",
    "number_optional",
    "number_array_mandatory",
    "number_array_optional",
    "double_mandatory",
    "double_optional",
    "double_mandatory_lat_lng",
    "double_optional_lat_lng",
    "double_mandatory_amount",
    "double_optional_amount",
    "boolean_mandatory",
    "boolean_optional",
    "date_mandatory",
    "date_optional",
    "date_time_mandatory",
    "date_time_optional",
    # Enum factories
    "enum_mandatory",
    "enum_optional",
    "enum_array_mandatory",
    "enum_array_optional",
    "get_all_enums",
    # Selections
    "single_select_mandatory",
    "single_select_optional",
    "multi_select_mandatory",
    "multi_select_optional",
    # Composites
    "nested_object_mandatory",
    "nested_object_optional",
    "nested_array_of_object_mandatory",
    "nested_array_of_objects_optional",
    "dynamic_json_schema",
    # Schemas
    "SchemaBase",
    "define_schema",
    "BaseQuerySchema",
    "MongoBaseQuerySchema",
    "OrderBySchema",
    "BaseFileSchema",
    "FilePresignedUrlSchema",
    "PresignedUrl",
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
    # Requests and responses
    "DEFAULT_FIND_PARAMS",
    "with_defaults",
    "PageData",
    "SummaryData",
    "SimpleResponse",
    "DataResponse",
    "PagedResponse",
    "SBR",
    "BR",
    "FBR",
    # Payload validators
    "SchemaPayloadValidator",
    "RuleValidator",
    "create_payload_validators",
    "validate_batch",
    # Protocols
    "ApiTransportProtocol",
    "FieldValidatorProtocol",
    # Transport
    "ApiClient",
    "api_get",
    "api_post",
    "api_patch",
    "api_delete",
    "get_api_client",
    "set_api_client",
    # Services
    "ResourceEndpoints",
    "ResourceService",
    # Pandas
    "register_accessor",
    "validate_records",
]
