"""Standard query schemas shared by every find endpoint.

Domain modules extend :data:`BaseQuerySchema` with their own filters:

    >>> DeviceTypeQuery = BaseQuerySchema.extend(
    ...     {"device_type_ids": multi_select_optional("Device Type")},
    ...     model_name="DeviceTypeQuery",
    ... )
"""

from __future__ import annotations

from vms_schema_utils.models.base import define_schema
from vms_schema_utils.models.enums import (
    LoadChild,
    LoadChildCount,
    LoadParents,
    LoginFrom,
    OrderBy,
    Paging,
    Status,
    YesNo,
)
from vms_schema_utils.validation.composite import (
    dynamic_json_schema,
    nested_array_of_objects_optional,
)
from vms_schema_utils.validation.enums import (
    enum_array_optional,
    enum_mandatory,
    enum_optional,
    get_all_enums,
)
from vms_schema_utils.validation.primitives import (
    number_optional,
    string_array_optional,
    string_mandatory,
    string_optional,
)
from vms_schema_utils.validation.selection import single_select_optional

DEFAULT_PAGE_COUNT = 100
DEFAULT_PAGE_INDEX = 0
MAX_PAGE_COUNT = 1000
MAX_PAGE_INDEX = 1000
MAX_STATUS_FILTERS = 10

# One sort key: {name, field, direction}
OrderBySchema = define_schema(
    "OrderBySchema",
    {
        "name": string_mandatory("Order Field Name", 0, 255),
        "field": string_mandatory("Order Field Name", 0, 255),
        "direction": enum_mandatory("Order Direction", OrderBy, OrderBy.ASC),
    },
)

# Fields shared by the relational and document-store query schemas
_PAGING_FIELDS = {
    "search": string_optional("Search", 0, 255, ""),
    "paging": enum_optional("Paging", Paging, Paging.YES),
    "page_count": number_optional("Page Count", 0, MAX_PAGE_COUNT, DEFAULT_PAGE_COUNT),
    "page_index": number_optional("Page Index", 0, MAX_PAGE_INDEX, DEFAULT_PAGE_INDEX),
    "date_format_id": single_select_optional("MasterMainDateFormat"),
    "time_zone_id": single_select_optional("MasterMainTimeZone"),
}

BaseQuerySchema = define_schema(
    "BaseQuerySchema",
    {
        **_PAGING_FIELDS,
        "status": enum_array_optional(
            "Status", Status, get_all_enums(Status), 0, MAX_STATUS_FILTERS, unique=True
        ),
        "load_parents": enum_optional("Load Parents", LoadParents, LoadParents.NO),
        "load_parents_list": string_array_optional("Load Parents List"),
        "load_child": enum_optional("Load Child", LoadChild, LoadChild.NO),
        "load_child_list": string_array_optional("Load Child List"),
        "load_child_count": enum_optional("Load Child Count", LoadChildCount, LoadChildCount.NO),
        "load_child_count_list": string_array_optional("Load Child Count List"),
        "include_details": dynamic_json_schema("Include Details"),
        "where_relations": dynamic_json_schema("Where Relations"),
        "order_by": nested_array_of_objects_optional("Order By", OrderBySchema, []),
        "include_master_data": enum_optional("Include Master Data", YesNo, YesNo.NO),
    },
)

# Document-store variant: no relation loading, requires the client platform
MongoBaseQuerySchema = define_schema(
    "MongoBaseQuerySchema",
    {
        **_PAGING_FIELDS,
        "login_from": enum_mandatory("Login From", LoginFrom, LoginFrom.WEB),
    },
)
