"""Tests for schema composition and the standard query and file schemas."""

from __future__ import annotations

import pytest

from vms_schema_utils import (
    DEFAULT_FIND_PARAMS,
    BaseFileSchema,
    BaseQuerySchema,
    DataResponse,
    FilePresignedUrlSchema,
    FileType,
    LoadChild,
    LoginFrom,
    MongoBaseQuerySchema,
    OrderBy,
    PagedResponse,
    Paging,
    SchemaBase,
    Status,
    SummaryData,
    VmsValidationError,
    YesNo,
    date_optional,
    define_schema,
    multi_select_optional,
    number_optional,
    string_mandatory,
    with_defaults,
)


class TestBaseQuerySchema:
    """Tests for the standard find payload."""

    def test_empty_payload_gets_defaults(self) -> None:
        query = BaseQuerySchema.validate_payload({})
        assert query.search == ""
        assert query.paging is Paging.YES
        assert query.page_count == 100
        assert query.page_index == 0
        assert query.status == [Status.ACTIVE, Status.INACTIVE]
        assert query.load_parents == "No"
        assert query.load_child is LoadChild.NO
        assert query.include_master_data is YesNo.NO
        assert query.order_by == []
        assert query.include_details == {}
        assert query.date_format_id == ""

    def test_none_payload_is_treated_as_empty(self) -> None:
        assert BaseQuerySchema.validate_payload(None).page_count == 100

    def test_wire_form(self) -> None:
        payload = BaseQuerySchema.validate_payload({"search": "  truck "}).to_payload()
        assert payload["search"] == "truck"
        assert payload["status"] == ["Active", "Inactive"]
        assert payload["paging"] == "Yes"
        assert payload["order_by"] == []

    def test_numeric_strings_are_coerced(self) -> None:
        query = BaseQuerySchema.validate_payload({"page_count": "25", "page_index": "3"})
        assert (query.page_count, query.page_index) == (25, 3)

    def test_page_count_above_maximum(self) -> None:
        with pytest.raises(VmsValidationError) as exc_info:
            BaseQuerySchema.validate_payload({"page_count": 1001})
        assert exc_info.value.field_errors == {"page_count": ["Page Count must be at most 1000."]}

    def test_duplicate_status_is_rejected(self) -> None:
        with pytest.raises(VmsValidationError) as exc_info:
            BaseQuerySchema.validate_payload({"status": ["Active", "Active"]})
        assert exc_info.value.error_types == ["array_not_unique"]

    def test_status_from_comma_string(self) -> None:
        query = BaseQuerySchema.validate_payload({"status": "Inactive"})
        assert query.status == [Status.INACTIVE]

    def test_order_by_entries(self) -> None:
        query = BaseQuerySchema.validate_payload(
            {"order_by": [{"name": "odometer", "field": "odometer", "direction": "desc"}]}
        )
        assert query.order_by[0].direction is OrderBy.DESC

    def test_invalid_order_by_entry_is_located(self) -> None:
        with pytest.raises(VmsValidationError) as exc_info:
            BaseQuerySchema.validate_payload(
                {"order_by": [{"name": "odometer", "field": "odometer", "direction": "up"}]}
            )
        assert list(exc_info.value.field_errors) == ["order_by.0.direction"]

    def test_every_error_is_reported(self) -> None:
        with pytest.raises(VmsValidationError) as exc_info:
            BaseQuerySchema.validate_payload({"page_count": -1, "paging": "Maybe"})
        assert set(exc_info.value.field_errors) == {"page_count", "paging"}
        assert exc_info.value.context["schema"] == "BaseQuerySchema"

    def test_unknown_keys_are_dropped(self) -> None:
        payload = BaseQuerySchema.validate_payload({"vehicle_id": "x"}).to_payload()
        assert "vehicle_id" not in payload

    def test_new_payload(self) -> None:
        payload = BaseQuerySchema.new_payload()
        assert payload["status"] == ["Active", "Inactive"]
        assert payload["page_count"] == 100
        assert payload["load_child_list"] == []
        assert payload["where_relations"] == {}


class TestMongoBaseQuerySchema:
    def test_login_from_is_required(self) -> None:
        with pytest.raises(VmsValidationError) as exc_info:
            MongoBaseQuerySchema.validate_payload({})
        assert exc_info.value.field_errors == {"login_from": ["Please select Login From."]}

    def test_valid_payload(self) -> None:
        query = MongoBaseQuerySchema.validate_payload({"login_from": "AndroidPWA"})
        assert query.login_from is LoginFrom.ANDROID_PWA
        assert query.page_count == 100
        assert "status" not in MongoBaseQuerySchema.model_fields

    def test_new_payload_prefills_platform(self) -> None:
        assert MongoBaseQuerySchema.new_payload()["login_from"] == "Web"


class TestExtend:
    """Tests for schema composition."""

    def test_extend_adds_fields(self) -> None:
        VehicleQuery = BaseQuerySchema.extend(
            {"vehicle_ids": multi_select_optional("Vehicle")},
            model_name="VehicleQuery",
        )
        query = VehicleQuery.validate_payload({"vehicle_ids": ["v1"]})
        assert query.vehicle_ids == ["v1"]
        assert query.page_count == 100
        assert VehicleQuery.__name__ == "VehicleQuery"
        assert issubclass(VehicleQuery, BaseQuerySchema)
        assert "vehicle_ids" not in BaseQuerySchema.model_fields

    def test_extend_replaces_fields(self) -> None:
        SmallPages = BaseQuerySchema.extend(
            {"page_count": number_optional("Page Count", 0, 50, 10)},
            model_name="SmallPages",
        )
        assert SmallPages.validate_payload({}).page_count == 10
        assert SmallPages.new_payload()["page_count"] == 10
        assert SmallPages.field_specs["page_count"].default == 10

    def test_raw_pydantic_definitions_are_allowed(self) -> None:
        Tagged = define_schema("Tagged", {"tag": (str, "none")})
        assert Tagged.validate_payload({}).tag == "none"
        assert Tagged.new_payload() == {"tag": "none"}

    def test_unsupported_field_definition(self) -> None:
        with pytest.raises(TypeError, match="tag"):
            define_schema("Broken", {"tag": "str"})

    def test_define_schema_returns_schema_base(self) -> None:
        Named = define_schema("Named", {"name": string_mandatory("Name")})
        assert issubclass(Named, SchemaBase)
        assert Named.validate_payload({"name": " x "}).name == "x"

    def test_new_payload_dates_are_computed_per_call(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from vms_schema_utils.validation import primitives

        stamps = iter(["2024-01-01T00:00:00.000Z", "2024-01-02T00:00:00.000Z"])
        monkeypatch.setattr(primitives, "now_iso", lambda: next(stamps))
        Dated = define_schema("Dated", {"added_date_time": date_optional("Added Date")})
        assert Dated.new_payload()["added_date_time"] == "2024-01-01T00:00:00.000Z"
        assert Dated.new_payload()["added_date_time"] == "2024-01-02T00:00:00.000Z"


class TestFileSchemas:
    def test_presigned_url_payload(self) -> None:
        payload = FilePresignedUrlSchema.validate_payload(
            {"file_name": " photo.png ", "file_type": "Image"}
        ).to_payload()
        assert payload == {"file_name": "photo.png", "file_type": "Image"}

    def test_presigned_url_rejects_unknown_type(self) -> None:
        with pytest.raises(VmsValidationError) as exc_info:
            FilePresignedUrlSchema.validate_payload({"file_name": "a.gif", "file_type": "Gif"})
        assert exc_info.value.field_errors == {
            "file_type": ["File Type should be one of the following values: NoFile, Image, Video, PDF, Excel."]
        }

    def test_presigned_url_new_payload(self) -> None:
        assert FilePresignedUrlSchema.new_payload() == {"file_name": "", "file_type": "Image"}

    def test_base_file_schema(self) -> None:
        record = BaseFileSchema.validate_payload({"file_type": "PDF", "status": "Active", "file_size": "2048"})
        assert record.file_type is FileType.PDF
        assert record.file_size == 2048
        assert record.file_metadata == {}
        assert record.file_url == ""


class TestResponses:
    def test_paged_response(self) -> None:
        page = PagedResponse[list[dict]].model_validate(
            {
                "status": True,
                "data": [{"id": 1}],
                "page_data": {"total_count": 1, "page_count": 1, "next_page": False, "page_index": 0},
            }
        )
        assert page.data == [{"id": 1}]
        assert page.page_data.total_count == 1
        assert not page.has_next_page

    def test_data_response_defaults(self) -> None:
        response = DataResponse[dict].model_validate({"status": False, "message": "nope"})
        assert response.data is None
        assert response.error is None

    def test_summary_alias(self) -> None:
        assert SummaryData.model_validate({"as": 12.5}).as_ == 12.5


def test_with_defaults_does_not_mutate() -> None:
    merged = with_defaults(DEFAULT_FIND_PARAMS, {"page_count": 10})
    assert merged["page_count"] == 10
    assert merged["status"] == "Active,Inactive"
    assert DEFAULT_FIND_PARAMS["page_count"] == 100
