"""Schemas for the file-upload flow.

Uploading is a three-step exchange:

1. request a presigned URL with a :data:`FilePresignedUrlSchema` payload,
2. upload the bytes directly to that URL (outside this package),
3. register the file with a payload derived from :data:`BaseFileSchema`.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from vms_schema_utils.models.base import define_schema
from vms_schema_utils.models.enums import FileType, Status
from vms_schema_utils.validation.composite import dynamic_json_schema
from vms_schema_utils.validation.enums import enum_mandatory
from vms_schema_utils.validation.primitives import number_optional, string_mandatory, string_optional

FilePresignedUrlSchema = define_schema(
    "FilePresignedUrlSchema",
    {
        "file_name": string_mandatory("File Name", 1, 255),
        "file_type": enum_mandatory("File Type", FileType, FileType.IMAGE),
    },
)

# Metadata of an uploaded file; domain modules add their owner ids via extend()
BaseFileSchema = define_schema(
    "BaseFileSchema",
    {
        "usage_type": string_optional("Usage Type", 0, 100),
        "file_type": enum_mandatory("File Type", FileType, FileType.IMAGE),
        "file_url": string_optional("File URL", 0, 2000),
        "file_key": string_optional("File Key", 0, 1000),
        "file_name": string_optional("File Name", 0, 255),
        "file_description": string_optional("File Description", 0, 2000),
        "file_size": number_optional("File Size", 0),
        "file_metadata": dynamic_json_schema("File Metadata"),
        "status": enum_mandatory("Status", Status, Status.ACTIVE),
    },
)


class PresignedUrl(BaseModel):
    """Upload target returned by a presigned-URL request."""

    model_config = ConfigDict(extra="allow")

    url: str
    key: str = ""
