"""Enumerations used by the base query and file schemas."""

from __future__ import annotations

from enum import Enum


class Status(str, Enum):
    """Record status filter."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"


class YesNo(str, Enum):
    YES = "Yes"
    NO = "No"


class Paging(str, Enum):
    """Whether a find request is paginated."""

    YES = "Yes"
    NO = "No"


class LoadParents(str, Enum):
    """How parent relations are loaded; ``CUSTOM`` uses ``load_parents_list``."""

    YES = "Yes"
    NO = "No"
    CUSTOM = "Custom"


class LoadChild(str, Enum):
    """How child relations are loaded; ``CUSTOM`` uses ``load_child_list``."""

    NO = "No"
    YES = "Yes"
    COUNT = "Count"
    CUSTOM = "Custom"
    DIRECT = "Direct"


class LoadChildCount(str, Enum):
    NO = "No"
    YES = "Yes"
    CUSTOM = "Custom"


class OrderBy(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class LoginFrom(str, Enum):
    """Client platform a request originates from."""

    WEB = "Web"
    ANDROID = "Android"
    IPHONE = "IPhone"
    ANDROID_PWA = "AndroidPWA"
    IOS_PWA = "iOSPWA"


class FileType(str, Enum):
    NO_FILE = "NoFile"
    IMAGE = "Image"
    VIDEO = "Video"
    PDF = "PDF"
    EXCEL = "Excel"
