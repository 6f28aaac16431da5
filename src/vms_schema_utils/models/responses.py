"""Response envelopes returned by the API.

Every endpoint answers with one of three shapes:

- :class:`SimpleResponse` (``SBR``): status and message only.
- :class:`DataResponse` (``BR``): adds an optional ``data`` payload.
- :class:`PagedResponse` (``FBR``): adds ``page_data`` and summary blocks.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PageData(BaseModel):
    """Pagination state of a find response."""

    total_count: int = 0
    page_count: int = 0
    next_page: bool = False
    page_index: int = 0


class SummaryData(BaseModel):
    """Aggregated trip figures.

    Numeric totals come with preformatted ``*_f`` display strings.
    """

    model_config = ConfigDict(populate_by_name=True)

    dm: float = 0
    m_on_ts: float = 0
    m_off_ts: float = 0
    i_on_ts: float = 0
    i_off_ts: float = 0
    ms: float = 0
    as_: float = Field(default=0, alias="as")
    dm_km: str = ""
    m_on_ts_f: str = ""
    m_off_ts_f: str = ""
    i_on_ts_f: str = ""
    i_off_ts_f: str = ""


class SimpleResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    status: bool
    message: str = ""
    error: str | None = None


class DataResponse(SimpleResponse, Generic[T]):
    data: T | None = None


class PagedResponse(SimpleResponse, Generic[T]):
    page_data: PageData = Field(default_factory=PageData)
    data: T | None = None
    summary_vehicle_data: list[Any] | None = None
    summary_driver_data: list[Any] | None = None
    summary_day_data: list[Any] | None = None
    summary_data: SummaryData | None = None

    @property
    def has_next_page(self) -> bool:
        return self.page_data.next_page


# Short names used throughout the API documentation
SBR = SimpleResponse
BR = DataResponse
FBR = PagedResponse
