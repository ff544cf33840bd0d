"""Audit log request/response schemas.

Pydantic models for the admin audit log listing. Kept separate from domain
entities - these are HTTP-layer concerns.

RESTful Endpoints:
    GET /api/v1/audit-logs            - Paginated, filtered listing
    GET /api/v1/audit-logs/filters    - Action and table filter options
    GET /api/v1/audit-logs/activity   - Monthly activity by role group
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AuditLogEntryResponse(BaseModel):
    """One audit log entry with its joined lookup names."""

    id: str = Field(..., description="Log entry identifier")
    user_id: str = Field(..., description="Attributed user")
    user_name: str | None = Field(None, description="Attributed user's name")
    user_email: str | None = Field(None, description="Attributed user's email")
    user_role: str | None = Field(None, description="Attributed user's role")
    action_id: str = Field(..., description="Action lookup id")
    action_name: str = Field(..., description="Action name (EKLE, GÜNCELLE, SİL)")
    table_id: str = Field(..., description="Table-kind lookup id")
    table_name: str = Field(..., description="Table kind (Devices, OfferCards, ...)")
    ip: str = Field(..., description="Request origin")
    date: datetime | None = Field(None, description="When the entry was recorded")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "0190f1d2-7c3a-7b1e-9a51-0c2d5e6f7a8b",
                "user_id": "0190f1d2-0000-7000-8000-000000000001",
                "user_name": "Ayşe Yılmaz",
                "user_email": "ayse@example.com",
                "user_role": "MUSTERI_SEVIYE1",
                "action_id": "0190f1d2-0000-7000-8000-0000000000a1",
                "action_name": "EKLE",
                "table_id": "0190f1d2-0000-7000-8000-0000000000b1",
                "table_name": "Devices",
                "ip": "10.0.0.1",
                "date": "2026-03-14T09:30:00Z",
            }
        }
    )


class AuditLogListResponse(BaseModel):
    """One page of audit log entries."""

    items: list[AuditLogEntryResponse] = Field(default_factory=list)
    total: int = Field(..., description="Entries matching the filters")
    page: int = Field(..., description="1-based page number")
    page_size: int = Field(..., description="Entries per page")
    total_pages: int = Field(..., description="Number of pages for the filters")


class FilterOption(BaseModel):
    """A lookup row offered as a filter value."""

    id: str
    name: str


class AuditFilterOptionsResponse(BaseModel):
    """Available action and table filters."""

    actions: list[FilterOption] = Field(default_factory=list)
    tables: list[FilterOption] = Field(default_factory=list)


class MonthlyActivity(BaseModel):
    """Entry counts for one month by attributed role group."""

    month: int = Field(..., ge=1, le=12)
    customer: int = 0
    provider: int = 0
    admin: int = 0


class ActivitySummaryResponse(BaseModel):
    """Monthly audit activity for one year."""

    year: int
    months: list[MonthlyActivity]
