import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.config import settings
from app.models.site import DEFAULT_EXCERPT_LENGTH, DEFAULT_EXCERPT_MORE

_SLUG_PATTERN = r"^[a-z0-9][a-z0-9_-]*$"


def _clean_post_types(v: Optional[list[str]]) -> Optional[list[str]]:
    if v is None:
        return v
    seen: list[str] = []
    for t in v:
        t = t.strip()
        if t and t not in seen:
            seen.append(t)
    return seen


class SiteCreate(BaseModel):
    slug: str = Field(
        default_factory=lambda: settings.default_site_slug,
        max_length=100,
        pattern=_SLUG_PATTERN,
        description="Site identifier used in the hook URL",
    )
    webhook_url: str = Field("", description="Discord webhook URL. Empty disables posting.")
    enabled_post_types: list[str] = Field(
        default=[], description="Post types that trigger a notification, e.g. post, page"
    )
    template: str = Field("", description="Message content with %name% placeholders")
    excerpt_length: int = Field(DEFAULT_EXCERPT_LENGTH, ge=1, le=1000)
    excerpt_more: str = Field(DEFAULT_EXCERPT_MORE, max_length=100)

    @field_validator("enabled_post_types")
    @classmethod
    def clean_post_types(cls, v: Optional[list[str]]) -> Optional[list[str]]:
        return _clean_post_types(v)


class SiteUpdate(BaseModel):
    webhook_url: Optional[str] = None
    enabled_post_types: Optional[list[str]] = None
    template: Optional[str] = None
    excerpt_length: Optional[int] = Field(None, ge=1, le=1000)
    excerpt_more: Optional[str] = Field(None, max_length=100)
    is_active: Optional[bool] = None

    @field_validator("enabled_post_types")
    @classmethod
    def clean_post_types(cls, v: Optional[list[str]]) -> Optional[list[str]]:
        return _clean_post_types(v)


class SiteResponse(BaseModel):
    id: uuid.UUID
    slug: str
    webhook_url: str
    enabled_post_types: list[str]
    template: str
    excerpt_length: int
    excerpt_more: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class SiteCreated(SiteResponse):
    hook_key: str = Field(..., description="Save this key — it cannot be retrieved again")


class PreviewResponse(BaseModel):
    notify: bool = Field(..., description="Whether this event would pass the publish gate")
    payload: dict
