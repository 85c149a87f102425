"""Inbound post-saved event sent by the WordPress host."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class PostRecord(BaseModel):
    id: int
    title: str = ""
    status: str
    type: str
    type_label: Optional[str] = Field(None, description="Singular label of the post type")
    content: str = ""
    date: Optional[datetime] = None
    permalink: str = ""
    thumbnail_url: Optional[str] = Field(None, description="Full-size featured image URL, if any")


class AuthorRecord(BaseModel):
    id: int
    display_name: Optional[str] = None


class SiteInfo(BaseModel):
    name: str = ""
    icon_url: Optional[str] = None


class PostSavedEvent(BaseModel):
    """Mirror of the ``wp_after_insert_post`` action arguments."""

    post_id: int
    post: PostRecord
    update: bool = False
    post_before: Optional[PostRecord] = None
    author: Optional[AuthorRecord] = None
    site: SiteInfo = Field(default_factory=SiteInfo)
