"""Per-site poster settings."""

from typing import Optional

from sqlalchemy import JSON, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, UUIDMixin, TimestampMixin

DEFAULT_EXCERPT_LENGTH = 55
DEFAULT_EXCERPT_MORE = " ..."


class SiteSettings(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "site_settings"

    slug: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)
    webhook_url: Mapped[str] = mapped_column(Text, nullable=False, default="")
    enabled_post_types: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    template: Mapped[str] = mapped_column(Text, nullable=False, default="")
    excerpt_length: Mapped[int] = mapped_column(
        Integer, nullable=False, default=DEFAULT_EXCERPT_LENGTH
    )
    excerpt_more: Mapped[str] = mapped_column(
        String(100), nullable=False, default=DEFAULT_EXCERPT_MORE
    )
    hook_key_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    key_prefix: Mapped[Optional[str]] = mapped_column(String(12), nullable=True)
    is_active: Mapped[bool] = mapped_column(default=True)
