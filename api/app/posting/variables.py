"""
Template variables for a single post.

Every placeholder an admin can use in a message template is listed in
``VARIABLES``. A ``VariableResolver`` computes each one lazily for one post
and caches the result, so ``%title%`` appearing three times in a template
and once more in the embed is only cleaned up once.
"""

import logging
from datetime import timezone
from typing import Callable, Iterable, Optional

from app.models.site import DEFAULT_EXCERPT_LENGTH, DEFAULT_EXCERPT_MORE
from app.posting.text import DEFAULT_CONTENT_FILTERS, ContentFilter, html_to_text, make_excerpt
from app.schemas.event import AuthorRecord, PostRecord, PostSavedEvent, SiteInfo

logger = logging.getLogger(__name__)


class VariableResolver:
    """Lazily resolves and caches the template variables of one post."""

    def __init__(
        self,
        post: PostRecord,
        author: Optional[AuthorRecord] = None,
        site: Optional[SiteInfo] = None,
        excerpt_length: int = DEFAULT_EXCERPT_LENGTH,
        excerpt_more: str = DEFAULT_EXCERPT_MORE,
        content_filters: Iterable[ContentFilter] = DEFAULT_CONTENT_FILTERS,
    ):
        self.post = post
        self.author = author
        self.site = site or SiteInfo()
        self.excerpt_length = excerpt_length
        self.excerpt_more = excerpt_more
        self.content_filters = tuple(content_filters)
        self._cache: dict[str, Optional[str]] = {}

    @classmethod
    def for_event(cls, event: PostSavedEvent, site_settings) -> "VariableResolver":
        """Build a resolver for *event* using the excerpt options of *site_settings*."""
        return cls(
            event.post,
            event.author,
            event.site,
            excerpt_length=site_settings.excerpt_length,
            excerpt_more=site_settings.excerpt_more,
        )

    def resolve(self, name: str) -> Optional[str]:
        """Return the value of variable *name*, or None if it is unknown or empty."""
        if name in self._cache:
            return self._cache[name]

        value = None
        getter = VARIABLES.get(name)
        if getter is not None:
            try:
                value = getter(self)
            except Exception:
                logger.warning(
                    "Failed to resolve %%%s%% for post %s", name, self.post.id, exc_info=True
                )
        self._cache[name] = value
        return value


# --- Variable getters ---


def _title(r: VariableResolver) -> str:
    return html_to_text(r.post.title)


def _author(r: VariableResolver) -> str:
    if r.author is None:
        return ""
    return html_to_text(r.author.display_name or "")


def _url(r: VariableResolver) -> str:
    return r.post.permalink


def _post_type(r: VariableResolver) -> str:
    return html_to_text(r.post.type_label or "")


def _description(r: VariableResolver) -> str:
    return make_excerpt(
        r.post.content, r.excerpt_length, r.excerpt_more, filters=r.content_filters
    )


def _timestamp(r: VariableResolver) -> str:
    if r.post.date is None:
        return ""
    date = r.post.date
    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)
    return date.isoformat(timespec="seconds")


def _image(r: VariableResolver) -> Optional[str]:
    return r.post.thumbnail_url or None


def _site_name(r: VariableResolver) -> str:
    return r.site.name.strip()


def _site_icon(r: VariableResolver) -> str:
    return r.site.icon_url or ""


VARIABLES: dict[str, Callable[[VariableResolver], Optional[str]]] = {
    "title": _title,
    "author": _author,
    "url": _url,
    "post_type": _post_type,
    "description": _description,
    "timestamp": _timestamp,
    "image": _image,
    "site_name": _site_name,
    "site_icon": _site_icon,
}


def variable_names() -> list[str]:
    return list(VARIABLES)
