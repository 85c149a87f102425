"""Decide whether a saved post should be announced."""

import logging
from typing import Optional

from app.schemas.event import PostRecord

logger = logging.getLogger(__name__)

PUBLISH_STATUS = "publish"


def should_notify(post: PostRecord, post_before: Optional[PostRecord], site_settings) -> bool:
    """
    Return True only for a post that has just become published.

    Checks run in order and stop at the first failure:
      1. the post is now published
      2. it was not already published (re-saves are ignored)
      3. its post type is enabled for the site
      4. the site has a webhook URL
    """
    if post.status != PUBLISH_STATUS:
        return False

    old_status = post_before.status if post_before is not None else None
    if post.status == old_status:
        logger.debug("Post %s was already published, ignoring", post.id)
        return False

    if post.type not in (site_settings.enabled_post_types or []):
        logger.debug("Post type %s is not enabled for %s", post.type, site_settings.slug)
        return False

    if not (site_settings.webhook_url or "").strip():
        logger.debug("No webhook URL configured for %s", site_settings.slug)
        return False

    return True
