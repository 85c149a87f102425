"""Public endpoint called by the WordPress host after a post is saved."""

import logging

from fastapi import APIRouter, Depends

from app.auth import get_hook_site
from app.models.site import SiteSettings
from app.posting.dispatcher import handle_post_saved
from app.schemas.event import PostSavedEvent

logger = logging.getLogger(__name__)

router = APIRouter(tags=["hooks"])


@router.post("/hooks/{slug}/post-saved", summary="Receive a post-saved event")
async def post_saved(
    event: PostSavedEvent,
    site: SiteSettings = Depends(get_hook_site),
):
    try:
        sent = await handle_post_saved(event, site)
    except Exception:
        # Publishing must never fail because of a notification problem
        logger.exception("Notification failed for post %s on site %s", event.post_id, site.slug)
        sent = False
    return {"status": "sent" if sent else "skipped"}
