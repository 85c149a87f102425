"""Deliver post notifications to Discord."""

import logging
from typing import Awaitable, Callable

from app.config import settings
from app.posting import WebhookRequest
from app.posting.discord import format_discord
from app.posting.gate import should_notify
from app.posting.variables import VariableResolver
from app.schemas.event import PostSavedEvent
from app.security import safe_http_client

logger = logging.getLogger(__name__)

Sender = Callable[[WebhookRequest, str], Awaitable[None]]


async def send_webhook(request: WebhookRequest, site_slug: str) -> None:
    """
    POST a single webhook request.

    Delivery is best effort: errors and non-2xx responses are logged and
    dropped so the publishing host never sees them.
    """
    try:
        async with safe_http_client(timeout=settings.http_timeout) as client:
            response = await client.post(
                request.url,
                headers=request.headers,
                content=request.body,
            )

            if response.status_code >= 400:
                logger.warning(
                    "Discord returned status %s for site %s: %s",
                    response.status_code,
                    site_slug,
                    response.text[:200],
                )
            else:
                logger.debug("Sent Discord notification for site %s", site_slug)

    except Exception as e:
        logger.error("Failed to send Discord notification for site %s: %s", site_slug, e, exc_info=True)


async def handle_post_saved(
    event: PostSavedEvent,
    site_settings,
    send: Sender = send_webhook,
) -> bool:
    """
    Announce *event* if it passes the publish gate.

    Returns True when a notification was handed to *send*.
    """
    if not should_notify(event.post, event.post_before, site_settings):
        return False

    resolver = VariableResolver.for_event(event, site_settings)
    request = format_discord(site_settings.webhook_url.strip(), resolver, site_settings.template)

    logger.info("Posting %s %s to Discord for site %s", event.post.type, event.post_id, site_settings.slug)
    await send(request, site_settings.slug)
    return True
