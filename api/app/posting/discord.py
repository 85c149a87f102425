"""Discord embed formatting for published posts."""

import json

from app.posting import WebhookRequest
from app.posting.template import render
from app.posting.variables import VariableResolver


def build_payload(resolver: VariableResolver, template: str) -> dict:
    """
    Build the Discord webhook body for one post.

    The rendered template goes into ``content``; the embed always carries the
    post fields and only gets an ``image`` block when the post has a thumbnail.
    """
    embed = {
        "title": resolver.resolve("title"),
        "url": resolver.resolve("url"),
        "description": resolver.resolve("description"),
        "author": {"name": resolver.resolve("author")},
        "timestamp": resolver.resolve("timestamp"),
        "footer": {
            "text": resolver.resolve("site_name"),
            "icon_url": resolver.resolve("site_icon"),
        },
    }

    image = resolver.resolve("image")
    if image:
        embed["image"] = {"url": image}

    return {
        "content": render(template or "", resolver).strip(),
        "embeds": [embed],
    }


def format_discord(webhook_url: str, resolver: VariableResolver, template: str) -> WebhookRequest:
    """
    Format a published post for a Discord webhook.

    Returns the ready-to-send POST with the embed payload as a JSON body.
    """
    return WebhookRequest(
        url=webhook_url,
        headers={"Content-Type": "application/json"},
        body=json.dumps(build_payload(resolver, template)),
    )
