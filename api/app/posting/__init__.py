"""Publish notifications: gate, variables, templating and Discord delivery."""

from dataclasses import dataclass


@dataclass
class WebhookRequest:
    """An outbound webhook call, ready to send."""
    url: str
    headers: dict[str, str]
    body: str  # JSON string
