"""Settings validation."""

from typing import Optional
from urllib.parse import urlparse

_DISCORD_HOSTS = {"discord.com", "discordapp.com", "ptb.discord.com", "canary.discord.com"}


def validate_webhook_url(url: str) -> Optional[str]:
    """
    Validate a Discord webhook URL.
    Returns None if valid, or an error message string if invalid.

    An empty value is valid: it switches notifications off for the site.
    """
    url = (url or "").strip()
    if not url:
        return None
    try:
        parsed = urlparse(url)
    except ValueError:
        return "webhook_url is not a valid URL"
    if parsed.scheme not in ("http", "https"):
        return "webhook_url must use http or https protocol"
    if not parsed.netloc or not parsed.hostname:
        return "webhook_url is not a valid URL"
    if parsed.hostname.lower() not in _DISCORD_HOSTS or not parsed.path.startswith("/api/webhooks/"):
        return "webhook_url must be a discord.com webhook URL"
    return None
