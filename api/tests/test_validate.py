import pytest

from app.posting.validate import validate_webhook_url
from app.security import is_safe_url


@pytest.mark.parametrize(
    "url",
    [
        "",
        "   ",
        "https://discord.com/api/webhooks/123/abc",
        "https://discordapp.com/api/webhooks/123/abc",
        "https://canary.discord.com/api/webhooks/123/abc",
    ],
)
def test_valid_webhook_urls(url):
    assert validate_webhook_url(url) is None


@pytest.mark.parametrize(
    "url, message",
    [
        ("ftp://discord.com/api/webhooks/1/a", "must use http or https"),
        ("https://", "not a valid URL"),
        ("https://example.com/api/webhooks/1/a", "discord.com webhook URL"),
        ("https://discord.com/channels/1/2", "discord.com webhook URL"),
    ],
)
def test_invalid_webhook_urls(url, message):
    assert message in validate_webhook_url(url)


def test_is_safe_url_allows_public_hosts(public_dns):
    assert is_safe_url("https://discord.com/api/webhooks/1/a") == (True, "")


def test_is_safe_url_blocks_private_hosts(private_dns):
    safe, reason = is_safe_url("https://discord.com/api/webhooks/1/a")
    assert not safe
    assert "private" in reason


def test_is_safe_url_blocks_internal_service_names():
    safe, reason = is_safe_url("http://redis/api/webhooks/1/a")
    assert not safe
    assert "not allowed" in reason
