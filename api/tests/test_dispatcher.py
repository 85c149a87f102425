import json

import httpx
import respx

from app.posting import WebhookRequest
from app.posting.dispatcher import send_webhook
from tests.factories import WEBHOOK_URL


def _request() -> WebhookRequest:
    return WebhookRequest(
        url=WEBHOOK_URL,
        headers={"Content-Type": "application/json"},
        body=json.dumps({"content": "hi", "embeds": []}),
    )


@respx.mock
async def test_send_webhook_posts_json(public_dns):
    route = respx.post(WEBHOOK_URL).mock(return_value=httpx.Response(204))

    await send_webhook(_request(), "blog")

    assert route.call_count == 1
    sent = route.calls.last.request
    assert sent.headers["Content-Type"] == "application/json"
    assert json.loads(sent.content) == {"content": "hi", "embeds": []}


@respx.mock
async def test_send_webhook_logs_error_status(public_dns, caplog):
    respx.post(WEBHOOK_URL).mock(return_value=httpx.Response(400, text="Invalid Form Body"))

    await send_webhook(_request(), "blog")

    assert "Discord returned status 400 for site blog" in caplog.text


@respx.mock
async def test_send_webhook_swallows_network_errors(public_dns, caplog):
    route = respx.post(WEBHOOK_URL).mock(side_effect=httpx.ConnectError("connection refused"))

    await send_webhook(_request(), "blog")

    assert route.call_count == 1
    assert "Failed to send Discord notification for site blog" in caplog.text


async def test_send_webhook_refuses_private_addresses(private_dns, caplog):
    await send_webhook(_request(), "blog")

    assert "Blocked outbound request to discord.com" in caplog.text
