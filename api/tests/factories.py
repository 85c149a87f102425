from types import SimpleNamespace

ADMIN_HEADERS = {"X-API-Key": "test-admin-key"}
WEBHOOK_URL = "https://discord.com/api/webhooks/123/abc"


def make_site(**overrides) -> SimpleNamespace:
    site = {
        "slug": "blog",
        "webhook_url": WEBHOOK_URL,
        "enabled_post_types": ["post"],
        "template": "New %post_type%: %title% by %author%",
        "excerpt_length": 55,
        "excerpt_more": " ...",
    }
    site.update(overrides)
    return SimpleNamespace(**site)


def make_event(status="publish", before_status="draft", post_type="post", **post_fields) -> dict:
    post = {
        "id": 42,
        "title": "Hello &amp; <em>welcome</em>",
        "status": status,
        "type": post_type,
        "type_label": "Post",
        "content": "<!-- wp:paragraph --><p>First post body.</p><!-- /wp:paragraph -->",
        "date": "2026-10-19T08:30:00+00:00",
        "permalink": "https://blog.example.com/hello",
        "thumbnail_url": None,
    }
    post.update(post_fields)
    before = None
    if before_status is not None:
        before = {**post, "status": before_status}
    return {
        "post_id": post["id"],
        "post": post,
        "update": before is not None,
        "post_before": before,
        "author": {"id": 1, "display_name": "Ada"},
        "site": {"name": " Example Blog ", "icon_url": "https://blog.example.com/icon.png"},
    }
