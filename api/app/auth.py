import logging
import secrets

from fastapi import Depends, HTTPException, Request, Security
from fastapi.security import APIKeyHeader
from passlib.hash import pbkdf2_sha256
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db
from app.models.site import SiteSettings

logger = logging.getLogger(__name__)

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)
hook_key_header = APIKeyHeader(name="X-Hook-Key", auto_error=False)

_LOCKOUT_THRESHOLD = 10
_LOCKOUT_WINDOW = 300  # 5 minutes


def get_client_ip(request: Request) -> str:
    cf_ip = request.headers.get("CF-Connecting-IP")
    if cf_ip:
        return cf_ip
    xff = request.headers.get("X-Forwarded-For")
    if xff:
        return xff.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


async def _check_lockout(ip: str) -> None:
    from app.redis import redis as redis_client

    try:
        count = await redis_client.get(f"auth_fail:{ip}")
        if count and int(count) >= _LOCKOUT_THRESHOLD:
            raise HTTPException(
                status_code=429,
                detail="Too many failed authentication attempts. Try again later.",
            )
    except HTTPException:
        raise
    except Exception:
        logger.warning("Auth lockout check unavailable for %s", ip)


async def _record_failure(ip: str) -> None:
    from app.redis import redis as redis_client

    try:
        key = f"auth_fail:{ip}"
        count = await redis_client.incr(key)
        if count == 1:
            await redis_client.expire(key, _LOCKOUT_WINDOW)
    except Exception:
        logger.warning("Could not record auth failure for %s", ip)


async def _clear_failure(ip: str) -> None:
    from app.redis import redis as redis_client

    try:
        await redis_client.delete(f"auth_fail:{ip}")
    except Exception:
        logger.debug("Could not clear auth failures for %s", ip)


def hash_key(key: str) -> str:
    return pbkdf2_sha256.hash(key)


def verify_key(key: str, key_hash: str) -> bool:
    return pbkdf2_sha256.verify(key, key_hash)


def generate_key() -> str:
    return f"wpd_{secrets.token_urlsafe(32)}"


async def require_admin(
    request: Request,
    api_key: str = Security(api_key_header),
) -> None:
    """Guard for the settings API: only the configured admin key is accepted."""
    if not api_key:
        raise HTTPException(status_code=401, detail="Missing API key")

    client_ip = get_client_ip(request)
    await _check_lockout(client_ip)

    if secrets.compare_digest(api_key, settings.admin_api_key):
        await _clear_failure(client_ip)
        return

    await _record_failure(client_ip)
    logger.warning("Failed admin auth attempt from %s", client_ip)
    raise HTTPException(status_code=401, detail="Invalid API key")


async def get_hook_site(
    slug: str,
    request: Request,
    hook_key: str = Security(hook_key_header),
    db: AsyncSession = Depends(get_db),
) -> SiteSettings:
    """Resolve the active site for a public hook call and check its hook key."""
    result = await db.execute(
        select(SiteSettings).where(SiteSettings.slug == slug, SiteSettings.is_active.is_(True))
    )
    site = result.scalar_one_or_none()
    if not site:
        raise HTTPException(status_code=404, detail="Site not found")

    if not hook_key:
        raise HTTPException(status_code=401, detail="Missing hook key")

    client_ip = get_client_ip(request)
    await _check_lockout(client_ip)

    # Cheap prefix check first; pbkdf2 only runs for plausible keys
    prefix_ok = not site.key_prefix or secrets.compare_digest(
        hook_key[:12].encode(), site.key_prefix.encode()
    )
    if not (prefix_ok and verify_key(hook_key, site.hook_key_hash)):
        await _record_failure(client_ip)
        logger.warning("Invalid hook key for site %s from %s", slug, client_ip)
        raise HTTPException(status_code=401, detail="Invalid hook key")

    await _clear_failure(client_ip)
    return site
