"""Admin API for site poster settings."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import generate_key, hash_key, require_admin
from app.database import get_db
from app.models.site import SiteSettings
from app.posting.discord import build_payload
from app.posting.gate import should_notify
from app.posting.validate import validate_webhook_url
from app.posting.variables import VariableResolver, variable_names
from app.response import paginated_response, single_response
from app.schemas.event import PostSavedEvent
from app.schemas.site import (
    PreviewResponse,
    SiteCreate,
    SiteCreated,
    SiteResponse,
    SiteUpdate,
)
from app.security import is_safe_url

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sites"], dependencies=[Depends(require_admin)])


def _check_webhook_url(url: str) -> None:
    error = validate_webhook_url(url)
    if error:
        raise HTTPException(status_code=400, detail=error)
    if url.strip():
        safe, reason = is_safe_url(url.strip())
        if not safe:
            raise HTTPException(status_code=400, detail=f"Invalid webhook_url: {reason}")


async def _get_site(slug: str, db: AsyncSession) -> SiteSettings:
    result = await db.execute(select(SiteSettings).where(SiteSettings.slug == slug))
    site = result.scalar_one_or_none()
    if not site:
        raise HTTPException(status_code=404, detail="Site not found")
    return site


def _new_hook_key(site: SiteSettings) -> str:
    raw_key = generate_key()
    site.hook_key_hash = hash_key(raw_key)
    site.key_prefix = raw_key[:12]
    return raw_key


@router.get("/variables", summary="List template placeholders")
async def list_variables():
    return single_response([f"%{name}%" for name in variable_names()])


@router.get("/sites", summary="List sites")
async def list_sites(
    limit: int = Query(50, le=200),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    total = (await db.execute(select(func.count()).select_from(SiteSettings))).scalar()
    result = await db.execute(
        select(SiteSettings).order_by(SiteSettings.created_at.desc()).limit(limit).offset(offset)
    )
    items = [SiteResponse.model_validate(s) for s in result.scalars().all()]
    return paginated_response(items, total, limit, offset)


@router.post("/sites", status_code=201, summary="Create site settings")
async def create_site(body: SiteCreate, db: AsyncSession = Depends(get_db)):
    _check_webhook_url(body.webhook_url)

    existing = await db.execute(select(SiteSettings.id).where(SiteSettings.slug == body.slug))
    if existing.scalar_one_or_none():
        raise HTTPException(status_code=409, detail="Site already exists")

    data = body.model_dump()
    data["webhook_url"] = data["webhook_url"].strip()
    site = SiteSettings(**data)
    raw_key = _new_hook_key(site)
    db.add(site)
    await db.commit()
    await db.refresh(site)

    logger.info("Created site %s", site.slug)
    resp = SiteResponse.model_validate(site)
    return single_response(SiteCreated(**resp.model_dump(), hook_key=raw_key))


@router.get("/sites/{slug}", summary="Get site settings")
async def get_site(slug: str, db: AsyncSession = Depends(get_db)):
    site = await _get_site(slug, db)
    return single_response(SiteResponse.model_validate(site))


@router.patch("/sites/{slug}", summary="Update site settings")
async def update_site(slug: str, body: SiteUpdate, db: AsyncSession = Depends(get_db)):
    site = await _get_site(slug, db)

    update_data = body.model_dump(exclude_unset=True)
    if update_data.get("webhook_url") is not None:
        _check_webhook_url(update_data["webhook_url"])
        update_data["webhook_url"] = update_data["webhook_url"].strip()

    # Explicit nulls leave the stored value alone
    for field, value in update_data.items():
        if value is not None:
            setattr(site, field, value)

    if update_data:
        await db.commit()
        await db.refresh(site)

    return single_response(SiteResponse.model_validate(site))


@router.post("/sites/{slug}/rotate-key", summary="Issue a new hook key")
async def rotate_hook_key(slug: str, db: AsyncSession = Depends(get_db)):
    site = await _get_site(slug, db)
    raw_key = _new_hook_key(site)
    await db.commit()
    await db.refresh(site)

    logger.info("Rotated hook key for site %s", slug)
    resp = SiteResponse.model_validate(site)
    return single_response(SiteCreated(**resp.model_dump(), hook_key=raw_key))


@router.delete("/sites/{slug}", status_code=204, summary="Delete site settings")
async def delete_site(slug: str, db: AsyncSession = Depends(get_db)):
    site = await _get_site(slug, db)
    await db.delete(site)
    await db.commit()


@router.post("/sites/{slug}/preview", summary="Render a notification without sending it")
async def preview(slug: str, event: PostSavedEvent, db: AsyncSession = Depends(get_db)):
    site = await _get_site(slug, db)
    resolver = VariableResolver.for_event(event, site)
    return single_response(
        PreviewResponse(
            notify=should_notify(event.post, event.post_before, site),
            payload=build_payload(resolver, site.template),
        )
    )
