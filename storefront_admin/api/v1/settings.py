"""App settings form: audio player status, layout, language, voice assistant."""

import logging

from fastapi import APIRouter

from storefront_admin.api.deps import CurrentSession
from storefront_admin.schemas.merchant import AppSettings, SettingsPage, SettingsUpdateResult
from storefront_admin.services.placeholders import settings_page

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=SettingsPage, summary="Get settings")
async def get_settings(session: CurrentSession) -> SettingsPage:
    """Current settings with the select options for each field."""
    return settings_page()


@router.post(
    "",
    response_model=SettingsUpdateResult,
    summary="Update settings",
    responses={401: {"description": "Not authenticated"}, 422: {"description": "Unknown option"}},
)
async def update_settings(body: AppSettings, session: CurrentSession) -> SettingsUpdateResult:
    """Validate and echo the submitted settings. Nothing is stored yet."""
    logger.info("Settings submitted for shop=%s: %s", session.shop, body.model_dump())
    return SettingsUpdateResult(success=True, settings=body)
