from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from netremote.database import get_db
from netremote.schemas.remote_settings import (
    CompanionLink,
    PresetRead,
    RemoteSettings,
    RemoteSettingsUpdate,
)
from netremote.services.links import COMPANION_APP_LINKS, link_for
from netremote.services.network import NetworkInterfaceScanner
from netremote.services.presets import PresetCatalog, preset_catalog
from netremote.services.remote_control import RemoteControlService, remote_control_service
from netremote.services.remote_settings import RemoteSettingsStore
from netremote.services.settings_store import DatabaseSettingsStore

router = APIRouter(prefix="/api/remote-settings", tags=["remote-settings"])


def get_preset_catalog() -> PresetCatalog:
    return preset_catalog


def get_scanner() -> NetworkInterfaceScanner:
    return NetworkInterfaceScanner()


def get_remote_control() -> RemoteControlService | None:
    return remote_control_service


def get_settings_store(
    db: AsyncSession = Depends(get_db),
    catalog: PresetCatalog = Depends(get_preset_catalog),
    scanner: NetworkInterfaceScanner = Depends(get_scanner),
    remote: RemoteControlService | None = Depends(get_remote_control),
) -> RemoteSettingsStore:
    return RemoteSettingsStore(DatabaseSettingsStore(db), catalog, scanner, remote)


@router.get("", response_model=RemoteSettings)
async def get_remote_settings(store: RemoteSettingsStore = Depends(get_settings_store)):
    return await store.load()


@router.put("", response_model=RemoteSettings)
async def update_remote_settings(
    payload: RemoteSettingsUpdate,
    store: RemoteSettingsStore = Depends(get_settings_store),
):
    current = await store.load()
    updated = current.model_copy(update=payload.model_dump(exclude_unset=True, exclude_none=True))
    await store.save(updated)
    return await store.load()


@router.get("/presets", response_model=list[PresetRead])
async def list_presets(catalog: PresetCatalog = Depends(get_preset_catalog)):
    return [
        PresetRead(
            index=i,
            name=preset.name,
            extension=preset.extension,
            codec_mimetype=preset.codec_mimetype,
            type=preset.type,
            label=preset.label,
        )
        for i, preset in enumerate(catalog.all())
    ]


@router.get("/presets/{index}/options-group")
async def get_preset_options_group(index: int, catalog: PresetCatalog = Depends(get_preset_catalog)):
    """Settings group for the encoder options of the selected preset."""
    preset = catalog.get(index)
    if preset is None:
        raise HTTPException(404, "Preset not found")
    return {"group": catalog.options_group(preset)}


@router.get("/links", response_model=list[CompanionLink])
async def list_links():
    return [CompanionLink(trigger=trigger, url=url) for trigger, url in COMPANION_APP_LINKS.items()]


@router.get("/links/{trigger}", response_model=CompanionLink)
async def get_link(trigger: str):
    url = link_for(trigger)
    if url is None:
        raise HTTPException(404, f"Unknown link: {trigger}")
    return CompanionLink(trigger=trigger, url=url)
