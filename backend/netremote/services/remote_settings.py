import asyncio
import logging
from collections.abc import Callable
from typing import Any, Protocol

from netremote.config import settings as app_settings
from netremote.schemas.remote_settings import DEFAULT_OUTPUT_FORMAT, MAX_PORT, RemoteSettings
from netremote.services.auth_code import default_auth_code
from netremote.services.extensions import (
    DEFAULT_MUSIC_EXTENSIONS,
    filter_extensions,
    parse_extension_list,
)
from netremote.services.network import NetworkInterfaceScanner
from netremote.services.presets import PresetCatalog
from netremote.services.settings_store import KeyValueStore

logger = logging.getLogger(__name__)

SETTINGS_NAMESPACE = "network_remote"


class ReloadHandle(Protocol):
    async def notify_reload(self) -> None: ...


def _coerce_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off", ""}:
            return False
    return default


def _coerce_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


def _coerce_extensions(value: Any) -> list[str]:
    if isinstance(value, str):
        return parse_extension_list(value)
    if isinstance(value, (list, tuple)):
        return filter_extensions(value)
    return list(DEFAULT_MUSIC_EXTENSIONS)


class RemoteSettingsStore:
    """Loads and saves the network remote configuration.

    Reads and writes go through a ``KeyValueStore`` under the
    ``network_remote`` namespace. ``remote`` is the running remote-control
    service, told to reload after a save; it may be ``None`` when the
    feature is not running.
    """

    def __init__(
        self,
        store: KeyValueStore,
        catalog: PresetCatalog,
        scanner: NetworkInterfaceScanner,
        remote: ReloadHandle | None = None,
        auth_codes: Callable[[], int] = default_auth_code,
    ):
        self._store = store
        self._catalog = catalog
        self._scanner = scanner
        self._remote = remote
        self._auth_codes = auth_codes

    async def _get(self, key: str, default: Any = None) -> Any:
        return await self._store.get(SETTINGS_NAMESPACE, key, default)

    async def _set(self, key: str, value: Any) -> None:
        await self._store.set(SETTINGS_NAMESPACE, key, value)

    async def _load_port(self) -> int:
        default = app_settings.default_server_port
        raw = await self._get("port", default)
        port = _coerce_int(raw, default)
        if not 1 <= port <= MAX_PORT:
            logger.warning("Persisted port %r out of range, using %d", raw, default)
            return default
        return port

    async def _load_auth_code(self) -> int:
        raw = await self._get("auth_code")
        if raw is None:
            # First load: generate once and keep it so later loads agree
            code = self._auth_codes()
            await self._set("auth_code", code)
            logger.info("Generated initial network remote auth code")
            return code
        code = _coerce_int(raw, None)
        if code is None:
            logger.warning("Persisted auth code %r is not a number, regenerating", raw)
            code = self._auth_codes()
            await self._set("auth_code", code)
        return code

    async def load(self) -> RemoteSettings:
        output_format_id = await self._get("last_output_format", DEFAULT_OUTPUT_FORMAT)
        output_format_id = str(output_format_id) if output_format_id is not None else DEFAULT_OUTPUT_FORMAT
        root_folder = await self._get("files_root_folder", "")

        result = RemoteSettings(
            enabled=_coerce_bool(await self._get("use_remote", False), False),
            port=await self._load_port(),
            only_non_public_ip=_coerce_bool(await self._get("only_non_public_ip", True), True),
            use_auth_code=_coerce_bool(await self._get("use_auth_code", False), False),
            auth_code=await self._load_auth_code(),
            allow_downloads=_coerce_bool(await self._get("allow_downloads", False), False),
            convert_lossless=_coerce_bool(await self._get("convert_lossless", False), False),
            output_format_id=output_format_id,
            root_folder=str(root_folder) if root_folder is not None else "",
            allowed_extensions=_coerce_extensions(
                await self._get("files_music_extensions", list(DEFAULT_MUSIC_EXTENSIONS))
            ),
            ip_addresses=await asyncio.to_thread(self._scanner.scan),
            output_format_index=self._catalog.index_of(output_format_id),
        )
        if result.output_format_index is None:
            logger.info("No transcoder preset matches %r, leaving format unselected", output_format_id)
        return result

    async def save(self, settings: RemoteSettings) -> None:
        await self._set("port", settings.port)
        await self._set("use_remote", settings.enabled)
        await self._set("only_non_public_ip", settings.only_non_public_ip)
        await self._set("use_auth_code", settings.use_auth_code)
        await self._set("auth_code", settings.auth_code)
        await self._set("allow_downloads", settings.allow_downloads)
        await self._set("convert_lossless", settings.convert_lossless)
        await self._set("last_output_format", settings.output_format_id)
        await self._set("files_root_folder", settings.root_folder)
        await self._set("files_music_extensions", parse_extension_list(settings.allowed_extensions_text))

        if self._remote is None:
            return
        try:
            await self._remote.notify_reload()
        except Exception:
            logger.exception("Network remote failed to reload settings")
