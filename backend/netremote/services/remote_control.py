import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from netremote.schemas.remote_settings import RemoteSettings
from netremote.services.network import NetworkInterfaceScanner
from netremote.services.presets import PresetCatalog, preset_catalog
from netremote.services.remote_settings import RemoteSettingsStore
from netremote.services.settings_store import DatabaseSettingsStore

logger = logging.getLogger(__name__)


class RemoteControlService:
    """Holds the configuration the network remote server runs with.

    The server itself lives elsewhere; this handle re-reads the persisted
    settings whenever they are saved.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession] | None = None,
        catalog: PresetCatalog = preset_catalog,
    ):
        self._session_factory = session_factory
        self._catalog = catalog
        self.current: RemoteSettings | None = None

    def set_session_factory(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    @property
    def is_enabled(self) -> bool:
        return self.current is not None and self.current.enabled

    @property
    def port(self) -> int | None:
        return self.current.port if self.current else None

    async def notify_reload(self) -> None:
        if self._session_factory is None:
            logger.debug("Remote control service has no database yet, skipping reload")
            return

        async with self._session_factory() as db:
            store = RemoteSettingsStore(DatabaseSettingsStore(db), self._catalog, NetworkInterfaceScanner())
            self.current = await store.load()

        if self.current.enabled:
            logger.info(
                "Network remote enabled on port %d (auth code %s, downloads %s)",
                self.current.port,
                "required" if self.current.use_auth_code else "off",
                "allowed" if self.current.allow_downloads else "blocked",
            )
        else:
            logger.info("Network remote disabled")


remote_control_service = RemoteControlService()
