import json
import logging
from typing import Any, Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from netremote.models.setting_value import SettingValue

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Minimal get/set capability the settings layer persists through."""

    async def get(self, namespace: str, key: str, default: Any = None) -> Any: ...

    async def set(self, namespace: str, key: str, value: Any) -> None: ...


class DatabaseSettingsStore:
    """KeyValueStore backed by the ``settings`` table.

    Values are JSON-encoded so lists and booleans survive the round trip.
    Every ``set`` commits immediately.
    """

    def __init__(self, db: AsyncSession):
        self._db = db

    async def get(self, namespace: str, key: str, default: Any = None) -> Any:
        row = await self._db.get(SettingValue, (namespace, key))
        if row is None or row.value is None:
            return default
        try:
            return json.loads(row.value)
        except json.JSONDecodeError:
            # Hand-edited rows may hold bare strings
            logger.warning("Non-JSON value for %s/%s, using raw text", namespace, key)
            return row.value

    async def set(self, namespace: str, key: str, value: Any) -> None:
        db_value = json.dumps(value)
        existing = await self._db.get(SettingValue, (namespace, key))
        if existing:
            existing.value = db_value
        else:
            self._db.add(SettingValue(namespace=namespace, key=key, value=db_value))
        await self._db.commit()
