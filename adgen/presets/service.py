"""Saving and loading named presets through a configuration store."""

from typing import TYPE_CHECKING

from adgen.configuration.codec import from_persisted, to_persisted
from adgen.configuration.models import AdConfiguration, PersistedConfiguration
from adgen.core.errors import StoreError
from adgen.core.structlog_logger import StructlogMixin
from adgen.protocols.store_protocol import ConfigurationStoreProtocol


if TYPE_CHECKING:
    from adgen.config.user_config import UserConfig


class PresetService(StructlogMixin):
    """Bridges editable configurations and a preset store.

    ``save`` takes its snapshot before the first await, so edits made to
    the live model while the store call is pending are not saved. A failed
    store call raises ``StoreError`` and leaves the model untouched.
    """

    def __init__(self, store: ConfigurationStoreProtocol):
        super().__init__()
        self._store = store

    @property
    def store(self) -> ConfigurationStoreProtocol:
        return self._store

    async def save(self, name: str, model: AdConfiguration) -> PersistedConfiguration:
        """Save ``model`` under ``name`` and return the stored record."""
        record = to_persisted(name, model.snapshot())
        try:
            stored = await self._store.create(record)
        except StoreError as e:
            self.log_error_with_context("preset_save_failed", e, name=name)
            raise
        self.logger.debug(
            "preset_save_completed", name=stored.name, overrides=len(stored.overrides)
        )
        return stored

    async def list(self) -> list[PersistedConfiguration]:
        """All presets in store order."""
        return await self._store.list()

    async def get(self, name_or_id: str) -> PersistedConfiguration | None:
        return await self._store.get(name_or_id)

    async def load(self, name_or_id: str) -> AdConfiguration | None:
        """Rebuild an editable configuration from a preset, or None if absent."""
        record = await self._store.get(name_or_id)
        if record is None:
            self.logger.debug("preset_not_found", name=name_or_id)
            return None
        return from_persisted(record)


def create_preset_service(user_config: "UserConfig") -> PresetService:
    """Create a PresetService using the store selected in user configuration."""
    from adgen.adapters.store_factory import create_configuration_store

    return PresetService(create_configuration_store(user_config.data.store))
