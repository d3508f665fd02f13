"""Protocol for preset persistence backends."""

from typing import Protocol, runtime_checkable

from adgen.configuration.models import PersistedConfiguration


@runtime_checkable
class ConfigurationStoreProtocol(Protocol):
    """Asynchronous create/list/get of named presets.

    Name uniqueness is the store's policy, not the caller's.
    """

    async def create(self, record: PersistedConfiguration) -> PersistedConfiguration:
        """Persist ``record`` and return it with store-assigned fields filled in.

        Raises:
            StoreError: If the preset could not be saved
        """
        ...

    async def list(self) -> list[PersistedConfiguration]:
        """All presets in store order.

        Raises:
            StoreError: If the presets could not be read
        """
        ...

    async def get(self, name_or_id: str) -> PersistedConfiguration | None:
        """The preset with this name or id, or None when there is none.

        Raises:
            StoreError: If the store could not be queried
        """
        ...
