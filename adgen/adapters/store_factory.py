"""Factory for the configured preset store."""

from adgen.adapters.file_store import FileConfigurationStore
from adgen.adapters.http_store import HttpConfigurationStore
from adgen.config.models import StoreSettings
from adgen.core.errors import ConfigError
from adgen.protocols.store_protocol import ConfigurationStoreProtocol


def create_configuration_store(settings: StoreSettings) -> ConfigurationStoreProtocol:
    """Create the store selected by ``settings.backend``.

    Raises:
        ConfigError: If the http backend is selected without an API URL
    """
    if settings.backend == "http":
        if not settings.api_url:
            raise ConfigError(
                "store.api_url is required when store.backend is 'http'",
                {"backend": settings.backend},
            )
        return HttpConfigurationStore(settings.api_url, timeout=settings.timeout)
    return FileConfigurationStore(settings.path)
