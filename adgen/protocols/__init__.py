"""Protocol definitions for adgen adapters and collaborators.

These protocols use Python's typing.Protocol system with the
@runtime_checkable decorator to enable both static type checking and
runtime isinstance() checks.
"""

from .config_file_adapter_protocol import ConfigFileAdapterProtocol
from .store_protocol import ConfigurationStoreProtocol


__all__ = [
    "ConfigFileAdapterProtocol",
    "ConfigurationStoreProtocol",
]
