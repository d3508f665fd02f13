"""User configuration for adgen."""

from adgen.config.models import FormDefaults, StoreSettings, UserConfigData
from adgen.config.user_config import UserConfig, create_user_config


__all__ = [
    "FormDefaults",
    "StoreSettings",
    "UserConfig",
    "UserConfigData",
    "create_user_config",
]
