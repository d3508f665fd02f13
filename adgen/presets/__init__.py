"""Named, reloadable presets."""

from adgen.presets.models import PresetCollection
from adgen.presets.service import PresetService, create_preset_service


__all__ = ["PresetCollection", "PresetService", "create_preset_service"]
