"""Preset collection model used by the file store."""

from pydantic import Field

from adgen.configuration.models import PersistedConfiguration
from adgen.models.base import AdgenBaseModel


class PresetCollection(AdgenBaseModel):
    """Named presets in save order (oldest first)."""

    presets: list[PersistedConfiguration] = Field(default_factory=list)

    def add_preset(self, preset: PersistedConfiguration) -> None:
        """Add a preset, replacing any preset saved under the same name."""
        self.presets = [p for p in self.presets if p.name != preset.name]
        self.presets.append(preset)

    def get_preset(self, name_or_id: str) -> PersistedConfiguration | None:
        """Look a preset up by name, then by id."""
        for preset in self.presets:
            if preset.name == name_or_id:
                return preset
        for preset in self.presets:
            if preset.id is not None and preset.id == name_or_id:
                return preset
        return None

    def newest_first(self) -> list[PersistedConfiguration]:
        return list(reversed(self.presets))
