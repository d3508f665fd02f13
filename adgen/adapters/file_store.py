"""Preset store backed by a JSON document on disk."""

from __future__ import annotations

import asyncio
import builtins
import json
import threading
import uuid
from datetime import UTC, datetime
from pathlib import Path

from pydantic import ValidationError

from adgen.configuration.models import PersistedConfiguration
from adgen.core.errors import StoreError
from adgen.core.structlog_logger import StructlogMixin
from adgen.presets.models import PresetCollection
from adgen.utils.xdg import get_xdg_data_dir


PRESETS_FILENAME = "presets.json"


class FileConfigurationStore(StructlogMixin):
    """Keeps presets in a single JSON file.

    Saving under an existing name replaces that preset. ``list`` returns
    the most recently saved preset first.
    """

    def __init__(self, path: Path | None = None):
        super().__init__()
        self.path = path or get_xdg_data_dir() / PRESETS_FILENAME
        self._lock = threading.Lock()

    def _read(self) -> PresetCollection:
        if not self.path.exists():
            return PresetCollection()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return PresetCollection.model_validate(data)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            raise StoreError(
                f"Cannot read preset file: {e}", {"path": str(self.path)}
            ) from e

    def _write(self, collection: PresetCollection) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(".tmp")
            tmp_path.write_text(
                json.dumps(collection.model_dump(mode="json"), indent=2),
                encoding="utf-8",
            )
            tmp_path.replace(self.path)
        except OSError as e:
            raise StoreError(
                f"Cannot write preset file: {e}", {"path": str(self.path)}
            ) from e

    def _create(self, record: PersistedConfiguration) -> PersistedConfiguration:
        stored = record.model_copy(
            update={
                "id": record.id or uuid.uuid4().hex,
                "created_at": datetime.now(UTC),
            }
        )
        with self._lock:
            collection = self._read()
            collection.add_preset(stored)
            self._write(collection)
        self.logger.info("preset_saved", name=stored.name, id=stored.id)
        return stored

    def _get(self, name_or_id: str) -> PersistedConfiguration | None:
        with self._lock:
            return self._read().get_preset(name_or_id)

    def _list(self) -> builtins.list[PersistedConfiguration]:
        with self._lock:
            return self._read().newest_first()

    async def create(self, record: PersistedConfiguration) -> PersistedConfiguration:
        return await asyncio.to_thread(self._create, record)

    async def get(self, name_or_id: str) -> PersistedConfiguration | None:
        return await asyncio.to_thread(self._get, name_or_id)

    async def list(self) -> builtins.list[PersistedConfiguration]:
        return await asyncio.to_thread(self._list)
