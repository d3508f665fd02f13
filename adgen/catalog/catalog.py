"""Static catalog of documented override keys.

The catalog only ever answers "what does this key mean". It never decides
whether a key may be used: any non-empty string is a legal override key.
"""

from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml
from pydantic import ValidationError

from adgen.catalog.models import ParameterEntry
from adgen.core.errors import CatalogError
from adgen.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)

CATALOG_RESOURCE = "parameters.yaml"
VALUE_PLACEHOLDER = "Value"


class ParameterCatalog:
    """Read-only lookup table of :class:`ParameterEntry` records."""

    def __init__(self, entries: Iterable[ParameterEntry]):
        by_key: dict[str, ParameterEntry] = {}
        for entry in entries:
            if entry.key in by_key:
                raise CatalogError(
                    "Duplicate key in parameter catalog", {"key": entry.key}
                )
            by_key[entry.key] = entry
        self._entries: Mapping[str, ParameterEntry] = MappingProxyType(by_key)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ParameterEntry]:
        return iter(self._entries.values())

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def lookup(self, key: str) -> ParameterEntry | None:
        """Return the entry documenting ``key``, or None when it is undocumented."""
        return self._entries.get(key)

    def keys(self) -> list[str]:
        """All documented keys in ordinal order."""
        return sorted(self._entries)

    def groups(self) -> list[str]:
        """Group names in order of first appearance in the source data."""
        seen: dict[str, None] = {}
        for entry in self._entries.values():
            seen.setdefault(entry.group, None)
        return list(seen)

    def grouped_view(self) -> dict[str, list[ParameterEntry]]:
        """Entries per group, each group sorted by key (case-sensitive ordinal).

        Groups keep the order in which they first appear in the source data.
        """
        grouped: dict[str, list[ParameterEntry]] = {
            group: [] for group in self.groups()
        }
        for entry in self._entries.values():
            grouped[entry.group].append(entry)
        for group_entries in grouped.values():
            group_entries.sort(key=lambda e: e.key)
        return grouped

    def search(self, text: str) -> list[ParameterEntry]:
        """Case-insensitive substring match over key and description."""
        needle = text.strip().lower()
        if not needle:
            return [self._entries[key] for key in self.keys()]
        return [
            self._entries[key]
            for key in self.keys()
            if needle in key.lower()
            or needle in self._entries[key].description.lower()
        ]

    def placeholder_for(self, key: str) -> str:
        """Placeholder text for the value input of ``key``."""
        entry = self.lookup(key)
        if entry is not None and entry.default_hint:
            return entry.default_hint
        return VALUE_PLACEHOLDER


def parse_catalog_data(data: Any, source: str = "<memory>") -> ParameterCatalog:
    """Build a catalog from the decoded catalog document.

    Raises:
        CatalogError: If the document does not have the expected shape
    """
    if not isinstance(data, dict) or not isinstance(data.get("parameters"), list):
        raise CatalogError(
            "Catalog must be a mapping with a 'parameters' list", {"source": source}
        )

    entries: list[ParameterEntry] = []
    for index, record in enumerate(data["parameters"]):
        try:
            entries.append(ParameterEntry.model_validate(record))
        except ValidationError as e:
            raise CatalogError(
                f"Invalid catalog record: {e.errors()[0]['msg']}",
                {"source": source, "index": index},
            ) from e

    catalog = ParameterCatalog(entries)
    logger.debug("catalog_loaded", source=source, entries=len(catalog))
    return catalog


def load_catalog(path: Path | None = None) -> ParameterCatalog:
    """Load a catalog from ``path`` or from the copy packaged with adgen."""
    try:
        if path is None:
            text = (
                resources.files("adgen.catalog")
                .joinpath(CATALOG_RESOURCE)
                .read_text(encoding="utf-8")
            )
            source = CATALOG_RESOURCE
        else:
            text = path.read_text(encoding="utf-8")
            source = str(path)
        data = yaml.safe_load(text)
    except OSError as e:
        raise CatalogError(f"Cannot read parameter catalog: {e}") from e
    except yaml.YAMLError as e:
        raise CatalogError(f"Cannot parse parameter catalog: {e}") from e

    return parse_catalog_data(data, source)


@lru_cache(maxsize=1)
def get_catalog() -> ParameterCatalog:
    """Process-wide catalog, loaded on first use."""
    return load_catalog()
