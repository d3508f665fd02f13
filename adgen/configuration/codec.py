"""Conversion between the ordered editing rows and the canonical override mapping.

The editing side is a list that may hold duplicate and half-typed rows. The
persisted side is a mapping with unique keys. ``to_canonical`` collapses the
list (last row wins), ``to_ordered`` expands a mapping back into rows.

A round trip keeps every key/value pair but not the original row order:
``to_ordered`` follows the mapping's own iteration order.
"""

from collections.abc import Iterable, Mapping

from adgen.configuration.models import (
    AdConfiguration,
    OverrideEntry,
    PersistedConfiguration,
)


def to_canonical(overrides: Iterable[OverrideEntry]) -> dict[str, str]:
    """Collapse editing rows into a key/value mapping.

    Rows without a key are dropped. When a key repeats, the value of its last
    row is kept.
    """
    canonical: dict[str, str] = {}
    for entry in overrides:
        if not entry.key:
            continue
        # Re-insert so the mapping lists keys by their final occurrence
        canonical.pop(entry.key, None)
        canonical[entry.key] = entry.value
    return canonical


def to_ordered(canonical: Mapping[str, str]) -> list[OverrideEntry]:
    """Expand a mapping into editing rows, one per key, in mapping order."""
    return [OverrideEntry(key=key, value=value) for key, value in canonical.items()]


def to_persisted(name: str, model: AdConfiguration) -> PersistedConfiguration:
    """Build the store payload for ``model`` saved under ``name``."""
    return PersistedConfiguration(
        name=name,
        placement_count=model.placement_count,
        width=model.width,
        height=model.height,
        overrides=to_canonical(model.overrides),
    )


def from_persisted(record: PersistedConfiguration) -> AdConfiguration:
    """Rebuild an editable configuration from a stored preset."""
    return AdConfiguration(
        placement_count=record.placement_count,
        width=record.width,
        height=record.height,
        overrides=to_ordered(record.overrides),
    )


__all__ = ["from_persisted", "to_canonical", "to_ordered", "to_persisted"]
