"""Tests for the parameter catalog."""

from pathlib import Path

import pytest

from adgen.catalog import (
    ParameterCatalog,
    ParameterEntry,
    load_catalog,
    parse_catalog_data,
)
from adgen.core.errors import CatalogError


def _entry(key: str, group: str = "imp", default: str | None = None) -> ParameterEntry:
    return ParameterEntry(
        key=key,
        group=group,
        description=f"{key} description",
        example="x",
        default_hint=default,
    )


class TestPackagedCatalog:
    """Tests against the catalog shipped with adgen."""

    def test_loads_entries(self, catalog):
        assert len(catalog) > 0
        assert "bidfloor" in catalog

    def test_lookup_known_key(self, catalog):
        entry = catalog.lookup("bidfloor")

        assert entry is not None
        assert entry.group == "imp"
        assert entry.example == "0.5"

    def test_lookup_unknown_key_is_none(self, catalog):
        assert catalog.lookup("definitely_not_documented") is None

    def test_every_group_sorted_by_key(self, catalog):
        for entries in catalog.grouped_view().values():
            keys = [entry.key for entry in entries]
            assert keys == sorted(keys)

    def test_grouped_view_covers_every_entry_once(self, catalog):
        grouped_keys = [
            entry.key for entries in catalog.grouped_view().values() for entry in entries
        ]
        assert sorted(grouped_keys) == catalog.keys()


class TestParameterCatalog:
    """Tests for ParameterCatalog behaviour."""

    def test_duplicate_keys_rejected(self):
        with pytest.raises(CatalogError, match="Duplicate key"):
            ParameterCatalog([_entry("ip"), _entry("ip", group="device")])

    def test_grouped_view_case_sensitive_ordinal(self):
        catalog = ParameterCatalog(
            [_entry("b"), _entry("B"), _entry("a"), _entry("ua", group="device")]
        )

        grouped = catalog.grouped_view()

        assert list(grouped) == ["imp", "device"]
        assert [e.key for e in grouped["imp"]] == ["B", "a", "b"]

    def test_placeholder_uses_default_hint(self):
        catalog = ParameterCatalog([_entry("tmax", default="500"), _entry("tagid")])

        assert catalog.placeholder_for("tmax") == "500"
        assert catalog.placeholder_for("tagid") == "Value"
        assert catalog.placeholder_for("unknown") == "Value"

    def test_search_matches_key_and_description(self):
        catalog = ParameterCatalog(
            [
                ParameterEntry(key="ip", group="device", description="IPv4 address"),
                ParameterEntry(key="yob", group="user", description="Year of birth"),
            ]
        )

        assert [e.key for e in catalog.search("IPV4")] == ["ip"]
        assert [e.key for e in catalog.search("yo")] == ["yob"]
        assert [e.key for e in catalog.search("  ")] == ["ip", "yob"]

    def test_entries_are_frozen(self):
        entry = _entry("ip")

        with pytest.raises(Exception):
            entry.key = "other"


class TestCatalogLoading:
    """Tests for reading catalog source data."""

    def test_parse_requires_parameters_list(self):
        with pytest.raises(CatalogError):
            parse_catalog_data({"params": []})

    def test_parse_reports_bad_record(self):
        with pytest.raises(CatalogError) as exc_info:
            parse_catalog_data({"parameters": [{"key": "ip", "group": "device"}, {}]})

        assert exc_info.value.context["index"] == 1

    def test_numeric_examples_become_strings(self):
        catalog = parse_catalog_data(
            {"parameters": [{"key": "tmax", "group": "request", "example": 300, "default": 500}]}
        )

        entry = catalog.lookup("tmax")
        assert entry is not None
        assert entry.example == "300"
        assert entry.default_hint == "500"

    def test_load_from_path(self, tmp_path: Path):
        path = tmp_path / "catalog.yaml"
        path.write_text(
            "parameters:\n  - key: ip\n    group: device\n    description: IP\n",
            encoding="utf-8",
        )

        catalog = load_catalog(path)

        assert catalog.keys() == ["ip"]

    def test_load_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "catalog.yaml"
        path.write_text("parameters: [unclosed", encoding="utf-8")

        with pytest.raises(CatalogError, match="Cannot parse"):
            load_catalog(path)

    def test_load_missing_file(self, tmp_path: Path):
        with pytest.raises(CatalogError, match="Cannot read"):
            load_catalog(tmp_path / "missing.yaml")
