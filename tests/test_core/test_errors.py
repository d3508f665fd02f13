"""Tests for the adgen exception hierarchy."""

import pytest

from adgen.core.errors import (
    AdgenError,
    CatalogError,
    ConfigError,
    StoreError,
    StoreNetworkError,
    StoreResponseError,
)


class TestAdgenError:
    def test_message_only(self):
        error = AdgenError("Something failed")

        assert str(error) == "Something failed"
        assert error.context == {}

    def test_context_appended(self):
        error = ConfigError("Cannot read", {"path": "/tmp/x.yaml", "line": 3})

        assert str(error) == "Cannot read (path=/tmp/x.yaml, line=3)"
        assert error.message == "Cannot read"

    @pytest.mark.parametrize(
        "error_cls",
        [ConfigError, CatalogError, StoreError, StoreNetworkError, StoreResponseError],
    )
    def test_hierarchy(self, error_cls):
        assert issubclass(error_cls, AdgenError)

    def test_store_errors_share_base(self):
        assert issubclass(StoreNetworkError, StoreError)
        assert issubclass(StoreResponseError, StoreError)

    def test_response_error_details(self):
        error = StoreResponseError(
            "Not allowed", status_code=403, response_data={"message": "Not allowed"}
        )

        assert error.status_code == 403
        assert error.response_data == {"message": "Not allowed"}
        assert str(error) == "Not allowed"
