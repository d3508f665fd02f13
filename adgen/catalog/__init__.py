"""Documented vocabulary of request override keys."""

from adgen.catalog.catalog import (
    ParameterCatalog,
    get_catalog,
    load_catalog,
    parse_catalog_data,
)
from adgen.catalog.models import ParameterEntry


__all__ = [
    "ParameterCatalog",
    "ParameterEntry",
    "get_catalog",
    "load_catalog",
    "parse_catalog_data",
]
