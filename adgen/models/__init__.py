"""Shared model infrastructure."""

from adgen.models.base import AdgenBaseModel


__all__ = ["AdgenBaseModel"]
